"""Exceptions raised by local store and filesystem operations."""

from __future__ import annotations

from skillmem.exceptions.base import SkillMemoryError


class SkillNotFoundError(SkillMemoryError, FileNotFoundError):
    """Raised when a skill, a file inside a skill, or a source cannot be found."""


class SkillExistsError(SkillMemoryError, FileExistsError):
    """Raised when an operation would overwrite an existing skill or file."""


class SkillOperationError(SkillMemoryError, ValueError):
    """Raised when an operation's arguments are inconsistent (e.g. copy onto itself)."""


class LocalPathError(SkillMemoryError, OSError):
    """Raised when a local source directory is missing, unreadable, or not a directory."""
