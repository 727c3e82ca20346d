"""Reference grammar exceptions."""

from __future__ import annotations

from skillmem.exceptions.base import SkillMemoryError


class InvalidReferenceError(SkillMemoryError, ValueError):
    """Raised when a repository, skill, or skill-path reference is malformed."""


class PathTraversalError(InvalidReferenceError):
    """Raised when a name or path would escape its base directory."""
