"""Shared exception hierarchy for skill-memory."""

from __future__ import annotations

from .base import SkillMemoryError
from .config import ConfigError
from .references import InvalidReferenceError, PathTraversalError
from .store import LocalPathError, SkillExistsError, SkillNotFoundError, SkillOperationError
from .vcs import (
    GitCommandError,
    GitError,
    GitNotInstalledError,
    GitTimeoutError,
    InitialCommitError,
    NetworkError,
    NoCommitsError,
    UndoError,
)

__all__ = [
    "ConfigError",
    "GitCommandError",
    "GitError",
    "GitNotInstalledError",
    "GitTimeoutError",
    "InitialCommitError",
    "InvalidReferenceError",
    "LocalPathError",
    "NetworkError",
    "NoCommitsError",
    "PathTraversalError",
    "SkillExistsError",
    "SkillMemoryError",
    "SkillNotFoundError",
    "SkillOperationError",
    "UndoError",
]
