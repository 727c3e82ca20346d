"""Version-control and network exceptions."""

from __future__ import annotations

from collections.abc import Sequence

from skillmem.exceptions.base import SkillMemoryError


class GitError(SkillMemoryError, RuntimeError):
    """Base class for failures of the external git executable."""


class GitNotInstalledError(GitError):
    """Raised when the git executable cannot be found."""


class GitTimeoutError(GitError, TimeoutError):
    """Raised when a git invocation exceeds its timeout."""

    def __init__(self, operation: str, seconds: float) -> None:
        super().__init__(f"git {operation} timed out after {seconds:g}s")
        self.operation = operation
        self.seconds = seconds


class GitCommandError(GitError):
    """Raised when git exits with a non-zero status."""

    def __init__(self, args: Sequence[str], returncode: int, output: str) -> None:
        detail = output.strip() or f"exit status {returncode}"
        super().__init__(f"git {' '.join(args)} failed: {detail}")
        self.args_list = tuple(args)
        self.returncode = returncode
        self.output = output


class NetworkError(GitError):
    """Raised when a remote source cannot be cloned."""


class UndoError(GitError):
    """Raised when the store history cannot be rolled back."""


class NoCommitsError(UndoError):
    """Raised when undo is requested on a repository without commits."""


class InitialCommitError(UndoError):
    """Raised when undo would discard the first commit."""
