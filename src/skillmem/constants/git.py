"""Constants for git invocation and commit messages."""

from __future__ import annotations

GIT_EXECUTABLE: str = "git"
DEFAULT_LOCAL_TIMEOUT_SECONDS: float = 5.0
DEFAULT_NETWORK_TIMEOUT_SECONDS: float = 15.0

BASELINE_COMMIT_MESSAGE: str = "chore: initialize skill-memory git tracking"

NOTHING_TO_COMMIT_MARKERS: tuple[str, ...] = (
    "nothing to commit",
    "nothing added to commit",
    "no changes added to commit",
)

CLONE_TIMEOUT_MARKERS: tuple[str, ...] = ("ETIMEDOUT", "timed out")
CLONE_NOT_FOUND_MARKERS: tuple[str, ...] = ("Repository not found", "not found")
CLONE_UNREACHABLE_MARKERS: tuple[str, ...] = ("Could not resolve host", "unable to access")

HISTORY_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"
# Unit/record separators keep "|" and newlines in messages intact.
LOG_FIELD_SEPARATOR: str = "\x1f"
LOG_RECORD_SEPARATOR: str = "\x1e"
UNDO_TARGET: str = "HEAD~1"
