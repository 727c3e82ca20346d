"""Versioned mutation log over the local skills directory.

Every mutating operation goes through :meth:`MutationLog.record`, which
brings the directory under version control before the edit is applied
and commits the edit afterwards. Version-control problems never abort the
edit itself: a missing executable or a failing git command degrades to a
warning (``skipped``), a local timeout is reported as ``failed`` so the
caller can exit non-zero while the file change stays in place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from skillmem.constants.git import BASELINE_COMMIT_MESSAGE, UNDO_TARGET
from skillmem.exceptions import GitError, GitTimeoutError, InitialCommitError, NoCommitsError, UndoError
from skillmem.types import BootstrapResult, CommitOutcome, HistoryPage
from skillmem.vcs.commits import CommitMessage
from skillmem.vcs.git import GitBackend

logger = logging.getLogger(__name__)

NO_REPOSITORY_MESSAGE = "No git repository in skills directory."


class MutationLog:
    """Commit-per-mutation history of the skills directory."""

    def __init__(self, skills_dir: Path, git: GitBackend) -> None:
        self.skills_dir = skills_dir
        self.git = git

    def prepare(self) -> BootstrapResult:
        """Initialize version control, committing pre-existing skills as a baseline."""
        if not self.git.is_available():
            warning = "Git is not installed; changes are not recorded in history."
            logger.warning(warning)
            return BootstrapResult(status="skipped", warning=warning)

        existing = _list_skill_dirs(self.skills_dir)
        initialized = not self.git.is_repo(self.skills_dir)
        # A repository without commits still owes its baseline.
        if not initialized and (not existing or self.git.commit_count(self.skills_dir) > 0):
            return BootstrapResult(status="unchanged")

        try:
            if initialized:
                self.git.init(self.skills_dir)
            if not existing:
                return BootstrapResult(status="unchanged", initialized=True)
            self.git.add_all(self.skills_dir)
            created = self.git.commit(self.skills_dir, BASELINE_COMMIT_MESSAGE)
        except GitTimeoutError as exc:
            warning = f"Could not initialize repository: {exc}"
            logger.warning(warning)
            return BootstrapResult(status="failed", warning=warning)
        except GitError as exc:
            warning = f"Could not initialize repository: {exc}"
            logger.warning(warning)
            return BootstrapResult(status="skipped", warning=warning)

        if not created:
            return BootstrapResult(status="unchanged", initialized=initialized)
        logger.debug("Baseline commit for %d existing skill(s)", len(existing))
        return BootstrapResult(status="committed", initialized=initialized, migrated_skills=existing)

    def commit(self, message: str) -> CommitOutcome:
        """Stage everything and commit it under *message*."""
        try:
            self.git.add_all(self.skills_dir)
            created = self.git.commit(self.skills_dir, message)
        except GitTimeoutError as exc:
            warning = f"Could not commit changes: {exc}"
            logger.warning(warning)
            return CommitOutcome(status="failed", message=message, warning=warning)
        except GitError as exc:
            warning = f"Could not commit changes: {exc}"
            logger.warning(warning)
            return CommitOutcome(status="skipped", message=message, warning=warning)

        if not created:
            logger.debug("Nothing to commit for %r", message)
            return CommitOutcome(status="unchanged", message=message)
        return CommitOutcome(status="committed", message=message)

    def record(self, message: CommitMessage | str, apply: Callable[[], None]) -> CommitOutcome:
        """Bootstrap, run *apply*, then commit its changes.

        Exceptions raised by *apply* propagate and no commit is attempted.
        """
        rendered = message.render() if isinstance(message, CommitMessage) else message
        self.skills_dir.mkdir(parents=True, exist_ok=True)

        bootstrap = self.prepare()
        apply()

        if bootstrap.status in ("skipped", "failed"):
            return CommitOutcome(
                status=bootstrap.status,
                message=rendered,
                bootstrap=bootstrap,
                warning=bootstrap.warning,
            )

        outcome = self.commit(rendered)
        return CommitOutcome(
            status=outcome.status,
            message=rendered,
            bootstrap=bootstrap,
            warning=outcome.warning,
        )

    def undo(self) -> str:
        """Discard the newest commit and return its message."""
        if not self.git.is_repo(self.skills_dir):
            raise UndoError(NO_REPOSITORY_MESSAGE)

        count = self.git.commit_count(self.skills_dir)
        if count == 0:
            raise NoCommitsError("No commits to undo. The skills repository has no history.")
        if count == 1:
            raise InitialCommitError("Already at the initial commit. Cannot undo further.")

        message = self.git.last_commit_message(self.skills_dir)
        self.git.reset_hard(self.skills_dir, UNDO_TARGET)
        return message

    def history(self, offset: int, limit: int) -> HistoryPage:
        """Return up to *limit* commits, newest first, after skipping *offset*."""
        if not self.git.is_repo(self.skills_dir):
            raise GitError(NO_REPOSITORY_MESSAGE)

        total = self.git.commit_count(self.skills_dir)
        if total == 0 or offset >= total:
            return HistoryPage(total=total, offset=offset, entries=())
        entries = self.git.log(self.skills_dir, offset, limit)
        return HistoryPage(total=total, offset=offset, entries=tuple(entries))


def _list_skill_dirs(skills_dir: Path) -> tuple[str, ...]:
    if not skills_dir.is_dir():
        return ()
    return tuple(
        sorted(entry.name for entry in skills_dir.iterdir() if entry.is_dir() and not entry.name.startswith("."))
    )
