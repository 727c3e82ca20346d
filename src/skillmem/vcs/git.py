"""Thin wrapper around the git executable."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from skillmem.constants.git import (
    CLONE_NOT_FOUND_MARKERS,
    CLONE_TIMEOUT_MARKERS,
    CLONE_UNREACHABLE_MARKERS,
    DEFAULT_LOCAL_TIMEOUT_SECONDS,
    DEFAULT_NETWORK_TIMEOUT_SECONDS,
    GIT_EXECUTABLE,
    HISTORY_DATE_FORMAT,
    LOG_FIELD_SEPARATOR,
    LOG_RECORD_SEPARATOR,
    NOTHING_TO_COMMIT_MARKERS,
)
from skillmem.exceptions import GitCommandError, GitError, GitNotInstalledError, GitTimeoutError, NetworkError
from skillmem.types import HistoryEntry

logger = logging.getLogger(__name__)


class GitBackend(Protocol):
    """Version-control capability required by the store."""

    def is_available(self) -> bool: ...

    def is_repo(self, path: Path) -> bool: ...

    def init(self, path: Path) -> None: ...

    def add_all(self, path: Path) -> None: ...

    def commit(self, path: Path, message: str) -> bool: ...

    def commit_count(self, path: Path) -> int: ...

    def last_commit_message(self, path: Path) -> str: ...

    def log(self, path: Path, offset: int, limit: int) -> list[HistoryEntry]: ...

    def reset_hard(self, path: Path, ref: str) -> None: ...

    def clone(self, url: str, dest: Path) -> None: ...

    def refresh(self, path: Path) -> None: ...


class SubprocessGit:
    """GitBackend backed by ``subprocess.run`` calls to the git CLI."""

    def __init__(
        self,
        local_timeout: float = DEFAULT_LOCAL_TIMEOUT_SECONDS,
        network_timeout: float = DEFAULT_NETWORK_TIMEOUT_SECONDS,
        executable: str = GIT_EXECUTABLE,
    ) -> None:
        self.local_timeout = local_timeout
        self.network_timeout = network_timeout
        self.executable = executable

    def is_available(self) -> bool:
        if shutil.which(self.executable) is None:
            return False
        try:
            self._run(["--version"])
        except GitError:
            return False
        return True

    def is_repo(self, path: Path) -> bool:
        return (path / ".git").exists()

    def init(self, path: Path) -> None:
        self._run(["init", "--quiet"], cwd=path)

    def add_all(self, path: Path) -> None:
        self._run(["add", "-A"], cwd=path)

    def commit(self, path: Path, message: str) -> bool:
        """Commit staged changes; return False when there was nothing to commit."""
        try:
            self._run(["commit", "--quiet", "-m", message], cwd=path)
        except GitCommandError as exc:
            if any(marker in exc.output for marker in NOTHING_TO_COMMIT_MARKERS):
                return False
            raise
        return True

    def commit_count(self, path: Path) -> int:
        try:
            output = self._run(["rev-list", "--count", "HEAD"], cwd=path)
        except GitCommandError:
            return 0
        try:
            return int(output.strip())
        except ValueError:
            return 0

    def last_commit_message(self, path: Path) -> str:
        return self._run(["log", "-1", "--format=%s"], cwd=path).strip()

    def log(self, path: Path, offset: int, limit: int) -> list[HistoryEntry]:
        """Return commits newest first, skipping *offset* and returning at most *limit*."""
        output = self._run(
            [
                "log",
                f"--skip={offset}",
                "-n",
                str(limit),
                f"--date=format:{HISTORY_DATE_FORMAT}",
                f"--format=%ad{LOG_FIELD_SEPARATOR}%s{LOG_RECORD_SEPARATOR}",
            ],
            cwd=path,
        )
        entries: list[HistoryEntry] = []
        for record in output.split(LOG_RECORD_SEPARATOR):
            record = record.strip("\r\n")
            if not record:
                continue
            date, _, message = record.partition(LOG_FIELD_SEPARATOR)
            entries.append(HistoryEntry(date=date.strip(), message=message))
        return entries

    def reset_hard(self, path: Path, ref: str) -> None:
        self._run(["reset", "--quiet", "--hard", ref], cwd=path)

    def clone(self, url: str, dest: Path) -> None:
        """Shallow-clone *url* into *dest*, raising NetworkError with a classified message."""
        args = ["clone", "--depth", "1", "--quiet", url, str(dest)]
        try:
            self._run(args, timeout=self.network_timeout)
        except GitTimeoutError as exc:
            raise NetworkError(f"Connection timed out: {url}") from exc
        except GitCommandError as exc:
            raise NetworkError(_classify_clone_failure(url, exc.output)) from exc

    def refresh(self, path: Path) -> None:
        """Fetch the latest shallow snapshot and hard-reset to the remote default branch."""
        self._run(["fetch", "--depth", "1", "--quiet", "origin"], cwd=path, timeout=self.network_timeout)
        head = self._run(["rev-parse", "--abbrev-ref", "origin/HEAD"], cwd=path).strip()
        branch = head.removeprefix("origin/")
        self._run(["reset", "--quiet", "--hard", f"origin/{branch}"], cwd=path)

    def _run(self, args: Sequence[str], *, cwd: Path | None = None, timeout: float | None = None) -> str:
        seconds = self.local_timeout if timeout is None else timeout
        command = [self.executable, *args]
        logger.debug("Running %s (cwd=%s)", " ".join(command), cwd)
        try:
            result = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=seconds,
                check=False,
            )
        except FileNotFoundError as exc:
            raise GitNotInstalledError(
                "Git is not installed. Please install git and try again."
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise GitTimeoutError(args[0], seconds) from exc

        if result.returncode != 0:
            raise GitCommandError(args, result.returncode, f"{result.stdout}\n{result.stderr}".strip())
        return result.stdout


def _classify_clone_failure(url: str, output: str) -> str:
    if any(marker in output for marker in CLONE_TIMEOUT_MARKERS):
        return f"Connection timed out: {url}"
    if any(marker in output for marker in CLONE_NOT_FOUND_MARKERS):
        return f"Repository not found: {url}"
    if any(marker in output for marker in CLONE_UNREACHABLE_MARKERS):
        return f"Network error: Unable to connect to {url}"
    detail = output.strip() or "unknown error"
    return f"Failed to clone repository: {detail}"
