"""Result records returned by command operations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillmem.types.common import RefreshStatus
from skillmem.types.store import CommitOutcome


@dataclass(frozen=True)
class MutationResult:
    """A completed store mutation and how it was recorded."""

    summary: str
    outcome: CommitOutcome


@dataclass(frozen=True)
class ViewResult:
    """Text content of a skill file, possibly cut at the line limit."""

    content: str
    truncated: bool


@dataclass(frozen=True)
class DownloadResult:
    """A file or directory exported from a skill."""

    summary: str
    target: Path
    file_count: int | None = None


@dataclass(frozen=True)
class SourceTree:
    """A remote or local source directory ready to be scanned for skills."""

    path: Path
    status: RefreshStatus
    warning: str | None = None
