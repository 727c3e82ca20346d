"""Frozen dataclasses for the local store and its version history."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillmem.types.common import GitStatus


@dataclass(frozen=True)
class LocalSkill:
    """A skill materialized under the local skills directory."""

    name: str
    display_name: str
    description: str
    path: Path


@dataclass(frozen=True)
class SkillInfo:
    """A skill discovered inside a source tree."""

    name: str
    description: str
    path: str
    full_ref: str

    def to_dict(self) -> dict[str, str]:
        return {"skill": self.full_ref, "description": self.description}


@dataclass(frozen=True)
class BootstrapResult:
    """Outcome of bringing the skills directory under version control."""

    status: GitStatus
    initialized: bool = False
    migrated_skills: tuple[str, ...] = ()
    warning: str | None = None


@dataclass(frozen=True)
class CommitOutcome:
    """Outcome of recording one mutation in the store history."""

    status: GitStatus
    message: str
    bootstrap: BootstrapResult | None = None
    warning: str | None = None

    @property
    def ok(self) -> bool:
        return self.status != "failed"


@dataclass(frozen=True)
class HistoryEntry:
    """One commit in the store history."""

    date: str
    message: str


@dataclass(frozen=True)
class HistoryPage:
    """A window of the store history, newest first."""

    total: int
    offset: int
    entries: tuple[HistoryEntry, ...]
