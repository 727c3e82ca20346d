"""Config data model for the skill store."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from skillmem.constants.config import (
    DEFAULT_GIT_TIMEOUT,
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_NETWORK_TIMEOUT,
    DEFAULT_VIEW_MAX_LINES,
)
from skillmem.constants.store import REPOS_DIRNAME, SKILLS_DIRNAME


@dataclass(frozen=True)
class StoreConfig:
    """Resolved store configuration, built once at startup and passed explicitly."""

    root: Path
    git_timeout: float = DEFAULT_GIT_TIMEOUT
    network_timeout: float = DEFAULT_NETWORK_TIMEOUT
    history_limit: int = DEFAULT_HISTORY_LIMIT
    view_max_lines: int = DEFAULT_VIEW_MAX_LINES

    @property
    def repos_dir(self) -> Path:
        """Cache of cloned remote sources, nested as host/owner/repo."""
        return self.root / REPOS_DIRNAME

    @property
    def skills_dir(self) -> Path:
        """Flat directory of local skills; this is the git working tree."""
        return self.root / SKILLS_DIRNAME
