"""Helpers shared by command operations."""

from __future__ import annotations

from pathlib import Path

from skillmem.config import StoreConfig
from skillmem.exceptions import SkillNotFoundError
from skillmem.store import get_local_skill_path
from skillmem.vcs import GitBackend, MutationLog


def open_mutation_log(config: StoreConfig, git: GitBackend) -> MutationLog:
    return MutationLog(config.skills_dir, git)


def require_skill_dir(config: StoreConfig, name: str) -> Path:
    """Return the directory of an existing local skill."""
    skill_dir = get_local_skill_path(config, name)
    if not skill_dir.is_dir():
        raise SkillNotFoundError(f"Skill '{name}' not found.")
    return skill_dir
