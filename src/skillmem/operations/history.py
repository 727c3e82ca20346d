"""Undo and history over the store's mutation log."""

from __future__ import annotations

from skillmem.config import StoreConfig
from skillmem.exceptions import GitError, SkillOperationError, UndoError
from skillmem.operations.common import open_mutation_log
from skillmem.types import HistoryPage
from skillmem.vcs import GitBackend


def undo(config: StoreConfig, git: GitBackend) -> str:
    """Roll the skills directory back one commit and return the discarded commit's message."""
    if not config.skills_dir.is_dir():
        raise UndoError("Skills directory not found.")
    return open_mutation_log(config, git).undo()


def history(config: StoreConfig, git: GitBackend, offset: int = 0, limit: int | None = None) -> HistoryPage:
    if offset < 0:
        raise SkillOperationError("offset must be a non-negative integer")
    effective_limit = config.history_limit if limit is None else limit
    if effective_limit < 1:
        raise SkillOperationError("limit must be a positive integer")
    if not config.skills_dir.is_dir():
        raise GitError("Skills directory not found.")
    return open_mutation_log(config, git).history(offset, effective_limit)
