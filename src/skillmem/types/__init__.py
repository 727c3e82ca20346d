"""Shared types for skill-memory."""

from .common import CommitKind, GitStatus, RefreshStatus
from .operations import DownloadResult, MutationResult, SourceTree, ViewResult
from .references import GithubRepoRef, LocalRepoRef, RepoRef, SkillPathRef, SkillRef
from .store import BootstrapResult, CommitOutcome, HistoryEntry, HistoryPage, LocalSkill, SkillInfo

__all__ = [
    "BootstrapResult",
    "CommitKind",
    "CommitOutcome",
    "DownloadResult",
    "GitStatus",
    "GithubRepoRef",
    "HistoryEntry",
    "HistoryPage",
    "LocalRepoRef",
    "LocalSkill",
    "MutationResult",
    "RefreshStatus",
    "RepoRef",
    "SkillInfo",
    "SkillPathRef",
    "SkillRef",
    "SourceTree",
    "ViewResult",
]
