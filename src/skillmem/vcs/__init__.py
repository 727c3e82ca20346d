"""Version control for the local skill store."""

from __future__ import annotations

from skillmem.vcs.commits import CommitMessage
from skillmem.vcs.git import GitBackend, SubprocessGit
from skillmem.vcs.mutation_log import MutationLog

__all__ = ["CommitMessage", "GitBackend", "MutationLog", "SubprocessGit"]
