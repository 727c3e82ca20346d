"""Structured references produced by the reference grammar."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Literal, TypeAlias


@dataclass(frozen=True)
class GithubRepoRef:
    """A repository hosted on GitHub."""

    owner: str
    repo: str
    host: ClassVar[Literal["github.com"]] = "github.com"


@dataclass(frozen=True)
class LocalRepoRef:
    """A directory on the local filesystem; ``path`` is absolute and resolved."""

    path: Path
    host: ClassVar[Literal["localhost"]] = "localhost"


RepoRef: TypeAlias = GithubRepoRef | LocalRepoRef


@dataclass(frozen=True)
class SkillRef:
    """A named skill inside a repository reference."""

    repo: RepoRef
    skill_name: str


@dataclass(frozen=True)
class SkillPathRef:
    """A file inside a local skill; an empty ``file_path`` targets the whole skill."""

    skill_name: str
    file_path: str = ""

    @property
    def is_whole_skill(self) -> bool:
        return not self.file_path
