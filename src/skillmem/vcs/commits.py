"""Conventional commit messages for store mutations."""

from __future__ import annotations

from dataclasses import dataclass

from skillmem.types import CommitKind


@dataclass(frozen=True)
class CommitMessage:
    """A ``kind(scope): description`` header with an optional body."""

    kind: CommitKind
    scope: str
    description: str
    body: str | None = None

    def render(self) -> str:
        header = f"{self.kind}({self.scope}): {self.description}"
        if self.body:
            return f"{header}\n\n{self.body}"
        return header
