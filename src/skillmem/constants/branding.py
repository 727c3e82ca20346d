"""Branding constants for terminal output."""

from __future__ import annotations

PROG_NAME: str = "skill-memory"
CLI_DESCRIPTION: str = "\n".join(
    (
        f"{PROG_NAME}: a local, git-backed library of agent skills",
        "",
        "Skills are referenced as @name, @name/path, github.com@owner/repo@name,",
        "or localhost@path@name.",
    )
)
GIT_MESSAGE_PREFIX: str = "[git]"
