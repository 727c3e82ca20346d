"""Constants for the reference grammar."""

from __future__ import annotations

import re
from re import Pattern

GITHUB_HOST: str = "github.com"
LOCAL_HOST: str = "localhost"
SUPPORTED_HOSTS: tuple[str, ...] = (GITHUB_HOST, LOCAL_HOST)

REF_SEPARATOR: str = "@"
PATH_SEPARATOR: str = "/"
TRAVERSAL_TOKEN: str = ".."
NULL_BYTE: str = "\0"
RESERVED_NAMES: frozenset[str] = frozenset({".", ".."})

SKILL_NAME_PATTERN: Pattern[str] = re.compile(r"[A-Za-z0-9_-]+")
REPEATED_SEPARATOR_PATTERN: Pattern[str] = re.compile(r"/+")

REPO_REF_FORMS: str = "github.com@owner/repo or localhost@path"
SKILL_REF_FORMS: str = "github.com@owner/repo@skill_name or localhost@path@skill_name"
GITHUB_CLONE_URL_TEMPLATE: str = "https://github.com/{owner}/{repo}.git"
