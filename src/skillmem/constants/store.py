"""Constants for the on-disk store layout."""

from __future__ import annotations

import re
from re import Pattern

STORE_HOME_ENV: str = "SKILL_MEMORY_HOME"
DEFAULT_STORE_DIRNAME: str = ".skill-memory"
REPOS_DIRNAME: str = "repos"
SKILLS_DIRNAME: str = "skills"

SEGMENT_EDGE_PATTERN: Pattern[str] = re.compile(r"^[\s.]+|[\s.]+$")
SEGMENT_SEPARATOR_PATTERN: Pattern[str] = re.compile(r"[/\\]")
SEGMENT_SEPARATOR_REPLACEMENT: str = "-"

LOCAL_SKILL_DESCRIPTION_FALLBACK: str = "No description"
