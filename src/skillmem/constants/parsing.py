"""Constants for front-matter parsing and rewriting."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
FRONTMATTER_PATTERN: Pattern[str] = re.compile(r"\A---\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)
TOP_LEVEL_KEY_PATTERN: Pattern[str] = re.compile(r"^([A-Za-z0-9_.-]+)\s*:")
PLAIN_SCALAR_PATTERN: Pattern[str] = re.compile(r"^[A-Za-z0-9_-]+$")
HEADING_PREFIX: str = "#"
DEFAULT_LINE_ENDING: str = "\n"
