"""Constants for filesystem discovery of skill manifests."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
SKIPPED_DIRECTORIES: frozenset[str] = frozenset({".git", "node_modules"})
DESCRIPTION_FALLBACK: str = "No description available"
DESCRIPTION_MAX_LENGTH: int = 100
