"""Parsers for SKILL.md manifests."""

from .skill_markdown import (
    body_after_frontmatter,
    extract_frontmatter,
    frontmatter_string,
    rewrite_frontmatter_name,
    update_frontmatter_name,
)

__all__ = [
    "body_after_frontmatter",
    "extract_frontmatter",
    "frontmatter_string",
    "rewrite_frontmatter_name",
    "update_frontmatter_name",
]
