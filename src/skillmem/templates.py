"""Starter content for newly initialized skills."""

from __future__ import annotations

SKILL_TEMPLATE = """---
name: {name}
description: A brief description of what this skill does
---

# {title}

Instructions for the AI assistant on how to use this skill.

## When to Use

- Use case 1
- Use case 2

## How to Use

1. Step one
2. Step two
"""


def generate_skill_template(name: str) -> str:
    """Render a SKILL.md scaffold with a Title Case heading derived from the kebab-case *name*."""
    title = " ".join(word[:1].upper() + word[1:] for word in name.split("-"))
    return SKILL_TEMPLATE.format(name=name, title=title)
