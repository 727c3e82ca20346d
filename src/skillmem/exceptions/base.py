"""Root exception for skill-memory."""

from __future__ import annotations


class SkillMemoryError(Exception):
    """Base class for all errors raised by skill-memory."""
