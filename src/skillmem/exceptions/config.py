"""Configuration-related exceptions."""

from __future__ import annotations

from skillmem.exceptions.base import SkillMemoryError


class ConfigError(SkillMemoryError, ValueError):
    """Raised when the store configuration is invalid."""
