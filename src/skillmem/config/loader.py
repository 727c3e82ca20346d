"""Config loading and normalization for the skill store."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from skillmem.config.model import StoreConfig
from skillmem.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_GIT_TIMEOUT,
    DEFAULT_HISTORY_LIMIT,
    DEFAULT_NETWORK_TIMEOUT,
    DEFAULT_VIEW_MAX_LINES,
)
from skillmem.constants.store import DEFAULT_STORE_DIRNAME, STORE_HOME_ENV
from skillmem.exceptions import ConfigError


def resolve_store_root(env: Mapping[str, str] | None = None) -> Path:
    """Return the absolute store root from ``SKILL_MEMORY_HOME`` or ``~/.skill-memory``."""
    environ = os.environ if env is None else env
    override = environ.get(STORE_HOME_ENV, "").strip()
    if override:
        return Path(override).expanduser().resolve()
    return Path.home() / DEFAULT_STORE_DIRNAME


def load_store_config(env: Mapping[str, str] | None = None, config_path: Path | None = None) -> StoreConfig:
    """Resolve the store root and load optional settings from ``config.yaml``."""
    root = resolve_store_root(env)
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return StoreConfig(root=root)

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    return StoreConfig(
        root=root,
        git_timeout=_positive_number(raw.get("git_timeout", DEFAULT_GIT_TIMEOUT), "git_timeout"),
        network_timeout=_positive_number(raw.get("network_timeout", DEFAULT_NETWORK_TIMEOUT), "network_timeout"),
        history_limit=_positive_int(raw.get("history_limit", DEFAULT_HISTORY_LIMIT), "history_limit"),
        view_max_lines=_positive_int(raw.get("view_max_lines", DEFAULT_VIEW_MAX_LINES), "view_max_lines"),
    )


def _positive_number(value: Any, key_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive number of seconds")
    return float(value)


def _positive_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value
