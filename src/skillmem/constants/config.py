"""Configuration defaults and filenames."""

from __future__ import annotations

from skillmem.constants.git import DEFAULT_LOCAL_TIMEOUT_SECONDS, DEFAULT_NETWORK_TIMEOUT_SECONDS

CONFIG_FILENAME: str = "config.yaml"
DEFAULT_HISTORY_LIMIT: int = 20
DEFAULT_VIEW_MAX_LINES: int = 400
DEFAULT_GIT_TIMEOUT: float = DEFAULT_LOCAL_TIMEOUT_SECONDS
DEFAULT_NETWORK_TIMEOUT: float = DEFAULT_NETWORK_TIMEOUT_SECONDS

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "git_timeout",
        "network_timeout",
        "history_limit",
        "view_max_lines",
    }
)
