"""Store configuration: root discovery plus optional ``config.yaml`` settings."""

from __future__ import annotations

from skillmem.config.loader import load_store_config, resolve_store_root
from skillmem.config.model import StoreConfig

__all__ = ["StoreConfig", "load_store_config", "resolve_store_root"]
