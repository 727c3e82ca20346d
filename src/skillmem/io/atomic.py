"""Atomic text persistence."""

from __future__ import annotations

import os
import tempfile
from contextlib import suppress
from pathlib import Path

from skillmem.constants.files import ATOMIC_TEMP_PREFIX, ATOMIC_TEMP_SUFFIX


def write_text_atomic(
    *,
    path: Path,
    content: str,
    temp_prefix: str = ATOMIC_TEMP_PREFIX,
    temp_suffix: str = ATOMIC_TEMP_SUFFIX,
) -> None:
    """Persist text atomically by writing to a temp file then renaming.

    Content is written verbatim (no newline translation) so CRLF manifests
    round-trip unchanged.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            handle.write(content)
    except Exception:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise

    assert temp_name is not None
    os.replace(temp_name, path)
