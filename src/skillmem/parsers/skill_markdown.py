"""Read and rewrite the YAML front-matter of SKILL.md manifests."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from skillmem.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillmem.constants.parsing import (
    DEFAULT_LINE_ENDING,
    FRONTMATTER_DELIMITER,
    FRONTMATTER_PATTERN,
    PLAIN_SCALAR_PATTERN,
    TOP_LEVEL_KEY_PATTERN,
)
from skillmem.io import write_text_atomic

logger = logging.getLogger(__name__)

_BOM = "\ufeff"


def extract_frontmatter(content: str) -> dict[str, Any] | None:
    """Return the front-matter mapping, or None when absent, unparsable or not a mapping."""
    match = FRONTMATTER_PATTERN.match(content.removeprefix(_BOM))
    if match is None:
        return None

    try:
        payload = yaml.safe_load(match.group(1))
    except yaml.YAMLError as exc:
        logger.debug("Ignoring malformed front-matter: %s", exc)
        return None

    if not isinstance(payload, dict):
        return None
    return payload


def frontmatter_string(frontmatter: dict[str, Any] | None, key: str) -> str | None:
    """Return ``frontmatter[key]`` when it is a string."""
    if frontmatter is None:
        return None
    value = frontmatter.get(key)
    return value if isinstance(value, str) else None


def body_after_frontmatter(content: str) -> str:
    """Return the manifest text that follows the front-matter block."""
    text = content.removeprefix(_BOM)
    match = FRONTMATTER_PATTERN.match(text)
    return text[match.end() :] if match else text


def rewrite_frontmatter_name(content: str, new_name: str) -> str | None:
    """Return *content* with its ``name`` field set to *new_name*.

    ``name`` becomes the first header line; every other header field keeps its
    original text and order. Line endings and the body are untouched. Returns
    None when the header exists but cannot be parsed.
    """
    bom = _BOM if content.startswith(_BOM) else ""
    text = content[len(bom) :]
    eol = _detect_line_ending(text)
    name_line = f"name: {_yaml_scalar(new_name)}"

    match = FRONTMATTER_PATTERN.match(text)
    if match is None:
        first_line = text.splitlines()[0] if text else ""
        if first_line.strip() == FRONTMATTER_DELIMITER:
            return None
        header = f"{FRONTMATTER_DELIMITER}{eol}{name_line}{eol}{FRONTMATTER_DELIMITER}{eol}"
        return f"{bom}{header}{text}"

    header_text = match.group(1)
    try:
        payload = yaml.safe_load(header_text)
    except yaml.YAMLError:
        return None
    if payload is not None and not isinstance(payload, dict):
        return None

    kept_lines = _drop_top_level_key(header_text.splitlines(), "name")
    new_header = eol.join([name_line, *kept_lines])
    return f"{bom}{text[: match.start(1)]}{new_header}{text[match.end(1) :]}"


def update_frontmatter_name(skill_dir: Path, new_name: str) -> bool:
    """Rewrite the manifest in *skill_dir* so its ``name`` field equals *new_name*.

    Returns False (and writes nothing) when the manifest is missing or its
    header is malformed.
    """
    manifest = skill_dir / SKILL_MARKDOWN_FILENAME
    if not manifest.is_file():
        return False

    with manifest.open(encoding="utf-8", newline="") as handle:
        content = handle.read()

    updated = rewrite_frontmatter_name(content, new_name)
    if updated is None:
        logger.warning("Left %s unchanged: front-matter could not be parsed", manifest)
        return False
    if updated == content:
        return False

    write_text_atomic(path=manifest, content=updated)
    return True


def _drop_top_level_key(lines: list[str], key: str) -> list[str]:
    kept: list[str] = []
    skipping = False
    for line in lines:
        match = TOP_LEVEL_KEY_PATTERN.match(line)
        if match is not None:
            skipping = match.group(1) == key
        elif skipping and line[:1] not in {" ", "\t"}:
            skipping = False
        if not skipping:
            kept.append(line)
    return kept


def _detect_line_ending(text: str) -> str:
    return "\r\n" if "\r\n" in text else DEFAULT_LINE_ENDING


def _yaml_scalar(value: str) -> str:
    if PLAIN_SCALAR_PATTERN.match(value) and yaml.safe_load(value) == value:
        return value
    return json.dumps(value)
