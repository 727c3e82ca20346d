"""Command operations over the local skill store."""

from __future__ import annotations

from skillmem.operations.files import download, upsert_file, view_file
from skillmem.operations.history import history, undo
from skillmem.operations.remote import add_remote_skill, ensure_source, list_remote_skills
from skillmem.operations.skills import (
    copy_skill,
    delete,
    delete_skill,
    delete_skill_file,
    init_skill,
    list_skills,
    rename_skill,
)

__all__ = [
    "add_remote_skill",
    "copy_skill",
    "delete",
    "delete_skill",
    "delete_skill_file",
    "download",
    "ensure_source",
    "history",
    "init_skill",
    "list_remote_skills",
    "list_skills",
    "rename_skill",
    "undo",
    "upsert_file",
    "view_file",
]
