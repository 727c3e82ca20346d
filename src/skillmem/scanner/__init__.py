"""Skill discovery inside source trees."""

from __future__ import annotations

from skillmem.scanner.discovery import find_skill_by_name, find_skill_files, parse_all_skills, parse_skill_info

__all__ = ["find_skill_by_name", "find_skill_files", "parse_all_skills", "parse_skill_info"]
