"""Shared file I/O helpers."""

from .atomic import write_text_atomic
from .files import copy_file, copy_tree, count_files, is_binary_file, remove_tree

__all__ = ["copy_file", "copy_tree", "count_files", "is_binary_file", "remove_tree", "write_text_atomic"]
