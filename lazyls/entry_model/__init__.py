"""Domain model for filesystem entries plus the non-recursive reader.

This package contains non-UI primitives:
- entry and display-row datatypes
- single-directory reads built on ``lstat``
"""

from __future__ import annotations

from .types import ROOT_REL_PATH, DisplayEntry, EntryKind, EntryRecord, lossy_text, normalize_match_path
from .fs import count_children, entry_name, is_hidden, read_entries, read_entry, record_from_stat

__all__ = [
    "ROOT_REL_PATH",
    "DisplayEntry",
    "EntryKind",
    "EntryRecord",
    "lossy_text",
    "normalize_match_path",
    "count_children",
    "entry_name",
    "is_hidden",
    "read_entries",
    "read_entry",
    "record_from_stat",
]
