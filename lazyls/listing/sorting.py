"""Ordering policy for directory listings.

Directories always come first. The sort key only orders entries inside the
directory group and the non-directory group, and ``reverse`` only flips that
key comparison.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..entry_model import EntryRecord
from ..options import SortKey


def _name_key(entry: EntryRecord) -> str:
    return entry.display_name.lower()


def _size_key(entry: EntryRecord) -> int:
    # Largest first without ``reverse``.
    return -entry.size


def _age_key(entry: EntryRecord) -> tuple[bool, int]:
    # Newest first; unknown modification times sort last.
    if entry.mtime_ns is None:
        return (True, 0)
    return (False, -entry.mtime_ns)


_KEY_FUNCTIONS: dict[SortKey, Callable[[EntryRecord], object]] = {
    SortKey.NAME: _name_key,
    SortKey.SIZE: _size_key,
    SortKey.AGE: _age_key,
}


def sort_entries(entries: Iterable[EntryRecord], key: SortKey, reverse: bool = False) -> list[EntryRecord]:
    """Return entries ordered directories-first, then by ``key``.

    Both passes are stable, so entries that compare equal keep enumeration
    order whether or not ``reverse`` is set.
    """
    by_key = sorted(entries, key=_KEY_FUNCTIONS[key], reverse=reverse)
    return sorted(by_key, key=lambda entry: not entry.is_dir)


__all__ = ["sort_entries"]
