"""Filesystem reads producing fresh ``EntryRecord`` values.

Nothing here recurses, filters on patterns, or caches; callers compose these
reads into listings.
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..errors import ListingIOError
from .types import EntryKind, EntryRecord

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


def is_hidden(name: str) -> bool:
    """Return whether ``name`` is a dot-file."""
    return name.startswith(HIDDEN_PREFIX)


def entry_name(path: Path) -> str:
    """Return the last path component, or the whole path for roots like ``/``."""
    return path.name or str(path)


def _kind_for_mode(mode: int) -> EntryKind:
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def record_from_stat(name: str, path: Path, st: os.stat_result) -> EntryRecord:
    """Build an entry from ``lstat`` output; only regular files carry a size."""
    kind = _kind_for_mode(st.st_mode)
    return EntryRecord(
        name=name,
        path=path,
        kind=kind,
        size=int(st.st_size) if kind is EntryKind.FILE else 0,
        mtime_ns=int(st.st_mtime_ns),
        writable=bool(st.st_mode & (stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH)),
    )


def read_entry(path: Path) -> EntryRecord:
    """Read one entry's own metadata without following a final symlink."""
    try:
        st = path.lstat()
    except OSError as exc:
        raise ListingIOError(f"Failed to read metadata for {path}: {exc.strerror or exc}", path) from exc
    return record_from_stat(entry_name(path), path, st)


def read_entries(directory: Path, show_hidden: bool) -> list[EntryRecord]:
    """List immediate children of ``directory`` in enumeration order.

    Raises ``ListingIOError`` when the directory cannot be opened or a child's
    metadata cannot be read.
    """
    logger.debug("reading %s (show_hidden=%s)", directory, show_hidden)
    out: list[EntryRecord] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and is_hidden(name):
                    continue
                child_path = Path(child.path)
                try:
                    st = child.stat(follow_symlinks=False)
                except OSError as exc:
                    raise ListingIOError(
                        f"Failed to read metadata for {child_path}: {exc.strerror or exc}",
                        child_path,
                    ) from exc
                out.append(record_from_stat(name, child_path, st))
    except ListingIOError:
        raise
    except OSError as exc:
        raise ListingIOError(f"Failed to read {directory}: {exc.strerror or exc}", directory) from exc
    return out


def count_children(directory: Path) -> tuple[int, int]:
    """Return ``(dirs, files)`` among all children; symlinks count as files."""
    dirs = 0
    files = 0
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                if child.is_dir(follow_symlinks=False):
                    dirs += 1
                else:
                    files += 1
    except OSError as exc:
        raise ListingIOError(f"Failed to read {directory}: {exc.strerror or exc}", directory) from exc
    return dirs, files


__all__ = [
    "HIDDEN_PREFIX",
    "is_hidden",
    "entry_name",
    "record_from_stat",
    "read_entry",
    "read_entries",
    "count_children",
]
