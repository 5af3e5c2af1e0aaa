"""Domain datatypes for filesystem entries and rendered listing rows."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

ROOT_REL_PATH = Path(".")


class EntryKind(enum.Enum):
    DIRECTORY = "dir"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(frozen=True)
class EntryRecord:
    """One filesystem entry as observed by ``lstat`` at read time.

    ``name`` keeps undecodable bytes as surrogate escapes, so it round-trips
    to the real filename; use ``display_name`` for text output.
    """

    name: str
    path: Path
    kind: EntryKind
    size: int = 0
    mtime_ns: int | None = None
    writable: bool = True

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.kind is EntryKind.SYMLINK

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def display_name(self) -> str:
        return lossy_text(self.name)

    @property
    def modified(self) -> datetime | None:
        """Modification time as an aware UTC datetime, if known."""
        if self.mtime_ns is None:
            return None
        return datetime.fromtimestamp(self.mtime_ns / 1_000_000_000, tz=timezone.utc)


@dataclass(frozen=True)
class DisplayEntry:
    """One rendered line: the entry, its tree glyphs, and its root-relative path."""

    entry: EntryRecord
    prefix: str
    rel_path: Path

    @property
    def match_path(self) -> str:
        """Relative path with ``/`` separators, as seen by glob filters."""
        return normalize_match_path(self.rel_path)

    @property
    def display_path(self) -> str:
        """``match_path`` with undecodable bytes replaced, for text output."""
        return lossy_text(self.match_path)

    @property
    def depth(self) -> int:
        if self.rel_path == ROOT_REL_PATH:
            return 0
        return max(0, len(self.rel_path.parts) - 1)


def lossy_text(text: str) -> str:
    """Replace surrogate-escaped filename bytes with U+FFFD."""
    return text.encode("utf-8", errors="surrogateescape").decode("utf-8", errors="replace")


def normalize_match_path(path: Path) -> str:
    """Render ``path`` with forward slashes regardless of platform."""
    return str(path).replace("\\", "/")


__all__ = [
    "ROOT_REL_PATH",
    "EntryKind",
    "EntryRecord",
    "DisplayEntry",
    "lossy_text",
    "normalize_match_path",
]
