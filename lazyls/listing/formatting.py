"""Plain-string formatters plus name decoration for listing rows."""

from __future__ import annotations

import hashlib
import os
from datetime import datetime, timezone
from pathlib import Path

from ..entry_model import EntryRecord, normalize_match_path
from ..options import ListOptions
from ..ui_theme import PLAIN_THEME, UITheme, paint

SIZE_UNITS = ("B", "KiB", "MiB", "GiB", "TiB")
EXECUTABLE_SUFFIXES = frozenset({"exe", "bat", "cmd"})
ICON_DIR = "📁 "
ICON_SYMLINK = "🔗 "
ICON_FILE = "📄 "
RFC3339_SECONDS = "%Y-%m-%dT%H:%M:%SZ"


def format_size(size: int, human: bool) -> str:
    """Render a byte count, in binary units when ``human`` is set.

    Bytes stay integral (``"0 B"``); larger units use one decimal
    (``"1.5 KiB"``) and stop at TiB.
    """
    if not human:
        return str(size)
    value = float(size)
    idx = 0
    while value >= 1024.0 and idx + 1 < len(SIZE_UNITS):
        value /= 1024.0
        idx += 1
    if idx == 0:
        return f"{size} {SIZE_UNITS[0]}"
    return f"{value:.1f} {SIZE_UNITS[idx]}"


def format_mode(entry: EntryRecord) -> str:
    """Three-character mode column: type, always readable, writable flag."""
    if entry.is_dir:
        type_char = "d"
    elif entry.is_symlink:
        type_char = "l"
    else:
        type_char = "-"
    return f"{type_char}r{'w' if entry.writable else '-'}"


def format_timestamp(moment: datetime | None) -> str | None:
    """RFC 3339 UTC timestamp with second precision, or ``None``."""
    if moment is None:
        return None
    return moment.astimezone(timezone.utc).strftime(RFC3339_SECONDS)


def format_modified(entry: EntryRecord) -> str:
    return format_timestamp(entry.modified) or "-"


def kind_label(entry: EntryRecord) -> str:
    """Structured-output kind: ``dir``, ``symlink`` or ``file``."""
    if entry.is_dir:
        return "dir"
    if entry.is_symlink:
        return "symlink"
    return "file"


def icon_for(entry: EntryRecord) -> str:
    if entry.is_dir:
        return ICON_DIR
    if entry.is_symlink:
        return ICON_SYMLINK
    return ICON_FILE


def is_probably_executable(path: Path) -> bool:
    return path.suffix[1:].lower() in EXECUTABLE_SUFFIXES


def rainbow_rgb(rel_path: Path) -> tuple[int, int, int]:
    """Stable per-path color; each channel lands in ``64..223``."""
    digest = hashlib.blake2b(normalize_match_path(rel_path).encode("utf-8", errors="surrogateescape"), digest_size=8)
    h = int.from_bytes(digest.digest(), "little")
    r = h & 0xFF
    g = (h >> 8) & 0xFF
    b = (h >> 16) & 0xFF
    return 64 + r % 160, 64 + g % 160, 64 + b % 160


def entry_label(entry: EntryRecord, options: ListOptions) -> str:
    """Undecorated label: optional icon, name, trailing separator for dirs."""
    icon = icon_for(entry) if options.icons else ""
    suffix = os.sep if entry.is_dir else ""
    return f"{icon}{entry.display_name}{suffix}"


def format_name(
    entry: EntryRecord,
    rel_path: Path,
    options: ListOptions,
    theme: UITheme = PLAIN_THEME,
) -> str:
    """Decorated name for one listing row."""
    label = entry_label(entry, options)
    if options.rainbow and theme is not PLAIN_THEME:
        r, g, b = rainbow_rgb(rel_path)
        return paint(label, f"\033[38;2;{r};{g};{b}m", theme)
    if entry.is_dir:
        color = theme.name_dir
    elif entry.is_symlink:
        color = theme.name_symlink
    elif is_probably_executable(entry.path):
        color = theme.name_executable
    else:
        color = theme.name_file
    return paint(label, color, theme)


__all__ = [
    "SIZE_UNITS",
    "format_size",
    "format_mode",
    "format_timestamp",
    "format_modified",
    "kind_label",
    "icon_for",
    "is_probably_executable",
    "rainbow_rgb",
    "entry_label",
    "format_name",
]
