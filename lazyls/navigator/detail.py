"""Detail panel text for the highlighted navigator entry."""

from __future__ import annotations

from pathlib import Path

from ..entry_model import count_children, read_entry
from ..listing import format_size, format_timestamp


def describe_entry(path: Path) -> str:
    """Describe ``path`` from fresh ``lstat`` metadata.

    Raises ``ListingIOError`` when metadata or, for directories, the child
    listing cannot be read.
    """
    entry = read_entry(path)
    if entry.is_dir:
        kind = "Directory"
    elif entry.is_symlink:
        kind = "Symlink"
    else:
        kind = "File"

    lines = [
        f"Path: {path}",
        f"Type: {kind}",
        f"Modified: {format_timestamp(entry.modified) or '-'}",
    ]
    if entry.is_file:
        lines.append(f"Size: {format_size(entry.size, True)}")
    elif entry.is_dir:
        dirs, files = count_children(path)
        lines.append(f"Children: {dirs} dirs, {files} files")
    lines.append(f"Writable: {'yes' if entry.writable else 'no'}")
    return "\n".join(lines) + "\n"


__all__ = ["describe_entry"]
