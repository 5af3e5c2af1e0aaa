"""Single-shot listing: build rows/summary for a path and write them out.

Two output shapes exist: human text lines and one structured JSON record
per render (``root``, ``entries``, ``summary``, ``error``).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from ..entry_model import DisplayEntry, entry_name, lossy_text, read_entry
from ..options import ListOptions
from ..ui_theme import PLAIN_THEME, UITheme, paint
from .build import build_display_entries
from .filtering import FilterPredicate
from .formatting import format_mode, format_modified, format_name, format_size, format_timestamp, kind_label
from .summary import ListingSummary, compute_summary


@dataclass(frozen=True)
class ListingResult:
    root: Path
    entries: list[DisplayEntry]
    summary: ListingSummary | None = None


def build_listing(path: Path, options: ListOptions) -> ListingResult:
    """Produce rows and optional summary for ``path``.

    Raises ``InvalidFilterPattern`` or ``ListingIOError``; nothing is written
    before the whole listing is built.
    """
    predicate = FilterPredicate.from_options(options)
    root_entry = read_entry(path)
    summary = compute_summary(path, options, predicate) if options.wants_summary else None

    if root_entry.is_dir:
        entries = build_display_entries(path, path, options, predicate)
    else:
        entries = [DisplayEntry(entry=root_entry, prefix="", rel_path=Path(entry_name(path)))]
    return ListingResult(root=path, entries=entries, summary=summary)


def entry_record(display: DisplayEntry) -> dict[str, object]:
    entry = display.entry
    return {
        "rel_path": display.display_path,
        "name": entry.display_name,
        "kind": kind_label(entry),
        "size": entry.size,
        "modified": format_timestamp(entry.modified),
        "depth": display.depth,
    }


def summary_record(summary: ListingSummary, include_extensions: bool) -> dict[str, object]:
    extensions: dict[str, dict[str, int]] | None = None
    if include_extensions:
        extensions = {ext: {"files": stats.files, "bytes": stats.bytes} for ext, stats in summary.sorted_extensions()}
    return {
        "total_bytes": summary.total_bytes,
        "total_files": summary.total_files,
        "total_dirs": summary.total_dirs,
        "extensions": extensions,
    }


def listing_record(result: ListingResult, options: ListOptions) -> dict[str, object]:
    return {
        "root": lossy_text(str(result.root)),
        "entries": [entry_record(display) for display in result.entries],
        "summary": summary_record(result.summary, options.extensions) if result.summary is not None else None,
        "error": None,
    }


def error_record(root: Path, message: str) -> dict[str, object]:
    """Record emitted for a failed render: no entries, no summary."""
    return {"root": lossy_text(str(root)), "entries": [], "summary": None, "error": message}


def _decorated_name(display: DisplayEntry, options: ListOptions, theme: UITheme) -> str:
    prefix = paint(display.prefix, theme.tree_prefix, theme)
    return prefix + format_name(display.entry, display.rel_path, options, theme)


def render_long_lines(entries: list[DisplayEntry], options: ListOptions, theme: UITheme = PLAIN_THEME) -> list[str]:
    """Mode, size and time columns right-aligned to their widest raw value."""
    rows = [
        (format_mode(d.entry), format_size(d.entry.size, options.human), format_modified(d.entry), d)
        for d in entries
    ]
    mode_w = max((len(mode) for mode, _, _, _ in rows), default=0)
    size_w = max((len(size) for _, size, _, _ in rows), default=0)
    time_w = max((len(time) for _, _, time, _ in rows), default=0)

    lines: list[str] = []
    for mode, size, time, display in rows:
        lines.append(
            "  ".join(
                (
                    paint(mode.rjust(mode_w), theme.long_mode, theme),
                    paint(size.rjust(size_w), theme.long_size, theme),
                    paint(time.rjust(time_w), theme.long_time, theme),
                    _decorated_name(display, options, theme),
                )
            )
        )
    return lines


def render_summary_lines(summary: ListingSummary, options: ListOptions, theme: UITheme = PLAIN_THEME) -> list[str]:
    lines: list[str] = []
    if options.du:
        lines.append(
            f"{paint('Total:', theme.total, theme)} {paint(format_size(summary.total_bytes, True), theme.total, theme)}"
        )
    if options.extensions:
        for ext, stats in summary.sorted_extensions():
            label = f".{ext}" if ext else "(none)"
            lines.append(
                "  ".join(
                    (
                        paint(label, theme.ext_label, theme),
                        paint(f"{stats.files} files", theme.ext_files, theme),
                        paint(format_size(stats.bytes, True), theme.ext_bytes, theme),
                    )
                )
            )
    return lines


def render_human_lines(result: ListingResult, options: ListOptions, theme: UITheme = PLAIN_THEME) -> list[str]:
    if options.long:
        lines = render_long_lines(result.entries, options, theme)
    else:
        lines = [_decorated_name(display, options, theme) for display in result.entries]
    if result.summary is not None:
        lines.extend(render_summary_lines(result.summary, options, theme))
    return lines


def write_listing(result: ListingResult, options: ListOptions, stream: TextIO, theme: UITheme = PLAIN_THEME) -> None:
    if options.json:
        stream.write(json.dumps(listing_record(result, options), indent=2) + "\n")
        return
    for line in render_human_lines(result, options, theme):
        stream.write(line + "\n")


def render_once(path: Path, options: ListOptions, stream: TextIO, theme: UITheme = PLAIN_THEME) -> None:
    """Build and write one listing of ``path``."""
    write_listing(build_listing(path, options), options, stream, theme)


__all__ = [
    "ListingResult",
    "build_listing",
    "entry_record",
    "summary_record",
    "listing_record",
    "error_record",
    "render_long_lines",
    "render_summary_lines",
    "render_human_lines",
    "write_listing",
    "render_once",
]
