"""Recursive size/count statistics for a listing root.

The walk is independent of the rendered rows: every entry is counted on its
own merit, so a directory that fails the filter is still descended into.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from ..entry_model import EntryRecord, entry_name, read_entries, read_entry
from ..options import ListOptions
from .build import relative_to_root
from .filtering import FilterPredicate


@dataclass
class ExtensionStats:
    files: int = 0
    bytes: int = 0


@dataclass
class ListingSummary:
    """Totals for one render plus per-extension buckets (``""`` = no extension)."""

    total_bytes: int = 0
    total_files: int = 0
    total_dirs: int = 0
    extensions: dict[str, ExtensionStats] = field(default_factory=dict)

    def sorted_extensions(self) -> Iterator[tuple[str, ExtensionStats]]:
        for ext in sorted(self.extensions):
            yield ext, self.extensions[ext]

    def add_file(self, entry: EntryRecord) -> None:
        """Count one non-directory entry that passed the filter."""
        self.total_files += 1
        self.total_bytes += entry.size
        if entry.is_file:
            stats = self.extensions.setdefault(extension_of(entry.path), ExtensionStats())
            stats.files += 1
            stats.bytes += entry.size


def extension_of(path: Path) -> str:
    """Lower-cased text after the last dot of the file name, or ``""``."""
    return path.suffix[1:].lower()


def _walk_summary_dir(
    directory: Path,
    root: Path,
    options: ListOptions,
    predicate: FilterPredicate,
    summary: ListingSummary,
) -> None:
    for entry in read_entries(directory, options.show_hidden):
        rel_path = relative_to_root(entry.path, root)
        if entry.is_dir:
            _walk_summary_dir(entry.path, root, options, predicate, summary)
            if predicate.matches(entry, rel_path):
                summary.total_dirs += 1
        elif predicate.matches(entry, rel_path):
            summary.add_file(entry)


def compute_summary(path: Path, options: ListOptions, predicate: FilterPredicate) -> ListingSummary:
    """Aggregate statistics below ``path``.

    A regular file given directly as ``path`` is summarized on its own, with
    its file name as relative path. Anything else is walked as a directory.
    """
    summary = ListingSummary()
    root_entry = read_entry(path)
    if root_entry.is_file:
        if predicate.matches(root_entry, Path(entry_name(path))):
            summary.add_file(root_entry)
        return summary

    _walk_summary_dir(path, path, options, predicate, summary)
    return summary


__all__ = ["ExtensionStats", "ListingSummary", "extension_of", "compute_summary"]
