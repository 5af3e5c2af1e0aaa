"""Flat and tree listing assembly.

Tree mode keeps "ghost ancestors": a directory that fails the filter itself
is still rendered when anything below it passes, so filtered leaves keep
their path context. The filesystem is queried on demand; no tree snapshot
is kept between calls.
"""

from __future__ import annotations

from pathlib import Path

from ..entry_model import ROOT_REL_PATH, DisplayEntry, EntryRecord, read_entries, read_entry
from ..options import ListOptions
from .filtering import FilterPredicate
from .sorting import sort_entries

BRANCH_MID = "├── "
BRANCH_LAST = "└── "
ANCESTOR_MORE = "│   "
ANCESTOR_DONE = "    "


def relative_to_root(path: Path, root: Path) -> Path:
    """Return ``path`` relative to ``root``, or ``path`` unchanged if outside it."""
    try:
        return path.relative_to(root)
    except ValueError:
        return path


def tree_prefix(ancestor_more: list[bool], is_last: bool) -> str:
    """Build the glyph prefix for one row.

    ``ancestor_more[i]`` tells whether the ancestor at depth ``i`` still has
    siblings printed below it, which decides between a vertical bar and
    blank padding in that column.
    """
    parts = [ANCESTOR_MORE if more else ANCESTOR_DONE for more in ancestor_more]
    parts.append(BRANCH_LAST if is_last else BRANCH_MID)
    return "".join(parts)


def subtree_has_match(
    directory: Path,
    root: Path,
    options: ListOptions,
    predicate: FilterPredicate,
) -> bool:
    """Return whether any descendant of ``directory`` passes ``predicate``."""
    for entry in read_entries(directory, options.show_hidden):
        if predicate.matches(entry, relative_to_root(entry.path, root)):
            return True
        if entry.is_dir and subtree_has_match(entry.path, root, options, predicate):
            return True
    return False


def _collect_tree_children(
    directory: Path,
    root: Path,
    options: ListOptions,
    predicate: FilterPredicate,
    ancestor_more: list[bool],
    out: list[DisplayEntry],
) -> None:
    """Append included children of ``directory`` (depth-first) to ``out``."""
    entries = sort_entries(read_entries(directory, options.show_hidden), options.sort, options.reverse)

    included: list[tuple[EntryRecord, Path]] = []
    for entry in entries:
        rel_path = relative_to_root(entry.path, root)
        if predicate.matches(entry, rel_path):
            included.append((entry, rel_path))
        elif entry.is_dir and not options.only_files and subtree_has_match(entry.path, root, options, predicate):
            included.append((entry, rel_path))

    total = len(included)
    for idx, (entry, rel_path) in enumerate(included):
        is_last = idx + 1 == total
        out.append(DisplayEntry(entry=entry, prefix=tree_prefix(ancestor_more, is_last), rel_path=rel_path))
        if entry.is_dir:
            ancestor_more.append(not is_last)
            _collect_tree_children(entry.path, root, options, predicate, ancestor_more, out)
            ancestor_more.pop()


def build_tree_entries(
    directory: Path,
    root: Path,
    options: ListOptions,
    predicate: FilterPredicate,
) -> list[DisplayEntry]:
    """Build tree rows for ``directory``, root row first unless ``only_files``."""
    out: list[DisplayEntry] = []
    if not options.only_files:
        out.append(DisplayEntry(entry=read_entry(directory), prefix="", rel_path=ROOT_REL_PATH))
    _collect_tree_children(directory, root, options, predicate, [], out)
    return out


def build_flat_entries(
    directory: Path,
    root: Path,
    options: ListOptions,
    predicate: FilterPredicate,
) -> list[DisplayEntry]:
    """Build one sorted, filtered level of ``directory``."""
    entries = sort_entries(read_entries(directory, options.show_hidden), options.sort, options.reverse)
    out: list[DisplayEntry] = []
    for entry in entries:
        rel_path = relative_to_root(entry.path, root)
        if predicate.matches(entry, rel_path):
            out.append(DisplayEntry(entry=entry, prefix="", rel_path=rel_path))
    return out


def build_display_entries(
    directory: Path,
    root: Path,
    options: ListOptions,
    predicate: FilterPredicate,
) -> list[DisplayEntry]:
    """Dispatch to tree or flat assembly according to ``options.tree``."""
    if options.tree:
        return build_tree_entries(directory, root, options, predicate)
    return build_flat_entries(directory, root, options, predicate)


__all__ = [
    "BRANCH_MID",
    "BRANCH_LAST",
    "ANCESTOR_MORE",
    "ANCESTOR_DONE",
    "relative_to_root",
    "tree_prefix",
    "subtree_has_match",
    "build_tree_entries",
    "build_flat_entries",
    "build_display_entries",
]
