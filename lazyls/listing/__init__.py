"""Listing engine: ordering, filtering, tree assembly, statistics, output.

Builds on ``lazyls.entry_model`` reads; holds no state between renders.
"""

from __future__ import annotations

from .build import (
    build_display_entries,
    build_flat_entries,
    build_tree_entries,
    relative_to_root,
    subtree_has_match,
    tree_prefix,
)
from .filtering import FilterPredicate, compile_glob, translate_glob
from .formatting import (
    entry_label,
    format_mode,
    format_modified,
    format_name,
    format_size,
    format_timestamp,
    kind_label,
)
from .output import (
    ListingResult,
    build_listing,
    error_record,
    listing_record,
    render_human_lines,
    render_once,
    write_listing,
)
from .sorting import sort_entries
from .summary import ExtensionStats, ListingSummary, compute_summary, extension_of

__all__ = [
    "build_display_entries",
    "build_flat_entries",
    "build_tree_entries",
    "relative_to_root",
    "subtree_has_match",
    "tree_prefix",
    "FilterPredicate",
    "compile_glob",
    "translate_glob",
    "entry_label",
    "format_mode",
    "format_modified",
    "format_name",
    "format_size",
    "format_timestamp",
    "kind_label",
    "ListingResult",
    "build_listing",
    "error_record",
    "listing_record",
    "render_human_lines",
    "render_once",
    "write_listing",
    "sort_entries",
    "ExtensionStats",
    "ListingSummary",
    "compute_summary",
    "extension_of",
]
