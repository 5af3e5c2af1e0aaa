"""Navigator state: one directory, its sorted entries, and the selection.

The state object has a single owner, the transition dispatcher in
``lazyls.navigator.transitions``; rendering only reads it.
"""

from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass, field
from pathlib import Path

from ..entry_model import EntryRecord
from ..listing import entry_label
from ..options import ListOptions

DETAIL_PLACEHOLDER = "Select an entry"
EMPTY_DETAIL = "(empty)"
WINDOW_TITLE_PREFIX = "lz interactive - "


@dataclass
class BrowserState:
    current_directory: Path
    options: ListOptions
    entries: list[EntryRecord] = field(default_factory=list)
    selected: int = 0
    detail: str = DETAIL_PLACEHOLDER
    quit: bool = False

    @property
    def labels(self) -> list[str]:
        return [entry_label(entry, self.options) for entry in self.entries]

    @property
    def selected_entry(self) -> EntryRecord | None:
        if 0 <= self.selected < len(self.entries):
            return self.entries[self.selected]
        return None

    @property
    def title(self) -> str:
        return f"{WINDOW_TITLE_PREFIX}{self.current_directory}"


def normalize_start(start: Path) -> Path:
    """Make ``start`` absolute against the CWD and resolve it when possible."""
    if not start.is_absolute():
        try:
            start = Path(os.getcwd()) / start
        except OSError:
            start = Path(".") / start
    try:
        return start.resolve(strict=True)
    except OSError:
        return start


def create_browser_state(start: Path, options: ListOptions) -> BrowserState:
    """Create the navigator state with its own copy of ``options``."""
    return BrowserState(current_directory=normalize_start(start), options=dataclasses.replace(options))


__all__ = [
    "DETAIL_PLACEHOLDER",
    "EMPTY_DETAIL",
    "WINDOW_TITLE_PREFIX",
    "BrowserState",
    "normalize_start",
    "create_browser_state",
]
