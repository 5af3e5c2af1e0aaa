"""Navigator events and the single transition function.

Every user action becomes one event handed to ``dispatch``. Transitions run
to completion, including any directory reload, before the next event. A
``ListingError`` inside a transition is shown in the detail panel instead of
ending the session; only a missing state object is fatal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..entry_model import read_entries, read_entry
from ..errors import ListingError, MissingNavigatorState
from ..listing import sort_entries
from .detail import describe_entry
from .state import EMPTY_DETAIL, BrowserState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reload:
    """Re-read the current directory."""


@dataclass(frozen=True)
class Select:
    """Highlight ``index`` and describe it without reloading."""

    index: int


@dataclass(frozen=True)
class Activate:
    """Open ``index`` when it is a directory, otherwise just select it."""

    index: int


@dataclass(frozen=True)
class NavigateUp:
    """Move to the parent directory."""


@dataclass(frozen=True)
class ToggleHidden:
    """Flip dot-file visibility and reload."""


@dataclass(frozen=True)
class Quit:
    """End the navigator loop."""


NavigatorEvent = Reload | Select | Activate | NavigateUp | ToggleHidden | Quit


def _reload(state: BrowserState, directory: Path | None = None, show_hidden: bool | None = None) -> None:
    """Read ``directory`` and commit it, the new entries and options together.

    The read happens before anything is committed, so a failing directory
    leaves the previous listing in place.
    """
    target = state.current_directory if directory is None else directory
    hidden = state.options.show_hidden if show_hidden is None else show_hidden
    entries = sort_entries(read_entries(target, hidden), state.options.sort, state.options.reverse)

    state.current_directory = target
    state.options.show_hidden = hidden
    state.entries = entries
    state.selected = 0
    if not entries:
        state.detail = EMPTY_DETAIL
        return
    state.detail = describe_entry(entries[0].path)


def _select(state: BrowserState, index: int) -> None:
    if not state.entries:
        return
    state.selected = max(0, min(index, len(state.entries) - 1))
    state.detail = describe_entry(state.entries[state.selected].path)


def _activate(state: BrowserState, index: int) -> None:
    if not 0 <= index < len(state.entries):
        return
    target = state.entries[index].path
    if read_entry(target).is_dir:
        _reload(state, directory=target)
    else:
        _select(state, index)


def _navigate_up(state: BrowserState) -> None:
    parent = state.current_directory.parent
    if parent == state.current_directory:
        return
    _reload(state, directory=parent)


def _apply(state: BrowserState, event: NavigatorEvent) -> None:
    if isinstance(event, Reload):
        _reload(state)
    elif isinstance(event, Select):
        _select(state, event.index)
    elif isinstance(event, Activate):
        _activate(state, event.index)
    elif isinstance(event, NavigateUp):
        _navigate_up(state)
    elif isinstance(event, ToggleHidden):
        _reload(state, show_hidden=not state.options.show_hidden)
    elif isinstance(event, Quit):
        state.quit = True
    else:
        raise TypeError(f"unknown navigator event: {event!r}")


def dispatch(state: BrowserState | None, event: NavigatorEvent) -> BrowserState:
    """Apply ``event`` to ``state`` in place and return it."""
    if state is None:
        raise MissingNavigatorState("Missing browser state")
    try:
        _apply(state, event)
    except MissingNavigatorState:
        raise
    except ListingError as exc:
        logger.debug("navigator transition %r failed: %s", event, exc)
        state.detail = str(exc)
    return state


__all__ = [
    "Reload",
    "Select",
    "Activate",
    "NavigateUp",
    "ToggleHidden",
    "Quit",
    "NavigatorEvent",
    "dispatch",
]
