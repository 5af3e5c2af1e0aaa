"""Interactive, keyboard-driven directory navigator.

``transitions.dispatch`` is the state machine; the remaining modules turn
keys into events and paint the state onto a raw-mode terminal.
"""

from __future__ import annotations

from .detail import describe_entry
from .keys import KEYBAR_TEXT, KeyComboBinding, KeyComboRegistry, build_key_registry, key_to_event
from .loop import run_navigator
from .state import BrowserState, create_browser_state, normalize_start
from .transitions import Activate, NavigateUp, NavigatorEvent, Quit, Reload, Select, ToggleHidden, dispatch

__all__ = [
    "describe_entry",
    "KEYBAR_TEXT",
    "KeyComboBinding",
    "KeyComboRegistry",
    "build_key_registry",
    "key_to_event",
    "run_navigator",
    "BrowserState",
    "create_browser_state",
    "normalize_start",
    "Activate",
    "NavigateUp",
    "NavigatorEvent",
    "Quit",
    "Reload",
    "Select",
    "ToggleHidden",
    "dispatch",
]
