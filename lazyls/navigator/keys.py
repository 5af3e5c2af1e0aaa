"""Key bindings: translate key tokens into navigator events."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .state import BrowserState
from .transitions import Activate, NavigateUp, NavigatorEvent, Quit, Reload, Select, ToggleHidden

KEYBAR_TEXT = "Enter: open   Backspace: up   h: hidden   r: refresh   q/Esc: quit"


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to a single event factory."""

    combos: tuple[str, ...]
    handler: Callable[[], NavigatorEvent | None]


class KeyComboRegistry:
    """Small key-dispatch table; key tokens are matched exactly."""

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], NavigatorEvent | None]] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> NavigatorEvent | None:
        """Return the event bound to ``key``, or ``None`` when unbound."""
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


def build_key_registry(state: BrowserState, page_rows: int = 10) -> KeyComboRegistry:
    """Bindings for the current state; selection moves become ``Select`` events."""
    page = max(1, page_rows)

    def move(delta: int) -> Callable[[], NavigatorEvent | None]:
        def handler() -> NavigatorEvent | None:
            if not state.entries:
                return None
            target = max(0, min(state.selected + delta, len(state.entries) - 1))
            if target == state.selected:
                return None
            return Select(target)

        return handler

    def jump(index_for: Callable[[int], int]) -> Callable[[], NavigatorEvent | None]:
        def handler() -> NavigatorEvent | None:
            if not state.entries:
                return None
            return Select(index_for(len(state.entries)))

        return handler

    def activate() -> NavigatorEvent | None:
        if not state.entries:
            return None
        return Activate(state.selected)

    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("q", "ESC", "CTRL_C", "EOF"), lambda: Quit()),
        KeyComboBinding(("ENTER", "RIGHT", "l"), activate),
        KeyComboBinding(("BACKSPACE", "LEFT", "-"), lambda: NavigateUp()),
        KeyComboBinding(("h",), lambda: ToggleHidden()),
        KeyComboBinding(("r",), lambda: Reload()),
        KeyComboBinding(("UP", "k"), move(-1)),
        KeyComboBinding(("DOWN", "j"), move(1)),
        KeyComboBinding(("PAGE_UP",), move(-page)),
        KeyComboBinding(("PAGE_DOWN",), move(page)),
        KeyComboBinding(("HOME", "g"), jump(lambda _count: 0)),
        KeyComboBinding(("END", "G"), jump(lambda count: count - 1)),
    )


def key_to_event(key: str, state: BrowserState, page_rows: int = 10) -> NavigatorEvent | None:
    if not key:
        return None
    return build_key_registry(state, page_rows).dispatch(key)


__all__ = [
    "KEYBAR_TEXT",
    "KeyComboBinding",
    "KeyComboRegistry",
    "build_key_registry",
    "key_to_event",
]
