"""Interactive navigator event loop.

Blocking and single-threaded: paint, read one key, dispatch one event, and
repeat. Each event's transition finishes before the next key is read.
"""

from __future__ import annotations

import shutil
import sys
from collections.abc import Callable
from pathlib import Path

from ..options import ListOptions
from ..ui_theme import PLAIN_THEME, UITheme
from .input import read_key
from .keys import key_to_event
from .render import body_rows, build_screen_lines, render_frame
from .state import BrowserState, create_browser_state
from .terminal import TerminalController
from .transitions import Reload, dispatch


def run_navigator(
    start: Path,
    options: ListOptions,
    *,
    theme: UITheme = PLAIN_THEME,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
    terminal: TerminalController | None = None,
    read_key_fn: Callable[[int], str] = read_key,
    terminal_size: Callable[[], tuple[int, int]] | None = None,
) -> BrowserState:
    """Browse from ``start`` until a quit key; return the final state.

    ``terminal``, ``read_key_fn`` and ``terminal_size`` are injectable so the
    loop can be driven without a real tty.
    """
    in_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
    out_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
    term = terminal if terminal is not None else TerminalController(in_fd, out_fd)

    def current_size() -> tuple[int, int]:
        if terminal_size is not None:
            return terminal_size()
        size = shutil.get_terminal_size((80, 24))
        return size.columns, size.lines

    state = dispatch(create_browser_state(start, options), Reload())
    with term.raw_mode():
        while not state.quit:
            columns, rows = current_size()
            term.set_title(state.title)
            term.write(render_frame(build_screen_lines(state, columns, rows, theme)))
            key = read_key_fn(in_fd)
            event = key_to_event(key, state, page_rows=body_rows(rows))
            if event is None:
                continue
            state = dispatch(state, event)
    return state


__all__ = ["run_navigator"]
