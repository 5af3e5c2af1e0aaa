"""Screen composition for the navigator: entries list, detail panel, key bar.

Layout math works on plain text; colors are applied after cells are
clipped and padded so escape codes never count toward widths.
"""

from __future__ import annotations

import unicodedata

from ..ui_theme import PLAIN_THEME, UITheme, paint
from .keys import KEYBAR_TEXT
from .state import BrowserState

DETAIL_MIN_WIDTH = 42
CHROME_ROWS = 3
SELECTED_MARKER = "> "
UNSELECTED_MARKER = "  "


def char_display_width(ch: str) -> int:
    """Terminal columns used by ``ch``: 0 for combining marks, 2 for wide."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def fit_cell(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` display columns and pad it with spaces."""
    if width <= 0:
        return ""
    out: list[str] = []
    used = 0
    for ch in text.replace("\t", " "):
        if not ch.isprintable():
            ch = "?"
        w = char_display_width(ch)
        if used + w > width:
            break
        out.append(ch)
        used += w
    return "".join(out) + " " * (width - used)


def pane_widths(columns: int) -> tuple[int, int]:
    """Return ``(left, right)`` widths; one column is the divider."""
    columns = max(3, columns)
    right = max(DETAIL_MIN_WIDTH, columns // 3)
    right = min(right, max(1, columns - 10))
    left = max(1, columns - right - 1)
    return left, right


def body_rows(rows: int) -> int:
    return max(1, rows - CHROME_ROWS)


def list_window_start(selected: int, count: int, visible: int) -> int:
    """First visible list row so that ``selected`` stays on screen."""
    if visible <= 0 or count <= visible or selected < visible:
        return 0
    return min(selected - visible + 1, count - visible)


def build_screen_lines(state: BrowserState, columns: int, rows: int, theme: UITheme = PLAIN_THEME) -> list[str]:
    """Compose exactly ``rows`` lines for the current state."""
    left_w, right_w = pane_widths(columns)
    visible = body_rows(rows)
    divider = paint("│", theme.panel_border, theme)

    lines = [paint(fit_cell(f" lz  {state.current_directory}", columns), theme.panel_title, theme)]
    lines.append(
        paint(fit_cell(" Entries", left_w), theme.panel_title, theme)
        + divider
        + paint(fit_cell(" Summary", right_w), theme.panel_title, theme)
    )

    labels = state.labels
    start = list_window_start(state.selected, len(labels), visible)
    detail_lines = state.detail.splitlines()
    for row in range(visible):
        idx = start + row
        if idx < len(labels):
            is_selected = idx == state.selected
            marker = SELECTED_MARKER if is_selected else UNSELECTED_MARKER
            cell = fit_cell(marker + labels[idx], left_w)
            left = paint(cell, theme.selected, theme) if is_selected else cell
        else:
            left = fit_cell("", left_w)
        right_text = f" {detail_lines[row]}" if row < len(detail_lines) else ""
        lines.append(left + divider + fit_cell(right_text, right_w))

    lines.append(paint(fit_cell(KEYBAR_TEXT, columns), theme.keybar, theme))
    return lines[:rows] if rows > 0 else []


def render_frame(lines: list[str]) -> str:
    """Full-frame redraw payload for a raw-mode terminal."""
    return "\x1b[H" + "\r\n".join(line + "\x1b[K" for line in lines) + "\x1b[J"


__all__ = [
    "char_display_width",
    "fit_cell",
    "pane_widths",
    "body_rows",
    "list_window_start",
    "build_screen_lines",
    "render_frame",
]
