"""ANSI palettes for listing output and the navigator chrome.

Decoration only: every renderer works the same with ``PLAIN_THEME``, which is
what ``--no-color`` and non-TTY output select.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    tree_prefix: str
    name_dir: str
    name_symlink: str
    name_executable: str
    name_file: str
    long_mode: str
    long_size: str
    long_time: str
    total: str
    ext_label: str
    ext_files: str
    ext_bytes: str
    error: str
    panel_title: str
    panel_border: str
    selected: str
    keybar: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    tree_prefix="\033[90m",
    name_dir="\033[94m",
    name_symlink="\033[96m",
    name_executable="\033[92m",
    name_file="\033[97m",
    long_mode="\033[93m",
    long_size="\033[95m",
    long_time="\033[90m",
    total="\033[93m",
    ext_label="\033[94m",
    ext_files="\033[97m",
    ext_bytes="\033[95m",
    error="\033[91m",
    panel_title="\033[1;97m",
    panel_border="\033[32m",
    selected="\033[7;31m",
    keybar="\033[2m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    tree_prefix="",
    name_dir="",
    name_symlink="",
    name_executable="",
    name_file="",
    long_mode="",
    long_size="",
    long_time="",
    total="",
    ext_label="",
    ext_files="",
    ext_bytes="",
    error="",
    panel_title="",
    panel_border="",
    selected="",
    keybar="",
)


def resolve_theme(*, no_color: bool = False) -> UITheme:
    """Return the concrete theme for the requested color mode."""
    return PLAIN_THEME if no_color else DEFAULT_THEME


def paint(text: str, color: str, theme: UITheme) -> str:
    """Wrap ``text`` in ``color`` and the theme reset, skipping empty colors."""
    if not color or not text:
        return text
    return f"{color}{text}{theme.reset}"


__all__ = ["UITheme", "DEFAULT_THEME", "PLAIN_THEME", "resolve_theme", "paint"]
