"""Watch mode: re-render a listing on a fixed interval.

This is plain polling. A failed iteration is reported inline and the loop
keeps going until the process is interrupted.
"""

from __future__ import annotations

import json
import logging
import sys
import time
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from .errors import ListingError
from .listing import error_record, render_once
from .options import ListOptions
from .ui_theme import PLAIN_THEME, UITheme, paint

logger = logging.getLogger(__name__)

WATCH_INTERVAL_SECONDS = 2.0
CLEAR_SCREEN = "\033[2J\033[H"


def run_watch_iteration(
    path: Path,
    options: ListOptions,
    stdout: TextIO,
    stderr: TextIO,
    *,
    theme: UITheme = PLAIN_THEME,
    render: Callable[..., None] = render_once,
) -> bool:
    """Run one watch tick; return ``False`` when the render failed."""
    if not options.json:
        stdout.write(CLEAR_SCREEN)
    ok = True
    try:
        render(path, options, stdout, theme)
    except ListingError as exc:
        ok = False
        logger.debug("watch iteration failed for %s: %s", path, exc)
        if options.json:
            stdout.write(json.dumps(error_record(path, str(exc))) + "\n")
        else:
            stderr.write(paint(str(exc), theme.error, theme) + "\n")
            stderr.flush()
    stdout.flush()
    return ok


def run_watch(
    path: Path,
    options: ListOptions,
    *,
    interval_seconds: float = WATCH_INTERVAL_SECONDS,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    theme: UITheme = PLAIN_THEME,
    render: Callable[..., None] = render_once,
    sleep: Callable[[float], None] = time.sleep,
    max_iterations: int | None = None,
) -> None:
    """Render ``path`` every ``interval_seconds`` until interrupted.

    ``max_iterations`` bounds the loop for tests; the CLI never sets it.
    """
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr
    iteration = 0
    while max_iterations is None or iteration < max_iterations:
        run_watch_iteration(path, options, out, err, theme=theme, render=render)
        iteration += 1
        sleep(interval_seconds)


__all__ = ["WATCH_INTERVAL_SECONDS", "CLEAR_SCREEN", "run_watch_iteration", "run_watch"]
