"""Native folder picker used by ``lz fastls``."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

PICKER_TITLE = "Choose a folder to list"


def pick_folder(title: str = PICKER_TITLE) -> Path | None:
    """Show a directory dialog and return the chosen folder.

    Returns ``None`` when the dialog is cancelled or no GUI is available.
    """
    try:
        import tkinter
        from tkinter import filedialog
    except ImportError as exc:
        logger.warning("folder picker unavailable: %s", exc)
        return None

    try:
        root = tkinter.Tk()
    except tkinter.TclError as exc:
        logger.warning("folder picker unavailable: %s", exc)
        return None
    try:
        root.withdraw()
        chosen = filedialog.askdirectory(parent=root, title=title, mustexist=True)
    finally:
        root.destroy()
    if not chosen:
        return None
    return Path(chosen)


__all__ = ["PICKER_TITLE", "pick_folder"]
