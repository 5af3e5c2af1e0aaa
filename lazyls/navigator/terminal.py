"""Terminal control helpers for the navigator session.

Owns raw-mode lifecycle, alternate-screen switching, the window title, and
full-frame writes.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from ..errors import TerminalUnavailable


class TerminalController:
    """Manage terminal mode transitions for one navigator session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalUnavailable(f"Interactive mode needs a terminal on stdin: {exc.args[-1]}") from exc

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Restore cursor, main screen buffer and the saved tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def set_title(self, title: str) -> None:
        """Set the terminal window title via OSC 0."""
        safe = "".join(ch for ch in title if ch.isprintable())
        self.write(f"\x1b]0;{safe}\x07")

    def write(self, text: str) -> None:
        data = text.encode("utf-8", errors="replace")
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()


__all__ = ["TerminalController"]
