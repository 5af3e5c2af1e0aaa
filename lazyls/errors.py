"""Exception types raised by the listing engine and the navigator."""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base class for errors that abort one render or one navigator step."""


class ListingIOError(ListingError):
    """A directory or an entry's metadata could not be read."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class InvalidFilterPattern(ListingError):
    """The ``--filter`` glob could not be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid glob: {pattern}: {reason}")
        self.pattern = pattern
        self.reason = reason


class MissingNavigatorState(ListingError):
    """The navigator lost its state object; the session cannot continue."""


class TerminalUnavailable(ListingError):
    """Interactive mode was started without a controlling terminal on stdin."""


__all__ = [
    "ListingError",
    "ListingIOError",
    "InvalidFilterPattern",
    "MissingNavigatorState",
    "TerminalUnavailable",
]
