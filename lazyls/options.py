"""View options shared by the single-shot listing, watch mode and navigator."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class SortKey(enum.Enum):
    NAME = "name"
    SIZE = "size"
    AGE = "age"

    @classmethod
    def parse(cls, value: str) -> SortKey:
        """Parse a CLI/config sort key, accepting ``time``/``mtime`` for age."""
        normalized = value.strip().lower()
        if normalized in {"time", "mtime"}:
            return cls.AGE
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"unknown sort key: {value!r}") from exc


SORT_KEY_CHOICES = ("name", "size", "age", "time", "mtime")


@dataclass
class ListOptions:
    """Everything that shapes one rendered listing.

    ``show_hidden`` is the only field the navigator changes at runtime; it
    works on its own copy (see ``dataclasses.replace``).
    """

    show_hidden: bool = False
    long: bool = False
    icons: bool = False
    tree: bool = False
    rainbow: bool = False
    filter: str | None = None
    only_dirs: bool = False
    only_files: bool = False
    json: bool = False
    du: bool = False
    extensions: bool = False
    watch: bool = False
    human: bool = False
    sort: SortKey = SortKey.NAME
    reverse: bool = False
    color: bool = True

    @property
    def wants_summary(self) -> bool:
        return self.du or self.extensions


__all__ = ["SortKey", "SORT_KEY_CHOICES", "ListOptions"]
