"""Glob compilation and the direct-visibility predicate.

The predicate decides whether one entry is visible on its own. Keeping
ancestors of matches visible in tree mode is handled by ``build``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from ..entry_model import EntryRecord, normalize_match_path
from ..errors import InvalidFilterPattern
from ..options import ListOptions


def _translate_class(pattern: str, body: str) -> str:
    """Translate the inside of a ``[...]`` class into regex class syntax."""
    negate = body[:1] in {"!", "^"}
    if negate:
        body = body[1:]
    if not body:
        raise InvalidFilterPattern(pattern, "empty character class")
    escaped = "".join("\\" + ch if ch in "\\[]^&~|" else ch for ch in body)
    return ("[^" if negate else "[") + escaped + "]"


def translate_glob(pattern: str) -> str:
    """Translate a glob into an anchored-by-caller regular expression.

    ``*`` and ``**`` both cross ``/``; a ``**/`` segment may also match no
    directories at all, so ``**/b.txt`` matches ``b.txt``.
    """
    out: list[str] = []
    brace_depth = 0
    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "\\":
            if i + 1 >= n:
                raise InvalidFilterPattern(pattern, "dangling escape")
            out.append(re.escape(pattern[i + 1]))
            i += 2
        elif ch == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            at_segment_start = i == 0 or pattern[i - 1] == "/"
            if j - i >= 2 and at_segment_start and j < n and pattern[j] == "/":
                out.append("(?:.*/)?")
                i = j + 1
            else:
                out.append(".*")
                i = j
        elif ch == "?":
            out.append(".")
            i += 1
        elif ch == "[":
            j = i + 1
            if j < n and pattern[j] in {"!", "^"}:
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 1
            if j >= n:
                raise InvalidFilterPattern(pattern, "unclosed character class")
            out.append(_translate_class(pattern, pattern[i + 1 : j]))
            i = j + 1
        elif ch == "{":
            brace_depth += 1
            out.append("(?:")
            i += 1
        elif ch == "}":
            if brace_depth == 0:
                raise InvalidFilterPattern(pattern, "unopened alternate group")
            brace_depth -= 1
            out.append(")")
            i += 1
        elif ch == "," and brace_depth > 0:
            out.append("|")
            i += 1
        else:
            out.append(re.escape(ch))
            i += 1
    if brace_depth:
        raise InvalidFilterPattern(pattern, "unclosed alternate group")
    return "".join(out)


def compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile ``pattern`` for whole-string matching against ``/`` paths."""
    translated = translate_glob(pattern)
    try:
        return re.compile(rf"(?s:{translated})\Z")
    except re.error as exc:
        raise InvalidFilterPattern(pattern, str(exc)) from exc


@dataclass(frozen=True)
class FilterPredicate:
    """Direct-visibility test shared by one whole render.

    Pure and stateless: the result depends only on ``entry`` and
    ``rel_path``. With both ``only_dirs`` and ``only_files`` set nothing
    matches.
    """

    matcher: re.Pattern[str] | None = None
    only_dirs: bool = False
    only_files: bool = False

    @classmethod
    def from_options(cls, options: ListOptions) -> FilterPredicate:
        matcher = compile_glob(options.filter) if options.filter is not None else None
        return cls(matcher=matcher, only_dirs=options.only_dirs, only_files=options.only_files)

    def matches(self, entry: EntryRecord, rel_path: Path) -> bool:
        if self.only_dirs and not entry.is_dir:
            return False
        if self.only_files and entry.is_dir:
            return False
        if self.matcher is None:
            return True
        return self.matcher.match(normalize_match_path(rel_path)) is not None

    __call__ = matches


__all__ = ["translate_glob", "compile_glob", "FilterPredicate"]
