"""Command-line front door for lazyls (``lz``).

Parses options, resolves the target path, and dispatches to a single-shot
listing, watch mode, the interactive navigator, or the folder picker.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ConfigDefaults, load_defaults
from .errors import ListingError
from .listing import render_once
from .navigator import run_navigator
from .options import SORT_KEY_CHOICES, ListOptions, SortKey
from .picker import pick_folder
from .ui_theme import UITheme, paint, resolve_theme
from .watch import run_watch

COMMANDS = ("interactive", "fastls")
_VALUE_OPTIONS = frozenset({"--filter", "--sort"})


def split_command(argv: list[str]) -> tuple[str | None, list[str]]:
    """Pull a leading subcommand out of ``argv``.

    Options are global, so the subcommand may appear after them; only the
    first positional token is considered.
    """
    idx = 0
    while idx < len(argv):
        token = argv[idx]
        if token == "--":
            break
        if token.startswith("-") and token != "-":
            idx += 2 if token in _VALUE_OPTIONS else 1
            continue
        if token in COMMANDS:
            return token, argv[:idx] + argv[idx + 1 :]
        break
    return None, list(argv)


def _sort_key(value: str) -> SortKey:
    """argparse type for ``--sort`` values."""
    try:
        return SortKey.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"invalid choice: {value!r} (choose from {', '.join(SORT_KEY_CHOICES)})"
        ) from exc


def build_parser(defaults: ConfigDefaults) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lz",
        description="An advanced ls alternative with interactive browsing.",
        epilog="Commands: 'lz interactive [PATH]' browses with the keyboard; "
        "'lz fastls' lists a folder chosen in a dialog.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Path to list. Defaults to current directory.")
    parser.add_argument("-a", "--all", action="store_true", default=defaults.show_hidden, help="Show hidden entries.")
    parser.add_argument("-l", "--long", action="store_true", help="Show mode, size and modification time.")
    parser.add_argument("--icons", action="store_true", default=defaults.icons, help="Prefix names with icons.")
    parser.add_argument("--tree", action="store_true", help="List recursively as a tree.")
    parser.add_argument("--rainbow", action="store_true", help="Color each name by a hash of its path.")
    parser.add_argument("--filter", metavar="PATTERN", default=None, help="Glob matched against relative paths.")
    parser.add_argument("--only-dirs", action="store_true", help="Show directories only.")
    parser.add_argument("--only-files", action="store_true", help="Show non-directories only.")
    parser.add_argument("--json", action="store_true", help="Print structured JSON output.")
    parser.add_argument("--du", action="store_true", help="Print the total size of matching files.")
    parser.add_argument("--extensions", action="store_true", help="Print per-extension file counts and sizes.")
    parser.add_argument("--watch", action="store_true", help="Re-render every few seconds until interrupted.")
    parser.add_argument("--human", action="store_true", default=defaults.human, help="Human-readable sizes.")
    parser.add_argument(
        "--sort",
        type=_sort_key,
        default=defaults.sort,
        metavar="{name,size,age}",
        help="Sort key (default: name; 'time' and 'mtime' mean age).",
    )
    parser.add_argument("-r", "--reverse", action="store_true", default=defaults.reverse, help="Reverse the sort key.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def options_from_args(args: argparse.Namespace) -> ListOptions:
    return ListOptions(
        show_hidden=args.all,
        long=args.long,
        icons=args.icons,
        tree=args.tree,
        rainbow=args.rainbow,
        filter=args.filter,
        only_dirs=args.only_dirs,
        only_files=args.only_files,
        json=args.json,
        du=args.du,
        extensions=args.extensions,
        watch=args.watch,
        human=args.human,
        sort=args.sort,
        reverse=args.reverse,
        color=not args.no_color and sys.stdout.isatty(),
    )


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def list_path(path: Path, options: ListOptions, theme: UITheme, interval_seconds: float) -> None:
    if options.watch:
        run_watch(path, options, interval_seconds=interval_seconds, theme=theme)
    else:
        render_once(path, options, sys.stdout, theme)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run the requested mode.

    ``ListingError`` is printed in red to stderr and exits with status 1;
    an interrupt (the only way out of watch mode) exits with 130.
    """
    command, rest = split_command(list(sys.argv[1:] if argv is None else argv))
    defaults = load_defaults()
    args = build_parser(defaults).parse_args(rest)
    configure_logging(args.verbose)
    options = options_from_args(args)
    theme = resolve_theme(no_color=not options.color)

    if command == "fastls" and args.path is not None:
        raise SystemExit("fastls does not take a path; pick one in the dialog.")

    try:
        if command == "interactive":
            run_navigator(Path(args.path or "."), options, theme=theme)
        elif command == "fastls":
            picked = pick_folder()
            if picked is not None:
                list_path(picked, options, theme, defaults.watch_interval_seconds)
        else:
            list_path(Path(args.path or "."), options, theme, defaults.watch_interval_seconds)
    except ListingError as exc:
        sys.stderr.write(paint(str(exc), theme.error, theme) + "\n")
        raise SystemExit(1) from exc
    except KeyboardInterrupt:
        raise SystemExit(130) from None


if __name__ == "__main__":
    main()
