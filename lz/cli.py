"""Command-line front door for lz.

Parses flags into a :class:`ListingOptions` value, then runs the
collect -> sort -> reverse -> render pipeline and writes the result.
"""

from __future__ import annotations

import argparse
import os
import shutil
import sys
from collections.abc import Sequence

from .collection import collect_entries
from .config import load_user_defaults
from .errors import LzError
from .options import ListingOptions, resolve_sort_key
from .render import render_listing
from .ui_theme import available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _default_render_width() -> int:
    """Resolve default grid width from current terminal size."""
    term = shutil.get_terminal_size((80, 24))
    return max(1, term.columns)


def _color_disabled(requested_off: bool) -> bool:
    if requested_off:
        return True
    if os.environ.get("NO_COLOR"):
        return True
    isatty = getattr(sys.stdout, "isatty", None)
    return not (isatty is not None and isatty())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lz",
        description="List directory contents, optionally sorted by time or size.",
    )
    parser.add_argument("paths", nargs="*", metavar="PATH", help="Files or directory to list. Defaults to current directory.")
    parser.add_argument("-t", "--time", action="store_true", help="sort by modification time, newest first")
    parser.add_argument("-s", "--size", action="store_true", help="sort by file size, largest first")
    parser.add_argument("-r", "--reverse", action="store_true", help="reverse order while sorting")
    parser.add_argument(
        "-l",
        "--long",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="use long listing format (--no-long overrides a persisted default)",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Column width for grid output (default: terminal width).",
    )
    return parser


def build_options(args: argparse.Namespace) -> ListingOptions:
    """Combine parsed flags with persisted defaults.

    Flag conflicts are checked before the config file is read.
    """
    resolve_sort_key(args.time, args.size)
    defaults = load_user_defaults()
    theme = resolve_theme(args.theme or defaults.theme, no_color=_color_disabled(args.no_color or defaults.no_color))
    return ListingOptions.from_flags(
        by_time=args.time,
        by_size=args.size,
        reverse=args.reverse,
        long=args.long if args.long is not None else defaults.long,
        theme=theme,
        width=args.width if args.width is not None else _default_render_width(),
        column_padding=defaults.column_padding,
    )


def run(paths: Sequence[str], options: ListingOptions) -> str:
    """Collect, order and render ``paths``; raises before any output on failure."""
    collection = collect_entries(paths)
    collection.sort(options.sort_key)
    if options.reverse:
        collection.reverse()
    return render_listing(collection, options)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and print the listing.

    Configuration and metadata errors exit with status 1 and a diagnostic on
    stderr; nothing is written to stdout in that case.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        options = build_options(args)
        output = run(args.paths, options)
    except LzError as exc:
        raise SystemExit(f"lz: {exc}") from exc
    sys.stdout.write(output)


if __name__ == "__main__":
    main()
