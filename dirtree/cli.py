"""Command-line front door for dirtree.

Parses flags and root paths, resolves config-backed defaults, then hands the
roots to the aggregator. Usage problems are reported here and nowhere else.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from .aggregate import ListingOptions, collect_roots, run_roots
from .config import load_color, load_log_level, load_max_depth, load_max_roots, load_theme_name
from .errors import UsageError
from .logger import setup_logging
from .tree_model import MAX_DEPTH_LIMIT
from .ui_theme import available_theme_names, resolve_theme

PROG = "dirtree"

USAGE = """\
Usage {prog} [-t] [-s] [-v] [-h] [path...]
Gather information about directory trees. If no path is given, the current directory
is analyzed.

Options:
 -t              print the directory tree (default if no other option specified)
 -s              print summary of directories (total number of files, total file size, etc)
 -v              print detailed information for each file. Turns on tree view.
 -h              print this help
 --no-color      disable color output even on a TTY
 --theme NAME    color theme ({themes})
 --max-depth N   do not descend more than N levels below a root (default: {max_depth})
 path...         list of space-separated paths (max {max_roots}). Default is the current directory.
"""


class _Parser(argparse.ArgumentParser):
    """Argument parser that reports problems as ``UsageError`` instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError("%s.", message)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _depth_limit(value: str) -> int:
    """argparse type for --max-depth: a positive integer no larger than the walker allows."""
    parsed = _positive_int(value)
    if parsed > MAX_DEPTH_LIMIT:
        raise argparse.ArgumentTypeError(f"value must be <= {MAX_DEPTH_LIMIT}")
    return parsed


def _keep_undecodable_names(stream: TextIO, errors: str) -> None:
    """Let ``stream`` write names that ``os.scandir`` decoded with surrogate escapes."""
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors=errors)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog=PROG, add_help=False, allow_abbrev=False)
    parser.add_argument("-t", dest="tree", action="store_true")
    parser.add_argument("-s", dest="summary", action="store_true")
    parser.add_argument("-v", dest="verbose", action="store_true")
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--theme", choices=available_theme_names(), default=None)
    parser.add_argument("--max-depth", type=_depth_limit, default=None)
    parser.add_argument("paths", nargs="*")
    return parser


def format_usage(max_roots: int, max_depth: int) -> str:
    return USAGE.format(
        prog=PROG,
        themes=", ".join(available_theme_names()),
        max_depth=max_depth,
        max_roots=max_roots,
    )


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    """Parse ``argv``; unknown options raise ``UsageError``."""
    args, extras = build_parser().parse_known_intermixed_args(list(argv))
    for extra in extras:
        if extra.startswith("-") and extra != "-":
            raise UsageError("Unrecognized option '%s'.", extra)
        args.paths.append(extra)
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Run dirtree and return the process exit status.

    ``argv`` defaults to ``sys.argv[1:]``. Help and usage errors print the
    usage text to stderr and return 1.
    """
    if argv is None:
        argv = sys.argv[1:]
    # Undecodable bytes go back out unchanged on stdout and escaped in diagnostics.
    _keep_undecodable_names(sys.stdout, "surrogateescape")
    _keep_undecodable_names(sys.stderr, "backslashreplace")
    setup_logging(load_log_level())
    max_roots = load_max_roots()
    default_depth = load_max_depth()

    try:
        args = parse_args(argv)
    except UsageError as exc:
        message = exc.format()
        if message:
            sys.stderr.write(message + "\n\n")
        sys.stderr.write(format_usage(max_roots, default_depth))
        return 1
    if args.help:
        sys.stderr.write(format_usage(max_roots, default_depth))
        return 1

    stdout = sys.stdout
    use_color = not args.no_color and load_color() and stdout.isatty()
    options = ListingOptions(
        tree=args.tree or args.verbose or not args.summary,
        summary=args.summary,
        verbose=args.verbose,
        max_depth=args.max_depth if args.max_depth is not None else default_depth,
        theme=resolve_theme(args.theme or load_theme_name()) if use_color else None,
    )

    try:
        run_roots(collect_roots(args.paths, max_roots), options, stdout)
    except MemoryError:
        sys.stderr.write(f"{PROG}: out of memory\n")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
