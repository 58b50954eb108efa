"""Multi-root driver: one walk per root, summed into a grand total."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from .errors import DirtreeError
from .paths import CURRENT_DIR, split_root
from .summary import format_grand_total, format_root_header, format_root_summary
from .tree_model import DEFAULT_MAX_DEPTH, Statistics, StreamSink, walk_tree
from .ui_theme import UITheme

logger = logging.getLogger(__name__)

MAX_ROOTS = 64


@dataclass(frozen=True)
class ListingOptions:
    """What to print for each root and how deep to go."""

    tree: bool = True
    summary: bool = False
    verbose: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    theme: UITheme | None = None


@dataclass(frozen=True)
class RootReport:
    """Completed traversal of one root; ``stats`` is a detached copy."""

    root: str
    stats: Statistics
    issues: tuple[DirtreeError, ...] = ()


@dataclass(frozen=True)
class AggregateReport:
    roots: tuple[RootReport, ...]
    total: Statistics


def collect_roots(paths: Iterable[str | os.PathLike[str]], max_roots: int = MAX_ROOTS) -> list[str]:
    """Return at most ``max_roots`` roots, defaulting to the current directory.

    Extra roots are dropped with a warning rather than failing the run.
    """
    roots: list[str] = []
    for raw in paths:
        path = os.fspath(raw)
        if len(roots) >= max_roots:
            logger.warning("maximum number of directories exceeded, ignoring '%s'", path)
            continue
        roots.append(path)
    if not roots:
        roots.append(CURRENT_DIR)
    return roots


def run_root(root: str, options: ListingOptions, out: TextIO) -> RootReport:
    """Walk one root with a fresh accumulator, printing rows and its summary."""
    stats = Statistics()
    if options.summary:
        out.write(format_root_header(root) + "\n")

    parent, name = split_root(root)
    sink = StreamSink(out, tree=options.tree, verbose=options.verbose, theme=options.theme)
    issues = walk_tree(parent, name, stats, sink=sink, max_depth=options.max_depth)

    if options.summary:
        out.write(format_root_summary(stats) + "\n")
    return RootReport(root=root, stats=stats.copy(), issues=tuple(issues))


def run_roots(roots: Iterable[str], options: ListingOptions, out: TextIO) -> AggregateReport:
    """Run every root in order and fold each root's totals into a grand total.

    The grand total is printed in summary mode when more than one root ran.
    """
    total = Statistics()
    reports: list[RootReport] = []
    for root in roots:
        report = run_root(root, options, out)
        total.merge(report.stats)
        reports.append(report)

    if options.summary and len(reports) > 1:
        out.write(format_grand_total(total, len(reports), options.verbose) + "\n")
    return AggregateReport(roots=tuple(reports), total=total)


__all__ = [
    "AggregateReport",
    "ListingOptions",
    "MAX_ROOTS",
    "RootReport",
    "collect_roots",
    "run_root",
    "run_roots",
]
