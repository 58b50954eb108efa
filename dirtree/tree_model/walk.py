"""Depth-first, pre-order traversal of one directory tree."""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..errors import DepthExceeded, DirectoryUnavailable, DirtreeError
from ..paths import TreePath
from .fs import read_directory, sort_entries
from .rendering import EntrySink, child_prefix
from .stats import StatisticsObserver, observe_entry
from .types import DirEntry

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256
# One interpreter frame per level; the ceiling leaves room under the default recursion limit.
MAX_DEPTH_LIMIT = 512

DirectoryReader = Callable[[TreePath], tuple[list[DirEntry], DirectoryUnavailable | None]]


def walk_tree(
    parent: TreePath,
    name: str,
    observer: StatisticsObserver,
    sink: EntrySink | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
    reader: DirectoryReader = read_directory,
) -> list[DirtreeError]:
    """Visit every entry below ``parent/name`` and report it to ``observer``.

    Each directory's children are sorted (directories first, byte-wise names)
    and then, one by one, emitted to ``sink``, counted, and descended into when
    they are real directories. Symbolic links are never followed. The root's
    own contents are at depth 1; directories at ``max_depth`` are listed and
    counted but not entered. ``max_depth`` may not exceed ``MAX_DEPTH_LIMIT``.

    Returns the recoverable problems met on the way. Unreadable directories
    and depth cut-offs skip their subtree only.
    """
    if not 1 <= max_depth <= MAX_DEPTH_LIMIT:
        raise ValueError(f"max_depth must be between 1 and {MAX_DEPTH_LIMIT}")
    issues: list[DirtreeError] = []

    def walk(directory: TreePath, prefix: str, depth: int) -> None:
        entries, error = reader(directory)
        if error is not None:
            logger.warning("%s", error)
            issues.append(error)
            return
        if not entries:
            return

        ordered = sort_entries(entries)
        last_index = len(ordered) - 1
        for idx, entry in enumerate(ordered):
            last = idx == last_index
            if sink is not None:
                sink.emit(entry, prefix, last)
            observe_entry(observer, entry)
            if not entry.is_dir:
                continue
            if depth >= max_depth:
                exceeded = DepthExceeded(entry.path, max_depth)
                logger.warning("%s", exceeded)
                issues.append(exceeded)
                continue
            walk(entry.path, child_prefix(prefix, last), depth + 1)

    walk(parent.join(name), "", 1)
    return issues


__all__ = ["DEFAULT_MAX_DEPTH", "MAX_DEPTH_LIMIT", "DirectoryReader", "walk_tree"]
