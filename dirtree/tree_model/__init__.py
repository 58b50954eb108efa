"""Domain model for directory traversal.

This package contains the non-CLI pieces:
- entry datatypes and kinds resolved from ``lstat``
- directory scanning, classification and sibling ordering
- the statistics accumulator and its observer interface
- row formatting and output sinks
- the recursive tree walker
"""

from __future__ import annotations

from .types import DirEntry, EntryKind
from .fs import classify_mode, read_directory, sort_entries, sort_key, stat_entry
from .stats import Statistics, StatisticsObserver, observe_entry
from .rendering import EntrySink, StreamSink, child_prefix, format_tree_entry
from .walk import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT, walk_tree

__all__ = [
    "DirEntry",
    "EntryKind",
    "classify_mode",
    "read_directory",
    "sort_entries",
    "sort_key",
    "stat_entry",
    "Statistics",
    "StatisticsObserver",
    "observe_entry",
    "EntrySink",
    "StreamSink",
    "child_prefix",
    "format_tree_entry",
    "DEFAULT_MAX_DEPTH",
    "MAX_DEPTH_LIMIT",
    "walk_tree",
]
