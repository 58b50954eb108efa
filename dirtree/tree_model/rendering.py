"""Row formatting and output sinks for listed entries.

Rows are plain names in flat mode and branch-prefixed names in tree mode.
Verbose mode appends owner, size, blocks and a type column.
"""

from __future__ import annotations

import functools
import grp
import pwd
from typing import Protocol, TextIO

from ..ui_theme import UITheme, paint
from .types import DirEntry

BRANCH_MID = "├─ "
BRANCH_LAST = "└─ "
PREFIX_MID = "│  "
PREFIX_LAST = "   "

VERBOSE_NAME_WIDTH = 54
VERBOSE_OWNER_WIDTH = 16
VERBOSE_SIZE_WIDTH = 10
VERBOSE_BLOCKS_WIDTH = 8


class EntrySink(Protocol):
    """Receives each visited entry in traversal order."""

    def emit(self, entry: DirEntry, prefix: str, last: bool) -> None: ...


def child_prefix(prefix: str, last: bool) -> str:
    """Prefix for the children of an entry drawn with ``prefix``."""
    return prefix + (PREFIX_LAST if last else PREFIX_MID)


@functools.lru_cache(maxsize=256)
def _user_name(uid: int) -> str:
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


@functools.lru_cache(maxsize=256)
def _group_name(gid: int) -> str:
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def owner_label(entry: DirEntry) -> str:
    if entry.uid is None or entry.gid is None:
        return "?:?"
    return f"{_user_name(entry.uid)}:{_group_name(entry.gid)}"


def _fit(text: str, width: int) -> str:
    """Pad or truncate ``text`` to exactly ``width`` columns."""
    if len(text) > width:
        return text[: width - 3] + "..."
    return text.ljust(width)


def format_tree_entry(
    entry: DirEntry,
    prefix: str,
    last: bool,
    tree: bool = True,
    verbose: bool = False,
    theme: UITheme | None = None,
) -> str:
    """Render one listing row; ``theme`` enables ANSI colour."""
    branch = ""
    if tree:
        branch = prefix + (BRANCH_LAST if last else BRANCH_MID)
    if not verbose:
        if theme is None:
            return branch + entry.name
        return paint(theme.branch, branch) + paint(theme.attr_for(entry.kind), entry.name)

    plain = branch + entry.name
    label = _fit(plain, VERBOSE_NAME_WIDTH)
    if theme is not None and len(plain) <= VERBOSE_NAME_WIDTH:
        # Pad outside the colour codes so they do not count towards the width.
        label = (
            paint(theme.branch, branch)
            + paint(theme.attr_for(entry.kind), entry.name)
            + " " * (VERBOSE_NAME_WIDTH - len(plain))
        )
    size = "?" if entry.size is None else str(entry.size)
    blocks = "?" if entry.blocks is None else str(entry.blocks)
    return (
        f"{label}  {owner_label(entry):<{VERBOSE_OWNER_WIDTH}} "
        f"{size:>{VERBOSE_SIZE_WIDTH}} {blocks:>{VERBOSE_BLOCKS_WIDTH}}  {entry.kind.type_char}"
    )


class StreamSink:
    """Writes one formatted row per entry to a text stream."""

    def __init__(
        self,
        stream: TextIO,
        tree: bool = True,
        verbose: bool = False,
        theme: UITheme | None = None,
    ) -> None:
        self.stream = stream
        self.tree = tree or verbose
        self.verbose = verbose
        self.theme = theme
        self.rows = 0

    def emit(self, entry: DirEntry, prefix: str, last: bool) -> None:
        row = format_tree_entry(
            entry,
            prefix,
            last,
            tree=self.tree,
            verbose=self.verbose,
            theme=self.theme,
        )
        self.stream.write(row + "\n")
        self.rows += 1


__all__ = [
    "BRANCH_LAST",
    "BRANCH_MID",
    "EntrySink",
    "PREFIX_LAST",
    "PREFIX_MID",
    "StreamSink",
    "child_prefix",
    "format_tree_entry",
    "owner_label",
]
