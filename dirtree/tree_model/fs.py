"""Directory scanning and per-entry classification."""

from __future__ import annotations

import logging
import os
import stat

from ..errors import DirectoryUnavailable
from ..paths import TreePath
from .types import DirEntry, EntryKind

logger = logging.getLogger(__name__)


def classify_mode(mode: int) -> EntryKind:
    """Map an ``st_mode`` value to an entry kind."""
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISFIFO(mode):
        return EntryKind.FIFO
    if stat.S_ISSOCK(mode):
        return EntryKind.SOCKET
    return EntryKind.OTHER


def stat_entry(directory: TreePath, name: str) -> DirEntry:
    """Classify ``name`` inside ``directory`` with an ``lstat`` lookup.

    A failed lookup yields an ``UNREADABLE`` entry instead of raising.
    """
    path = directory.join(name)
    try:
        st = os.lstat(path)
    except OSError as exc:
        logger.info("cannot stat '%s': %s", path, exc.strerror or exc)
        return DirEntry(name=name, path=path, kind=EntryKind.UNREADABLE)
    return DirEntry(
        name=name,
        path=path,
        kind=classify_mode(st.st_mode),
        size=int(st.st_size),
        blocks=int(getattr(st, "st_blocks", 0)),
        uid=st.st_uid,
        gid=st.st_gid,
        mode=st.st_mode,
    )


def sort_key(entry: DirEntry) -> tuple[bool, bytes]:
    """Directories first, then names compared as filesystem bytes."""
    return (not entry.is_dir, os.fsencode(entry.name))


def sort_entries(entries: list[DirEntry]) -> list[DirEntry]:
    return sorted(entries, key=sort_key)


def read_directory(directory: TreePath) -> tuple[list[DirEntry], DirectoryUnavailable | None]:
    """List and classify the immediate children of ``directory``.

    Returns ``(entries, error)``; ``error`` is set and ``entries`` empty when
    the directory cannot be opened or listed. Entries come back in discovery
    order, fully materialised, with the directory handle already closed.
    """
    names: list[str] = []
    try:
        with os.scandir(directory) as scanned:
            for child in scanned:
                names.append(child.name)
    except OSError as exc:
        return [], DirectoryUnavailable(directory, exc)

    return [stat_entry(directory, name) for name in names], None


__all__ = ["classify_mode", "read_directory", "sort_entries", "sort_key", "stat_entry"]
