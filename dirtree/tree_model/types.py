"""Domain datatypes for classified directory entries."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ..paths import TreePath


class EntryKind(enum.Enum):
    """Entry type resolved from an ``lstat`` lookup."""

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    FIFO = "fifo"
    SOCKET = "socket"
    OTHER = "other"
    UNREADABLE = "unreadable"

    @property
    def type_char(self) -> str:
        return _TYPE_CHARS[self]


_TYPE_CHARS = {
    EntryKind.DIRECTORY: "d",
    EntryKind.FILE: "f",
    EntryKind.SYMLINK: "l",
    EntryKind.FIFO: "p",
    EntryKind.SOCKET: "s",
    EntryKind.OTHER: "?",
    EntryKind.UNREADABLE: "?",
}


@dataclass(frozen=True)
class DirEntry:
    """One immediate child of a directory plus the metadata observed for it."""

    name: str
    path: TreePath
    kind: EntryKind
    size: int | None = None
    blocks: int | None = None
    uid: int | None = None
    gid: int | None = None
    mode: int | None = None

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


__all__ = ["DirEntry", "EntryKind"]
