"""Traversal statistics and the observer interface the walker reports to.

One ``Statistics`` accumulator belongs to a traversal root. The walker only
sees it through ``StatisticsObserver``, so tests can substitute a recorder.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Protocol

from .types import DirEntry, EntryKind


class StatisticsObserver(Protocol):
    """Receives exactly one call per visited entry."""

    def add_directory(self) -> None: ...

    def add_file(self, size: int, blocks: int) -> None: ...

    def add_link(self) -> None: ...

    def add_fifo(self) -> None: ...

    def add_socket(self) -> None: ...

    def add_other(self) -> None: ...


@dataclass
class Statistics:
    """Counts per entry type plus total size and 512-byte blocks of regular files."""

    dirs: int = 0
    files: int = 0
    links: int = 0
    fifos: int = 0
    socks: int = 0
    others: int = 0
    size: int = 0
    blocks: int = 0

    def add_directory(self) -> None:
        self.dirs += 1

    def add_file(self, size: int, blocks: int) -> None:
        self.files += 1
        self.size += size
        self.blocks += blocks

    def add_link(self) -> None:
        self.links += 1

    def add_fifo(self) -> None:
        self.fifos += 1

    def add_socket(self) -> None:
        self.socks += 1

    def add_other(self) -> None:
        self.others += 1

    @property
    def entries(self) -> int:
        """Number of entries counted, i.e. rows printed for this accumulator."""
        return self.dirs + self.files + self.links + self.fifos + self.socks + self.others

    def merge(self, other: "Statistics") -> None:
        """Add every field of ``other`` into this accumulator."""
        for field in fields(self):
            setattr(self, field.name, getattr(self, field.name) + getattr(other, field.name))

    def copy(self) -> "Statistics":
        return replace(self)


def observe_entry(observer: StatisticsObserver, entry: DirEntry) -> None:
    """Report ``entry`` to ``observer`` through exactly one counter method."""
    kind = entry.kind
    if kind is EntryKind.DIRECTORY:
        observer.add_directory()
    elif kind is EntryKind.FILE:
        observer.add_file(entry.size or 0, entry.blocks or 0)
    elif kind is EntryKind.SYMLINK:
        observer.add_link()
    elif kind is EntryKind.FIFO:
        observer.add_fifo()
    elif kind is EntryKind.SOCKET:
        observer.add_socket()
    else:
        observer.add_other()


__all__ = ["Statistics", "StatisticsObserver", "observe_entry"]
