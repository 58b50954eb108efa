"""Immutable path values used while descending into directory trees.

``TreePath`` keeps a tuple of segments instead of a string buffer, so joining
a parent and a child name always inserts exactly one separator. Each frame of
the traversal derives new paths from its parent's value; nothing is mutated.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

SEPARATOR = "/"
CURRENT_DIR = "."


@dataclass(frozen=True)
class TreePath:
    """Path made of non-empty segments, optionally anchored at the filesystem root."""

    segments: tuple[str, ...] = ()
    absolute: bool = False

    @classmethod
    def parse(cls, raw: str) -> "TreePath":
        """Parse ``raw`` collapsing repeated and trailing separators.

        An empty relative path parses to the current-directory marker.
        """
        absolute = raw.startswith(SEPARATOR)
        segments = tuple(part for part in raw.split(SEPARATOR) if part)
        if not segments and not absolute:
            segments = (CURRENT_DIR,)
        return cls(segments, absolute)

    def join(self, name: str) -> "TreePath":
        """Return a new path with ``name`` appended as one segment."""
        if not name:
            raise ValueError("cannot join an empty path segment")
        if SEPARATOR in name:
            raise ValueError(f"path segment contains a separator: {name!r}")
        return TreePath(self.segments + (name,), self.absolute)

    @property
    def name(self) -> str:
        return self.segments[-1] if self.segments else ""

    def __str__(self) -> str:
        body = SEPARATOR.join(self.segments)
        if self.absolute:
            return SEPARATOR + body
        return body

    def __fspath__(self) -> str:
        return str(self)


def split_root(raw: str | os.PathLike[str]) -> tuple[TreePath, str]:
    """Split a root argument into ``(parent, leaf)``.

    ``"A"`` and ``"A/"`` split identically; a path without separators has the
    current directory as parent; the filesystem root splits into ``("/", ".")``.
    """
    path = TreePath.parse(os.fspath(raw))
    if not path.segments:
        return path, CURRENT_DIR
    if len(path.segments) == 1 and not path.absolute:
        return TreePath.parse(CURRENT_DIR), path.segments[0]
    return TreePath(path.segments[:-1], path.absolute), path.segments[-1]


__all__ = ["CURRENT_DIR", "SEPARATOR", "TreePath", "split_root"]
