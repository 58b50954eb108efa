"""Error taxonomy for traversal and command-line handling.

Recoverable traversal problems (``DirectoryUnavailable``, ``DepthExceeded``)
are returned as values and logged; only ``UsageError`` ends a run early.
"""

from __future__ import annotations

import os


class DirtreeError(Exception):
    """Base class for all dirtree errors."""


class UsageError(DirtreeError):
    """Malformed command line; carries an unformatted message plus arguments."""

    def __init__(self, message: str | None = None, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message
        self.args_for_message = args

    def format(self) -> str:
        if self.message is None:
            return ""
        if not self.args_for_message:
            return self.message
        return self.message % self.args_for_message

    def __str__(self) -> str:
        return self.format()


class DirectoryUnavailable(DirtreeError):
    """A directory could not be opened or listed; its subtree is skipped."""

    def __init__(self, path: str | os.PathLike[str], reason: OSError | str) -> None:
        self.path = os.fspath(path)
        self.reason = reason
        detail = reason.strerror if isinstance(reason, OSError) and reason.strerror else str(reason)
        super().__init__(f"cannot open directory '{self.path}': {detail}")


class DepthExceeded(DirtreeError):
    """Descending into ``path`` would pass the configured maximum depth."""

    def __init__(self, path: str | os.PathLike[str], max_depth: int) -> None:
        self.path = os.fspath(path)
        self.max_depth = max_depth
        super().__init__(f"maximum depth {max_depth} reached, not entering '{self.path}'")


__all__ = ["DepthExceeded", "DirectoryUnavailable", "DirtreeError", "UsageError"]
