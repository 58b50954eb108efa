"""Entry-kind colour palettes for listing rows.

Palette values are ``pygments.console`` attribute strings (``"*blue*"`` is bold
blue). An empty value leaves that part of the row uncoloured.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pygments.console import ansiformat

if TYPE_CHECKING:
    from .tree_model.types import EntryKind


@dataclass(frozen=True)
class UITheme:
    """Semantic colour attributes used by the row renderer."""

    name: str
    branch: str
    directory: str
    file: str
    symlink: str
    fifo: str
    socket: str
    other: str

    def attr_for(self, kind: EntryKind) -> str:
        """Attribute for ``kind``; unreadable and unknown kinds use ``other``."""
        return getattr(self, _ATTR_BY_KIND.get(kind.value, "other"))


_ATTR_BY_KIND = {
    "directory": "directory",
    "file": "file",
    "symlink": "symlink",
    "fifo": "fifo",
    "socket": "socket",
}

DEFAULT_THEME = UITheme(
    name="default",
    branch="brightblack",
    directory="*blue*",
    file="",
    symlink="cyan",
    fifo="yellow",
    socket="magenta",
    other="red",
)

MONO_THEME = UITheme(
    name="mono",
    branch="",
    directory="*gray*",
    file="",
    symlink="_gray_",
    fifo="",
    socket="",
    other="",
)

_THEMES = {theme.name: theme for theme in (DEFAULT_THEME, MONO_THEME)}


def available_theme_names() -> list[str]:
    return sorted(_THEMES)


def resolve_theme(name: str | None) -> UITheme:
    """Return the named theme, falling back to ``DEFAULT_THEME``."""
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)


def paint(attr: str, text: str) -> str:
    """Wrap ``text`` in the ANSI codes for ``attr``; empty attr or text is left alone."""
    if not attr or not text:
        return text
    return ansiformat(attr, text)


__all__ = ["DEFAULT_THEME", "MONO_THEME", "UITheme", "available_theme_names", "paint", "resolve_theme"]
