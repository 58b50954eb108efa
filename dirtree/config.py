"""Persistent JSON config helpers.

Stores listing defaults: traversal depth, root-list bound, colour and theme,
and the diagnostic log level. All access is defensive: malformed or missing
config falls back to built-in defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .aggregate import MAX_ROOTS
from .tree_model import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT

APP_NAME = "dirtree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_LEVEL = "WARNING"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_positive_int(key: str, default: int) -> int:
    """Read a positive integer; booleans and other types fall back to ``default``."""
    value = load_config().get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return default
    return value


def load_max_depth() -> int:
    """Return the configured depth limit, clamped to ``MAX_DEPTH_LIMIT``."""
    return min(_load_positive_int("max_depth", DEFAULT_MAX_DEPTH), MAX_DEPTH_LIMIT)


def load_max_roots() -> int:
    return _load_positive_int("max_roots", MAX_ROOTS)


def load_color() -> bool:
    """Return the colour preference; only explicit booleans are honoured."""
    value = load_config().get("color")
    return value if isinstance(value, bool) else True


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    return value if isinstance(value, str) and value.strip() else None


def load_log_level() -> int:
    """Return the configured ``logging`` level, ``WARNING`` when unset or unknown."""
    value = load_config().get("log_level", DEFAULT_LOG_LEVEL)
    if not isinstance(value, str):
        return logging.WARNING
    level = logging.getLevelName(value.strip().upper())
    return level if isinstance(level, int) else logging.WARNING
