"""Persistent JSON defaults for ``lz``.

Reads theme, color, long-format and grid padding preferences.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .columns import DEFAULT_COLUMN_PADDING

APP_NAME = "lz"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class UserDefaults:
    """Persisted preferences applied underneath command-line flags."""

    theme: str | None = None
    no_color: bool = False
    long: bool = False
    column_padding: int = DEFAULT_COLUMN_PADDING


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


def _load_bool(data: dict[str, object], key: str) -> bool:
    """Only explicit booleans count; anything else is ``False``."""
    value = data.get(key)
    return value if isinstance(value, bool) else False


def _load_positive_int(data: dict[str, object], key: str, default: int) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return default
    return value


def load_user_defaults() -> UserDefaults:
    """Return validated defaults; invalid keys are dropped one by one."""
    data = load_config()
    theme = data.get("theme")
    return UserDefaults(
        theme=theme if isinstance(theme, str) and theme.strip() else None,
        no_color=_load_bool(data, "no_color"),
        long=_load_bool(data, "long"),
        column_padding=_load_positive_int(data, "column_padding", DEFAULT_COLUMN_PADDING),
    )
