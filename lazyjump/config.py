"""User JSON preferences.

Reads the syntax style, marker style, abort keys, and command key
overrides from a hand-edited file. Points are session-only and never
stored here. All access is
defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .commands import DEFAULT_COMMAND_KEYS
from .jump import DEFAULT_MARKER_STYLE

APP_NAME = "lazyjump"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_ABORT_KEYS: tuple[str, ...] = ("CTRL_G", "ESC")
DEFAULT_SYNTAX_STYLE = "monokai"


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


def _string_tuple(value: object) -> tuple[str, ...] | None:
    """Return non-empty strings from a JSON list, or ``None`` if none survive."""
    if not isinstance(value, list):
        return None
    items = tuple(item for item in value if isinstance(item, str) and item)
    return items or None


def load_abort_keys() -> tuple[str, ...]:
    """Return key tokens that cancel a jump selection."""
    return _string_tuple(load_config().get("abort_keys")) or DEFAULT_ABORT_KEYS


def load_marker_style() -> str:
    """Return the SGR prefix used to draw point markers."""
    value = load_config().get("marker_style")
    if isinstance(value, str) and value.startswith("\033["):
        return value
    return DEFAULT_MARKER_STYLE


def load_syntax_style() -> str:
    value = load_config().get("syntax_style")
    if not isinstance(value, str):
        return DEFAULT_SYNTAX_STYLE
    stripped = value.strip()
    return stripped if stripped else DEFAULT_SYNTAX_STYLE


def load_command_keys() -> dict[str, tuple[str, ...]]:
    """Return command key bindings with per-command overrides applied.

    Unknown command names and entries without any usable key are ignored.
    """
    keys = dict(DEFAULT_COMMAND_KEYS)
    value = load_config().get("command_keys")
    if not isinstance(value, dict):
        return keys
    for name, raw_keys in value.items():
        if name not in keys:
            continue
        combos = _string_tuple(raw_keys)
        if combos is not None:
            keys[name] = combos
    return keys
