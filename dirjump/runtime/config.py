"""Persistent JSON config helpers.

Stores the hidden-entry preference, listing height, key overrides and the
log level. All access is defensive: malformed or missing config falls back
to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from loguru import logger
from platformdirs import user_config_dir

from ..browser.viewport import MAX_VIEW_HEIGHT

APP_NAME = "dirjump"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
MAX_CONFIG_VIEW_HEIGHT = 100
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config {}: {}", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored so a read-only config
    directory never ends the session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("Cannot write config {}: {}", CONFIG_PATH, exc)


def load_show_hidden() -> bool:
    """Return persisted hidden-entry visibility; non-booleans mean ``False``."""
    value = load_config().get("show_hidden")
    return bool(value) if isinstance(value, bool) else False


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    if config.get("show_hidden") is bool(show_hidden):
        return
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_view_height() -> int:
    """Return listing height in rows, clamped to ``[1, MAX_CONFIG_VIEW_HEIGHT]``."""
    value = load_config().get("view_height")
    if isinstance(value, bool) or not isinstance(value, int):
        return MAX_VIEW_HEIGHT
    return max(1, min(MAX_CONFIG_VIEW_HEIGHT, value))


def load_keybinding_overrides() -> dict[str, list[str]]:
    """Load ``{action_name: [key tokens]}`` overrides, dropping malformed items."""
    value = load_config().get("keybindings")
    if not isinstance(value, dict):
        return {}
    overrides: dict[str, list[str]] = {}
    for name, keys in value.items():
        if not isinstance(name, str):
            continue
        if isinstance(keys, str):
            keys = [keys]
        if not isinstance(keys, list):
            continue
        tokens = [key for key in keys if isinstance(key, str) and key]
        if tokens:
            overrides[name] = tokens
    return overrides


def load_log_level() -> str:
    value = load_config().get("log_level")
    if isinstance(value, str) and value.strip().upper() in LOG_LEVELS:
        return value.strip().upper()
    return DEFAULT_LOG_LEVEL
