"""Persistent JSON config helpers.

Stores string lists (expanded directories, recent files and directories)
under fixed keys in one JSON object. All access is defensive: malformed or
missing config falls back safely and failed writes never reach callers.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyedit"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

EXPANDED_DIRS_KEY = "expanded_dirs"
RECENT_DIRS_KEY = "recent_dirs"
RECENT_FILES_KEY = "recent_files"
RECENT_LIMIT = 10

logger = logging.getLogger(__name__)


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = path if path is not None else CONFIG_PATH
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except Exception as exc:
        logger.warning("ignoring unreadable config %s: %s", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object], path: Path | None = None) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is logged and ignored to keep runtime
    behavior non-fatal when config cannot be written.
    """
    config_path = path if path is not None else CONFIG_PATH
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        config_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception as exc:
        logger.warning("could not write config %s: %s", config_path, exc)


class ConfigStore:
    """Key/value view over the JSON config where every value is a string list."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path

    def get(self, key: str) -> list[str]:
        """Return the string members stored under ``key``.

        Non-list values and non-string members are dropped.
        """
        value = load_config(self.path).get(key)
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, str)]

    def set(self, key: str, values: Iterable[str]) -> None:
        config = load_config(self.path)
        config[key] = [str(value) for value in values]
        save_config(config, self.path)

    def push_recent(self, key: str, value: str, limit: int = RECENT_LIMIT) -> list[str]:
        """Move ``value`` to the front of the recent list stored under ``key``."""
        recent = [value]
        recent.extend(item for item in self.get(key) if item != value)
        recent = recent[: max(0, limit)]
        self.set(key, recent)
        return recent


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ConfigStore",
    "EXPANDED_DIRS_KEY",
    "RECENT_DIRS_KEY",
    "RECENT_FILES_KEY",
    "RECENT_LIMIT",
    "load_config",
    "save_config",
]
