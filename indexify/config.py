"""Per-user defaults for indexify flags, read from a JSON file.

Keys: ``index_name``, ``base_url`` and ``hidden``. Anything missing, malformed
or of the wrong type yields the built-in default; command-line flags win.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from platformdirs import user_config_dir

from .options import DEFAULT_INDEX_NAME

APP_NAME = "indexify"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Return the defaults file as a dict, or ``{}`` if it is absent or not a JSON object."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def is_valid_index_name(name: str) -> bool:
    """Return whether ``name`` is a plain file name usable for the index."""
    if not name or name in (".", ".."):
        return False
    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    return not any(sep in name for sep in separators)


def load_index_name() -> str:
    """Return the configured index file name, or ``index.html``."""
    value = load_config().get("index_name")
    if isinstance(value, str) and is_valid_index_name(value):
        return value
    return DEFAULT_INDEX_NAME


def load_base_url() -> str:
    """Return the configured base URL for item links, or an empty string."""
    value = load_config().get("base_url")
    return value if isinstance(value, str) else ""


def load_include_hidden() -> bool:
    """Return persisted hidden-file inclusion preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("hidden")
    return bool(value) if isinstance(value, bool) else False


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "is_valid_index_name",
    "load_index_name",
    "load_base_url",
    "load_include_hidden",
]
