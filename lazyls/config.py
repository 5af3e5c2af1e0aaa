"""Read-only JSON config supplying default view options.

The file lives in the platform config dir (``lazyls/config.json``). Missing,
unreadable or malformed values fall back to built-in defaults; lazyls never
writes this file.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .options import SortKey
from .watch import WATCH_INTERVAL_SECONDS

logger = logging.getLogger(__name__)

APP_NAME = "lazyls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ConfigDefaults:
    show_hidden: bool = False
    sort: SortKey = SortKey.NAME
    reverse: bool = False
    human: bool = False
    icons: bool = False
    watch_interval_seconds: float = WATCH_INTERVAL_SECONDS


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _bool_value(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else keeps ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def _sort_value(data: dict[str, object], default: SortKey) -> SortKey:
    value = data.get("sort")
    if not isinstance(value, str):
        return default
    try:
        return SortKey.parse(value)
    except ValueError:
        logger.debug("ignoring unknown sort key in config: %r", value)
        return default


def _interval_value(data: dict[str, object], default: float) -> float:
    value = data.get("watch_interval_seconds")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        return default
    return float(value)


def load_defaults() -> ConfigDefaults:
    """Return option defaults from config with strict per-key validation."""
    data = load_config()
    base = ConfigDefaults()
    return ConfigDefaults(
        show_hidden=_bool_value(data, "show_hidden", base.show_hidden),
        sort=_sort_value(data, base.sort),
        reverse=_bool_value(data, "reverse", base.reverse),
        human=_bool_value(data, "human", base.human),
        icons=_bool_value(data, "icons", base.icons),
        watch_interval_seconds=_interval_value(data, base.watch_interval_seconds),
    )


__all__ = ["APP_NAME", "CONFIG_FILENAME", "CONFIG_PATH", "ConfigDefaults", "load_config", "load_defaults"]
