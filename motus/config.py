# motus/config.py
"""
User settings for the motus CLI.
Settings saved as JSON in %APPDATA%/Motus/config.json (Windows) or ~/.motus/config.json (fallback).
Command-line options always win over these values.
"""

import logging
import os
from typing import Any, Dict

from .storage import read_json, write_json

logger = logging.getLogger(__name__)

DEFAULTS: Dict[str, Any] = {
    "output": "text",
    "analyze": False,
    "clipboard": True,
    "pin_length": 7,
    "characters": 16,
    "words": 5,
    "separator": "space",
}


def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "Motus")
    return os.path.join(os.path.expanduser("~"), ".motus")


def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")


def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        data = read_json(p)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable config %s: %s", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring config %s: expected a JSON object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update({k: v for k, v in data.items() if k in DEFAULTS})
    return out


def save_config(cfg: Dict[str, Any]) -> None:
    write_json(config_path(), cfg)
