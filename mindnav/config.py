"""
Configuration management for mindnav.

Handles persistent configuration including:
- OFFSET_WEIGHT, the exponent of the endpoint offset in navigation scoring
- Hotkey overrides per node action

Config is stored in config.json at the project root, or wherever MINDNAV_CONFIG
points.
"""

import json
import logging
import math
import os
from pathlib import Path
from typing import Dict, Optional

from mindnav.nav.constants import DEFAULT_OFFSET_WEIGHT, NODE_ACTIONS

logger = logging.getLogger(__name__)

OFFSET_WEIGHT_ENV = "MINDNAV_OFFSET_WEIGHT"
CONFIG_PATH_ENV = "MINDNAV_CONFIG"


def get_config_path() -> Path:
    """Path of config.json: MINDNAV_CONFIG if set, else beside the mindnav package."""
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path)
    return Path(__file__).resolve().parent.parent / "config.json"


def load_config() -> dict:
    """Load configuration from config.json."""
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return data if isinstance(data, dict) else {}
        except (json.JSONDecodeError, IOError):
            return {}
    return {}


def save_config(config: dict) -> None:
    """Save configuration to config.json."""
    config_path = get_config_path()
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2)


def _parse_weight(value, source: str) -> Optional[float]:
    try:
        weight = float(value)
    except (TypeError, ValueError):
        logger.warning(f"Ignoring non-numeric offset weight {value!r} from {source}")
        return None
    if not weight >= 0 or math.isinf(weight):
        logger.warning(f"Ignoring invalid offset weight {value!r} from {source}")
        return None
    return weight


def get_offset_weight() -> float:
    """
    Get the offset weight used to score navigation candidates.

    Priority:
    1. Environment variable MINDNAV_OFFSET_WEIGHT
    2. Stored in config.json
    3. DEFAULT_OFFSET_WEIGHT
    """
    env_value = os.environ.get(OFFSET_WEIGHT_ENV)
    if env_value:
        weight = _parse_weight(env_value, OFFSET_WEIGHT_ENV)
        if weight is not None:
            return weight

    config = load_config()
    if "offset_weight" in config:
        weight = _parse_weight(config["offset_weight"], "config.json")
        if weight is not None:
            return weight

    return DEFAULT_OFFSET_WEIGHT


def set_offset_weight(weight: float) -> None:
    """Save the offset weight to config.json."""
    value = _parse_weight(weight, "set_offset_weight")
    if value is None:
        raise ValueError(f"Offset weight must be a finite number >= 0, got {weight!r}")
    config = load_config()
    config["offset_weight"] = value
    save_config(config)


def get_hotkeys() -> Dict[str, str]:
    """Get configured hotkeys, keeping only known node actions."""
    hotkeys = load_config().get("hotkeys") or {}
    if not isinstance(hotkeys, dict):
        logger.warning("Ignoring 'hotkeys' in config.json: expected an object")
        return {}

    result = {}
    for action, hotkey in hotkeys.items():
        if action not in NODE_ACTIONS:
            logger.warning(f"Ignoring hotkey for unknown action '{action}'")
            continue
        result[action] = str(hotkey)
    return result
