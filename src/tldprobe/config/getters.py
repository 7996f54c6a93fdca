"""Configuration getter functions."""

import os
from typing import Any

from .env_loader import load_global_config

ENV_PREFIX = "TLDPROBE_"
TRUTHY = {"1", "true", "yes", "on"}


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable (``TLDPROBE_<KEY>``)
    2. Global config file (``key`` in lowercase)
    3. Default value

    Args:
        key: Configuration key without prefix, e.g. ``threads``
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    env_value = os.environ.get(f"{ENV_PREFIX}{key.upper()}")
    if env_value:
        return env_value

    global_config = load_global_config()
    if global_config.get(key.lower()) is not None:
        return global_config[key.lower()]

    return default


def get_positive_int(key: str, default: int) -> int:
    """Return a positive integer setting, falling back to *default* when invalid."""
    try:
        value = int(get_config(key, default))
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def get_nonnegative_int(key: str, default: int) -> int:
    """Return a non-negative integer setting with fallback default."""
    try:
        value = int(get_config(key, default))
    except (TypeError, ValueError):
        return default
    return value if value >= 0 else default


def get_positive_float(key: str, default: float) -> float:
    """Return a positive float setting with fallback default."""
    try:
        value = float(get_config(key, default))
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


def get_flag(key: str) -> bool:
    """Return a boolean setting; strings like ``yes`` or ``1`` count as true."""
    value = get_config(key, False)
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY
