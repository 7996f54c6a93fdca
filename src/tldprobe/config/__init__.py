"""
Configuration management for tldprobe.

Supports multiple configuration sources in order of priority:
1. Command-line options
2. Environment variables (TLDPROBE_*)
3. Global config file (~/.tldprobe/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import global_config_path, load_global_config
from .getters import (
    get_config,
    get_flag,
    get_nonnegative_int,
    get_positive_float,
    get_positive_int,
)

__all__ = [
    "get_config",
    "get_flag",
    "get_nonnegative_int",
    "get_positive_float",
    "get_positive_int",
    "global_config_path",
    "load_global_config",
]
