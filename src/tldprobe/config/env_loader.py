"""Global configuration file loading."""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def global_config_path() -> Path:
    """Return the path of the global ``~/.tldprobe/config.yml`` file."""
    return Path.home() / ".tldprobe" / "config.yml"


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.tldprobe/config.yml."""
    config_path = global_config_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError):
        logger.warning("Ignoring unreadable config file %s", config_path, exc_info=True)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a mapping", config_path)
        return {}
    return data
