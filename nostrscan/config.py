"""Configuration management for nostrscan."""

import json
import os
from pathlib import Path
from typing import Any

from .models.config import ALL_KINDS, NostrscanConfig

# Application name for XDG paths
APP_NAME = "nostrscan"

# Default configuration
DEFAULT_CONFIG: dict[str, Any] = {
    "output": {
        "format": "table",  # table | json
        "kinds": list(ALL_KINDS),
    },
    "logging": {
        "level": "WARNING",
    },
    "web": {
        "host": "127.0.0.1",
        "port": 5180,
    },
}


def get_xdg_config_home() -> Path:
    """Get XDG config home directory."""
    return Path(os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config")))


def get_config_path() -> Path:
    """
    Get the path to the config file.

    Priority:
    1. NOSTRSCAN_CONFIG environment variable
    2. XDG default: ~/.config/nostrscan/config.json
    """
    env_path = os.environ.get("NOSTRSCAN_CONFIG")
    if env_path:
        return Path(env_path)
    return get_xdg_config_home() / APP_NAME / "config.json"


def load_config() -> dict[str, Any]:
    """Load configuration, merging with defaults."""
    config = deep_merge(DEFAULT_CONFIG, {})
    config_path = get_config_path()

    if config_path.exists():
        with open(config_path) as f:
            user_config = json.load(f)
            config = deep_merge(config, user_config)

    return config


def save_config(config: dict[str, Any]) -> None:
    """Save configuration to file."""
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)


def deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries."""
    result = {key: (deep_merge(value, {}) if isinstance(value, dict) else value) for key, value in base.items()}
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def get_settings() -> NostrscanConfig:
    """Load configuration as a validated model."""
    return NostrscanConfig.model_validate(load_config())
