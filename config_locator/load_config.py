"""Logic for loading and merging the locator settings file."""

import copy
from pathlib import Path
from typing import Any

import yaml

from config_locator.deep_merge import deep_merge
from config_locator.errors import ConfigurationError

DEFAULT_CONFIG: dict[str, Any] = {
    "logging": {
        "level": "WARNING",
    },
    "classpath": {
        "roots": [],
    },
    "locator": {
        "home_dir": None,
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load settings from a YAML file and merge them with defaults.

    A missing file leaves the defaults in place.

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as exc:
                msg = f"Invalid settings file {p}: {exc}"
                raise ConfigurationError(msg) from exc
            if not isinstance(user_config, dict):
                msg = f"Settings file {p} must contain a mapping"
                raise ConfigurationError(msg)
            config = deep_merge(config, user_config)
    return config
