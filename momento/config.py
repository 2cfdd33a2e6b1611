"""Configuration loading for Momento.

Settings live in a TOML file at ``~/.config/momento/config.toml``. The
``MOMENTO_CONFIG`` environment variable points at a different file.
"""

import copy
import logging
import os
from pathlib import Path
from typing import Optional

import toml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "momento"

DEFAULT_CONFIG = {
    "storage": {
        "db_path": str(CONFIG_DIR / "momento.db"),
        "image_dir": str(CONFIG_DIR / "images"),
    },
    "mood": {
        "min_rating": 0,
        "max_rating": 10,
        "trend_window_days": 30,
        "trend_smoothing": 7,
    },
}


def get_config_path() -> Path:
    """Get the path of the active config file."""
    override = os.environ.get("MOMENTO_CONFIG")
    if override:
        return Path(override).expanduser()
    return CONFIG_DIR / "config.toml"


def _merge(defaults: dict, overrides: dict) -> dict:
    merged = copy.deepcopy(defaults)
    for section, values in overrides.items():
        if isinstance(values, dict) and isinstance(merged.get(section), dict):
            merged[section].update(values)
        else:
            merged[section] = values
    return merged


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration merged over the defaults.

    A missing or unreadable file gives the defaults.

    Args:
        config_path: Optional explicit path.

    Returns:
        Configuration dictionary.
    """
    path = config_path or get_config_path()

    if not path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        loaded = toml.load(path)
    except (toml.TomlDecodeError, OSError) as e:
        logger.warning("Could not read config %s, using defaults: %s", path, e)
        return copy.deepcopy(DEFAULT_CONFIG)

    return _merge(DEFAULT_CONFIG, loaded)


def create_template_config(config_path: Optional[Path] = None) -> Path:
    """Write a template configuration file.

    Args:
        config_path: Optional explicit path.

    Returns:
        Path of the written file.
    """
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        toml.dump(DEFAULT_CONFIG, f)

    return path


def get_db_path(config: dict) -> Path:
    return Path(config["storage"]["db_path"]).expanduser()


def get_image_dir(config: dict) -> Path:
    return Path(config["storage"]["image_dir"]).expanduser()
