"""
Configuration loader — reads images.yml into the config model.

The file is optional: without one, the generator runs on the built-in
defaults.  When present, it is validated against the Pydantic schema
and its directory becomes the base for globs and the output path.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from image_lister.core.models.config import ImagesConfig

logger = logging.getLogger(__name__)

# Default config filename
IMAGES_CONFIG_FILE = "images.yml"


class ConfigError(Exception):
    """Raised when the images configuration is invalid or missing."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for images.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to images.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / IMAGES_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None) -> ImagesConfig:
    """Load and validate the images configuration.

    Args:
        path: Explicit path to images.yml. If None, searches upward and
            falls back to the defaults when nothing is found.

    Returns:
        Validated ImagesConfig model.

    Raises:
        ConfigError: If an explicit file is missing, or any file is invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No %s found, using defaults", IMAGES_CONFIG_FILE)
            return ImagesConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading images config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return ImagesConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under an "images" key or be flat
    images_data = data["images"] if "images" in data else data
    if not isinstance(images_data, dict):
        raise ConfigError(f"Expected 'images' to be a mapping in {path}")

    try:
        config = ImagesConfig.model_validate(images_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid images configuration: {e}") from e

    logger.info("Loaded module '%s' with %d bindings", config.module, len(config.bindings))
    return config


def config_root(config_path: Path) -> Path:
    """Get the base directory from a config file path."""
    return config_path.parent.resolve()
