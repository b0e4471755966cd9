"""Configuration file loading.

The configuration lives in a YAML file (by default `breathe.yaml` in the
user configuration directory):

    iterations: 8
    patterns:
      relax:
        breath_in: 4
        hold_in: 7
        breath_out: 8
        description: "4-7-8 relaxing breath"
      box:
        breath_in: 4
        hold_in: 4
        breath_out: 4
        hold_out: 4
        time: 300
        description: "Box breathing"
"""

import os
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from breathe.patterns.errors import ConfigNotFoundError, InvalidConfigError
from breathe.patterns.types import BreatheConfig

CONFIG_DEFAULT_NAME = "breathe.yaml"


def default_config_path() -> Path:
    """Return `$XDG_CONFIG_HOME/breathe.yaml`, falling back to `~/.config`."""
    config_home = os.getenv("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / CONFIG_DEFAULT_NAME


def load_config(config_path: Path) -> BreatheConfig:
    """Load and validate a configuration file.

    Args:
        config_path: Path to the YAML configuration

    Returns:
        Validated BreatheConfig

    Raises:
        ConfigNotFoundError: If the path does not exist or is not a file
        InvalidConfigError: If the file is not valid YAML or fails validation
    """
    if not config_path.is_file():
        raise ConfigNotFoundError(config_path)

    logger.info(f"Loading configuration from {config_path}")
    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise InvalidConfigError(config_path, str(e)) from e

    if not isinstance(data, dict):
        raise InvalidConfigError(config_path, "expected a mapping at the top level")

    try:
        config = BreatheConfig.model_validate(data)
    except ValidationError as e:
        raise InvalidConfigError(config_path, str(e)) from e

    logger.debug(f"Loaded {len(config.patterns)} patterns: {', '.join(config.pattern_names())}")
    return config
