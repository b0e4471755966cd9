"""Breathing patterns and their configuration file."""

from breathe.patterns.errors import (
    BreatheConfigError,
    ConfigNotFoundError,
    InvalidConfigError,
    PatternLengthError,
    PatternNotFoundError,
)
from breathe.patterns.loader import default_config_path, load_config
from breathe.patterns.types import (
    BreatheConfig,
    IterationsLength,
    Pattern,
    PatternLength,
    TimeLength,
    parse_pattern_length,
)

__all__ = [
    "BreatheConfig",
    "BreatheConfigError",
    "ConfigNotFoundError",
    "InvalidConfigError",
    "IterationsLength",
    "Pattern",
    "PatternLength",
    "PatternLengthError",
    "PatternNotFoundError",
    "TimeLength",
    "default_config_path",
    "load_config",
    "parse_pattern_length",
]
