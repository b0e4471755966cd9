"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from pathlib import Path

import pytest
from loguru import logger

from breathe.patterns.loader import load_config
from breathe.patterns.types import BreatheConfig, Pattern

RESOURCES_DIR = Path(__file__).parent / "resources"


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop loguru sinks added during a test.

    CLI tests point the console sink at a captured stream that is closed once
    the test ends.
    """
    yield
    logger.remove()


@pytest.fixture
def resources_dir() -> Path:
    return RESOURCES_DIR


@pytest.fixture
def config_path() -> Path:
    return RESOURCES_DIR / "config.yaml"


@pytest.fixture
def standard_config(config_path: Path) -> BreatheConfig:
    return load_config(config_path)


@pytest.fixture
def relax_pattern() -> Pattern:
    """4-7-8 pattern without hold-out and without its own session length."""
    return Pattern(
        breath_in=4,
        hold_in=7,
        breath_out=8,
        hold_out=None,
        description="Test pattern",
    )


@pytest.fixture
def no_hold_pattern() -> Pattern:
    return Pattern(breath_in=4, breath_out=8, description="No holds")
