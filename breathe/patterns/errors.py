"""Configuration error types.

Every failure of the configuration layer (missing file, unreadable YAML,
schema violations, unknown pattern names, malformed length specifications)
is raised as a BreatheConfigError subclass so the CLI can report it with a
single handler.
"""

from pathlib import Path


class BreatheConfigError(RuntimeError):
    """Base class for configuration and pattern resolution errors."""


class ConfigNotFoundError(BreatheConfigError):
    """Raised when the configuration file does not exist or is not a file.

    Attributes:
        path: Path that was looked up
    """

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"File {path} doesn't exist or is not readable")


class InvalidConfigError(BreatheConfigError):
    """Raised when the configuration file cannot be parsed or validated.

    Attributes:
        path: Path of the offending file
        reason: Parser or validator message
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid configuration in {path}: {reason}")


class PatternNotFoundError(BreatheConfigError):
    """Raised when a pattern name is not defined in the configuration.

    Attributes:
        name: Requested pattern name
        available: Names defined in the configuration
    """

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        known = ", ".join(available) if available else "none"
        super().__init__(f"Pattern {name} not found (available: {known})")


class PatternLengthError(BreatheConfigError):
    """Raised when a pattern length specification cannot be parsed."""

    def __init__(self, spec: str, reason: str):
        self.spec = spec
        self.reason = reason
        super().__init__(f"Invalid pattern length specification '{spec}': {reason}")
