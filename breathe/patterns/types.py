"""Breathing pattern schema.

A pattern is four phase durations in seconds plus a description. How long a
session runs is a PatternLength: either a fixed number of seconds or a fixed
number of full pattern iterations. In the YAML file a length is written as a
`time: N` or `iterations: N` key, either at the top level (global default) or
inside a pattern (override for that pattern).
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from breathe.patterns.errors import PatternLengthError, PatternNotFoundError

TIME_KEYS: tuple[str, ...] = ("time", "Time")
ITERATION_KEYS: tuple[str, ...] = ("iterations", "Iterations", "iteration", "Iteration")


class TimeLength(BaseModel):
    """Session runs for a fixed number of seconds."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["time"] = "time"
    value: int = Field(ge=0)

    def __str__(self) -> str:
        return f"Time={self.value}"

    def short_string(self) -> str:
        return f"{self.value} seconds"

    def session_ticks(self, cycle_length: int) -> int:  # noqa: ARG002
        return self.value


class IterationsLength(BaseModel):
    """Session runs for a fixed number of full pattern cycles."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["iterations"] = "iterations"
    value: int = Field(ge=0)

    def __str__(self) -> str:
        return f"Iterations={self.value}"

    def short_string(self) -> str:
        return f"{self.value} iterations"

    def session_ticks(self, cycle_length: int) -> int:
        return self.value * cycle_length


PatternLength = Annotated[TimeLength | IterationsLength, Field(discriminator="kind")]


def _pop_pattern_length(data: dict[str, Any]) -> dict[str, Any] | None:
    """Remove `time`/`iterations` keys from raw data and return a length payload.

    Raises:
        ValueError: If more than one length key is present
    """
    found = [key for key in (*TIME_KEYS, *ITERATION_KEYS) if key in data]
    if not found:
        return None
    if len(found) > 1:
        raise ValueError(f"Only one of 'time' or 'iterations' may be given, got: {', '.join(found)}")
    key = found[0]
    kind = "time" if key in TIME_KEYS else "iterations"
    return {"kind": kind, "value": data.pop(key)}


def _collect_pattern_length(data: Any) -> Any:
    if not isinstance(data, dict):
        return data
    data = dict(data)
    length = _pop_pattern_length(data)
    if length is not None:
        if data.get("pattern_length") is not None:
            raise ValueError("Pattern length given twice")
        data["pattern_length"] = length
    return data


def parse_pattern_length(spec: str) -> TimeLength | IterationsLength:
    """Parse a `KIND=VALUE` pattern length specification.

    Whitespace is ignored, so "iterations = 5" and "Iterations=5" are the
    same. KIND is one of time/Time or iterations/Iterations/iteration/Iteration.

    Args:
        spec: Specification string, e.g. "time=300"

    Returns:
        TimeLength or IterationsLength

    Raises:
        PatternLengthError: If the string is malformed

    Example:
        >>> parse_pattern_length("iteration = 123")
        IterationsLength(kind='iterations', value=123)
    """
    compact = "".join(spec.split())
    parts = compact.split("=")
    if len(parts) != 2:
        raise PatternLengthError(spec, "expected exactly one '=' as in 'time=60' or 'iterations=5'")

    kind, raw_value = parts
    try:
        value = int(raw_value)
    except ValueError:
        raise PatternLengthError(spec, f"invalid duration {raw_value!r}") from None
    if value < 0:
        raise PatternLengthError(spec, f"duration must not be negative, got {value}")

    if kind in TIME_KEYS:
        return TimeLength(value=value)
    if kind in ITERATION_KEYS:
        return IterationsLength(value=value)
    raise PatternLengthError(spec, f"duration type {kind!r} not recognized")


class Pattern(BaseModel):
    """A named breathing pattern.

    Attributes:
        breath_in: Inhale duration in seconds (must be > 0)
        hold_in: Hold after inhale, None or 0 skips the phase
        breath_out: Exhale duration in seconds (must be > 0)
        hold_out: Hold after exhale, None or 0 skips the phase
        description: Free text shown in listings
        pattern_length: Optional per-pattern session length
    """

    breath_in: int = Field(gt=0)
    hold_in: int | None = Field(default=None, ge=0)
    breath_out: int = Field(gt=0)
    hold_out: int | None = Field(default=None, ge=0)
    description: str = ""
    pattern_length: PatternLength | None = None

    @model_validator(mode="before")
    @classmethod
    def collect_pattern_length(cls, data: Any) -> Any:
        return _collect_pattern_length(data)

    def length(self) -> int:
        """Seconds for one full cycle."""
        return self.breath_in + self.breath_out + (self.hold_in or 0) + (self.hold_out or 0)

    def short_string(self) -> str:
        return f"{self.breath_in}-{self.hold_in or 0}-{self.breath_out}-{self.hold_out or 0}"

    def short_session_string(self) -> str:
        if self.pattern_length is None:
            return ""
        return self.pattern_length.short_string()


class BreatheConfig(BaseModel):
    """Parsed configuration file: named patterns plus the default session length."""

    patterns: dict[str, Pattern] = Field(min_length=1)
    pattern_length: PatternLength

    @model_validator(mode="before")
    @classmethod
    def collect_pattern_length(cls, data: Any) -> Any:
        return _collect_pattern_length(data)

    def pattern_names(self) -> list[str]:
        return sorted(self.patterns)

    def compute_pattern(
        self,
        pattern_name: str,
        override: TimeLength | IterationsLength | None = None,
    ) -> Pattern:
        """Resolve a pattern and its session length.

        Length precedence: explicit override, then the pattern's own length,
        then the configuration default.

        Args:
            pattern_name: Key under `patterns`
            override: Length given on the command line, if any

        Returns:
            Copy of the pattern with pattern_length always set

        Raises:
            PatternNotFoundError: If the name is not defined
        """
        pattern = self.patterns.get(pattern_name)
        if pattern is None:
            raise PatternNotFoundError(pattern_name, self.pattern_names())
        resolved = override
        if resolved is None:
            resolved = pattern.pattern_length if pattern.pattern_length is not None else self.pattern_length
        return pattern.model_copy(update={"pattern_length": resolved})
