"""Breath cycle derived from a pattern.

A BreathCycle holds the tick count of every phase, the length of one full
cycle, and the least common multiple of the nonzero phase lengths. The LCM is
the common resolution of the per-phase progress bar: each tick of a phase of
length L moves the bar by lcm // L, so every phase fills it exactly.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from functools import reduce
from types import MappingProxyType

from breathe.patterns.types import Pattern
from breathe.session.phase import BreathPhase


@dataclass(frozen=True)
class BreathCycle:
    """Immutable per-phase durations of a pattern.

    Attributes:
        phase_lengths: Ticks per phase (0 means the phase is skipped)
        cycle_length: Sum of all phase lengths
        lcm: LCM of the nonzero phase lengths (1 if there are none)
    """

    phase_lengths: Mapping[BreathPhase, int]
    cycle_length: int
    lcm: int

    def length_of(self, phase: BreathPhase) -> int:
        return self.phase_lengths[phase]


def from_pattern(pattern: Pattern) -> BreathCycle:
    """Build a BreathCycle from a pattern.

    Args:
        pattern: Validated breathing pattern

    Returns:
        BreathCycle for the pattern

    Raises:
        ValueError: If breath_in or breath_out is not positive
    """
    lengths = {
        BreathPhase.BREATH_IN: pattern.breath_in,
        BreathPhase.HOLD_IN: pattern.hold_in or 0,
        BreathPhase.BREATH_OUT: pattern.breath_out,
        BreathPhase.HOLD_OUT: pattern.hold_out or 0,
    }
    # Phase skipping in BreathingSession.advance relies on this
    breaths = (lengths[BreathPhase.BREATH_IN], lengths[BreathPhase.BREATH_OUT])
    if not all(isinstance(length, int) and length > 0 for length in breaths):
        raise ValueError(
            f"breath_in and breath_out must be positive, got {pattern.breath_in} and {pattern.breath_out}"
        )

    lcm = reduce(math.lcm, (length for length in lengths.values() if length != 0), 1)
    return BreathCycle(
        phase_lengths=MappingProxyType(lengths),
        cycle_length=sum(lengths.values()),
        lcm=lcm,
    )
