"""Breathing phase definitions."""

from enum import Enum


class BreathPhase(str, Enum):
    """The four phases of a breathing cycle.

    Phases are ordered cyclically:
    BREATH_IN -> HOLD_IN -> BREATH_OUT -> HOLD_OUT -> BREATH_IN
    """

    BREATH_IN = "BreathIn"
    HOLD_IN = "HoldIn"
    BREATH_OUT = "BreathOut"
    HOLD_OUT = "HoldOut"

    def next(self) -> "BreathPhase":
        """Return the phase that follows this one in the cycle."""
        return _SUCCESSORS[self]


_SUCCESSORS: dict[BreathPhase, BreathPhase] = {
    BreathPhase.BREATH_IN: BreathPhase.HOLD_IN,
    BreathPhase.HOLD_IN: BreathPhase.BREATH_OUT,
    BreathPhase.BREATH_OUT: BreathPhase.HOLD_OUT,
    BreathPhase.HOLD_OUT: BreathPhase.BREATH_IN,
}

MAX_PHASE_NAME_LEN = max(len(phase.value) for phase in BreathPhase)
