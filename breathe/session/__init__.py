"""Breathing session core.

This module provides:
- The four cyclic breathing phases
- BreathCycle: per-phase tick counts, cycle length and LCM of a pattern
- BreathingSession: the tick-driven phase state machine
- SessionRunner: a lock-guarded 1 Hz ticker around a session
"""

from breathe.session.cycle import BreathCycle, from_pattern
from breathe.session.phase import MAX_PHASE_NAME_LEN, BreathPhase
from breathe.session.runner import SessionRunner, SessionSnapshot
from breathe.session.session import BreathingSession

__all__ = [
    "MAX_PHASE_NAME_LEN",
    "BreathCycle",
    "BreathPhase",
    "BreathingSession",
    "SessionRunner",
    "SessionSnapshot",
    "from_pattern",
]
