"""Breathing session state machine.

The session advances one tick at a time through the phases of a BreathCycle,
skipping phases of length 0, until the total session length is reached. It
performs no I/O and no locking; callers that tick it from a timer thread must
serialize access (see breathe.session.runner).
"""

from loguru import logger

from breathe.patterns.types import IterationsLength, Pattern, TimeLength
from breathe.session.cycle import BreathCycle, from_pattern
from breathe.session.phase import BreathPhase


class BreathingSession:
    """Tick-driven breathing session.

    Attributes:
        cycle: Phase lengths of the pattern
        session_length: Total ticks for the whole session
        total_ticks: Ticks elapsed so far, capped at session_length
        current_phase: Phase the session is in
        phase_ticks: Ticks elapsed in the current phase
        phase_just_changed: Whether the last advance entered a new phase
    """

    def __init__(self, pattern: Pattern, pattern_length: TimeLength | IterationsLength):
        self.cycle: BreathCycle = from_pattern(pattern)
        self.session_length: int = pattern_length.session_ticks(self.cycle.cycle_length)
        self.total_ticks: int = 0
        self.phase_ticks: int = 0
        self.current_phase: BreathPhase = BreathPhase.BREATH_IN
        # True before the first tick so the first phase gets rendered
        self.phase_just_changed: bool = True
        logger.debug(
            f"Session created: pattern={pattern.short_string()} length={pattern_length} "
            f"cycle_length={self.cycle.cycle_length} session_length={self.session_length} lcm={self.cycle.lcm}"
        )

    @classmethod
    def from_pattern(cls, pattern: Pattern) -> "BreathingSession":
        """Build a session from a pattern whose pattern_length is already resolved.

        Raises:
            ValueError: If pattern.pattern_length is None
        """
        if pattern.pattern_length is None:
            raise ValueError("Pattern length must be resolved before starting a session")
        return cls(pattern, pattern.pattern_length)

    @property
    def cycle_length(self) -> int:
        return self.cycle.cycle_length

    def advance(self) -> None:
        """Advance the session by one tick.

        Once the session is completed this is a no-op.
        """
        if self.is_completed():
            return
        self.total_ticks += 1
        self.phase_ticks += 1
        if self.phase_ticks >= self.current_phase_length():
            self._next_phase()
            self.phase_just_changed = True
        else:
            self.phase_just_changed = False

    def _next_phase(self) -> None:
        # Bounded: breath_in and breath_out are nonzero
        phase = self.current_phase.next()
        while self.cycle.length_of(phase) == 0:
            phase = phase.next()
        logger.debug(f"Phase {self.current_phase.value} -> {phase.value} at tick {self.total_ticks}")
        self.current_phase = phase
        self.phase_ticks = 0

    def current_phase_length(self) -> int:
        return self.cycle.length_of(self.current_phase)

    def current_phase_name(self) -> str:
        return self.current_phase.value

    def is_completed(self) -> bool:
        return self.total_ticks >= self.session_length

    def is_phase_changed(self) -> bool:
        """Whether the last advance moved the session into a new phase."""
        return self.phase_just_changed

    def lcm(self) -> int:
        return self.cycle.lcm

    def phase_increment(self) -> int:
        """Per-tick step of a phase progress bar whose total is lcm()."""
        return self.cycle.lcm // self.current_phase_length()

    def remaining_ticks(self) -> int:
        return self.session_length - self.total_ticks

    def __repr__(self) -> str:
        return (
            f"BreathingSession(phase={self.current_phase.value}, phase_ticks={self.phase_ticks}, "
            f"total_ticks={self.total_ticks}/{self.session_length})"
        )
