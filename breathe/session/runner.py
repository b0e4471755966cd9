"""Timer loop for a breathing session.

SessionRunner owns a BreathingSession behind a lock and advances it from a
single worker thread once per tick interval. Consumers never touch the
session directly; they receive an immutable SessionSnapshot after every tick.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass

from loguru import logger

from breathe.session.session import BreathingSession


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session after a tick.

    Attributes:
        phase: Display name of the current phase
        phase_length: Ticks in the current phase
        phase_ticks: Ticks elapsed in the current phase
        phase_increment: Per-tick step on a phase bar of total lcm
        phase_changed: Whether this tick entered a new phase
        lcm: LCM of the nonzero phase lengths
        total_ticks: Ticks elapsed in the session
        session_length: Total ticks of the session
        completed: Whether the session is over
    """

    phase: str
    phase_length: int
    phase_ticks: int
    phase_increment: int
    phase_changed: bool
    lcm: int
    total_ticks: int
    session_length: int
    completed: bool

    @classmethod
    def of(cls, session: BreathingSession) -> "SessionSnapshot":
        return cls(
            phase=session.current_phase_name(),
            phase_length=session.current_phase_length(),
            phase_ticks=session.phase_ticks,
            phase_increment=session.phase_increment(),
            phase_changed=session.is_phase_changed(),
            lcm=session.lcm(),
            total_ticks=session.total_ticks,
            session_length=session.session_length,
            completed=session.is_completed(),
        )


TickCallback = Callable[[SessionSnapshot], None]


class SessionRunner:
    """Advance a session at a fixed interval from a worker thread.

    All access to the session goes through an internal lock, so `tick` and
    `snapshot` may be called from any thread.
    """

    def __init__(self, session: BreathingSession, tick_seconds: float = 1.0):
        if tick_seconds <= 0:
            raise ValueError(f"tick_seconds must be positive, got {tick_seconds}")
        self.tick_seconds = tick_seconds
        self._session = session
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._error: BaseException | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot.of(self._session)

    def tick(self) -> SessionSnapshot:
        """Advance the session once and return its new state."""
        with self._lock:
            self._session.advance()
            return SessionSnapshot.of(self._session)

    def start(self, on_tick: TickCallback) -> None:
        """Start the worker thread.

        Args:
            on_tick: Called with a snapshot after every tick, outside the lock

        Raises:
            RuntimeError: If the runner was already started
        """
        if self._thread is not None:
            raise RuntimeError("SessionRunner can only be started once")
        self._thread = threading.Thread(target=self._loop, args=(on_tick,), name="breathe-ticker", daemon=True)
        logger.info(f"Starting session ({self.snapshot().session_length} ticks, tick={self.tick_seconds}s)")
        self._thread.start()

    def _loop(self, on_tick: TickCallback) -> None:
        try:
            while not self._stop_event.wait(self.tick_seconds):
                snapshot = self.tick()
                on_tick(snapshot)
                if snapshot.completed:
                    logger.info(f"Session completed after {snapshot.total_ticks} ticks")
                    break
        except Exception as e:
            logger.exception(f"Tick callback failed: {e}")
            self._error = e

    def stop(self) -> None:
        """Ask the worker thread to stop before the next tick."""
        if not self._stop_event.is_set():
            logger.info("Stopping session")
        self._stop_event.set()

    def wait(self, timeout: float | None = None) -> bool:
        """Join the worker thread.

        Returns:
            True if the session completed

        Raises:
            Exception: Whatever the tick callback raised, if it failed
        """
        if self._thread is not None:
            self._thread.join(timeout)
        if self._error is not None:
            raise self._error
        return self.snapshot().completed

    def run(self, on_tick: TickCallback, poll_seconds: float = 0.1) -> bool:
        """Start the session and block until it completes.

        On KeyboardInterrupt the worker is stopped and the interrupt re-raised.

        Returns:
            True if the session completed
        """
        self.start(on_tick)
        try:
            while self.is_running:
                self.wait(poll_seconds)
        except KeyboardInterrupt:
            self.stop()
            self.wait()
            raise
        return self.wait()
