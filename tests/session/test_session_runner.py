"""Tests for the lock-guarded session runner."""

import pytest

from breathe.patterns.types import IterationsLength, Pattern, TimeLength
from breathe.session.runner import SessionRunner, SessionSnapshot
from breathe.session.session import BreathingSession

FAST_TICK = 0.001


@pytest.fixture
def quick_session() -> BreathingSession:
    """1-0-2-0 pattern, one iteration: three ticks."""
    pattern = Pattern(breath_in=1, breath_out=2)
    return BreathingSession(pattern, IterationsLength(value=1))


def test_runner_rejects_non_positive_tick(quick_session: BreathingSession):
    with pytest.raises(ValueError, match="tick_seconds"):
        SessionRunner(quick_session, tick_seconds=0)


def test_snapshot_does_not_advance(quick_session: BreathingSession):
    runner = SessionRunner(quick_session, tick_seconds=FAST_TICK)

    snapshot = runner.snapshot()

    assert snapshot == SessionSnapshot(
        phase="BreathIn",
        phase_length=1,
        phase_ticks=0,
        phase_increment=2,
        phase_changed=True,
        lcm=2,
        total_ticks=0,
        session_length=3,
        completed=False,
    )
    assert quick_session.total_ticks == 0


def test_tick_advances_once(quick_session: BreathingSession):
    runner = SessionRunner(quick_session, tick_seconds=FAST_TICK)

    snapshot = runner.tick()

    assert snapshot.phase == "BreathOut"
    assert snapshot.phase_changed
    assert snapshot.total_ticks == 1
    assert snapshot.phase_increment == 1


def test_run_reports_every_tick(quick_session: BreathingSession):
    runner = SessionRunner(quick_session, tick_seconds=FAST_TICK)
    snapshots: list[SessionSnapshot] = []

    completed = runner.run(snapshots.append)

    assert completed
    assert not runner.is_running
    assert [s.total_ticks for s in snapshots] == [1, 2, 3]
    assert [s.phase for s in snapshots] == ["BreathOut", "BreathOut", "BreathIn"]
    assert [s.phase_changed for s in snapshots] == [True, False, True]
    assert snapshots[-1].completed


def test_runner_starts_only_once(quick_session: BreathingSession):
    runner = SessionRunner(quick_session, tick_seconds=FAST_TICK)
    runner.start(lambda _: None)
    runner.wait()

    with pytest.raises(RuntimeError, match="only be started once"):
        runner.start(lambda _: None)


def test_stop_before_completion(quick_session: BreathingSession):
    runner = SessionRunner(quick_session, tick_seconds=60)
    runner.start(lambda _: None)

    runner.stop()
    completed = runner.wait(timeout=5)

    assert not completed
    assert not runner.is_running
    assert quick_session.total_ticks == 0


def test_callback_error_is_raised_from_wait(quick_session: BreathingSession):
    def on_tick(_: SessionSnapshot) -> None:
        raise ValueError("renderer failed")

    runner = SessionRunner(quick_session, tick_seconds=FAST_TICK)
    runner.start(on_tick)

    with pytest.raises(ValueError, match="renderer failed"):
        runner.wait(timeout=5)


def test_run_stops_worker_on_keyboard_interrupt(monkeypatch: pytest.MonkeyPatch):
    """Ctrl+C while waiting stops the ticker and re-raises the interrupt."""
    pattern = Pattern(breath_in=1, breath_out=2)
    session = BreathingSession(pattern, TimeLength(value=300))
    runner = SessionRunner(session, tick_seconds=0.01)
    original_wait = runner.wait
    calls: list[float | None] = []

    def interrupting_wait(timeout: float | None = None) -> bool:
        calls.append(timeout)
        if len(calls) == 1:
            raise KeyboardInterrupt
        return original_wait(timeout)

    monkeypatch.setattr(runner, "wait", interrupting_wait)

    with pytest.raises(KeyboardInterrupt):
        runner.run(lambda _: None)

    assert not runner.is_running
    assert len(calls) == 2
    assert not session.is_completed()
    frozen_at = session.total_ticks
    assert frozen_at < session.session_length

    # The worker is gone, so the session no longer moves
    original_wait(timeout=0.05)
    assert session.total_ticks == frozen_at
