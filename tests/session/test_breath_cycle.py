"""Tests for breath phases and BreathCycle construction."""

import pytest

from breathe.patterns.types import Pattern
from breathe.session.cycle import from_pattern
from breathe.session.phase import MAX_PHASE_NAME_LEN, BreathPhase


def test_breath_phase_next():
    """Phases follow the cyclic order in->hold->out->hold->in."""
    phase = BreathPhase.BREATH_IN
    assert phase.next() == BreathPhase.HOLD_IN
    assert phase.next().next() == BreathPhase.BREATH_OUT
    assert phase.next().next().next() == BreathPhase.HOLD_OUT
    assert phase.next().next().next().next() == BreathPhase.BREATH_IN


def test_breath_phase_display_names():
    assert [phase.value for phase in BreathPhase] == ["BreathIn", "HoldIn", "BreathOut", "HoldOut"]
    assert MAX_PHASE_NAME_LEN == len("BreathOut")


def test_breath_cycle_from_pattern(relax_pattern: Pattern):
    cycle = from_pattern(relax_pattern)

    assert cycle.length_of(BreathPhase.BREATH_IN) == 4
    assert cycle.length_of(BreathPhase.HOLD_IN) == 7
    assert cycle.length_of(BreathPhase.BREATH_OUT) == 8
    assert cycle.length_of(BreathPhase.HOLD_OUT) == 0
    assert cycle.cycle_length == 19


def test_breath_cycle_lcm_ignores_skipped_phases(relax_pattern: Pattern, no_hold_pattern: Pattern):
    assert from_pattern(relax_pattern).lcm == 56
    assert from_pattern(no_hold_pattern).lcm == 8


@pytest.mark.parametrize(
    ("durations", "cycle_length", "lcm"),
    [
        ((4, 4, 4, 4), 16, 4),
        ((6, 2, 8, 2), 18, 24),
        ((5, None, 5, None), 10, 5),
        ((3, 0, 5, 2), 10, 30),
    ],
)
def test_breath_cycle_length_and_lcm(durations, cycle_length, lcm):
    breath_in, hold_in, breath_out, hold_out = durations
    pattern = Pattern(breath_in=breath_in, hold_in=hold_in, breath_out=breath_out, hold_out=hold_out)

    cycle = from_pattern(pattern)

    assert cycle.cycle_length == cycle_length
    assert cycle.lcm == lcm


def test_breath_cycle_is_immutable(relax_pattern: Pattern):
    cycle = from_pattern(relax_pattern)

    with pytest.raises(AttributeError):
        cycle.lcm = 1  # type: ignore[misc]
    with pytest.raises(TypeError):
        cycle.phase_lengths[BreathPhase.HOLD_OUT] = 3  # type: ignore[index]


def test_breath_cycle_rejects_zero_breath():
    """A pattern that bypassed validation must not produce a cycle."""
    pattern = Pattern.model_construct(breath_in=0, hold_in=None, breath_out=4, hold_out=None, description="")

    with pytest.raises(ValueError, match="must be positive"):
        from_pattern(pattern)


@pytest.mark.parametrize(("breath_in", "breath_out"), [(None, 4), (4, None), (4, -2)])
def test_breath_cycle_rejects_missing_breath(breath_in, breath_out):
    pattern = Pattern.model_construct(
        breath_in=breath_in, hold_in=None, breath_out=breath_out, hold_out=None, description=""
    )

    with pytest.raises(ValueError, match="must be positive"):
        from_pattern(pattern)
