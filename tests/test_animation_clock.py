from __future__ import annotations

import pytest

from drugdiffusion.analysis import InvalidConfiguration
from drugdiffusion.controller.animation import AnimationClock, HorizonPolicy


def test_defaults_match_original_animation() -> None:
    clock = AnimationClock()
    assert clock.time_step == 5.0
    assert clock.horizon == 3600.0
    assert clock.horizon_policy is HorizonPolicy.WRAP
    assert clock.time == 0.0
    assert not clock.is_running


def test_advance_adds_time_step() -> None:
    clock = AnimationClock(time_step=5.0, horizon=100.0)
    assert [clock.advance() for _ in range(3)] == [5.0, 10.0, 15.0]


def test_wrap_returns_to_zero_after_horizon() -> None:
    clock = AnimationClock(time_step=5.0, horizon=10.0, horizon_policy=HorizonPolicy.WRAP)
    clock.start()

    times = [clock.advance() for _ in range(5)]

    assert times == [5.0, 10.0, 0.0, 5.0, 10.0]
    assert clock.is_running


def test_time_never_exceeds_horizon() -> None:
    clock = AnimationClock(time_step=7.0, horizon=10.0)
    assert clock.advance() == 7.0
    assert clock.advance() == 10.0
    assert clock.advance() == 0.0


def test_clamp_stops_at_horizon_and_pauses() -> None:
    clock = AnimationClock(time_step=5.0, horizon=10.0, horizon_policy=HorizonPolicy.CLAMP)
    clock.start()

    assert clock.advance() == 5.0
    assert clock.is_running
    assert clock.advance() == 10.0
    assert not clock.is_running
    assert clock.advance() == 10.0


def test_clamp_restart_from_end_rewinds() -> None:
    clock = AnimationClock(time_step=10.0, horizon=10.0, horizon_policy="clamp")
    clock.start()
    clock.advance()
    assert clock.time == 10.0

    clock.start()
    assert clock.time == 0.0
    assert clock.is_running


def test_pause_and_toggle() -> None:
    clock = AnimationClock()
    assert clock.toggle() is True
    assert clock.is_running
    assert clock.toggle() is False
    assert not clock.is_running


def test_reset_keeps_running_state() -> None:
    clock = AnimationClock(time_step=5.0)
    clock.start()
    clock.advance()
    clock.advance()

    clock.reset()

    assert clock.time == 0.0
    assert clock.is_running


def test_pause_does_not_move_time() -> None:
    clock = AnimationClock(time_step=5.0)
    clock.start()
    clock.advance()
    clock.pause()
    assert clock.time == 5.0
    clock.start()
    assert clock.advance() == 10.0


@pytest.mark.parametrize("kwargs, field", [
    ({"time_step": 0.0}, "time_step"),
    ({"time_step": -5.0}, "time_step"),
    ({"horizon": 0.0}, "horizon"),
    ({"horizon": float("nan")}, "horizon"),
])
def test_invalid_settings(kwargs: dict, field: str) -> None:
    with pytest.raises(InvalidConfiguration) as excinfo:
        AnimationClock(**kwargs)
    assert excinfo.value.field == field


def test_unknown_policy_rejected() -> None:
    with pytest.raises(ValueError):
        AnimationClock(horizon_policy="bounce")
