from __future__ import annotations

import logging
from enum import StrEnum

from drugdiffusion.analysis.parameters import check_positive
from drugdiffusion.analysis.errors import InvalidConfiguration, InvalidParameter
from drugdiffusion.config import DEFAULT_HORIZON, DEFAULT_TIME_STEP

logger = logging.getLogger(__name__)


class HorizonPolicy(StrEnum):
    """What the clock does once simulated time reaches the horizon."""
    WRAP = "wrap"  # next tick restarts from 0
    CLAMP = "clamp"  # stay at the horizon and pause


class AnimationClock:
    """
    Simulated time of the animation.

    Pure state machine with no timer attached: the driver calls advance() on
    every tick. Time never exceeds the horizon.
    """

    def __init__(
        self,
        time_step: float = DEFAULT_TIME_STEP,
        horizon: float = DEFAULT_HORIZON,
        horizon_policy: HorizonPolicy = HorizonPolicy.WRAP,
    ) -> None:
        """
        Args:
            time_step: Simulated seconds added per tick (> 0).
            horizon: Maximum simulated time in seconds (> 0).
            horizon_policy: Behaviour at the horizon.

        Raises:
            InvalidConfiguration: If time_step or horizon is not positive.
        """
        self.time_step = _check_setting("time_step", time_step)
        self.horizon = _check_setting("horizon", horizon)
        self.horizon_policy = HorizonPolicy(horizon_policy)
        self.time: float = 0.0
        self.is_running: bool = False

    def start(self) -> None:
        # A clamped clock sitting at the end restarts from 0
        if self.horizon_policy is HorizonPolicy.CLAMP and self.time >= self.horizon:
            self.time = 0.0
        self.is_running = True

    def pause(self) -> None:
        self.is_running = False

    def toggle(self) -> bool:
        """Start if paused, pause if running. Returns the new running state."""
        if self.is_running:
            self.pause()
        else:
            self.start()
        return self.is_running

    def reset(self) -> None:
        """Return time to 0 without changing the running state."""
        self.time = 0.0

    def advance(self) -> float:
        """
        Advance time by one step and return the new time.

        WRAP: a clock already at the horizon goes back to 0.
        CLAMP: time stops at the horizon and the clock pauses itself.
        """
        if self.time >= self.horizon:
            if self.horizon_policy is HorizonPolicy.WRAP:
                logger.debug(f"Horizon {self.horizon:g} s reached, wrapping to 0.")
                self.time = 0.0
            else:
                self.pause()
            return self.time

        self.time = min(self.time + self.time_step, self.horizon)
        if self.time >= self.horizon and self.horizon_policy is HorizonPolicy.CLAMP:
            logger.debug(f"Horizon {self.horizon:g} s reached, clock paused.")
            self.pause()
        return self.time


def _check_setting(field: str, value: float) -> float:
    try:
        return check_positive(field, value)
    except InvalidParameter as e:
        raise InvalidConfiguration(field, value, e.reason) from e
