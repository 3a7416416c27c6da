"""
Animation Driver (Qt Timer)
===========================
This module contains the QObject that periodically re-evaluates the profile.

Why is this file needed?
------------------------
1. Scheduling: A QTimer advances simulated time on a fixed wall-clock period
   and triggers one evaluation per tick.
2. Signals: Results and errors reach the GUI through Qt Signals, so the
   evaluator itself never knows about Qt.

Classes:
    AnimationDriver: Start / pause / reset controller for the animation.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from drugdiffusion.analysis.errors import DiffusionError, InvalidConfiguration
from drugdiffusion.analysis.profile import ConcentrationProfile, ProfileEvaluator
from drugdiffusion.controller.animation import AnimationClock
from drugdiffusion.config import DEFAULT_TICK_INTERVAL_MS
from drugdiffusion.model.state import SimulationState
from drugdiffusion.utils import format_time

logger = logging.getLogger(__name__)


class AnimationDriver(QObject):
    # Signals to update the UI
    profile_updated = Signal(object)  # ConcentrationProfile
    time_changed = Signal(float)
    running_changed = Signal(bool)
    error_occurred = Signal(str)

    def __init__(
        self,
        state: Optional[SimulationState] = None,
        clock: Optional[AnimationClock] = None,
        interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.state = state if state is not None else SimulationState()
        self.clock = clock if clock is not None else AnimationClock()
        self.last_profile: Optional[ConcentrationProfile] = None

        self._evaluator: Optional[ProfileEvaluator] = None
        self._evaluator_key: Optional[tuple] = None

        self.timer = QTimer(self)
        self.timer.timeout.connect(self.advance_frame)
        self.set_interval(interval_ms)

    @property
    def time(self) -> float:
        return self.clock.time

    @property
    def is_running(self) -> bool:
        return self.clock.is_running

    def set_interval(self, interval_ms: int) -> None:
        """Set the wall-clock period between ticks in milliseconds."""
        if isinstance(interval_ms, bool) or not isinstance(interval_ms, int) or interval_ms <= 0:
            raise InvalidConfiguration("interval_ms", interval_ms, "must be a positive integer")
        self.timer.setInterval(interval_ms)

    # --- PLAYBACK ---

    @Slot()
    def start(self) -> None:
        if self.clock.is_running:
            return
        self.clock.start()
        self.timer.start()
        logger.info(f"Animation started at {format_time(self.clock.time)}.")
        self.running_changed.emit(True)

    @Slot()
    def pause(self) -> None:
        if not self.clock.is_running and not self.timer.isActive():
            return
        self.clock.pause()
        self.timer.stop()
        logger.info(f"Animation paused at {format_time(self.clock.time)}.")
        self.running_changed.emit(False)

    @Slot()
    def toggle_play(self) -> None:
        if self.clock.is_running:
            self.pause()
        else:
            self.start()

    @Slot()
    def reset(self) -> None:
        """Set time back to 0 and recompute. Playback state is kept."""
        self.clock.reset()
        logger.info("Animation time reset.")
        self.time_changed.emit(self.clock.time)
        self.refresh()

    @Slot()
    def advance_frame(self) -> None:
        """
        Timer slot: advance the clock by one step and recompute.

        Playback pauses if the current state cannot be evaluated.
        """
        time = self.clock.advance()
        self.time_changed.emit(time)

        # Invalid state fails the same way on every tick, report it once
        if self.refresh() is None:
            self.pause()
            return

        # A clamping clock pauses itself at the horizon
        if not self.clock.is_running and self.timer.isActive():
            self.timer.stop()
            logger.info(f"Animation stopped at horizon {format_time(time)}.")
            self.running_changed.emit(False)

    # --- PARAMETERS ---

    def set_parameters(
        self,
        diffusivity: Optional[float] = None,
        thickness: Optional[float] = None,
        surface_concentration: Optional[float] = None,
        sample_count: Optional[int] = None,
        series_terms: Optional[int] = None,
    ) -> Optional[ConcentrationProfile]:
        """Update the given values in the state and recompute immediately."""
        if diffusivity is not None:
            self.state.diffusivity = diffusivity
        if thickness is not None:
            self.state.thickness = thickness
        if surface_concentration is not None:
            self.state.surface_concentration = surface_concentration
        if sample_count is not None:
            self.state.sample_count = sample_count
        if series_terms is not None:
            self.state.series_terms = series_terms
        return self.refresh()

    @Slot()
    def refresh(self) -> Optional[ConcentrationProfile]:
        """
        Evaluate the profile for the current state and time.

        Returns:
            The new profile, or None if the current state is invalid (the
            error is logged and emitted through error_occurred).
        """
        try:
            profile = self._current_evaluator().evaluate(self.clock.time)
        except DiffusionError as e:
            logger.error(f"Profile evaluation failed: {e}")
            self.error_occurred.emit(str(e))
            return None

        self.last_profile = profile
        self.profile_updated.emit(profile)
        return profile

    def _current_evaluator(self) -> ProfileEvaluator:
        # Coefficients only depend on the parameters and resolution, not on time
        key = (self.state.parameters(), self.state.sample_count, self.state.series_terms)
        if self._evaluator is None or key != self._evaluator_key:
            logger.debug(f"Rebuilding evaluator for {key}")
            self._evaluator = ProfileEvaluator(
                key[0], sample_count=key[1], series_terms=key[2]
            )
            self._evaluator_key = key
        return self._evaluator
