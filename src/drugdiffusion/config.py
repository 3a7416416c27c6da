"""
Configuration & Defaults
========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (default diffusivity, tick interval,
   horizon...) from being scattered throughout the code.
2. Host clamping: It keeps the allowed ranges of the user-adjustable
   parameters in one place, so a host can clamp UI values before they reach
   the evaluator.

Exports:
    DEFAULT_* constants: Physical and algorithm defaults.
    PARAMETER_RANGES (dict): ParameterRange for every adjustable parameter.
"""
from __future__ import annotations

import math
from dataclasses import dataclass


# Physical defaults
DEFAULT_DIFFUSIVITY: float = 1e-10  # m^2/s
DEFAULT_THICKNESS: float = 200e-6  # m
DEFAULT_SURFACE_CONCENTRATION: float = 1.0  # a.u.

# Algorithm quality knobs
DEFAULT_SAMPLE_COUNT: int = 81
DEFAULT_SERIES_TERMS: int = 20

# Animation
DEFAULT_TICK_INTERVAL_MS: int = 100
DEFAULT_TIME_STEP: float = 5.0  # simulated seconds per tick
DEFAULT_HORIZON: float = 3600.0  # s


@dataclass(frozen=True)
class ParameterRange:
    """Allowed interval of a user-adjustable parameter."""
    minimum: float
    maximum: float
    step: float

    def clamp(self, value: float) -> float:
        """Clamp value into [minimum, maximum]. NaN maps to the minimum."""
        if math.isnan(value):
            return self.minimum
        return min(max(value, self.minimum), self.maximum)

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum


PARAMETER_RANGES: dict[str, ParameterRange] = {
    "diffusivity": ParameterRange(minimum=1e-12, maximum=1e-9, step=1e-12),
    "thickness": ParameterRange(minimum=50e-6, maximum=1000e-6, step=10e-6),
    "surface_concentration": ParameterRange(minimum=0.5, maximum=2.0, step=0.1),
    "sample_count": ParameterRange(minimum=2, maximum=1001, step=1),
    "series_terms": ParameterRange(minimum=1, maximum=200, step=1),
}
