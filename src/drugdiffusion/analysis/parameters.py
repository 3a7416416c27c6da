from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Integral, Real

from drugdiffusion.analysis.errors import InvalidConfiguration, InvalidParameter


def _check_real(field: str, value: object) -> float:
    # bool is an Integral, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameter(field, value, "must be a real number")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameter(field, value, "must be finite")
    return value


def check_positive(field: str, value: object) -> float:
    """Validate a strictly positive physical quantity."""
    value = _check_real(field, value)
    if value <= 0.0:
        raise InvalidParameter(field, value, "must be > 0")
    return value


def check_non_negative(field: str, value: object) -> float:
    """Validate a non-negative physical quantity."""
    value = _check_real(field, value)
    if value < 0.0:
        raise InvalidParameter(field, value, "must be >= 0")
    return value


def check_count(field: str, value: object, minimum: int) -> int:
    """Validate an integer algorithm knob (sample count, series terms)."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidConfiguration(field, value, "must be an integer")
    if value < minimum:
        raise InvalidConfiguration(field, value, f"must be >= {minimum}")
    return int(value)


@dataclass(frozen=True)
class SimulationParameters:
    """
    Physical parameters of the slab.

    Attributes:
        diffusivity: Diffusion coefficient D in m²/s.
        thickness: Slab thickness L in m.
        surface_concentration: Fixed surface concentration C0 (arbitrary units).
    """
    diffusivity: float
    thickness: float
    surface_concentration: float

    def __post_init__(self) -> None:
        # Normalise to float so equal parameters compare and hash equal
        object.__setattr__(self, "diffusivity", check_positive("D", self.diffusivity))
        object.__setattr__(self, "thickness", check_positive("L", self.thickness))
        object.__setattr__(
            self, "surface_concentration", check_non_negative("C0", self.surface_concentration)
        )

    @property
    def characteristic_time(self) -> float:
        """Diffusion time scale L²/D in seconds."""
        return self.thickness * (self.thickness / self.diffusivity)

    def fourier_number(self, time: float) -> float:
        """
        Dimensionless time D·t/L².

        Two parameter sets with the same Fourier number have the same profile
        shape over the normalised depth x/L. Evaluated as (D·t/L)/L so that a
        tiny L cannot underflow L² to zero; the result may be inf, never nan.
        """
        time = check_non_negative("t", time)
        if time == 0.0:
            return 0.0
        return (self.diffusivity * time / self.thickness) / self.thickness
