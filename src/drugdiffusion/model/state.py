"""
Simulation State (Data Model)
=============================
This module defines the central data structure for the running simulation.

Why is this file needed?
------------------------
1. State Management: It holds the values the user currently edits (D, L, C0
   and the resolution knobs) in one place.
2. Decoupling: The host UI writes to this object; the animation driver reads
   from it on every tick.

Classes:
    SimulationState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging

from drugdiffusion.analysis.parameters import SimulationParameters
from drugdiffusion.config import (
    DEFAULT_DIFFUSIVITY, DEFAULT_THICKNESS, DEFAULT_SURFACE_CONCENTRATION,
    DEFAULT_SAMPLE_COUNT, DEFAULT_SERIES_TERMS, PARAMETER_RANGES
)

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """
    Mutable, user-editable simulation settings.
    Pass this instance to the driver; call parameters() to get a validated snapshot.
    """
    diffusivity: float = DEFAULT_DIFFUSIVITY  # m^2/s
    thickness: float = DEFAULT_THICKNESS  # m
    surface_concentration: float = DEFAULT_SURFACE_CONCENTRATION  # a.u.

    sample_count: int = DEFAULT_SAMPLE_COUNT
    series_terms: int = DEFAULT_SERIES_TERMS

    def parameters(self) -> SimulationParameters:
        """
        Snapshot of the physical parameters.

        Raises:
            InvalidParameter: If a value is outside its physical domain.
        """
        return SimulationParameters(
            diffusivity=self.diffusivity,
            thickness=self.thickness,
            surface_concentration=self.surface_concentration,
        )

    def clamped(self) -> SimulationState:
        """Return a copy with every value clamped into its configured UI range."""
        return replace(
            self,
            diffusivity=PARAMETER_RANGES["diffusivity"].clamp(self.diffusivity),
            thickness=PARAMETER_RANGES["thickness"].clamp(self.thickness),
            surface_concentration=PARAMETER_RANGES["surface_concentration"].clamp(
                self.surface_concentration
            ),
            sample_count=int(PARAMETER_RANGES["sample_count"].clamp(self.sample_count)),
            series_terms=int(PARAMETER_RANGES["series_terms"].clamp(self.series_terms)),
        )

    def reset(self) -> None:
        """Restore all defaults."""
        self.diffusivity = DEFAULT_DIFFUSIVITY
        self.thickness = DEFAULT_THICKNESS
        self.surface_concentration = DEFAULT_SURFACE_CONCENTRATION
        self.sample_count = DEFAULT_SAMPLE_COUNT
        self.series_terms = DEFAULT_SERIES_TERMS
        logger.info("Simulation state has been reset.")
