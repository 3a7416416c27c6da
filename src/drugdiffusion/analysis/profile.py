from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator, NamedTuple, Sequence, overload

import numpy as np

from drugdiffusion.analysis.parameters import (
    SimulationParameters, check_count, check_non_negative
)
from drugdiffusion.config import DEFAULT_SAMPLE_COUNT, DEFAULT_SERIES_TERMS
from drugdiffusion.utils import MICROMETRES_PER_METRE, format_time

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)

MIN_SAMPLE_COUNT = 2
MIN_SERIES_TERMS = 1


class ProfileSample(NamedTuple):
    depth: float
    concentration: float


@dataclass(frozen=True, eq=False)
class ConcentrationProfile:
    """
    Concentration profile across the slab at a single time.

    Attributes:
        parameters: Parameters the profile was evaluated for.
        time: Simulated time in seconds.
        series_terms: Number of series terms used.
        depths: Sample depths in m, strictly increasing from 0 to L (read-only).
        concentrations: Concentration at each depth (read-only).
    """
    parameters: SimulationParameters
    time: float
    series_terms: int
    depths: npt.NDArray[np.float64]
    concentrations: npt.NDArray[np.float64]

    def __len__(self) -> int:
        return int(self.depths.size)

    def __iter__(self) -> Iterator[ProfileSample]:
        for depth, concentration in zip(self.depths, self.concentrations):
            yield ProfileSample(float(depth), float(concentration))

    @overload
    def __getitem__(self, index: int) -> ProfileSample: ...

    @overload
    def __getitem__(self, index: slice) -> list[ProfileSample]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [
                ProfileSample(float(d), float(c))
                for d, c in zip(self.depths[index], self.concentrations[index])
            ]
        return ProfileSample(float(self.depths[index]), float(self.concentrations[index]))

    @property
    def depths_um(self) -> npt.NDArray[np.float64]:
        """Sample depths in micrometres."""
        return self.depths * MICROMETRES_PER_METRE

    def as_pairs(self) -> list[tuple[float, float]]:
        """Return the profile as a list of (depth, concentration) tuples."""
        return [tuple(sample) for sample in self]

    def plot(self, show: bool = True) -> Figure:
        """
        Plot the profile.
        """
        return plot_profiles([self], show=show)


class ProfileEvaluator:
    """
    Truncated cosine-series solution of 1D diffusion in a slab with a fixed
    surface concentration:

        c(x, t) = C0 * (1 - 4/π * Σ_n 1/(2n+1) * exp(-D k_n² t) * cos(k_n x)),
        k_n = (2n+1)π / (2L)

    Everything that does not depend on time (depths, dimensionless modes, weighted
    cosines) is computed once in the constructor, so each evaluate() call costs
    one exp() per series term plus a matrix-vector product. The cached arrays
    are read-only and the instance holds no other state, so it can be shared
    between threads.
    """

    def __init__(
        self,
        parameters: SimulationParameters,
        sample_count: int = DEFAULT_SAMPLE_COUNT,
        series_terms: int = DEFAULT_SERIES_TERMS,
    ) -> None:
        """
        Initialize the evaluator.

        Args:
            parameters: Validated physical parameters.
            sample_count: Number of depths spanning [0, L] inclusive (>= 2).
            series_terms: Number of series terms to sum (>= 1).

        Raises:
            InvalidConfiguration: If sample_count or series_terms is out of range.
        """
        self.parameters = parameters
        self.sample_count = check_count("sample_count", sample_count, MIN_SAMPLE_COUNT)
        self.series_terms = check_count("series_terms", series_terms, MIN_SERIES_TERMS)

        thickness = parameters.thickness

        # x_i = (i / (N - 1)) * L, so the last depth is exactly L
        fraction = np.arange(self.sample_count, dtype=np.float64) / (self.sample_count - 1)
        self._depths = fraction * thickness

        # Work in x/L and D·t/L², so no intermediate scales with 1/L
        odd = 2.0 * np.arange(self.series_terms, dtype=np.float64) + 1.0
        self._modes = odd * np.pi / 2.0
        self._eigenvalues = self._modes ** 2

        # (sample_count, series_terms): cos(k_n x_i) / (2n+1), k_n x_i = (2n+1)π/2 · x_i/L
        self._weighted_cosines = np.cos(np.outer(fraction, self._modes)) / odd

        for array in (self._depths, self._modes, self._eigenvalues, self._weighted_cosines):
            array.setflags(write=False)

        logger.debug(
            f"ProfileEvaluator prepared: {self.sample_count} samples x {self.series_terms} terms, "
            f"L={thickness:g} m, D={parameters.diffusivity:g} m²/s"
        )

    @property
    def depths(self) -> npt.NDArray[np.float64]:
        return self._depths

    @property
    def modes(self) -> npt.NDArray[np.float64]:
        """Dimensionless wavenumbers k_n·L = (2n+1)π/2."""
        return self._modes

    def series_sum(self, time: float) -> npt.NDArray[np.float64]:
        """
        Evaluate Σ_n cos(k_n x)/(2n+1) * exp(-(k_n L)² · D·t/L²) at every depth.

        Args:
            time: Time in seconds (>= 0).

        Returns:
            Array of length sample_count.
        """
        fourier = self.parameters.fourier_number(time)
        if fourier == 0.0:
            decay = np.ones_like(self._eigenvalues)
        else:
            # fourier may be inf for extreme D/L; exp(-inf) = 0
            with np.errstate(over="ignore", under="ignore"):
                decay = np.exp(-self._eigenvalues * fourier)
        return self._weighted_cosines @ decay

    def evaluate(self, time: float) -> ConcentrationProfile:
        """
        Compute the concentration profile at the given time.

        Args:
            time: Time in seconds (>= 0).

        Returns:
            ConcentrationProfile with sample_count samples.

        Raises:
            InvalidParameter: If time is negative or not finite.
        """
        series = self.series_sum(time)
        concentrations = self.parameters.surface_concentration * (1.0 - (4.0 / np.pi) * series)
        concentrations.setflags(write=False)

        return ConcentrationProfile(
            parameters=self.parameters,
            time=float(time),
            series_terms=self.series_terms,
            depths=self._depths,
            concentrations=concentrations,
        )


def evaluate_profile(
    diffusivity: float,
    thickness: float,
    surface_concentration: float,
    time: float,
    sample_count: int = DEFAULT_SAMPLE_COUNT,
    series_terms: int = DEFAULT_SERIES_TERMS,
) -> ConcentrationProfile:
    """
    Evaluate the concentration profile of a slab with fixed surface concentration.

    All arguments are validated before anything is computed.

    Args:
        diffusivity: Diffusion coefficient D in m²/s (> 0).
        thickness: Slab thickness L in m (> 0).
        surface_concentration: Surface concentration C0 (>= 0).
        time: Time in seconds (>= 0).
        sample_count: Number of depths spanning [0, L] inclusive (>= 2).
        series_terms: Number of series terms (>= 1).

    Returns:
        ConcentrationProfile ordered by increasing depth.

    Raises:
        InvalidParameter: D <= 0, L <= 0, C0 < 0 or t < 0 (or any non-finite value).
        InvalidConfiguration: sample_count < 2 or series_terms < 1.
    """
    parameters = SimulationParameters(
        diffusivity=diffusivity,
        thickness=thickness,
        surface_concentration=surface_concentration,
    )
    check_non_negative("t", time)
    evaluator = ProfileEvaluator(parameters, sample_count=sample_count, series_terms=series_terms)
    return evaluator.evaluate(time)


def plot_profiles(profiles: Sequence[ConcentrationProfile], show: bool = True) -> Figure:
    """
    Plot one or more profiles, concentration against depth in micrometres.

    Args:
        profiles: Profiles to draw, one line each.
        show: Call plt.show() after drawing.

    Returns:
        The matplotlib figure.
    """
    # Plotting is optional, keep pyplot out of the evaluator's import
    import matplotlib.pyplot as plt

    plt.rcParams["figure.constrained_layout.use"] = True
    fig = plt.figure(figsize=(7, 5))

    for profile in profiles:
        plt.plot(profile.depths_um, profile.concentrations, lw=2, label=format_time(profile.time))

    plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    plt.minorticks_on()
    plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

    plt.title("Concentration profile vs depth")
    plt.xlabel("Depth (µm)")
    plt.ylabel("Concentration (a.u.)")

    if profiles:
        top = max(profile.parameters.surface_concentration for profile in profiles)
        plt.ylim(0.0, top if top > 0.0 else 1.0)
        plt.legend()

    if show:
        plt.show()
    return fig
