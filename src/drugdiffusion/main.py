"""
Command-line Entry Point
========================
Evaluates the concentration profile at one or more times and prints it as a
depth / concentration table, optionally plotting it.

Usage:
    $ python -m drugdiffusion --time 0 --time 600 --time 3600 --plot
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from drugdiffusion.analysis import DiffusionError, ProfileEvaluator, SimulationParameters, plot_profiles
from drugdiffusion.config import (
    DEFAULT_DIFFUSIVITY, DEFAULT_THICKNESS, DEFAULT_SURFACE_CONCENTRATION,
    DEFAULT_SAMPLE_COUNT, DEFAULT_SERIES_TERMS, DEFAULT_HORIZON
)
from drugdiffusion.logging_config import setup_logging
from drugdiffusion.utils import format_time, metres_to_micrometres, micrometres_to_metres

logger = logging.getLogger(__name__)

EXIT_INVALID_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drugdiffusion",
        description="Drug diffusion through a tissue slab (1D, Fick's 2nd law, series solution).",
    )
    parser.add_argument("--diffusivity", "-D", type=float, default=DEFAULT_DIFFUSIVITY,
                        help="diffusion coefficient in m^2/s (default: %(default)g)")
    parser.add_argument("--thickness-um", "-L", type=float,
                        default=metres_to_micrometres(DEFAULT_THICKNESS),
                        help="tissue thickness in micrometres (default: %(default)g)")
    parser.add_argument("--surface-concentration", "-C", type=float,
                        default=DEFAULT_SURFACE_CONCENTRATION,
                        help="surface concentration in a.u. (default: %(default)g)")
    parser.add_argument("--time", "-t", type=float, action="append", dest="times",
                        help="simulated time in seconds, may be repeated "
                             f"(default: 0 and {DEFAULT_HORIZON:g})")
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLE_COUNT,
                        help="number of depth samples (default: %(default)d)")
    parser.add_argument("--terms", type=int, default=DEFAULT_SERIES_TERMS,
                        help="number of series terms (default: %(default)d)")
    parser.add_argument("--every", type=int, default=10,
                        help="print every n-th sample (default: %(default)d)")
    parser.add_argument("--plot", action="store_true", help="plot the profiles with matplotlib")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None, help="also write logs to this file")
    return parser


def format_table(profile, every: int = 1) -> str:
    """Render a profile as a two-column text table (depth in µm)."""
    lines = [f"# t = {format_time(profile.time)}", f"{'depth (um)':>12}  {'concentration':>14}"]
    last = len(profile) - 1
    for index, (depth, concentration) in enumerate(profile):
        # Always include the far end of the slab
        if index % every == 0 or index == last:
            lines.append(f"{metres_to_micrometres(depth):12.2f}  {concentration:14.6f}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, log_file=args.log_file)

    times = args.times if args.times else [0.0, DEFAULT_HORIZON]
    every = max(args.every, 1)

    try:
        parameters = SimulationParameters(
            diffusivity=args.diffusivity,
            thickness=micrometres_to_metres(args.thickness_um),
            surface_concentration=args.surface_concentration,
        )
        evaluator = ProfileEvaluator(parameters, sample_count=args.samples, series_terms=args.terms)
        profiles = [evaluator.evaluate(t) for t in times]
    except DiffusionError as e:
        logger.error(f"Invalid input: {e}")
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT

    logger.info(
        f"Evaluated {len(profiles)} profile(s), Fourier numbers: "
        + ", ".join(f"{parameters.fourier_number(t):.3g}" for t in times)
    )

    print("\n\n".join(format_table(profile, every=every) for profile in profiles))

    if args.plot:
        plot_profiles(profiles)

    return 0


if __name__ == "__main__":
    sys.exit(main())
