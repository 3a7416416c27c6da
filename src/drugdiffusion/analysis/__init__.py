"""
Profile Evaluator
=================
The core implementation of the drug diffusion analysis.

Why is this file needed?
------------------------
1. Physics: It implements the truncated series solution of Fick's second law
   in a slab with fixed surface concentration.
2. Validation: It rejects out-of-domain inputs before computing anything.

Note: This package should be pure Python/NumPy and should NOT import PySide6.
"""
from drugdiffusion.analysis.errors import DiffusionError, InvalidParameter, InvalidConfiguration
from drugdiffusion.analysis.parameters import SimulationParameters
from drugdiffusion.analysis.profile import (
    ConcentrationProfile, ProfileEvaluator, ProfileSample, evaluate_profile, plot_profiles
)

__all__ = [
    "DiffusionError",
    "InvalidParameter",
    "InvalidConfiguration",
    "SimulationParameters",
    "ConcentrationProfile",
    "ProfileEvaluator",
    "ProfileSample",
    "evaluate_profile",
    "plot_profiles",
]
