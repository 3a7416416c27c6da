from __future__ import annotations

import logging

import pytest

from drugdiffusion import config
from drugdiffusion.analysis import InvalidParameter
from drugdiffusion.logging_config import setup_logging
from drugdiffusion.model.state import SimulationState
from drugdiffusion.utils import format_time, metres_to_micrometres, micrometres_to_metres


def test_parameter_range_clamp() -> None:
    rng = config.ParameterRange(minimum=0.5, maximum=2.0, step=0.1)
    assert rng.clamp(0.1) == 0.5
    assert rng.clamp(3.0) == 2.0
    assert rng.clamp(1.2) == 1.2
    assert rng.contains(2.0)
    assert not rng.contains(2.1)


def test_defaults_inside_ranges() -> None:
    state = SimulationState()
    for name in ("diffusivity", "thickness", "surface_concentration", "sample_count", "series_terms"):
        assert config.PARAMETER_RANGES[name].contains(getattr(state, name)), name


def test_state_parameters_snapshot() -> None:
    state = SimulationState()
    parameters = state.parameters()
    assert parameters.diffusivity == config.DEFAULT_DIFFUSIVITY
    assert parameters.thickness == config.DEFAULT_THICKNESS
    assert parameters.surface_concentration == config.DEFAULT_SURFACE_CONCENTRATION

    # Later edits do not leak into an existing snapshot
    state.thickness = 500e-6
    assert parameters.thickness == config.DEFAULT_THICKNESS


def test_invalid_state_raises() -> None:
    state = SimulationState(thickness=0.0)
    with pytest.raises(InvalidParameter):
        state.parameters()


def test_clamped_makes_ui_values_valid() -> None:
    state = SimulationState(
        diffusivity=-1.0, thickness=5.0, surface_concentration=-2.0, sample_count=1, series_terms=10_000
    )

    clamped = state.clamped()

    assert clamped.diffusivity == 1e-12
    assert clamped.thickness == pytest.approx(1000e-6)
    assert clamped.surface_concentration == 0.5
    assert clamped.sample_count == 2
    assert clamped.series_terms == 200
    clamped.parameters()
    # Original untouched
    assert state.diffusivity == -1.0


def test_reset_restores_defaults() -> None:
    state = SimulationState(diffusivity=5e-10, series_terms=3)
    state.reset()
    assert state == SimulationState()


def test_unit_helpers() -> None:
    assert metres_to_micrometres(200e-6) == pytest.approx(200.0)
    assert micrometres_to_metres(50.0) == pytest.approx(50e-6)
    assert format_time(150.0) == "150 s (2.5 min)"
    assert format_time(0.0) == "0 s (0.0 min)"


def test_setup_logging_replaces_handlers(tmp_path) -> None:
    log_file = tmp_path / "run.log"

    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    setup_logging(level=logging.DEBUG, log_file=str(log_file))

    logger = logging.getLogger("drugdiffusion")
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    logging.getLogger("drugdiffusion.test").info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_parameter_range_clamp_nan_maps_to_minimum() -> None:
    rng = config.ParameterRange(minimum=0.5, maximum=2.0, step=0.1)
    assert rng.clamp(float("nan")) == 0.5
    assert rng.clamp(float("inf")) == 2.0
    assert rng.clamp(float("-inf")) == 0.5


def test_clamped_replaces_nan_fields() -> None:
    nan = float("nan")
    state = SimulationState(
        diffusivity=nan, thickness=nan, surface_concentration=nan, sample_count=nan, series_terms=nan
    )

    clamped = state.clamped()

    assert clamped.diffusivity == config.PARAMETER_RANGES["diffusivity"].minimum
    assert clamped.thickness == config.PARAMETER_RANGES["thickness"].minimum
    assert clamped.surface_concentration == config.PARAMETER_RANGES["surface_concentration"].minimum
    assert clamped.sample_count == 2
    assert clamped.series_terms == 1
    clamped.parameters()


def test_setup_logging_accepts_level_name(caplog) -> None:
    caplog.set_level(logging.INFO, logger="drugdiffusion")

    logger = setup_logging("debug")

    assert logger is logging.getLogger("drugdiffusion")
    assert logger.level == logging.DEBUG
    assert "Logging initialized at DEBUG." in caplog.text

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        setup_logging("LOUD")
