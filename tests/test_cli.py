from __future__ import annotations

import logging

import pytest

from drugdiffusion.analysis import evaluate_profile
from drugdiffusion.main import EXIT_INVALID_INPUT, format_table, main


@pytest.fixture(autouse=True)
def _detach_handlers():
    yield
    logger = logging.getLogger("drugdiffusion")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_default_run_prints_two_tables(capsys) -> None:
    assert main([]) == 0

    out = capsys.readouterr().out
    assert "# t = 0 s (0.0 min)" in out
    assert "# t = 3600 s (60.0 min)" in out


def test_requested_times_and_every(capsys) -> None:
    assert main(["--time", "600", "--samples", "21", "--every", "10"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "# t = 600 s (10.0 min)"
    # header + depths 0, 100, 200 um
    assert len(lines) == 2 + 3
    assert lines[-1].split()[0] == "200.00"


def test_invalid_input_exit_status(capsys) -> None:
    assert main(["--diffusivity=-1"]) == EXIT_INVALID_INPUT
    assert "D" in capsys.readouterr().err


def test_invalid_terms_exit_status(capsys) -> None:
    assert main(["--terms", "0"]) == EXIT_INVALID_INPUT
    assert "series_terms" in capsys.readouterr().err


def test_plot_flag(monkeypatch, capsys) -> None:
    import matplotlib.pyplot as plt

    shown = []
    monkeypatch.setattr(plt, "show", lambda: shown.append(True))

    assert main(["--time", "60", "--plot"]) == 0
    assert shown == [True]
    plt.close("all")


def test_format_table_includes_last_sample() -> None:
    profile = evaluate_profile(1e-10, 200e-6, 1.0, 60.0, sample_count=5)
    table = format_table(profile, every=3)

    rows = table.splitlines()[2:]
    assert [row.split()[0] for row in rows] == ["0.00", "150.00", "200.00"]
