"""Pytest configuration.

Makes the ``src`` layout importable without installing the package, forces a
non-interactive matplotlib backend and provides a Qt core application for the
driver tests.
"""

import os
import sys

import matplotlib
import pytest

# Project root = parent directory of this tests/ folder
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
SRC_PATH = os.path.join(PROJECT_ROOT, "src")

if SRC_PATH not in sys.path:
    sys.path.insert(0, SRC_PATH)

matplotlib.use("Agg")


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance() or QCoreApplication([])
    yield app
