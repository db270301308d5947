"""Pytest fixtures for plotting tests.

All tests in this directory require matplotlib, so we skip the entire
module if matplotlib is not available.
"""

from __future__ import annotations

import pytest

# Skip all tests in this directory if matplotlib is not installed
pytest.importorskip("matplotlib")

# Use non-interactive backend for tests
import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt

from exodiscover.catalog import DEMO_PLANETS
from exodiscover.compute.flux import TransitScenario, generate_scenario
from exodiscover.domain.lightcurve import LightCurveSeries
from exodiscover.simulation import ManualScheduler, SimulationSession, compose_frame
from exodiscover.simulation.compositor import Frame


@pytest.fixture
def series() -> LightCurveSeries:
    """Default demo light curve with seeded noise."""
    return generate_scenario(TransitScenario(), rng=42)


@pytest.fixture
def frame() -> Frame:
    """Frame for a habitable-zone planet a few ticks into its orbit."""
    session = SimulationSession.for_canvas(ManualScheduler(), 800, 384, DEMO_PLANETS[0])
    for _ in range(40):
        session.tick()
    return compose_frame(session)


@pytest.fixture(autouse=True)
def close_figures():
    """Automatically close all figures after each test.

    This prevents memory leaks from open figures during test runs.
    """
    yield
    plt.close("all")
