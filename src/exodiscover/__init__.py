"""exodiscover: orbit and transit kinematics for exoplanet visualisation.

Layers:
- domain: immutable orbit, light curve and planet models
- compute: pure ephemeris, flux, transit and spectrum functions
- simulation: session state, schedulers and the frame compositor
- plotting: optional matplotlib rendering (``pip install 'exodiscover[plotting]'``)
"""

from __future__ import annotations

__version__ = "0.1.0"

from exodiscover.compute.ephemeris import position
from exodiscover.compute.flux import generate_light_curve
from exodiscover.domain.lightcurve import LightCurveSample, LightCurveSeries
from exodiscover.domain.orbit import OrbitalParameters, PlanetState
from exodiscover.domain.planet import ExoplanetRecord
from exodiscover.errors import InvalidParameterError, MissingOptionalDependencyError
from exodiscover.simulation import ManualScheduler, SimulationSession

__all__ = [
    "__version__",
    "position",
    "generate_light_curve",
    "LightCurveSample",
    "LightCurveSeries",
    "OrbitalParameters",
    "PlanetState",
    "ExoplanetRecord",
    "InvalidParameterError",
    "MissingOptionalDependencyError",
    "SimulationSession",
    "ManualScheduler",
]
