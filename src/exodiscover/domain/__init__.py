"""Domain models for exodiscover.

This package is domain-only. It excludes scheduling, rendering and other
session-layer concepts.
"""

from exodiscover.domain.lightcurve import LightCurveSample, LightCurveSeries
from exodiscover.domain.orbit import SCALE_CONSTANT, TWO_PI, OrbitalParameters, PlanetState
from exodiscover.domain.planet import (
    COLOR_HEX,
    ColorClass,
    ConfidenceClass,
    ExoplanetRecord,
    PlanetAppearance,
)

__all__ = [
    "SCALE_CONSTANT",
    "TWO_PI",
    "OrbitalParameters",
    "PlanetState",
    "LightCurveSample",
    "LightCurveSeries",
    "ExoplanetRecord",
    "ConfidenceClass",
    "ColorClass",
    "COLOR_HEX",
    "PlanetAppearance",
]
