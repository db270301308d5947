"""Planet record and display metadata models.

This module provides:
- ExoplanetRecord: A candidate planet as reported by the (mock) analysis
- ConfidenceClass: Confirmed / candidate / false-positive bucket
- PlanetAppearance: Radius, colour class and label handed to a drawing surface
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


Confidence = Annotated[float, Field(ge=0, le=1, description="Detection confidence")]
RadiusEarth = Annotated[float, Field(gt=0, description="Planet radius, in Earth radii")]
PeriodDays = Annotated[float, Field(gt=0, description="Orbital period, in days")]


class ConfidenceClass(str, Enum):
    """Bucket a record falls into by confidence."""

    CONFIRMED = "confirmed"  # > 0.8
    CANDIDATE = "candidate"  # 0.6 to 0.8 inclusive
    FALSE_POSITIVE = "false_positive"  # < 0.6


class ColorClass(str, Enum):
    """Colour family used to draw a planet."""

    ROCKY = "rocky"
    SUPER_EARTH = "super_earth"
    GAS_GIANT = "gas_giant"
    ICE_GIANT = "ice_giant"
    DEFAULT = "default"


# Hex colours matching the demo interface palette.
COLOR_HEX: dict[ColorClass, str] = {
    ColorClass.ROCKY: "#ef4444",
    ColorClass.SUPER_EARTH: "#10b981",
    ColorClass.GAS_GIANT: "#f59e0b",
    ColorClass.ICE_GIANT: "#06b6d4",
    ColorClass.DEFAULT: "#4f46e5",
}

_TYPE_COLORS: dict[str, ColorClass] = {
    "Rocky Planet": ColorClass.ROCKY,
    "Terrestrial": ColorClass.ROCKY,
    "Super Earth": ColorClass.SUPER_EARTH,
    "Gas Giant": ColorClass.GAS_GIANT,
    "Ice Giant": ColorClass.ICE_GIANT,
}

MIN_DRAW_RADIUS = 5.0
DRAW_RADIUS_SCALE = 8.0


class PlanetAppearance(FrozenModel):
    """Drawable metadata for one planet."""

    label: str
    radius_px: float = Field(gt=0)
    color_class: ColorClass
    halo: bool = False

    @property
    def color(self) -> str:
        return COLOR_HEX[self.color_class]


class ExoplanetRecord(FrozenModel):
    """A planet candidate.

    The derived mass/gravity/escape-velocity values are the same rough
    radius scalings the demo panels display; they are not physical fits.
    """

    id: str
    name: str
    confidence: Confidence
    planet_type: str
    radius: RadiusEarth
    orbital_period: PeriodDays
    temperature: float = Field(gt=0, description="Equilibrium temperature, in K")
    habitable_zone: bool = False
    detection_method: str = "Transit"
    stellar_magnitude: float

    @property
    def confidence_class(self) -> ConfidenceClass:
        if self.confidence > 0.8:
            return ConfidenceClass.CONFIRMED
        if self.confidence >= 0.6:
            return ConfidenceClass.CANDIDATE
        return ConfidenceClass.FALSE_POSITIVE

    @property
    def mass_earth(self) -> float:
        return self.radius**3 * 1.2

    @property
    def surface_gravity(self) -> float:
        """m/s^2"""
        return self.radius * 9.8

    @property
    def escape_velocity(self) -> float:
        """km/s"""
        return self.radius * 11.2

    def appearance(self) -> PlanetAppearance:
        return PlanetAppearance(
            label=self.name,
            radius_px=max(MIN_DRAW_RADIUS, self.radius * DRAW_RADIUS_SCALE),
            color_class=_TYPE_COLORS.get(self.planet_type, ColorClass.DEFAULT),
            halo=self.habitable_zone,
        )
