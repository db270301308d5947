"""Orbit domain models.

This module provides:
- OrbitalParameters: Validated, immutable description of a drawn ellipse
- PlanetState: Per-tick snapshot of a simulated planet
- SCALE_CONSTANT: Radians of phase per unit time per unit speed multiplier

The orbit is a parametric ellipse centred on the star with a constant
angular speed. It is a visual approximation, not a Kepler solver.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from exodiscover.errors import InvalidParameterError

TWO_PI = 2.0 * math.pi

# Phase advanced per unit of simulated time at speed multiplier 1.0.
SCALE_CONSTANT = 0.01


def _require_finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameterError(name, value, "a finite number")
    return value


@dataclass(frozen=True)
class OrbitalParameters:
    """Immutable orbit description.

    Attributes:
        semi_major_axis: Long radius of the ellipse (> 0, arbitrary unit)
        eccentricity: Ellipse eccentricity (0 <= e < 1)
        angular_speed: Radians per unit simulated time (> 0)
    """

    semi_major_axis: float
    eccentricity: float
    angular_speed: float

    def __post_init__(self) -> None:
        a = _require_finite("semi_major_axis", self.semi_major_axis)
        e = _require_finite("eccentricity", self.eccentricity)
        w = _require_finite("angular_speed", self.angular_speed)
        if a <= 0:
            raise InvalidParameterError("semi_major_axis", a, "> 0")
        if not 0.0 <= e < 1.0:
            raise InvalidParameterError("eccentricity", e, "0 <= eccentricity < 1")
        if w <= 0:
            raise InvalidParameterError("angular_speed", w, "> 0")
        object.__setattr__(self, "semi_major_axis", a)
        object.__setattr__(self, "eccentricity", e)
        object.__setattr__(self, "angular_speed", w)

    @classmethod
    def from_speed(
        cls,
        semi_major_axis: float,
        speed_multiplier: float,
        eccentricity: float = 0.05,
    ) -> OrbitalParameters:
        """Build parameters from a UI speed multiplier."""
        speed = _require_finite("speed_multiplier", speed_multiplier)
        if speed <= 0:
            raise InvalidParameterError("speed_multiplier", speed, "> 0")
        return cls(
            semi_major_axis=semi_major_axis,
            eccentricity=eccentricity,
            angular_speed=speed * SCALE_CONSTANT,
        )

    @property
    def semi_minor_axis(self) -> float:
        """Short radius, a * sqrt(1 - e^2)."""
        return self.semi_major_axis * math.sqrt(1.0 - self.eccentricity**2)

    @property
    def speed_multiplier(self) -> float:
        return self.angular_speed / SCALE_CONSTANT

    @property
    def period(self) -> float:
        """Simulated time for one full revolution."""
        return TWO_PI / self.angular_speed

    def with_speed(self, speed_multiplier: float) -> OrbitalParameters:
        """Return a copy of this orbit running at a different speed."""
        return OrbitalParameters.from_speed(
            self.semi_major_axis, speed_multiplier, self.eccentricity
        )


@dataclass(frozen=True)
class PlanetState:
    """Snapshot of a simulated planet at one tick.

    Position is derived from the phase and orbit every tick and is never
    stored by the owning session.

    Attributes:
        phase_angle: Angular position in [0, 2*pi)
        time: Simulated time accumulated by the session
        x: Horizontal offset from the star
        y: Vertical offset from the star
    """

    phase_angle: float
    time: float
    x: float
    y: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def phase_fraction(self) -> float:
        """Fraction of the orbit completed, in [0, 1)."""
        return self.phase_angle / TWO_PI
