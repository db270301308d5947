"""Ephemeris calculations for the drawn orbit.

This module provides pure numpy-based functions for planet kinematics:
- position: Closed-form (x, y) offset from the star for a time and speed
- phase_angle: Wrapped orbital phase for a time and speed
- position_at_phase: (x, y) for an explicit phase on a given orbit
- trail: Points behind the planet used for the fading orbital trail
- orbit_outline: Closed polyline of the full ellipse
- state_at: PlanetState snapshot for a time on a given orbit

The model is a parametric ellipse with constant angular speed. There is no
equal-areas correction for eccentricity, so it is only physically accurate
near e = 0.

All functions accept scalar or array times and are safe to call every frame.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, overload

import numpy as np

from exodiscover.domain.orbit import SCALE_CONSTANT, TWO_PI, OrbitalParameters, PlanetState
from exodiscover.errors import InvalidParameterError

if TYPE_CHECKING:
    from numpy.typing import ArrayLike, NDArray


def semi_minor_axis(semi_major_axis: float, eccentricity: float) -> float:
    """Return a * sqrt(1 - e^2)."""
    return float(semi_major_axis) * math.sqrt(1.0 - float(eccentricity) ** 2)


def orbital_period(speed_multiplier: float) -> float:
    """Simulated time for one revolution at the given speed multiplier."""
    return TWO_PI / (float(speed_multiplier) * SCALE_CONSTANT)


def validate_position_inputs(
    time: ArrayLike,
    speed_multiplier: float,
    axis_length: float,
    eccentricity: float,
) -> None:
    """Check the position() input domain.

    Raises:
        InvalidParameterError: If any constraint is violated.
    """
    t = np.asarray(time, dtype=np.float64)
    if not np.all(np.isfinite(t)) or np.any(t < 0):
        raise InvalidParameterError("time", time, "finite and >= 0")
    if not math.isfinite(speed_multiplier) or speed_multiplier <= 0:
        raise InvalidParameterError("speed_multiplier", speed_multiplier, "> 0")
    if not math.isfinite(axis_length) or axis_length <= 0:
        raise InvalidParameterError("axis_length", axis_length, "> 0")
    if not (math.isfinite(eccentricity) and 0.0 <= eccentricity < 1.0):
        raise InvalidParameterError("eccentricity", eccentricity, "0 <= eccentricity < 1")


@overload
def phase_angle(time: float, speed_multiplier: float) -> float: ...


@overload
def phase_angle(time: NDArray[np.float64], speed_multiplier: float) -> NDArray[np.float64]: ...


def phase_angle(
    time: float | NDArray[np.float64], speed_multiplier: float
) -> float | NDArray[np.float64]:
    """Wrapped phase: (time * speed_multiplier * SCALE_CONSTANT) mod 2*pi.

    Example:
        >>> phase_angle(0.0, 1.0)
        0.0
    """
    phase = np.mod(np.asarray(time, dtype=np.float64) * speed_multiplier * SCALE_CONSTANT, TWO_PI)
    if phase.ndim == 0:
        return float(phase)
    return phase


def position(
    time: float | NDArray[np.float64],
    speed_multiplier: float,
    axis_length: float,
    eccentricity: float,
    *,
    validate: bool = False,
) -> tuple[float, float] | tuple[NDArray[np.float64], NDArray[np.float64]]:
    """Planet offset from the star.

    Args:
        time: Simulated time (>= 0), scalar or array
        speed_multiplier: UI speed multiplier (> 0)
        axis_length: Semi-major axis (> 0)
        eccentricity: Orbit eccentricity (0 <= e < 1)
        validate: Check the input domain first. Callers that already clamp
            their inputs upstream can skip this.

    Returns:
        Tuple (x, y). Floats for scalar time, arrays for array time.

    Raises:
        InvalidParameterError: Only when validate=True and a constraint fails.

    Example:
        >>> position(0.0, 1.0, 100.0, 0.05)
        (100.0, 0.0)
    """
    if validate:
        validate_position_inputs(time, speed_multiplier, axis_length, eccentricity)

    phase = np.mod(np.asarray(time, dtype=np.float64) * speed_multiplier * SCALE_CONSTANT, TWO_PI)
    b = semi_minor_axis(axis_length, eccentricity)
    x = axis_length * np.cos(phase)
    y = b * np.sin(phase)
    if phase.ndim == 0:
        return float(x), float(y)
    return x, y


def position_at_phase(phase: float, orbit: OrbitalParameters) -> tuple[float, float]:
    """(x, y) for an explicit phase angle on ``orbit``."""
    return (
        orbit.semi_major_axis * math.cos(phase),
        orbit.semi_minor_axis * math.sin(phase),
    )


def phase_fraction(phase: float) -> float:
    """Fraction of the orbit completed, in [0, 1)."""
    return (phase % TWO_PI) / TWO_PI


def trail(
    phase: float,
    orbit: OrbitalParameters,
    n_points: int = 50,
    step: float = 0.1,
) -> NDArray[np.float64]:
    """Points trailing the planet, newest first.

    Point ``i`` sits at ``phase - i * step``, so the first row is the planet
    itself.

    Returns:
        Array of shape (n_points, 2) with x and y columns.
    """
    if n_points < 0:
        raise InvalidParameterError("n_points", n_points, ">= 0")
    angles = phase - np.arange(n_points, dtype=np.float64) * step
    return np.column_stack(
        (orbit.semi_major_axis * np.cos(angles), orbit.semi_minor_axis * np.sin(angles))
    )


def orbit_outline(orbit: OrbitalParameters, n_points: int = 256) -> NDArray[np.float64]:
    """Closed polyline of the whole ellipse (first point repeated at the end)."""
    if n_points < 3:
        raise InvalidParameterError("n_points", n_points, ">= 3")
    angles = np.linspace(0.0, TWO_PI, n_points + 1)
    return np.column_stack(
        (orbit.semi_major_axis * np.cos(angles), orbit.semi_minor_axis * np.sin(angles))
    )


def state_at(time: float, orbit: OrbitalParameters) -> PlanetState:
    """Snapshot for ``time`` using the closed-form phase."""
    phase = float(np.mod(float(time) * orbit.angular_speed, TWO_PI))
    x, y = position_at_phase(phase, orbit)
    return PlanetState(phase_angle=phase, time=float(time), x=x, y=y)


__all__ = [
    "SCALE_CONSTANT",
    "semi_minor_axis",
    "orbital_period",
    "validate_position_inputs",
    "phase_angle",
    "position",
    "position_at_phase",
    "phase_fraction",
    "trail",
    "orbit_outline",
    "state_at",
]
