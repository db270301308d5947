"""Runtime defaults for simulations and rendering.

Defaults mirror the demo interface's hardcoded values. Each field can be
overridden with an ``EXODISCOVER_*`` environment variable; unparsable or
out-of-range overrides fall back to the default instead of failing import.

Example:
    >>> cfg = load_config()
    >>> cfg.default_speed
    1.0
"""

from __future__ import annotations

import logging
import math
import os

from pydantic import BaseModel, ConfigDict, Field, model_validator

logger = logging.getLogger(__name__)

ENV_PREFIX = "EXODISCOVER_"


class SimulationConfig(BaseModel):
    """Immutable bundle of simulation and display defaults.

    Attributes:
        default_speed: Speed multiplier a new session starts with.
        min_speed: Lower bound accepted by the speed control.
        max_speed: Upper bound accepted by the speed control.
        eccentricity: Orbit eccentricity used for every planet.
        axis_fraction: Semi-major axis as a fraction of the shorter canvas side.
        frame_interval_seconds: Delay between animation ticks.
        trail_points: Number of points in the orbital trail.
        trail_step: Phase step (radians) between trail points.
        log_level: Logging level name used by the CLI.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    default_speed: float = Field(default=1.0, gt=0)
    min_speed: float = Field(default=0.1, gt=0)
    max_speed: float = Field(default=5.0, gt=0)
    eccentricity: float = Field(default=0.05, ge=0, lt=1)
    axis_fraction: float = Field(default=0.3, gt=0, le=0.5)
    frame_interval_seconds: float = Field(default=1.0 / 60.0, gt=0)
    trail_points: int = Field(default=50, ge=0)
    trail_step: float = Field(default=0.1, gt=0)
    log_level: str = "WARNING"

    @model_validator(mode="after")
    def _check_speed_bounds(self) -> SimulationConfig:
        if not self.min_speed <= self.default_speed <= self.max_speed:
            raise ValueError(
                f"default_speed {self.default_speed} outside "
                f"[{self.min_speed}, {self.max_speed}]"
            )
        return self


_FLOAT_FIELDS = (
    "default_speed",
    "min_speed",
    "max_speed",
    "eccentricity",
    "axis_fraction",
    "frame_interval_seconds",
    "trail_step",
)


def _env_float(name: str) -> float | None:
    raw = os.getenv(ENV_PREFIX + name.upper())
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring unparsable %s%s=%r", ENV_PREFIX, name.upper(), raw)
        return None
    if not math.isfinite(value):
        logger.warning("Ignoring non-finite %s%s=%r", ENV_PREFIX, name.upper(), raw)
        return None
    return value


def _env_int(name: str) -> int | None:
    raw = os.getenv(ENV_PREFIX + name.upper())
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring unparsable %s%s=%r", ENV_PREFIX, name.upper(), raw)
        return None


def load_config() -> SimulationConfig:
    """Build a SimulationConfig from defaults plus environment overrides.

    Returns:
        The resolved configuration. If the overrides combine into an invalid
        configuration, the defaults are returned and a warning is logged.
    """
    overrides: dict[str, object] = {}
    for name in _FLOAT_FIELDS:
        value = _env_float(name)
        if value is not None:
            overrides[name] = value

    trail_points = _env_int("trail_points")
    if trail_points is not None:
        overrides["trail_points"] = trail_points

    log_level = os.getenv(ENV_PREFIX + "LOG_LEVEL")
    if log_level:
        overrides["log_level"] = log_level.upper()

    try:
        return SimulationConfig(**overrides)
    except ValueError as exc:
        logger.warning("Invalid EXODISCOVER_* overrides, using defaults: %s", exc)
        return SimulationConfig()


DEFAULT_CONFIG = SimulationConfig()

__all__ = ["ENV_PREFIX", "SimulationConfig", "load_config", "DEFAULT_CONFIG"]
