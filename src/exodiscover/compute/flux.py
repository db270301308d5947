"""Synthetic transit light curve generation.

This module provides:
- generate_light_curve: Uniform-noise baseline with an optional half-ellipse dip
- TransitScenario: Parameter bundle with the demo's defaults
- generate_scenario: Run the generator for a scenario
- generate_pair: Transit and no-transit curves for side-by-side display

The dip is symmetric and limb-darkening free: inside the window
``|i - mid| < duration / 2`` flux drops by ``depth * sqrt(1 - phase^2)``
where ``phase = (i - mid) / (duration / 2)`` and ``mid = sample_count / 2``.
For an odd ``sample_count`` the centre falls between samples ``n // 2`` and
``n // 2 + 1``; the dip is symmetric about that half index and its sampled
minimum stays slightly above ``1 - depth``.

Noise comes from an injected ``numpy.random.Generator``; pass a seeded one
(or an integer seed) for reproducible output. With ``noise_amplitude == 0``
no random numbers are drawn and off-transit flux is exactly 1.0.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from exodiscover.domain.lightcurve import LightCurveSeries
from exodiscover.errors import InvalidParameterError

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = logging.getLogger(__name__)

RandomSource = np.random.Generator | int | None


def resolve_rng(rng: RandomSource) -> np.random.Generator:
    """Return ``rng`` itself, a generator seeded with it, or a fresh generator."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def _require_integer(name: str, value: object) -> None:
    if isinstance(value, (bool, np.bool_)):
        raise InvalidParameterError(name, value, "an integer")
    if isinstance(value, (int, np.integer)):
        return
    if isinstance(value, (float, np.floating)) and math.isfinite(value) and float(value).is_integer():
        return
    raise InvalidParameterError(name, value, "an integer")


def validate_generator_inputs(
    sample_count: int,
    cadence: float,
    transit_depth: float,
    transit_duration_samples: int,
    noise_amplitude: float,
) -> None:
    """Check every generator constraint.

    Raises:
        InvalidParameterError: On the first violated constraint.
    """
    _require_integer("sample_count", sample_count)
    if sample_count <= 0:
        raise InvalidParameterError("sample_count", sample_count, "> 0")
    if not math.isfinite(cadence) or cadence <= 0:
        raise InvalidParameterError("cadence", cadence, "> 0")
    if not math.isfinite(transit_depth) or not 0.0 <= transit_depth < 1.0:
        raise InvalidParameterError("transit_depth", transit_depth, "0 <= transit_depth < 1")
    _require_integer("transit_duration_samples", transit_duration_samples)
    if not 0 <= transit_duration_samples < sample_count:
        raise InvalidParameterError(
            "transit_duration_samples",
            transit_duration_samples,
            f"0 <= transit_duration_samples < sample_count ({sample_count})",
        )
    if not math.isfinite(noise_amplitude) or noise_amplitude < 0:
        raise InvalidParameterError("noise_amplitude", noise_amplitude, ">= 0")


def transit_profile(
    sample_count: int,
    transit_depth: float,
    transit_duration_samples: int,
) -> NDArray[np.float64]:
    """Noise-free dip to subtract from the baseline (zeros outside the window)."""
    dip = np.zeros(sample_count, dtype=np.float64)
    if transit_duration_samples == 0 or transit_depth == 0.0:
        return dip

    mid = sample_count / 2
    half_width = transit_duration_samples / 2
    phase = (np.arange(sample_count, dtype=np.float64) - mid) / half_width
    in_transit = np.abs(phase) < 1.0
    dip[in_transit] = transit_depth * np.sqrt(1.0 - phase[in_transit] ** 2)
    return dip


def generate_light_curve(
    sample_count: int,
    cadence: float,
    transit_depth: float,
    transit_duration_samples: int,
    noise_amplitude: float,
    inject_transit: bool,
    *,
    rng: RandomSource = None,
) -> LightCurveSeries:
    """Generate a synthetic normalized light curve.

    Args:
        sample_count: Number of samples (> 0)
        cadence: Spacing between samples in days (> 0)
        transit_depth: Fractional dip at mid-transit (0 <= depth < 1)
        transit_duration_samples: Transit width in samples (< sample_count)
        noise_amplitude: Peak-to-peak width of the uniform noise (>= 0)
        inject_transit: Whether to add the dip
        rng: numpy Generator or integer seed for the noise

    Returns:
        LightCurveSeries with exactly ``sample_count`` samples.

    Raises:
        InvalidParameterError: If any constraint is violated. Raised before
            any sample is generated.

    Example:
        >>> lc = generate_light_curve(1000, 0.02, 0.01, 30, 0.0, True)
        >>> round(lc.flux[500], 6)
        0.99
    """
    validate_generator_inputs(
        sample_count, cadence, transit_depth, transit_duration_samples, noise_amplitude
    )
    sample_count = int(sample_count)
    transit_duration_samples = int(transit_duration_samples)

    time = np.arange(sample_count, dtype=np.float64) * float(cadence)
    flux = np.ones(sample_count, dtype=np.float64)

    if noise_amplitude > 0:
        generator = resolve_rng(rng)
        half = noise_amplitude / 2.0
        flux += generator.uniform(-half, half, size=sample_count)

    if inject_transit:
        flux -= transit_profile(sample_count, transit_depth, transit_duration_samples)

    error = np.full(sample_count, float(noise_amplitude), dtype=np.float64)

    logger.debug(
        "Generated light curve: n=%d cadence=%g depth=%g duration=%d noise=%g transit=%s",
        sample_count,
        cadence,
        transit_depth,
        transit_duration_samples,
        noise_amplitude,
        inject_transit,
    )
    return LightCurveSeries(time=time, flux=flux, error=error)


class TransitScenario(BaseModel):
    """Generator inputs for one chart.

    Defaults reproduce the demo light curve: 1000 points at a 0.02 day
    cadence with a 1% dip 30 samples wide and 0.001 noise.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sample_count: int = Field(default=1000)
    cadence: float = Field(default=0.02)
    transit_depth: float = Field(default=0.01)
    transit_duration_samples: int = Field(default=30)
    noise_amplitude: float = Field(default=0.001)
    inject_transit: bool = True

    @property
    def mid_index(self) -> int:
        return self.sample_count // 2

    @property
    def duration_days(self) -> float:
        return self.transit_duration_samples * self.cadence


def generate_scenario(scenario: TransitScenario, *, rng: RandomSource = None) -> LightCurveSeries:
    """Run generate_light_curve with the values in ``scenario``."""
    return generate_light_curve(
        scenario.sample_count,
        scenario.cadence,
        scenario.transit_depth,
        scenario.transit_duration_samples,
        scenario.noise_amplitude,
        scenario.inject_transit,
        rng=rng,
    )


def generate_pair(
    scenario: TransitScenario | None = None, *, rng: RandomSource = None
) -> tuple[LightCurveSeries, LightCurveSeries]:
    """Return (with_transit, without_transit) curves drawn from one generator."""
    scenario = scenario or TransitScenario()
    generator = resolve_rng(rng)
    with_transit = generate_scenario(
        scenario.model_copy(update={"inject_transit": True}), rng=generator
    )
    baseline = generate_scenario(
        scenario.model_copy(update={"inject_transit": False}), rng=generator
    )
    return with_transit, baseline


__all__ = [
    "RandomSource",
    "resolve_rng",
    "validate_generator_inputs",
    "transit_profile",
    "generate_light_curve",
    "TransitScenario",
    "generate_scenario",
    "generate_pair",
]
