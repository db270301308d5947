"""Transit measurement on generated light curves.

This module provides pure numpy-based functions for summarising a dip:
- transit_mask: Boolean mask for samples inside the transit window
- measure_depth: Depth from in/out of transit flux
- summarize_transit: Depth, radius ratio and SNR for chart badges
- fold_window: Slice centred on the transit for the zoomed panel

These replace the fixed depth/SNR badges of the demo with values measured
from the series that is actually drawn.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from exodiscover.errors import InvalidParameterError

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from exodiscover.domain.lightcurve import LightCurveSeries

logger = logging.getLogger(__name__)

# Maximum reported SNR; a noiseless curve would otherwise divide by zero
MAX_SNR = 1e6


class TransitSummary(BaseModel):
    """Measured properties of the injected dip.

    Attributes:
        depth: Fractional depth (mean out-of-transit minus mean in-transit)
        depth_err: Uncertainty on depth from the standard errors of the means
        radius_ratio: sqrt(depth), the planet/star radius ratio
        snr: depth * sqrt(n_in_transit) / out-of-transit scatter, capped
        duration_days: Width of the transit window in days
        n_in_transit: Samples inside the window
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    depth: float = Field(ge=0)
    depth_err: float
    radius_ratio: float = Field(ge=0)
    snr: float = Field(ge=0)
    duration_days: float = Field(ge=0)
    n_in_transit: int = Field(ge=0)

    @property
    def depth_percent(self) -> float:
        return self.depth * 100.0


def transit_mask(
    sample_count: int,
    duration_samples: int,
    center_index: float | None = None,
) -> NDArray[np.bool_]:
    """Mask of samples with ``|i - center| < duration / 2``.

    Args:
        sample_count: Length of the series
        duration_samples: Transit width in samples
        center_index: Transit centre; defaults to ``sample_count / 2``

    Returns:
        Boolean array, True for in-transit samples.
    """
    if center_index is None:
        center_index = sample_count / 2
    offsets = np.arange(sample_count, dtype=np.float64) - center_index
    return np.abs(offsets) < duration_samples / 2


def measure_depth(
    flux: NDArray[np.float64],
    in_transit_mask: NDArray[np.bool_],
) -> tuple[float, float]:
    """Measure transit depth from in/out of transit flux.

    Args:
        flux: Normalized flux array (float64, median ~1.0)
        in_transit_mask: Boolean mask where True = in transit

    Returns:
        Tuple of (depth, depth_err).

    Raises:
        InvalidParameterError: If there are no in-transit or no out-of-transit points.
    """
    out_transit_mask = ~in_transit_mask

    n_in = int(np.sum(in_transit_mask))
    n_out = int(np.sum(out_transit_mask))

    if n_in == 0:
        raise InvalidParameterError("in_transit_mask", n_in, "at least one in-transit sample")
    if n_out == 0:
        raise InvalidParameterError("in_transit_mask", n_out, "at least one out-of-transit sample")

    flux_in = flux[in_transit_mask]
    flux_out = flux[out_transit_mask]

    mean_in = float(np.mean(flux_in))
    mean_out = float(np.mean(flux_out))

    depth = (mean_out - mean_in) / mean_out

    std_in = float(np.std(flux_in, ddof=1)) if n_in > 1 else 0.0
    std_out = float(np.std(flux_out, ddof=1)) if n_out > 1 else 0.0
    sem_in = std_in / math.sqrt(n_in)
    sem_out = std_out / math.sqrt(n_out)

    # d(depth)/d(mean_in) = -1/mean_out, d(depth)/d(mean_out) = mean_in/mean_out^2
    depth_err = math.sqrt((sem_in / mean_out) ** 2 + (mean_in * sem_out / mean_out**2) ** 2)
    return float(depth), float(depth_err)


def summarize_transit(
    series: LightCurveSeries,
    duration_samples: int,
    center_index: float | None = None,
) -> TransitSummary:
    """Measure the dip in ``series``.

    Raises:
        InvalidParameterError: If the window leaves no in- or out-of-transit samples.
    """
    mask = transit_mask(len(series), duration_samples, center_index)
    flux = np.asarray(series.flux)
    depth, depth_err = measure_depth(flux, mask)

    if depth < 0:
        logger.warning(
            "Negative transit depth measured (%.6f); reporting 0. "
            "The window probably does not contain the dip.",
            depth,
        )
        depth = 0.0

    n_in = int(np.sum(mask))
    scatter = float(np.std(flux[~mask]))
    if scatter > 1e-15:
        snr = depth * math.sqrt(n_in) / scatter
    else:
        snr = MAX_SNR if depth > 0 else 0.0
    snr = max(0.0, min(snr, MAX_SNR))

    cadence = series.cadence
    duration_days = duration_samples * cadence if math.isfinite(cadence) else 0.0

    return TransitSummary(
        depth=depth,
        depth_err=depth_err,
        radius_ratio=math.sqrt(depth),
        snr=snr,
        duration_days=duration_days,
        n_in_transit=n_in,
    )


def fold_window(series: LightCurveSeries, half_width: int = 50) -> LightCurveSeries:
    """Samples within ``half_width`` of the midpoint (e.g. 450..550 for 1000).

    Raises:
        InvalidParameterError: If half_width is not positive.
    """
    if half_width <= 0:
        raise InvalidParameterError("half_width", half_width, "> 0")
    mid = len(series) // 2
    return series.window(max(0, mid - half_width), min(len(series), mid + half_width))


__all__ = [
    "MAX_SNR",
    "TransitSummary",
    "transit_mask",
    "measure_depth",
    "summarize_transit",
    "fold_window",
]
