"""Light curve domain models.

This module provides:
- LightCurveSample: One (time, flux, error) point as handed to chart components
- LightCurveSeries: Immutable ordered sequence of samples backed by numpy arrays
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, overload

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray


@dataclass(frozen=True)
class LightCurveSample:
    """Single light curve point.

    Attributes:
        time: Time in days
        flux: Normalized flux (1.0 is the undimmed baseline)
        error: Noise amplitude attached to the point
    """

    time: float
    flux: float
    error: float

    def to_dict(self) -> dict[str, float]:
        return {"time": self.time, "flux": self.flux, "error": self.error}


@dataclass(frozen=True)
class LightCurveSeries:
    """Ordered, read-only light curve.

    The arrays are made non-writeable on construction. A series is never
    edited in place; regenerate or slice to get a new one.

    Attributes:
        time: Sample times in days (float64, strictly increasing)
        flux: Normalized flux values (float64)
        error: Per-sample noise amplitude (float64)
    """

    time: NDArray[np.float64]
    flux: NDArray[np.float64]
    error: NDArray[np.float64]

    def __post_init__(self) -> None:
        """Validate array dtypes and shapes, then make arrays immutable."""
        arrays: dict[str, np.ndarray[Any, Any]] = {
            "time": self.time,
            "flux": self.flux,
            "error": self.error,
        }
        for name, arr in arrays.items():
            if not isinstance(arr, np.ndarray):
                raise TypeError(f"{name} must be a numpy array, got {type(arr).__name__}")
            if arr.dtype != np.float64:
                raise ValueError(f"{name} must be float64, got {arr.dtype}")
            if arr.ndim != 1:
                raise ValueError(f"{name} must be one-dimensional, got shape {arr.shape}")

        n = len(self.time)
        if len(self.flux) != n:
            raise ValueError(f"flux length {len(self.flux)} != time length {n}")
        if len(self.error) != n:
            raise ValueError(f"error length {len(self.error)} != time length {n}")

        for arr in arrays.values():
            arr.flags.writeable = False

    def __len__(self) -> int:
        return len(self.time)

    def __iter__(self) -> Iterator[LightCurveSample]:
        for i in range(len(self)):
            yield self._sample(i)

    @overload
    def __getitem__(self, index: int) -> LightCurveSample: ...

    @overload
    def __getitem__(self, index: slice) -> LightCurveSeries: ...

    def __getitem__(self, index: int | slice) -> LightCurveSample | LightCurveSeries:
        if isinstance(index, slice):
            return LightCurveSeries(
                time=self.time[index].copy(),
                flux=self.flux[index].copy(),
                error=self.error[index].copy(),
            )
        n = len(self)
        i = int(index)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError(f"sample index {index} out of range for {n} samples")
        return self._sample(i)

    def _sample(self, i: int) -> LightCurveSample:
        return LightCurveSample(
            time=float(self.time[i]),
            flux=float(self.flux[i]),
            error=float(self.error[i]),
        )

    @property
    def cadence(self) -> float:
        """Spacing between consecutive samples in days (nan if fewer than two)."""
        if len(self) < 2:
            return float("nan")
        return float(self.time[1] - self.time[0])

    @property
    def duration_days(self) -> float:
        if len(self) == 0:
            return 0.0
        return float(self.time[-1] - self.time[0])

    @property
    def min_flux(self) -> float:
        return float(np.min(self.flux)) if len(self) else float("nan")

    def window(self, start: int, stop: int) -> LightCurveSeries:
        """Return samples ``start`` (inclusive) to ``stop`` (exclusive)."""
        return self[start:stop]

    def to_records(self) -> list[dict[str, float]]:
        """List of ``{"time", "flux", "error"}`` dicts for chart components."""
        return [sample.to_dict() for sample in self]
