"""Mock transmission spectrum for the spectral panel.

Flat unit flux with box-shaped absorption bands at fixed wavelengths plus
uniform noise. This is display data, not a retrieval model.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from exodiscover.compute.flux import RandomSource, resolve_rng
from exodiscover.errors import InvalidParameterError

if TYPE_CHECKING:
    from numpy.typing import NDArray


@dataclass(frozen=True)
class AbsorptionBand:
    molecule: str
    center_um: float
    half_width_um: float
    factor: float


ABSORPTION_BANDS: tuple[AbsorptionBand, ...] = (
    AbsorptionBand("H2O", 1.4, 0.02, 0.85),
    AbsorptionBand("CO2", 2.0, 0.015, 0.90),
    AbsorptionBand("CH4", 3.3, 0.01, 0.92),
    AbsorptionBand("CO2", 4.3, 0.02, 0.88),
)


@dataclass(frozen=True)
class Spectrum:
    """Wavelength grid (microns) with relative flux and percent transmission."""

    wavelength: NDArray[np.float64]
    flux: NDArray[np.float64]

    def __post_init__(self) -> None:
        if len(self.wavelength) != len(self.flux):
            raise ValueError(
                f"flux length {len(self.flux)} != wavelength length {len(self.wavelength)}"
            )
        self.wavelength.flags.writeable = False
        self.flux.flags.writeable = False

    def __len__(self) -> int:
        return len(self.wavelength)

    @property
    def transmission(self) -> NDArray[np.float64]:
        return self.flux * 100.0

    def to_records(self) -> list[dict[str, float]]:
        transmission = self.transmission
        return [
            {
                "wavelength": float(w),
                "flux": float(f),
                "transmission": float(t),
            }
            for w, f, t in zip(self.wavelength, self.flux, transmission)
        ]


def generate_spectrum(
    start: float = 1.0,
    stop: float = 5.0,
    step: float = 0.05,
    noise: float = 0.02,
    *,
    bands: tuple[AbsorptionBand, ...] = ABSORPTION_BANDS,
    rng: RandomSource = None,
) -> Spectrum:
    """Build a mock spectrum on ``[start, stop]`` with spacing ``step``.

    Raises:
        InvalidParameterError: If the grid is empty or noise is negative.
    """
    for name, value in (("start", start), ("stop", stop), ("step", step), ("noise", noise)):
        if not math.isfinite(value):
            raise InvalidParameterError(name, value, "a finite number")
    if step <= 0:
        raise InvalidParameterError("step", step, "> 0")
    if stop < start:
        raise InvalidParameterError("stop", stop, f">= start ({start})")
    if noise < 0:
        raise InvalidParameterError("noise", noise, ">= 0")

    n = int(math.floor((stop - start) / step + 1e-9)) + 1
    wavelength = start + np.arange(n, dtype=np.float64) * step
    flux = np.ones(n, dtype=np.float64)
    for band in bands:
        flux[np.abs(wavelength - band.center_um) < band.half_width_um] *= band.factor

    if noise > 0:
        flux += resolve_rng(rng).uniform(-noise / 2, noise / 2, size=n)

    return Spectrum(wavelength=wavelength, flux=flux)


__all__ = ["AbsorptionBand", "ABSORPTION_BANDS", "Spectrum", "generate_spectrum"]
