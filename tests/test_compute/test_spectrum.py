"""Tests for exodiscover.compute.spectrum."""

from __future__ import annotations

import numpy as np
import pytest

from exodiscover.compute.spectrum import ABSORPTION_BANDS, generate_spectrum
from exodiscover.errors import InvalidParameterError


def test_default_grid() -> None:
    spectrum = generate_spectrum(noise=0.0)
    assert len(spectrum) == 81
    assert spectrum.wavelength[0] == pytest.approx(1.0)
    assert spectrum.wavelength[-1] == pytest.approx(5.0)


def test_bands_absorb() -> None:
    spectrum = generate_spectrum(noise=0.0)
    for band in ABSORPTION_BANDS:
        idx = int(np.argmin(np.abs(spectrum.wavelength - band.center_um)))
        assert spectrum.flux[idx] == pytest.approx(band.factor)
    assert spectrum.flux[0] == 1.0


def test_transmission_is_percent() -> None:
    spectrum = generate_spectrum(noise=0.0)
    np.testing.assert_allclose(spectrum.transmission, spectrum.flux * 100)
    record = spectrum.to_records()[0]
    assert record == {"wavelength": 1.0, "flux": 1.0, "transmission": 100.0}


def test_seeded_noise_reproduces() -> None:
    a = generate_spectrum(rng=3)
    b = generate_spectrum(rng=3)
    np.testing.assert_array_equal(a.flux, b.flux)
    assert np.all(np.abs(generate_spectrum(noise=0.0).flux - a.flux) <= 0.01 + 1e-12)


@pytest.mark.parametrize(
    "kwargs",
    [{"step": 0.0}, {"start": 5.0, "stop": 1.0}, {"noise": -0.1}, {"stop": float("inf")}],
)
def test_invalid(kwargs: dict[str, float]) -> None:
    with pytest.raises(InvalidParameterError):
        generate_spectrum(**kwargs)
