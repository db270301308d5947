"""Tests for ExoplanetRecord and PlanetAppearance."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from exodiscover.domain.planet import COLOR_HEX, ColorClass, ConfidenceClass, ExoplanetRecord


def _record(**overrides: object) -> ExoplanetRecord:
    values: dict[str, object] = {
        "id": "1",
        "name": "Kepler-442b",
        "confidence": 0.92,
        "planet_type": "Super Earth",
        "radius": 1.34,
        "orbital_period": 112.3,
        "temperature": 233,
        "habitable_zone": True,
        "stellar_magnitude": 14.76,
    }
    values.update(overrides)
    return ExoplanetRecord(**values)


@pytest.mark.parametrize(
    ("confidence", "expected"),
    [
        (0.95, ConfidenceClass.CONFIRMED),
        (0.8, ConfidenceClass.CANDIDATE),
        (0.6, ConfidenceClass.CANDIDATE),
        (0.59, ConfidenceClass.FALSE_POSITIVE),
    ],
)
def test_confidence_class(confidence: float, expected: ConfidenceClass) -> None:
    assert _record(confidence=confidence).confidence_class is expected


def test_derived_physical_values() -> None:
    record = _record(radius=2.0)
    assert record.mass_earth == pytest.approx(9.6)
    assert record.surface_gravity == pytest.approx(19.6)
    assert record.escape_velocity == pytest.approx(22.4)


class TestAppearance:
    def test_radius_scales_with_planet(self) -> None:
        assert _record(radius=1.5).appearance().radius_px == pytest.approx(12.0)

    def test_radius_has_minimum(self) -> None:
        assert _record(radius=0.3).appearance().radius_px == 5.0

    def test_color_by_type(self) -> None:
        assert _record(planet_type="Terrestrial").appearance().color_class is ColorClass.ROCKY
        look = _record(planet_type="Gas Giant").appearance()
        assert look.color == COLOR_HEX[ColorClass.GAS_GIANT]

    def test_unknown_type_uses_default_color(self) -> None:
        assert _record(planet_type="Mystery").appearance().color_class is ColorClass.DEFAULT

    def test_halo_marks_habitable_zone(self) -> None:
        assert _record(habitable_zone=True).appearance().halo is True
        assert _record(habitable_zone=False).appearance().halo is False


def test_validation() -> None:
    with pytest.raises(ValidationError):
        _record(confidence=1.5)
    with pytest.raises(ValidationError):
        _record(radius=0.0)
    with pytest.raises(ValidationError):
        _record(unexpected="field")
