"""Tests for exodiscover.compute.flux."""

from __future__ import annotations

import numpy as np
import pytest

from exodiscover.compute.flux import (
    TransitScenario,
    generate_light_curve,
    generate_pair,
    generate_scenario,
    transit_profile,
)
from exodiscover.errors import InvalidParameterError


class TestGenerateLightCurve:
    def test_reference_point(self) -> None:
        lc = generate_light_curve(1000, 0.02, 0.01, 30, 0.0, True)
        assert lc.flux[500] == pytest.approx(0.99)
        assert lc.flux[0] == 1.0

    def test_length_and_time_grid(self) -> None:
        lc = generate_light_curve(250, 0.5, 0.01, 10, 0.001, True, rng=1)
        assert len(lc) == 250
        np.testing.assert_allclose(lc.time, np.arange(250) * 0.5)
        assert np.all(np.diff(lc.time) > 0)

    def test_error_column_is_noise_amplitude(self) -> None:
        lc = generate_light_curve(100, 0.02, 0.01, 10, 0.003, False, rng=1)
        np.testing.assert_array_equal(lc.error, np.full(100, 0.003))

    def test_no_transit_no_noise_is_flat(self) -> None:
        lc = generate_light_curve(400, 0.02, 0.01, 30, 0.0, False)
        np.testing.assert_array_equal(lc.flux, np.ones(400))

    def test_symmetric_dip_without_noise(self) -> None:
        lc = generate_light_curve(1000, 0.02, 0.02, 40, 0.0, True)
        for k in range(0, 25):
            assert lc.flux[500 + k] == lc.flux[500 - k]

    def test_dip_confined_to_window(self) -> None:
        lc = generate_light_curve(1000, 0.02, 0.01, 30, 0.0, True)
        dipped = np.flatnonzero(lc.flux < 1.0)
        assert dipped.min() == 486
        assert dipped.max() == 514
        assert lc.min_flux == pytest.approx(0.99)

    def test_noise_is_bounded(self) -> None:
        lc = generate_light_curve(5000, 0.02, 0.0, 0, 0.004, False, rng=3)
        assert np.all(np.abs(lc.flux - 1.0) <= 0.002 + 1e-12)

    def test_odd_sample_count_is_symmetric_about_half_index(self) -> None:
        lc = generate_light_curve(101, 0.02, 0.01, 10, 0.0, True)
        mid_floor = 101 // 2
        for k in range(0, 10):
            assert lc.flux[mid_floor - k] == lc.flux[mid_floor + 1 + k]
        assert lc.flux[mid_floor] == lc.flux[mid_floor + 1] == lc.min_flux
        assert lc.min_flux > 0.99

    def test_zero_duration_has_no_dip(self) -> None:
        lc = generate_light_curve(100, 0.02, 0.5, 0, 0.0, True)
        np.testing.assert_array_equal(lc.flux, np.ones(100))

    def test_seed_reproduces(self) -> None:
        a = generate_light_curve(300, 0.02, 0.01, 30, 0.001, True, rng=np.random.default_rng(7))
        b = generate_light_curve(300, 0.02, 0.01, 30, 0.001, True, rng=np.random.default_rng(7))
        c = generate_light_curve(300, 0.02, 0.01, 30, 0.001, True, rng=8)
        np.testing.assert_array_equal(a.flux, b.flux)
        assert not np.array_equal(a.flux, c.flux)

    def test_noiseless_does_not_consume_generator(self) -> None:
        rng = np.random.default_rng(11)
        generate_light_curve(100, 0.02, 0.01, 10, 0.0, True, rng=rng)
        assert rng.uniform() == np.random.default_rng(11).uniform()

    def test_output_is_read_only(self) -> None:
        lc = generate_light_curve(10, 0.02, 0.01, 2, 0.001, True, rng=0)
        with pytest.raises(ValueError):
            lc.flux[0] = 0.0

    @pytest.mark.parametrize(
        ("args", "parameter"),
        [
            ((0, 0.02, 0.01, 0, 0.001), "sample_count"),
            ((100, 0.0, 0.01, 10, 0.001), "cadence"),
            ((100, 0.02, 1.2, 10, 0.001), "transit_depth"),
            ((100, 0.02, -0.1, 10, 0.001), "transit_depth"),
            ((100, 0.02, 0.01, 100, 0.001), "transit_duration_samples"),
            ((100, 0.02, 0.01, 150, 0.001), "transit_duration_samples"),
            ((100, 0.02, 0.01, -1, 0.001), "transit_duration_samples"),
            ((100, 0.02, 0.01, 10, -0.001), "noise_amplitude"),
            ((100, 0.02, float("nan"), 10, 0.001), "transit_depth"),
            ((10.5, 0.02, 0.01, 2, 0.001), "sample_count"),
            ((float("inf"), 0.02, 0.01, 2, 0.001), "sample_count"),
        ],
    )
    def test_invalid_inputs(self, args: tuple[float, ...], parameter: str) -> None:
        with pytest.raises(InvalidParameterError) as exc_info:
            generate_light_curve(*args, True)  # type: ignore[arg-type]
        assert exc_info.value.parameter == parameter


def test_transit_profile_peak() -> None:
    dip = transit_profile(1000, 0.01, 30)
    assert dip[500] == pytest.approx(0.01)
    assert dip.argmax() == 500
    assert dip[0] == 0.0


class TestScenario:
    def test_defaults(self) -> None:
        scenario = TransitScenario()
        assert scenario.sample_count == 1000
        assert scenario.mid_index == 500
        assert scenario.duration_days == pytest.approx(0.6)

    def test_generate_scenario(self) -> None:
        lc = generate_scenario(TransitScenario(noise_amplitude=0.0))
        assert lc.flux[500] == pytest.approx(0.99)

    def test_pair(self) -> None:
        with_transit, baseline = generate_pair(TransitScenario(noise_amplitude=0.0))
        assert with_transit.min_flux == pytest.approx(0.99)
        np.testing.assert_array_equal(baseline.flux, np.ones(1000))

    def test_pair_is_reproducible(self) -> None:
        a = generate_pair(rng=5)
        b = generate_pair(rng=5)
        np.testing.assert_array_equal(a[0].flux, b[0].flux)
        np.testing.assert_array_equal(a[1].flux, b[1].flux)
        assert not np.array_equal(a[0].flux[:100], a[1].flux[:100])
