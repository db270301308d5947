"""Tests for exodiscover.compute.transit."""

from __future__ import annotations

import numpy as np
import pytest

from exodiscover.compute.flux import generate_light_curve
from exodiscover.compute.transit import (
    MAX_SNR,
    fold_window,
    measure_depth,
    summarize_transit,
    transit_mask,
)
from exodiscover.errors import InvalidParameterError


class TestTransitMask:
    def test_default_center(self) -> None:
        mask = transit_mask(1000, 30)
        assert mask.sum() == 29
        assert mask[500]
        assert not mask[485]

    def test_explicit_center(self) -> None:
        mask = transit_mask(100, 10, center_index=20)
        assert np.flatnonzero(mask).tolist() == list(range(16, 25))


class TestMeasureDepth:
    def test_box_dip(self) -> None:
        flux = np.ones(100)
        mask = np.zeros(100, dtype=bool)
        mask[40:60] = True
        flux[mask] = 0.99
        depth, depth_err = measure_depth(flux, mask)
        assert depth == pytest.approx(0.01)
        assert depth_err == pytest.approx(0.0)

    def test_requires_in_transit_points(self) -> None:
        with pytest.raises(InvalidParameterError):
            measure_depth(np.ones(10), np.zeros(10, dtype=bool))

    def test_requires_out_of_transit_points(self) -> None:
        with pytest.raises(InvalidParameterError):
            measure_depth(np.ones(10), np.ones(10, dtype=bool))


class TestSummarizeTransit:
    def test_noisy_default_curve(self) -> None:
        lc = generate_light_curve(1000, 0.02, 0.01, 30, 0.001, True, rng=42)
        summary = summarize_transit(lc, 30)
        # Half-ellipse profile averages to pi/4 of the peak depth.
        assert summary.depth == pytest.approx(0.01 * np.pi / 4, rel=0.1)
        assert summary.depth_percent == pytest.approx(summary.depth * 100)
        assert summary.radius_ratio == pytest.approx(np.sqrt(summary.depth))
        assert summary.snr > 10
        assert summary.n_in_transit == 29
        assert summary.duration_days == pytest.approx(0.6)

    def test_noiseless_snr_is_capped(self) -> None:
        lc = generate_light_curve(1000, 0.02, 0.01, 30, 0.0, True)
        assert summarize_transit(lc, 30).snr == MAX_SNR

    def test_negative_depth_reported_as_zero(self, caplog: pytest.LogCaptureFixture) -> None:
        lc = generate_light_curve(1000, 0.02, 0.01, 30, 0.0, True)
        summary = summarize_transit(lc, 30, center_index=100)
        assert summary.depth == 0.0
        assert "Negative transit depth" in caplog.text

    def test_zero_duration_raises(self) -> None:
        lc = generate_light_curve(100, 0.02, 0.01, 0, 0.0, True)
        with pytest.raises(InvalidParameterError):
            summarize_transit(lc, 0)


class TestFoldWindow:
    def test_default_window(self) -> None:
        lc = generate_light_curve(1000, 0.02, 0.01, 30, 0.0, True)
        window = fold_window(lc)
        assert len(window) == 100
        assert window.time[0] == pytest.approx(450 * 0.02)
        assert window.min_flux == pytest.approx(0.99)

    def test_clipped_to_series(self) -> None:
        lc = generate_light_curve(20, 0.02, 0.01, 4, 0.0, True)
        assert len(fold_window(lc, 50)) == 20

    def test_rejects_non_positive_width(self) -> None:
        lc = generate_light_curve(20, 0.02, 0.01, 4, 0.0, True)
        with pytest.raises(InvalidParameterError):
            fold_window(lc, 0)
