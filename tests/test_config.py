"""Tests for environment-driven configuration."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from exodiscover.config import DEFAULT_CONFIG, SimulationConfig, load_config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "DEFAULT_SPEED",
        "MIN_SPEED",
        "MAX_SPEED",
        "ECCENTRICITY",
        "AXIS_FRACTION",
        "FRAME_INTERVAL_SECONDS",
        "TRAIL_POINTS",
        "TRAIL_STEP",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(f"EXODISCOVER_{name}", raising=False)


def test_defaults() -> None:
    cfg = load_config()
    assert cfg == DEFAULT_CONFIG
    assert cfg.min_speed == 0.1
    assert cfg.max_speed == 5.0
    assert cfg.eccentricity == 0.05
    assert cfg.trail_points == 50


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXODISCOVER_MAX_SPEED", "10")
    monkeypatch.setenv("EXODISCOVER_TRAIL_POINTS", "20")
    monkeypatch.setenv("EXODISCOVER_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.max_speed == 10.0
    assert cfg.trail_points == 20
    assert cfg.log_level == "DEBUG"


def test_unparsable_value_is_ignored(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    monkeypatch.setenv("EXODISCOVER_ECCENTRICITY", "round")
    with caplog.at_level(logging.WARNING, logger="exodiscover.config"):
        cfg = load_config()
    assert cfg.eccentricity == 0.05
    assert "EXODISCOVER_ECCENTRICITY" in caplog.text


def test_inconsistent_overrides_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXODISCOVER_MIN_SPEED", "2")
    monkeypatch.setenv("EXODISCOVER_DEFAULT_SPEED", "1")
    assert load_config() == SimulationConfig()


def test_config_is_frozen() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_CONFIG.max_speed = 9.0  # type: ignore[misc]


def test_rejects_default_speed_outside_bounds() -> None:
    with pytest.raises(ValidationError):
        SimulationConfig(default_speed=6.0)
