"""Explicit simulation session.

A SimulationSession owns everything the orbit animation needs between
frames: the selected planet, play/pause state, speed multiplier, simulated
time and accumulated phase. Callers pass the session around instead of
relying on UI framework state, and inject the Scheduler that drives ticks.

Lifecycle:
- select(record): choose a planet; phase and time reset to 0, paused
- play()/pause()/toggle(): start or stop scheduling ticks
- set_speed(s): change the multiplier within the configured bounds
- reset(): phase and time back to 0, paused
- close(): stop ticking and drop the compositor
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from exodiscover.compute.ephemeris import position_at_phase
from exodiscover.config import DEFAULT_CONFIG, SimulationConfig
from exodiscover.domain.orbit import SCALE_CONSTANT, TWO_PI, OrbitalParameters, PlanetState
from exodiscover.errors import InvalidParameterError

if TYPE_CHECKING:
    from exodiscover.domain.planet import ExoplanetRecord
    from exodiscover.simulation.compositor import FrameCompositor
    from exodiscover.simulation.scheduler import CancelHandle, Scheduler

logger = logging.getLogger(__name__)


class SimulationSession:
    """Play/pause/reset/speed state for one animated planet.

    Args:
        scheduler: Drives ticks while playing.
        record: Initially selected planet, if any.
        semi_major_axis: Orbit size in drawing units.
        speed: Initial speed multiplier; defaults to ``config.default_speed``.
        compositor: Receives the session after every tick.
        config: Speed bounds, eccentricity and trail settings.

    Raises:
        InvalidParameterError: If semi_major_axis or speed is out of range.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        record: ExoplanetRecord | None = None,
        *,
        semi_major_axis: float = 100.0,
        speed: float | None = None,
        compositor: FrameCompositor | None = None,
        config: SimulationConfig = DEFAULT_CONFIG,
    ) -> None:
        self.config = config
        self._scheduler = scheduler
        self._compositor = compositor
        self._record = record
        self._handle: CancelHandle | None = None
        self._time = 0.0
        self._phase = 0.0
        self._speed = self._check_speed(config.default_speed if speed is None else speed)
        self._orbit = OrbitalParameters.from_speed(
            semi_major_axis, self._speed, config.eccentricity
        )

    @classmethod
    def for_canvas(
        cls,
        scheduler: Scheduler,
        width: float,
        height: float,
        record: ExoplanetRecord | None = None,
        *,
        speed: float | None = None,
        compositor: FrameCompositor | None = None,
        config: SimulationConfig = DEFAULT_CONFIG,
    ) -> SimulationSession:
        """Size the orbit to ``axis_fraction`` of the shorter canvas side."""
        axis = min(float(width), float(height)) * config.axis_fraction
        return cls(
            scheduler,
            record,
            semi_major_axis=axis,
            speed=speed,
            compositor=compositor,
            config=config,
        )

    # ------------------------------------------------------------------
    # read-only state
    # ------------------------------------------------------------------

    @property
    def record(self) -> ExoplanetRecord | None:
        return self._record

    @property
    def orbit(self) -> OrbitalParameters:
        return self._orbit

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def time(self) -> float:
        return self._time

    @property
    def phase(self) -> float:
        return self._phase

    @property
    def is_playing(self) -> bool:
        return self._handle is not None and not self._handle.cancelled

    @property
    def state(self) -> PlanetState:
        """Current snapshot; the position is recomputed on every access."""
        x, y = position_at_phase(self._phase, self._orbit)
        return PlanetState(phase_angle=self._phase, time=self._time, x=x, y=y)

    # ------------------------------------------------------------------
    # controls
    # ------------------------------------------------------------------

    def _check_speed(self, speed: float) -> float:
        speed = float(speed)
        lo, hi = self.config.min_speed, self.config.max_speed
        if not math.isfinite(speed) or not lo <= speed <= hi:
            raise InvalidParameterError("speed_multiplier", speed, f"{lo} <= speed <= {hi}")
        return speed

    def set_speed(self, speed: float) -> None:
        """Change the multiplier. Takes effect from the next tick without a phase jump."""
        self._speed = self._check_speed(speed)
        self._orbit = self._orbit.with_speed(self._speed)
        logger.debug("Speed set to %.2fx", self._speed)

    def select(self, record: ExoplanetRecord) -> None:
        """Switch to another planet; previous phase is discarded.

        The reset frame is drawn for the newly selected planet.
        """
        self._record = record
        logger.debug("Selected %s", record.name)
        self.reset()

    def play(self) -> None:
        """Start ticking. No-op if already playing.

        Raises:
            InvalidParameterError: If no planet is selected.
        """
        if self._record is None:
            raise InvalidParameterError("record", None, "a selected planet before play()")
        if self.is_playing:
            return
        self._handle = self._scheduler.schedule(self.tick)
        logger.debug("Playing %s at %.2fx", self._record.name, self._speed)

    def pause(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
            logger.debug("Paused at phase %.4f", self._phase)

    def toggle(self) -> bool:
        """Flip play/pause; returns the new playing state."""
        if self.is_playing:
            self.pause()
        else:
            self.play()
        return self.is_playing

    def reset(self) -> None:
        """Pause and return phase and time to zero."""
        self.pause()
        self._time = 0.0
        self._phase = 0.0
        logger.debug("Session reset")
        if self._compositor is not None and self._record is not None:
            self._compositor.on_tick(self)

    def close(self) -> None:
        self.pause()
        self._compositor = None

    def tick(self, dt: float = 1.0) -> PlanetState:
        """Advance simulated time by ``dt`` and return the new state.

        Phase advances by ``dt * speed * SCALE_CONSTANT`` so that changing
        speed mid-run keeps the planet where it is.
        """
        if dt < 0 or not math.isfinite(dt):
            raise InvalidParameterError("dt", dt, "finite and >= 0")
        self._time += dt
        self._phase = (self._phase + dt * self._speed * SCALE_CONSTANT) % TWO_PI
        if self._compositor is not None:
            self._compositor.on_tick(self)
        return self.state


__all__ = ["SimulationSession"]
