"""Boundary between the kinematics core and drawing/charting collaborators.

The compositor turns a session's state into a ``Frame`` once per tick and
hands it to a ``DrawingSurface``; it hands each generated light curve to a
``ChartSink`` once. How frames and charts are drawn is up to the
collaborator (see ``exodiscover.plotting`` for a matplotlib one).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from exodiscover.compute.ephemeris import trail
from exodiscover.config import DEFAULT_CONFIG, SimulationConfig

if TYPE_CHECKING:
    from exodiscover.domain.lightcurve import LightCurveSeries
    from exodiscover.domain.orbit import OrbitalParameters
    from exodiscover.domain.planet import PlanetAppearance
    from exodiscover.simulation.session import SimulationSession

logger = logging.getLogger(__name__)

# Drawing units per "AU" in the distance read-out.
UNITS_PER_AU = 100.0


@dataclass(frozen=True)
class Frame:
    """Everything a surface needs to draw one tick.

    Coordinates are offsets from the star at the ellipse centre.
    """

    x: float
    y: float
    phase_fraction: float
    time: float
    speed: float
    orbit: OrbitalParameters
    appearance: PlanetAppearance
    trail: tuple[tuple[float, float], ...]
    labels: dict[str, str] = field(default_factory=dict)

    @property
    def phase_percent(self) -> float:
        return self.phase_fraction * 100.0


@runtime_checkable
class DrawingSurface(Protocol):
    def draw_frame(self, frame: Frame) -> None: ...


@runtime_checkable
class ChartSink(Protocol):
    def plot_series(self, series: LightCurveSeries) -> None: ...


def compose_frame(
    session: SimulationSession, config: SimulationConfig = DEFAULT_CONFIG
) -> Frame:
    """Build the Frame for the session's current state.

    Raises:
        ValueError: If the session has no selected planet.
    """
    record = session.record
    if record is None:
        raise ValueError("Cannot compose a frame without a selected planet")

    state = session.state
    orbit = session.orbit
    points = trail(state.phase_angle, orbit, config.trail_points, config.trail_step)

    labels = {
        "name": record.name,
        "period": f"Period: {record.orbital_period:.1f} days",
        "distance": f"Distance: {orbit.semi_major_axis / UNITS_PER_AU:.2f} AU",
        "temperature": f"Temperature: {record.temperature:g}K",
        "phase": f"Phase: {state.phase_fraction * 100:.1f}%",
        "speed": f"Speed: {session.speed:g}x",
        "detection": f"Detection: {record.detection_method}",
    }

    return Frame(
        x=state.x,
        y=state.y,
        phase_fraction=state.phase_fraction,
        time=state.time,
        speed=session.speed,
        orbit=orbit,
        appearance=record.appearance(),
        trail=tuple((float(px), float(py)) for px, py in points),
        labels=labels,
    )


class FrameCompositor:
    """Feeds a drawing surface every tick and a chart once per series."""

    def __init__(
        self,
        surface: DrawingSurface,
        chart: ChartSink | None = None,
        *,
        config: SimulationConfig = DEFAULT_CONFIG,
    ) -> None:
        self.surface = surface
        self.chart = chart
        self.config = config
        self.frames_drawn = 0

    def on_tick(self, session: SimulationSession) -> Frame | None:
        """Compose and draw the current frame; skipped when nothing is selected."""
        if session.record is None:
            return None
        frame = compose_frame(session, self.config)
        self.surface.draw_frame(frame)
        self.frames_drawn += 1
        return frame

    def publish_series(self, series: LightCurveSeries) -> None:
        if self.chart is None:
            logger.debug("No chart attached; dropping series of %d samples", len(series))
            return
        self.chart.plot_series(series)


class RecordingSurface:
    """In-memory DrawingSurface/ChartSink that keeps what it was given."""

    def __init__(self) -> None:
        self.frames: list[Frame] = []
        self.series: list[LightCurveSeries] = []

    def draw_frame(self, frame: Frame) -> None:
        self.frames.append(frame)

    def plot_series(self, series: LightCurveSeries) -> None:
        self.series.append(series)

    @property
    def last_frame(self) -> Frame | None:
        return self.frames[-1] if self.frames else None


__all__ = [
    "UNITS_PER_AU",
    "Frame",
    "DrawingSurface",
    "ChartSink",
    "compose_frame",
    "FrameCompositor",
    "RecordingSurface",
]
