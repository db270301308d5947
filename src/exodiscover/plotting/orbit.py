"""Orbit view rendering.

This module provides a matplotlib implementation of the compositor's
drawing contracts:
- plot_frame: Draw one Frame (orbit, star, trail, planet, labels)
- MatplotlibSurface: DrawingSurface + ChartSink backed by two axes
- save_overview: Orbit frame and light curve side by side, written to disk
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import matplotlib.axes
    from matplotlib.figure import Figure

    from exodiscover.domain.lightcurve import LightCurveSeries
    from exodiscover.simulation.compositor import Frame

logger = logging.getLogger(__name__)

STAR_RADIUS = 20.0
CORONA_PAD = 5.0
HALO_PAD = 3.0


def plot_frame(
    frame: Frame,
    *,
    ax: matplotlib.axes.Axes | None = None,
    show_labels: bool = True,
    style: str = "space",
) -> matplotlib.axes.Axes:
    """Draw one animation frame with the star at the origin.

    Sizes (star, planet radius) are in the same units as the orbit, so the
    axes are kept at equal aspect.
    """
    from matplotlib.patches import Circle

    from exodiscover.compute.ephemeris import orbit_outline

    from ._core import ensure_ax, style_context
    from ._styles import COLORS

    outline = orbit_outline(frame.orbit)
    trail = np.asarray(frame.trail, dtype=np.float64).reshape(-1, 2)
    appearance = frame.appearance

    with style_context(style):
        _fig, ax = ensure_ax(ax)
        ax.set_aspect("equal")
        ax.grid(False)

        ax.plot(outline[:, 0], outline[:, 1], color=COLORS["orbit_path"], alpha=0.5, linewidth=2)
        if len(trail) > 1:
            ax.plot(trail[:, 0], trail[:, 1], color=COLORS["orbit_path"], alpha=0.2, linewidth=1)

        ax.add_patch(Circle((0.0, 0.0), STAR_RADIUS, color=COLORS["star"]))
        ax.add_patch(
            Circle(
                (0.0, 0.0),
                STAR_RADIUS + CORONA_PAD,
                fill=False,
                edgecolor=COLORS["star_corona"],
                alpha=0.3,
                linewidth=3,
            )
        )

        ax.add_patch(Circle((frame.x, frame.y), appearance.radius_px, color=appearance.color))
        if appearance.halo:
            ax.add_patch(
                Circle(
                    (frame.x, frame.y),
                    appearance.radius_px + HALO_PAD,
                    fill=False,
                    edgecolor=COLORS["halo"],
                    alpha=0.5,
                    linewidth=2,
                )
            )

        if show_labels:
            ax.annotate(
                appearance.label,
                xy=(frame.x, frame.y),
                xytext=(appearance.radius_px + 10, 10),
                textcoords="offset points",
                fontsize=9,
            )
            info = "\n".join(
                frame.labels[key]
                for key in ("period", "distance", "temperature")
                if key in frame.labels
            )
            ax.text(0.01, 0.01, info, transform=ax.transAxes, fontsize=8, va="bottom")
            status = "\n".join(
                frame.labels[key] for key in ("phase", "speed", "detection") if key in frame.labels
            )
            ax.text(0.99, 0.99, status, transform=ax.transAxes, fontsize=8, va="top", ha="right")

        pad = STAR_RADIUS + appearance.radius_px + HALO_PAD
        a = frame.orbit.semi_major_axis + pad
        ax.set_xlim(-a, a)
        ax.set_ylim(-(frame.orbit.semi_minor_axis + pad), frame.orbit.semi_minor_axis + pad)
        ax.set_xticks([])
        ax.set_yticks([])
        ax.set_title(f"{appearance.label} - Orbital Simulation")

    return ax


class MatplotlibSurface:
    """DrawingSurface and ChartSink drawing into matplotlib axes.

    Each call clears and redraws its axes, like a canvas repaint.
    """

    def __init__(
        self,
        orbit_ax: matplotlib.axes.Axes,
        chart_ax: matplotlib.axes.Axes | None = None,
        *,
        style: str = "space",
    ) -> None:
        self.orbit_ax = orbit_ax
        self.chart_ax = chart_ax
        self.style = style
        self.frames_drawn = 0

    def draw_frame(self, frame: Frame) -> None:
        self.orbit_ax.clear()
        plot_frame(frame, ax=self.orbit_ax, style=self.style)
        self.frames_drawn += 1

    def plot_series(self, series: LightCurveSeries) -> None:
        from .lightcurve import plot_light_curve

        if self.chart_ax is None:
            logger.debug("MatplotlibSurface has no chart axes; ignoring series")
            return
        self.chart_ax.clear()
        plot_light_curve(series, ax=self.chart_ax, style=self.style)


def save_overview(
    frame: Frame,
    series: LightCurveSeries,
    path: str | Path,
    *,
    reference_flux: float | None = None,
    style: str = "space",
    dpi: int = 120,
) -> Figure:
    """Write the orbit frame and light curve side by side to ``path``."""
    import matplotlib.pyplot as plt

    from ._core import style_context
    from .lightcurve import plot_light_curve

    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)

    with style_context(style):
        fig, (orbit_ax, chart_ax) = plt.subplots(
            1, 2, figsize=(12, 5), gridspec_kw={"width_ratios": [1, 1.4]}
        )
        plot_frame(frame, ax=orbit_ax, style=style)
        plot_light_curve(series, ax=chart_ax, reference_flux=reference_flux, style=style)
        fig.tight_layout()
        fig.savefig(out, dpi=dpi)

    logger.info("Wrote overview figure to %s", out)
    return fig
