"""Light curve and spectrum visualization functions.

Functions:
    plot_light_curve: Full synthetic light curve with a reference depth line
    plot_fold_window: Zoomed view of the samples around the transit
    plot_spectrum: Mock transmission spectrum with absorption bands marked
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    import matplotlib.axes

    from exodiscover.compute.spectrum import Spectrum
    from exodiscover.domain.lightcurve import LightCurveSeries


def plot_light_curve(
    series: LightCurveSeries,
    *,
    ax: matplotlib.axes.Axes | None = None,
    reference_flux: float | None = None,
    color: str | None = None,
    show_errors: bool = False,
    style: str = "default",
    **line_kwargs: Any,
) -> matplotlib.axes.Axes:
    """Plot a light curve as a line.

    Parameters
    ----------
    series : LightCurveSeries
        Samples to draw.
    ax : matplotlib.axes.Axes, optional
        Axes to plot on. If None, creates a new figure and axes.
    reference_flux : float, optional
        Draw a dashed horizontal line here (e.g. 1 - depth).
    color : str, optional
        Line color. Defaults to COLORS["flux"].
    show_errors : bool, default=False
        Shade +/- error/2 around the curve.
    style : str, default="default"
        Style preset name.

    Returns
    -------
    matplotlib.axes.Axes
        The axes containing the plot.
    """
    from ._core import ensure_ax, style_context
    from ._styles import COLORS, LABELS

    if color is None:
        color = COLORS["flux"]

    time = np.asarray(series.time)
    flux = np.asarray(series.flux)

    with style_context(style):
        _fig, ax = ensure_ax(ax)

        line_defaults: dict[str, Any] = {"linewidth": 1.0}
        line_defaults.update(line_kwargs)
        ax.plot(time, flux, color=color, label="Flux", **line_defaults)

        if show_errors:
            half = np.asarray(series.error) / 2.0
            ax.fill_between(time, flux - half, flux + half, color=color, alpha=0.2, linewidth=0)

        if reference_flux is not None:
            ax.axhline(
                reference_flux,
                color=COLORS["reference"],
                linestyle="--",
                linewidth=1.0,
                label="Expected minimum",
            )

        ax.set_xlabel(LABELS["time_days"])
        ax.set_ylabel(LABELS["flux_normalized"])
        ax.set_title("Light Curve")
        if len(time) > 0:
            ax.set_xlim(time.min(), time.max())

    return ax


def plot_fold_window(
    series: LightCurveSeries,
    *,
    half_width: int = 50,
    ax: matplotlib.axes.Axes | None = None,
    style: str = "default",
) -> matplotlib.axes.Axes:
    """Plot the samples around the transit midpoint with markers."""
    from exodiscover.compute.transit import fold_window

    from ._core import ensure_ax, style_context
    from ._styles import COLORS, LABELS

    window = fold_window(series, half_width)

    with style_context(style):
        _fig, ax = ensure_ax(ax)
        ax.plot(
            window.time,
            window.flux,
            color=COLORS["folded"],
            marker="o",
            markersize=2,
            linewidth=1.5,
        )
        ax.set_xlabel(LABELS["time_days"])
        ax.set_ylabel(LABELS["flux"])
        ax.set_title("Transit Window")

    return ax


def plot_spectrum(
    spectrum: Spectrum,
    *,
    ax: matplotlib.axes.Axes | None = None,
    mark_bands: bool = True,
    style: str = "default",
) -> matplotlib.axes.Axes:
    """Plot percent transmission against wavelength."""
    from exodiscover.compute.spectrum import ABSORPTION_BANDS

    from ._core import ensure_ax, style_context
    from ._styles import COLORS, LABELS

    with style_context(style):
        _fig, ax = ensure_ax(ax)
        ax.plot(spectrum.wavelength, spectrum.transmission, color=COLORS["spectrum"])
        if mark_bands:
            for band in ABSORPTION_BANDS:
                ax.axvline(band.center_um, color=COLORS["band"], linestyle=":", linewidth=0.8)
                ax.annotate(
                    band.molecule,
                    xy=(band.center_um, 1.0),
                    xycoords=("data", "axes fraction"),
                    xytext=(2, -12),
                    textcoords="offset points",
                    fontsize=8,
                    color=COLORS["band"],
                )
        ax.set_xlabel(LABELS["wavelength_um"])
        ax.set_ylabel(LABELS["transmission"])
        ax.set_title("Transmission Spectrum")

    return ax
