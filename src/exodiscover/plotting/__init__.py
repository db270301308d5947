"""Plotting utilities for exodiscover.

All plotting functions require matplotlib. To install it, run:
    pip install 'exodiscover[plotting]'

The module uses lazy loading to avoid importing matplotlib until it is
actually needed, allowing the rest of the library to be used without
matplotlib installed.

Example:
    >>> from exodiscover.plotting import plot_light_curve
    >>> ax = plot_light_curve(series, reference_flux=0.99)

Style System:
    - "default": Balanced for interactive exploration (8x5 inches, 100 dpi)
    - "paper": Publication-ready (3.5x2.5 inches, 300 dpi)
    - "space": Dark background matching the web panels
"""

from __future__ import annotations

import importlib.util

# Check for matplotlib availability without importing it
MATPLOTLIB_AVAILABLE = importlib.util.find_spec("matplotlib") is not None

__all__: list[str]

if MATPLOTLIB_AVAILABLE:
    from .lightcurve import plot_fold_window, plot_light_curve, plot_spectrum
    from .orbit import MatplotlibSurface, plot_frame, save_overview

    __all__ = [
        "plot_light_curve",
        "plot_fold_window",
        "plot_spectrum",
        "plot_frame",
        "MatplotlibSurface",
        "save_overview",
    ]
else:
    __all__ = []


def __getattr__(name: str) -> object:
    """Raise MissingOptionalDependencyError for plot functions when matplotlib is missing."""
    if not MATPLOTLIB_AVAILABLE:
        from exodiscover.errors import MissingOptionalDependencyError

        raise MissingOptionalDependencyError("plotting")
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    """Return module attributes for tab completion."""
    return sorted(set(globals().keys()) | set(__all__))
