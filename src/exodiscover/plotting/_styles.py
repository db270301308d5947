"""Style presets and constants for plotting.

This module defines:
- STYLES: matplotlib rcParams presets ("default", "paper", "space")
- COLORS: Standard colors for light curves and the orbit view
- LABELS: Standard axis labels with units
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Style Presets
# =============================================================================

STYLES: dict[str, dict[str, Any]] = {
    "default": {
        "figure.figsize": (8, 5),
        "figure.dpi": 100,
        "font.size": 10,
        "axes.titlesize": 12,
        "axes.labelsize": 10,
        "xtick.labelsize": 9,
        "ytick.labelsize": 9,
        "legend.fontsize": 9,
        "lines.linewidth": 1.5,
        "axes.linewidth": 1.0,
        "axes.grid": False,
        "legend.framealpha": 0.8,
        "legend.edgecolor": "0.8",
    },
    "paper": {
        # Publication-ready: small figures, high resolution
        "figure.figsize": (3.5, 2.5),
        "figure.dpi": 300,
        "font.size": 8,
        "axes.titlesize": 9,
        "axes.labelsize": 8,
        "xtick.labelsize": 7,
        "ytick.labelsize": 7,
        "legend.fontsize": 7,
        "lines.linewidth": 1.0,
        "axes.linewidth": 0.8,
        "axes.grid": False,
        "legend.framealpha": 1.0,
        "legend.edgecolor": "none",
        "font.family": "serif",
    },
    "space": {
        # Dark background matching the web panels
        "figure.figsize": (10, 5),
        "figure.dpi": 100,
        "figure.facecolor": "#000000",
        "axes.facecolor": "#0a0a0f",
        "axes.edgecolor": "#444444",
        "axes.labelcolor": "#e5e7eb",
        "axes.titlesize": 13,
        "text.color": "#e5e7eb",
        "xtick.color": "#b3b3b3",
        "ytick.color": "#b3b3b3",
        "axes.grid": True,
        "grid.color": "#ffffff",
        "grid.alpha": 0.1,
        "grid.linestyle": "--",
        "lines.linewidth": 1.0,
        "savefig.facecolor": "#000000",
    },
}


# =============================================================================
# Color Definitions
# =============================================================================

COLORS: dict[str, str] = {
    # Light curves
    "flux": "#60a5fa",  # Blue - full light curve
    "folded": "#10b981",  # Green - zoomed transit window
    "reference": "#ef4444",  # Red - expected minimum flux
    "baseline": "#7f7f7f",  # Gray - no-transit curve
    # Orbit view
    "orbit_path": "#6495ed",  # Cornflower - ellipse outline and trail
    "star": "#ffcc00",
    "star_corona": "#ffff99",
    "halo": "#64c8ff",  # Habitable-zone ring
    # Spectrum
    "spectrum": "#a78bfa",
    "band": "#f59e0b",
}


# =============================================================================
# Axis Labels
# =============================================================================

LABELS: dict[str, str] = {
    "time_days": "Time (days)",
    "phase": "Phase",
    "flux_normalized": "Normalized Flux",
    "flux": "Relative Flux",
    "wavelength_um": r"Wavelength ($\mu$m)",
    "transmission": "Transmission (%)",
    "x": "x",
    "y": "y",
}
