"""Pure compute operations for exodiscover.

Nothing here holds state between calls or touches I/O:
- ephemeris: orbit positions, trails and outlines
- flux: synthetic transit light curves
- transit: depth/SNR measurement and fold windows
- spectrum: mock transmission spectrum
"""

from exodiscover.compute.ephemeris import (
    orbit_outline,
    orbital_period,
    phase_angle,
    phase_fraction,
    position,
    position_at_phase,
    semi_minor_axis,
    state_at,
    trail,
)
from exodiscover.compute.flux import (
    TransitScenario,
    generate_light_curve,
    generate_pair,
    generate_scenario,
)
from exodiscover.compute.spectrum import ABSORPTION_BANDS, Spectrum, generate_spectrum
from exodiscover.compute.transit import (
    TransitSummary,
    fold_window,
    measure_depth,
    summarize_transit,
    transit_mask,
)

__all__ = [
    # ephemeris
    "position",
    "phase_angle",
    "phase_fraction",
    "position_at_phase",
    "semi_minor_axis",
    "orbital_period",
    "trail",
    "orbit_outline",
    "state_at",
    # flux
    "generate_light_curve",
    "TransitScenario",
    "generate_scenario",
    "generate_pair",
    # transit
    "TransitSummary",
    "transit_mask",
    "measure_depth",
    "summarize_transit",
    "fold_window",
    # spectrum
    "ABSORPTION_BANDS",
    "Spectrum",
    "generate_spectrum",
]
