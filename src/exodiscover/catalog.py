"""Demo planet catalog and staged mock analysis.

The "analysis" is a fixed progress sequence that ends by returning three
hardcoded planet records. It exists so sessions and front ends have real
entities to select.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Sequence

from exodiscover.domain.planet import ConfidenceClass, ExoplanetRecord

logger = logging.getLogger(__name__)

ANALYSIS_STAGES: tuple[int, ...] = (10, 25, 40, 60, 75, 90, 100)
STAGE_DELAY_SECONDS = 0.8

DEMO_PLANETS: tuple[ExoplanetRecord, ...] = (
    ExoplanetRecord(
        id="1",
        name="Kepler-442b",
        confidence=0.92,
        planet_type="Super Earth",
        radius=1.34,
        orbital_period=112.3,
        temperature=233,
        habitable_zone=True,
        detection_method="Transit",
        stellar_magnitude=14.76,
    ),
    ExoplanetRecord(
        id="2",
        name="TOI-715b",
        confidence=0.87,
        planet_type="Rocky Planet",
        radius=1.55,
        orbital_period=19.3,
        temperature=347,
        habitable_zone=False,
        detection_method="Transit",
        stellar_magnitude=12.43,
    ),
    ExoplanetRecord(
        id="3",
        name="TRAPPIST-1d",
        confidence=0.95,
        planet_type="Terrestrial",
        radius=0.77,
        orbital_period=4.05,
        temperature=288,
        habitable_zone=True,
        detection_method="Transit",
        stellar_magnitude=18.8,
    ),
)


def get_planet(key: str, records: Iterable[ExoplanetRecord] = DEMO_PLANETS) -> ExoplanetRecord:
    """Look up a record by id or case-insensitive name.

    Raises:
        KeyError: If no record matches.
    """
    needle = key.strip().lower()
    for record in records:
        if record.id == key or record.name.lower() == needle:
            return record
    raise KeyError(f"Unknown planet {key!r}")


def classify(records: Iterable[ExoplanetRecord]) -> dict[ConfidenceClass, list[ExoplanetRecord]]:
    """Group records by confidence class (every class is present, possibly empty)."""
    groups: dict[ConfidenceClass, list[ExoplanetRecord]] = {cls: [] for cls in ConfidenceClass}
    for record in records:
        groups[record.confidence_class].append(record)
    return groups


def run_mock_analysis(
    progress: Callable[[int], None] | None = None,
    *,
    delay: float = 0.0,
    stages: Sequence[int] = ANALYSIS_STAGES,
    sleep: Callable[[float], None] = time.sleep,
) -> list[ExoplanetRecord]:
    """Step through the progress stages and return the demo records.

    Args:
        progress: Called with each stage percentage, in order.
        delay: Seconds to wait before each stage (the demo used 0.8).
        stages: Percentages to report.
        sleep: Injected sleep, so tests never wait.
    """
    for pct in stages:
        if delay > 0:
            sleep(delay)
        logger.debug("Mock analysis progress %d%%", pct)
        if progress is not None:
            progress(pct)
    logger.info("Mock analysis complete: %d candidates", len(DEMO_PLANETS))
    return list(DEMO_PLANETS)


__all__ = [
    "ANALYSIS_STAGES",
    "STAGE_DELAY_SECONDS",
    "DEMO_PLANETS",
    "get_planet",
    "classify",
    "run_mock_analysis",
]
