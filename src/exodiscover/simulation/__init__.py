"""Session, scheduling and frame composition for the orbit animation."""

from exodiscover.simulation.compositor import (
    ChartSink,
    DrawingSurface,
    Frame,
    FrameCompositor,
    RecordingSurface,
    compose_frame,
)
from exodiscover.simulation.scheduler import (
    AsyncioScheduler,
    CancelHandle,
    ManualScheduler,
    Scheduler,
)
from exodiscover.simulation.session import SimulationSession

__all__ = [
    "SimulationSession",
    "Scheduler",
    "CancelHandle",
    "ManualScheduler",
    "AsyncioScheduler",
    "Frame",
    "DrawingSurface",
    "ChartSink",
    "FrameCompositor",
    "RecordingSurface",
    "compose_frame",
]
