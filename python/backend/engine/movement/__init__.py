from backend.engine.movement.resolver import Slide, SlideResolver
from backend.engine.movement.simulator import RouteSimulator, SimulationResult, Trace

__all__ = ["RouteSimulator", "SimulationResult", "Slide", "SlideResolver", "Trace"]
