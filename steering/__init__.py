"""Seek steering core: agents, forces, integration, and target providers."""

from .errors import DegenerateDirection
from .agent import Agent
from .seek import seek_force
from .integrator import integrate
from .targets import (
    TargetProvider, StaticTarget, PointerTarget, OrbitTarget, WaypointTarget, make_target
)
from .simulation import Simulation, RenderState
from .batch import SeekerBatch
from .spawn import build_simulation

__all__ = [
    "DegenerateDirection", "Agent", "seek_force", "integrate",
    "TargetProvider", "StaticTarget", "PointerTarget", "OrbitTarget", "WaypointTarget",
    "make_target", "Simulation", "RenderState", "SeekerBatch", "build_simulation",
]
