"""Target providers: sources of the world-space point agents steer toward."""

import math
import numpy as np
from typing import Callable, Optional, Sequence, Tuple

Point = Tuple[float, float]


def _as_point(point) -> np.ndarray:
    return np.array(point, dtype=np.float64)[:2]


class TargetProvider:
    """
    Pull-based source of the current target position.

    The frame driver calls update() once per frame, then current().
    Neither call blocks or fails; a provider with no new sample keeps
    returning its last-known point.
    """

    def update(self):
        """Advance the provider by one frame."""

    def current(self) -> np.ndarray:
        raise NotImplementedError


class StaticTarget(TargetProvider):
    """A target that never moves."""

    def __init__(self, point: Point = (0.0, 0.0)):
        self._point = _as_point(point)

    def current(self) -> np.ndarray:
        return self._point.copy()


class PointerTarget(TargetProvider):
    """
    Target following a pointer already unprojected into world space.

    Args:
        source: Callable returning the pointer's world position, or None
            when no position is available (e.g. the pointer left the window)
        initial: Position used until the first sample arrives
    """

    def __init__(self, source: Optional[Callable[[], Optional[Point]]] = None,
                 initial: Point = (0.0, 0.0)):
        self.source = source
        self._point = _as_point(initial)

    def set(self, point: Optional[Point]):
        """Push a sample directly; None keeps the last position."""
        if point is not None:
            self._point = _as_point(point)

    def update(self):
        if self.source is not None:
            self.set(self.source())

    def current(self) -> np.ndarray:
        return self._point.copy()


class OrbitTarget(TargetProvider):
    """Scripted target circling a center point at a fixed angular speed."""

    def __init__(self, center: Point = (0.0, 0.0), radius: float = 250.0,
                 angular_speed: float = 0.01, phase: float = 0.0):
        self.center = _as_point(center)
        self.radius = float(radius)
        self.angular_speed = float(angular_speed)
        self.angle = float(phase)

    def update(self):
        self.angle = (self.angle + self.angular_speed) % (2 * math.pi)

    def current(self) -> np.ndarray:
        return self.center + self.radius * np.array([math.cos(self.angle), math.sin(self.angle)])


class WaypointTarget(TargetProvider):
    """Target jumping through fixed waypoints, holding each for hold_ticks frames."""

    def __init__(self, points: Sequence[Point], hold_ticks: int = 240):
        if not points:
            raise ValueError("WaypointTarget needs at least one point")
        if hold_ticks < 1:
            raise ValueError(f"hold_ticks must be >= 1, got {hold_ticks}")
        self.points = [_as_point(p) for p in points]
        self.hold_ticks = int(hold_ticks)
        self._ticks = 0

    @property
    def index(self) -> int:
        return (self._ticks // self.hold_ticks) % len(self.points)

    def update(self):
        self._ticks += 1

    def current(self) -> np.ndarray:
        return self.points[self.index].copy()


def make_target(kind: str, target_config: dict, pointer_source=None) -> TargetProvider:
    """Build a target provider by name from a TARGET config dict."""
    if kind == "static":
        return StaticTarget(target_config["position"])
    if kind == "pointer":
        return PointerTarget(pointer_source, target_config["position"])
    if kind == "orbit":
        return OrbitTarget(target_config["position"],
                           target_config["orbit_radius"],
                           target_config["orbit_speed"])
    if kind == "waypoint":
        return WaypointTarget(target_config["waypoints"], target_config["hold_ticks"])
    raise ValueError(f"Unknown target kind: {kind}")


TARGET_KINDS = ("static", "pointer", "orbit", "waypoint")
