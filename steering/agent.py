"""Individual seeking agent with position, velocity, and steering limits."""

import numpy as np
from dataclasses import dataclass, field

from .seek import seek_force


@dataclass
class Agent:
    """
    A single boid steering toward a target.

    Attributes:
        position: (x, y, layer) vector; layer is the render depth and is never steered
        velocity: 2D velocity vector (world units per tick)
        acceleration: 2D acceleration vector (reset each frame)
        max_speed: Maximum velocity magnitude
        max_force: Maximum steering force magnitude
        orientation: Facing angle from the last integration step
        target: Last target point this agent steered toward
    """
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(2))
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(2))
    max_speed: float = 2.0
    max_force: float = 0.1
    orientation: float = 0.0
    target: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def __post_init__(self):
        if self.max_speed < 0:
            raise ValueError(f"max_speed must be >= 0, got {self.max_speed}")
        if self.max_force < 0:
            raise ValueError(f"max_force must be >= 0, got {self.max_force}")

        position = np.zeros(3)
        given = np.asarray(self.position, dtype=np.float64)
        position[:given.shape[0]] = given
        self.position = position
        self.velocity = np.array(self.velocity, dtype=np.float64)[:2]
        self.acceleration = np.array(self.acceleration, dtype=np.float64)[:2]
        if self.velocity.shape != (2,) or self.acceleration.shape != (2,):
            raise ValueError("velocity and acceleration need x and y components")
        self.target = np.array(self.target, dtype=np.float64)

    @property
    def location(self) -> np.ndarray:
        """2D world position (without the render layer)."""
        return self.position[:2]

    @property
    def speed(self) -> float:
        return float(np.linalg.norm(self.velocity))

    def distance_to(self, point: np.ndarray) -> float:
        return float(np.linalg.norm(np.asarray(point, dtype=np.float64)[:2] - self.location))

    def apply_force(self, force: np.ndarray):
        """Add a force to the agent's acceleration."""
        self.acceleration += np.asarray(force, dtype=np.float64)[:2]

    def reset_acceleration(self):
        """Clear the per-frame force accumulator."""
        self.acceleration = np.zeros(2)

    def seek(self, target: np.ndarray) -> np.ndarray:
        """Remember target and calculate the steering force toward it."""
        self.target = np.array(target, dtype=np.float64)[:2]
        return seek_force(self.position, self.velocity, self.target,
                          self.max_speed, self.max_force)
