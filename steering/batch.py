"""Many independent seekers stepped together with a Numba-compiled kernel."""

import math
import numpy as np
from numba import njit, prange

from .simulation import RenderState
from .targets import TargetProvider


# ============================================================================
# NUMBA JIT-COMPILED SEEK + INTEGRATE
# ============================================================================

@njit(cache=True)
def facing_angle_numba(vx: float, vy: float) -> float:
    """Facing angle from +Y for a velocity; 0 for the zero vector."""
    if vx == 0.0 and vy == 0.0:
        return 0.0
    cos_angle = vy / math.sqrt(vx * vx + vy * vy)
    cos_angle = max(-1.0, min(1.0, cos_angle))
    return math.acos(cos_angle) * -math.copysign(1.0, vx)


@njit(parallel=True, cache=True)
def seek_and_integrate_numba(
    positions: np.ndarray,
    velocities: np.ndarray,
    orientations: np.ndarray,
    targets: np.ndarray,
    max_speed: float,
    max_force: float,
    clamp_before_move: bool,
    num_agents: int
):
    """Seek toward each agent's target, then advance one tick."""
    max_speed_sq = max_speed * max_speed
    max_force_sq = max_force * max_force

    for i in prange(num_agents):
        vx = velocities[i, 0]
        vy = velocities[i, 1]

        # Seek: desired velocity at max_speed, steer clamped to max_force
        ax = 0.0
        ay = 0.0
        dx = targets[i, 0] - positions[i, 0]
        dy = targets[i, 1] - positions[i, 1]
        dist = math.sqrt(dx * dx + dy * dy)
        if dist > 0.0:
            sx = (dx / dist) * max_speed - vx
            sy = (dy / dist) * max_speed - vy
            steer_sq = sx * sx + sy * sy
            if steer_sq > max_force_sq:
                steer_mag = math.sqrt(steer_sq)
                sx = (sx / steer_mag) * max_force
                sy = (sy / steer_mag) * max_force
            ax += sx
            ay += sy

        # Integrate
        vx += ax
        vy += ay

        speed_sq = vx * vx + vy * vy
        cx = vx
        cy = vy
        if speed_sq > max_speed_sq:
            speed = math.sqrt(speed_sq)
            cx = (vx / speed) * max_speed
            cy = (vy / speed) * max_speed

        if clamp_before_move:
            vx = cx
            vy = cy

        positions[i, 0] += vx
        positions[i, 1] += vy
        orientations[i] = facing_angle_numba(vx, vy)

        velocities[i, 0] = cx
        velocities[i, 1] = cy


# ============================================================================
# SEEKER BATCH CLASS
# ============================================================================

class SeekerBatch:
    """
    Structure-of-arrays seekers sharing speed and force limits.

    Every seeker reads only its own previous state, so the kernel runs
    them in parallel. Semantics match Simulation.step for each seeker.
    """

    def __init__(self, positions: np.ndarray, velocities: np.ndarray,
                 target_provider: TargetProvider, max_speed: float = 2.0,
                 max_force: float = 0.1, clamp_before_move: bool = False,
                 layer: float = 0.0):
        if max_speed < 0:
            raise ValueError(f"max_speed must be >= 0, got {max_speed}")
        if max_force < 0:
            raise ValueError(f"max_force must be >= 0, got {max_force}")

        self.positions = np.ascontiguousarray(positions, dtype=np.float64).reshape(-1, 2).copy()
        self.velocities = np.ascontiguousarray(velocities, dtype=np.float64).reshape(-1, 2).copy()
        if self.positions.shape != self.velocities.shape:
            raise ValueError("positions and velocities must have the same shape")

        self.num_agents = self.positions.shape[0]
        self.orientations = np.zeros(self.num_agents, dtype=np.float64)
        self.target_provider = target_provider
        self.max_speed = float(max_speed)
        self.max_force = float(max_force)
        self.clamp_before_move = clamp_before_move
        self.layer = float(layer)
        self.target = np.asarray(target_provider.current(), dtype=np.float64)
        self.tick = 0

        self._initial_positions = self.positions.copy()
        self._initial_velocities = self.velocities.copy()
        self._targets = np.zeros((self.num_agents, 2), dtype=np.float64)

    def _broadcast_targets(self, targets: np.ndarray) -> np.ndarray:
        targets = np.asarray(targets, dtype=np.float64)
        if targets.ndim == 1:
            self._targets[:] = targets[:2]
        else:
            self._targets[:] = targets[:, :2]
        return self._targets

    def step_toward(self, targets: np.ndarray):
        """Advance every seeker one tick toward a shared (2,) or per-seeker (n, 2) target."""
        seek_and_integrate_numba(
            self.positions,
            self.velocities,
            self.orientations,
            self._broadcast_targets(targets),
            self.max_speed,
            self.max_force,
            bool(self.clamp_before_move),
            self.num_agents
        )

    def step(self):
        """Run one frame: pull the target, then seek and integrate all seekers."""
        self.target_provider.update()
        self.target = np.asarray(self.target_provider.current(), dtype=np.float64)
        self.step_toward(self.target)
        self.tick += 1

    def run(self, ticks: int):
        for _ in range(ticks):
            self.step()

    def reset(self):
        np.copyto(self.positions, self._initial_positions)
        np.copyto(self.velocities, self._initial_velocities)
        self.orientations.fill(0.0)
        self.tick = 0

    def speeds(self) -> np.ndarray:
        return np.sqrt(np.sum(self.velocities ** 2, axis=1))

    def render_state(self) -> RenderState:
        return RenderState(
            positions=self.positions.copy(),
            orientations=self.orientations.copy(),
            target=self.target.copy(),
            layer=self.layer
        )

