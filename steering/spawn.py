"""Build simulations from configuration."""

import numpy as np

from .agent import Agent
from .batch import SeekerBatch
from .simulation import Simulation
from .targets import TargetProvider


def spawn_positions(count: int, center, spread: float, seed: int = 0) -> np.ndarray:
    """
    Starting positions for count agents.

    The first agent sits exactly on center; the rest are scattered
    uniformly within spread of it.
    """
    rng = np.random.default_rng(seed)
    positions = np.tile(np.asarray(center, dtype=np.float64)[:2], (count, 1))
    if count > 1:
        angles = rng.uniform(0.0, 2 * np.pi, count - 1)
        radii = spread * np.sqrt(rng.uniform(0.0, 1.0, count - 1))
        positions[1:, 0] += radii * np.cos(angles)
        positions[1:, 1] += radii * np.sin(angles)
    return positions


def build_simulation(agent_config: dict, simulation_config: dict,
                     target_provider: TargetProvider, count: int = None,
                     clamp_before_move: bool = None, seed: int = 0):
    """
    Create a Simulation, or a SeekerBatch once count exceeds batch_threshold.

    Args:
        agent_config: AGENT config dict
        simulation_config: SIMULATION config dict
        target_provider: Source of the target point
        count: Override for simulation_config["count"]
        clamp_before_move: Override for simulation_config["clamp_before_move"]
        seed: Seed for spawn jitter
    """
    count = simulation_config["count"] if count is None else count
    if clamp_before_move is None:
        clamp_before_move = simulation_config["clamp_before_move"]
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")

    positions = spawn_positions(count, agent_config["position"], agent_config["spread"], seed)
    velocity = np.asarray(agent_config["velocity"], dtype=np.float64)

    if count > simulation_config["batch_threshold"]:
        print(f"[Batch] Stepping {count:,} seekers with Numba")
        return SeekerBatch(
            positions,
            np.tile(velocity, (count, 1)),
            target_provider,
            max_speed=agent_config["max_speed"],
            max_force=agent_config["max_force"],
            clamp_before_move=clamp_before_move,
            layer=agent_config["layer"]
        )

    agents = [
        Agent(
            position=(x, y, agent_config["layer"]),
            velocity=velocity.copy(),
            max_speed=agent_config["max_speed"],
            max_force=agent_config["max_force"]
        )
        for x, y in positions
    ]
    return Simulation(agents, target_provider, clamp_before_move)
