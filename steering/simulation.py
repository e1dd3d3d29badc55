"""Frame driver: steps a collection of agents toward a shared target."""

import numpy as np
from dataclasses import dataclass
from typing import List

from .agent import Agent
from .integrator import integrate
from .targets import TargetProvider


@dataclass
class RenderState:
    """Everything the renderer needs for one frame."""
    positions: np.ndarray     # (n, 2) world positions
    orientations: np.ndarray  # (n,) facing angles in radians
    target: np.ndarray        # (2,) target position
    layer: float = 0.0


class Simulation:
    """
    Owns the agents and runs target -> steering -> integration once per frame.

    All steering forces for a frame are computed before any agent is
    integrated, so every force sees the state left by the previous step.
    """

    def __init__(self, agents: List[Agent], target_provider: TargetProvider,
                 clamp_before_move: bool = False):
        self.agents = list(agents)
        self.target_provider = target_provider
        self.clamp_before_move = clamp_before_move
        self.target = np.asarray(target_provider.current(), dtype=np.float64)
        self.tick = 0

        self._initial = [
            (agent.position.copy(), agent.velocity.copy()) for agent in self.agents
        ]

    @property
    def num_agents(self) -> int:
        return len(self.agents)

    def step(self):
        """Advance every agent by one tick."""
        self.target_provider.update()
        self.target = np.asarray(self.target_provider.current(), dtype=np.float64)

        forces = [agent.seek(self.target) for agent in self.agents]

        for agent, force in zip(self.agents, forces):
            agent.apply_force(force)
            integrate(agent, self.clamp_before_move)

        self.tick += 1

    def run(self, ticks: int):
        for _ in range(ticks):
            self.step()

    def reset(self):
        """Put every agent back at its starting position and velocity."""
        for agent, (position, velocity) in zip(self.agents, self._initial):
            agent.position = position.copy()
            agent.velocity = velocity.copy()
            agent.orientation = 0.0
            agent.reset_acceleration()
        self.tick = 0

    def speeds(self) -> np.ndarray:
        return np.array([agent.speed for agent in self.agents])

    def render_state(self) -> RenderState:
        positions = np.array([agent.location for agent in self.agents]).reshape(-1, 2)
        orientations = np.array([agent.orientation for agent in self.agents])
        layer = float(self.agents[0].position[2]) if self.agents else 0.0
        return RenderState(positions, orientations, self.target.copy(), layer)
