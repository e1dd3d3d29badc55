"""Semi-implicit Euler integration of an agent, one tick per frame."""

from .agent import Agent
from .vector import facing_angle, limit


def integrate(agent: Agent, clamp_before_move: bool = False) -> float:
    """
    Advance an agent by one tick and clear its acceleration.

    By default the position and facing for the tick come from the unclamped
    velocity and only the stored velocity is capped at max_speed, so a single
    tick's displacement can exceed max_speed right after a large force.
    With clamp_before_move the velocity is capped first and used for both.

    Args:
        agent: Agent to update in place
        clamp_before_move: Cap velocity before computing position and facing

    Returns:
        The agent's orientation for this tick (radians, 0 = facing +Y)
    """
    new_velocity = agent.velocity + agent.acceleration
    if clamp_before_move:
        new_velocity = limit(new_velocity, agent.max_speed)

    agent.position[:2] += new_velocity
    agent.orientation = facing_angle(new_velocity)
    agent.velocity = limit(new_velocity, agent.max_speed)

    agent.reset_acceleration()
    return agent.orientation
