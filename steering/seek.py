"""Seek steering behavior."""

import numpy as np

from .errors import DegenerateDirection
from .vector import limit, normalize


def seek_force(
    position: np.ndarray,
    velocity: np.ndarray,
    target: np.ndarray,
    max_speed: float,
    max_force: float
) -> np.ndarray:
    """
    Calculate the steering force that pulls velocity toward a target.

    Args:
        position: Current 2D position (extra components are ignored)
        velocity: Current 2D velocity
        target: 2D point to steer toward
        max_speed: Speed of the desired velocity
        max_force: Upper bound on the returned force magnitude

    Returns:
        2D force vector with magnitude <= max_force. Zero when the target
        coincides with the position.
    """
    desired = np.asarray(target, dtype=np.float64)[:2] - np.asarray(position, dtype=np.float64)[:2]
    try:
        desired = normalize(desired) * max_speed
    except DegenerateDirection:
        # Already at the target, nothing to correct
        return np.zeros(2)

    steer = desired - np.asarray(velocity, dtype=np.float64)[:2]
    return limit(steer, max_force)
