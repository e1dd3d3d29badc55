"""Small 2D vector helpers shared by the steering policy and the integrator."""

import math
import numpy as np

from .errors import DegenerateDirection


def limit(vector: np.ndarray, max_length: float) -> np.ndarray:
    """
    Clamp a vector's length to at most max_length.

    Vectors at or below the limit are returned unchanged (as a copy);
    longer ones are rescaled to exactly max_length.
    """
    vector = np.asarray(vector, dtype=np.float64)
    length_sq = float(np.dot(vector, vector))
    if length_sq > max_length * max_length:
        return vector / math.sqrt(length_sq) * max_length
    return vector.copy()


def normalize(vector: np.ndarray) -> np.ndarray:
    """Return the unit vector pointing along vector."""
    vector = np.asarray(vector, dtype=np.float64)
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise DegenerateDirection("cannot normalize a zero-length vector")
    return vector / length


def facing_angle(velocity: np.ndarray) -> float:
    """
    Signed rotation (radians) that turns a shape drawn facing +Y toward velocity.

    The zero vector faces +Y (angle 0). Otherwise the magnitude is the angle
    between velocity and +Y, negated for rightward motion, so the result can
    be fed directly to a counter-clockwise rotation about Z.
    """
    vx = float(velocity[0])
    vy = float(velocity[1])
    if vx == 0.0 and vy == 0.0:
        return 0.0

    cos_angle = vy / math.sqrt(vx * vx + vy * vy)
    angle = math.acos(max(-1.0, min(1.0, cos_angle)))
    # copysign keeps the sign of -0.0, so straight down faces -pi
    return angle * -math.copysign(1.0, vx)
