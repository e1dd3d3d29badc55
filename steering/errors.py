"""Exceptions raised by the steering core."""


class DegenerateDirection(ValueError):
    """A direction vector has zero length and cannot be normalized."""
