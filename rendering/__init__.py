"""Rendering components for the seek simulation."""

from .shapes import BoidRenderer, TargetRenderer
from .text import TextRenderer

__all__ = ["BoidRenderer", "TargetRenderer", "TextRenderer"]
