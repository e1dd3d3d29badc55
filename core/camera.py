"""2D orthographic camera and screen-to-world unprojection."""

import numpy as np
from OpenGL.GL import *
from config import seek as config


class Camera:
    """
    Orthographic camera centred on the world origin with smooth zoom.

    World +Y points up; one world unit is one pixel at zoom 1.
    """

    def __init__(self, width: int = None, height: int = None):
        self.width = width or config.WINDOW["width"]
        self.height = height or config.WINDOW["height"]
        self.center = np.array([0.0, 0.0])
        self.zoom_level = config.CAMERA["initial_zoom"]
        self.target_zoom = self.zoom_level
        self.zoom_smoothing = config.CAMERA["zoom_smoothing"]

    def _clamp_zoom(self, value: float) -> float:
        return max(config.CAMERA["min_zoom"], min(config.CAMERA["max_zoom"], value))

    def zoom(self, factor: float):
        """Immediately scale the zoom by factor."""
        self.zoom_level = self._clamp_zoom(self.zoom_level * factor)
        self.target_zoom = self.zoom_level

    def zoom_smooth(self, factor: float):
        """Smoothly scale the zoom by factor."""
        self.target_zoom = self._clamp_zoom(self.target_zoom * factor)

    def update(self, dt: float):
        """Update camera state (called each frame)."""
        blend = min(1.0, self.zoom_smoothing * dt)
        self.zoom_level = self._clamp_zoom(self.zoom_level + (self.target_zoom - self.zoom_level) * blend)

    def screen_to_world(self, screen_x: float, screen_y: float) -> tuple:
        """
        Convert a pygame pixel position (origin top-left, y down) to world space.
        """
        world_x = (screen_x - self.width / 2) / self.zoom_level + self.center[0]
        world_y = (self.height / 2 - screen_y) / self.zoom_level + self.center[1]
        return (world_x, world_y)

    def world_bounds(self) -> tuple:
        """Visible world rectangle as (left, right, bottom, top)."""
        half_w = self.width / 2 / self.zoom_level
        half_h = self.height / 2 / self.zoom_level
        return (self.center[0] - half_w, self.center[0] + half_w,
                self.center[1] - half_h, self.center[1] + half_h)

    def apply(self):
        """Load the orthographic projection into OpenGL."""
        left, right, bottom, top = self.world_bounds()
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(left, right, bottom, top, -1000.0, 1000.0)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
