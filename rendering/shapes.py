"""Outlined boid and target shapes drawn with immediate-mode OpenGL."""

import math
from collections import deque

import numpy as np
from OpenGL.GL import *
from config import seek as config

from steering import RenderState


def _draw_polygon(points, fill, outline, line_width):
    glColor3f(*fill)
    glBegin(GL_POLYGON)
    for x, y in points:
        glVertex2f(x, y)
    glEnd()

    glLineWidth(line_width)
    glColor3f(*outline)
    glBegin(GL_LINE_LOOP)
    for x, y in points:
        glVertex2f(x, y)
    glEnd()


class BoidRenderer:
    """Draws each agent as a filled triangle with a heading line, rotated to face its velocity."""

    def __init__(self, trail_length: int = 120):
        self.triangle = config.SHAPES["boid"]
        self.heading = config.SHAPES["heading"]
        self.line_width = config.SHAPES["outline_width"]
        self.fill = config.COLORS["boid"]
        self.outline = config.COLORS["outline"]
        self.trail_color = config.COLORS["trail"]
        # Trail of the first agent only
        self.trail = deque(maxlen=trail_length)

    def clear_trail(self):
        self.trail.clear()

    def _draw_trail(self):
        if len(self.trail) < 2:
            return
        glLineWidth(1.0)
        glColor3f(*self.trail_color)
        glBegin(GL_LINE_STRIP)
        for x, y in self.trail:
            glVertex2f(x, y)
        glEnd()

    def draw(self, state: RenderState):
        if len(state.positions):
            self.trail.append(tuple(state.positions[0]))
        self._draw_trail()

        for (x, y), angle in zip(state.positions, state.orientations):
            glPushMatrix()
            glTranslatef(x, y, 0.0)
            glRotatef(math.degrees(angle), 0.0, 0.0, 1.0)

            _draw_polygon(self.triangle, self.fill, self.outline, self.line_width)

            glColor3f(*self.outline)
            glBegin(GL_LINES)
            for hx, hy in self.heading:
                glVertex2f(hx, hy)
            glEnd()

            glPopMatrix()


class TargetRenderer:
    """Draws the target as a small outlined square."""

    def __init__(self):
        half = config.SHAPES["target_extent"] / 2
        self.square = [(-half, -half), (half, -half), (half, half), (-half, half)]
        self.line_width = config.SHAPES["outline_width"]
        self.fill = config.COLORS["target"]
        self.outline = config.COLORS["outline"]

    def draw(self, target: np.ndarray):
        glPushMatrix()
        glTranslatef(float(target[0]), float(target[1]), 0.0)
        _draw_polygon(self.square, self.fill, self.outline, self.line_width)
        glPopMatrix()
