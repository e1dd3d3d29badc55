"""HUD text drawn as pygame-rendered bitmaps over the scene."""

import pygame
from OpenGL.GL import *


class TextRenderer:
    """Draws lines of HUD text in window pixel coordinates (origin top-left)."""

    def __init__(self, font_name: str = "monospace", font_size: int = 16,
                 color: tuple = (0.9, 0.9, 0.9), cache_size: int = 64):
        pygame.font.init()
        self.font = pygame.font.SysFont(font_name, font_size)
        self.color = tuple(int(c * 255) for c in color)
        self.line_height = self.font.get_linesize()
        self.cache_size = cache_size
        self._bitmaps = {}

    def _bitmap(self, text: str) -> tuple:
        """(rgba bytes, width, height) for text, cached since HUD lines repeat."""
        bitmap = self._bitmaps.get(text)
        if bitmap is None:
            if len(self._bitmaps) >= self.cache_size:
                self._bitmaps.clear()
            surface = self.font.render(text, True, self.color)
            w, h = surface.get_size()
            bitmap = (pygame.image.tostring(surface, "RGBA", True), w, h)
            self._bitmaps[text] = bitmap
        return bitmap

    def _begin_overlay(self, screen_size: tuple):
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, screen_size[0], 0, screen_size[1], -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

    def _end_overlay(self):
        glDisable(GL_BLEND)
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)

    def _blit(self, text: str, x: int, y: int, screen_height: int):
        data, w, h = self._bitmap(text)
        glRasterPos2f(x, screen_height - y - h)
        glDrawPixels(w, h, GL_RGBA, GL_UNSIGNED_BYTE, data)

    def draw_text(self, text: str, x: int, y: int, screen_size: tuple):
        self.draw_lines([text], x, y, screen_size)

    def draw_lines(self, lines, x: int, y: int, screen_size: tuple):
        """
        Draw lines stacked downward from (x, y).

        Args:
            lines: Strings to draw, one per row
            x: Left edge in pixels
            y: Top edge of the first row in pixels
            screen_size: (width, height) of the window
        """
        self._begin_overlay(screen_size)
        for i, line in enumerate(lines):
            self._blit(line, x, y + i * self.line_height, screen_size[1])
        self._end_overlay()
