"""Input handling for keyboard, mouse wheel, and pointer target."""

import pygame
from pygame.locals import *
from config import seek as config

from .camera import Camera


class InputHandler:
    """Handles quit/pause/reset keys, zoom, and the pointer's world position."""

    def __init__(self, camera: Camera):
        self.camera = camera
        self.paused = False
        self.reset_requested = False
        self.toggle_clamp_requested = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            elif event.key == K_SPACE:
                self.paused = not self.paused
            elif event.key == K_r:
                self.reset_requested = True
            elif event.key == K_c:
                self.toggle_clamp_requested = True
        elif event.type == MOUSEWHEEL:
            self.camera.zoom_smooth(1.0 + event.y * config.CAMERA["zoom_step"])

        return True

    def pointer_world_position(self):
        """World position of the pointer, or None when it is outside the window."""
        if not pygame.mouse.get_focused():
            return None
        screen_x, screen_y = pygame.mouse.get_pos()
        return self.camera.screen_to_world(screen_x, screen_y)
