"""Main application class that ties everything together."""

import numpy as np
import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import seek as config
from .camera import Camera
from .input_handler import InputHandler
from rendering import BoidRenderer, TargetRenderer, TextRenderer
from steering import build_simulation, make_target


class Application:
    """Main application managing the frame loop and rendering."""

    def __init__(self, target_kind: str = "pointer", count: int = None,
                 clamp_before_move: bool = None):
        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(config.WINDOW["title"])

        # Core components
        self.camera = Camera()
        self.input_handler = InputHandler(self.camera)

        # Rendering components
        self.boid_renderer = BoidRenderer()
        self.target_renderer = TargetRenderer()
        self.text_renderer = TextRenderer(color=config.COLORS["text"])

        # Simulation
        self.target_kind = target_kind
        target_provider = make_target(
            target_kind, config.TARGET, self.input_handler.pointer_world_position
        )
        self.simulation = build_simulation(
            config.AGENT, config.SIMULATION, target_provider,
            count=count, clamp_before_move=clamp_before_move
        )

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0

        print(f"[Seek] {self.simulation.num_agents} agent(s), target: {target_kind}, "
              f"clamp before move: {self.simulation.clamp_before_move}")
        self._setup_gl()

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glDisable(GL_DEPTH_TEST)
        glEnable(GL_LINE_SMOOTH)

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

        if self.input_handler.reset_requested:
            self.input_handler.reset_requested = False
            self.simulation.reset()
            self.boid_renderer.clear_trail()
            print("[Seek] Reset")

        if self.input_handler.toggle_clamp_requested:
            self.input_handler.toggle_clamp_requested = False
            self.simulation.clamp_before_move = not self.simulation.clamp_before_move
            print(f"[Seek] Clamp before move: {self.simulation.clamp_before_move}")

    def _update(self, dt: float):
        """Advance the camera, then the simulation by one tick."""
        self.camera.update(min(dt, 0.05))
        if not self.input_handler.paused:
            self.simulation.step()

    def _hud_lines(self):
        state = self.simulation.render_state()
        speeds = self.simulation.speeds()
        distance = float(np.linalg.norm(state.positions[0] - state.target))
        mode = "clamp->move" if self.simulation.clamp_before_move else "move->clamp"
        lines = [
            f"Tick: {self.simulation.tick}  |  FPS: {self.fps:.0f}  |  Target: {self.target_kind}",
            f"Speed: {speeds[0]:.3f}  |  Distance: {distance:.1f}  |  Order: {mode}",
        ]
        if self.input_handler.paused:
            lines.append("PAUSED")
        return lines

    def _render(self):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT)
        self.camera.apply()

        state = self.simulation.render_state()
        self.target_renderer.draw(state.target)
        self.boid_renderer.draw(state)

        screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        self.text_renderer.draw_lines(self._hud_lines(), 10, 10, screen_size)

        pygame.display.flip()

    def run(self):
        """Main application loop: one simulation tick per rendered frame."""
        while self.running:
            dt = self.clock.tick(config.WINDOW["fps"]) / 1000.0
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()
