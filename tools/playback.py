"""
Seek Recording Playback
=======================

Replays a recorded trajectory frame by frame.

Usage:
    python -m tools.playback <session_name>              # Playback with defaults
    python -m tools.playback <session_name> --fps 120    # Custom FPS
    python -m tools.playback <session_name> --loop       # Loop playback

Controls during playback:
    Scroll      - Zoom in/out
    SPACE       - Pause/Resume
    LEFT/RIGHT  - Step frame
    R           - Restart from beginning
    L           - Toggle loop mode
    ESC         - Quit
"""

import argparse

import pygame
from pygame.locals import *
from OpenGL.GL import *

from config import seek as config
from core.camera import Camera
from rendering import BoidRenderer, TargetRenderer, TextRenderer
from steering import RenderState
from tools.record import RECORDINGS_ROOT, recording_exists, load_metadata, load_playable_trajectory


class Player:
    """Steps through a recorded trajectory and draws each frame."""

    def __init__(self, session_name: str, fps: int = 60, loop: bool = False):
        rec_dir = RECORDINGS_ROOT / session_name
        self.session_name = session_name
        self.metadata = load_metadata(rec_dir)
        self.positions, self.orientations, self.targets = load_playable_trajectory(rec_dir)
        self.num_frames = self.positions.shape[0]
        self.fps = fps
        self.loop = loop
        self.frame = 0
        self.paused = False
        self.running = True

        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(f"Playback: {session_name}")
        glClearColor(*config.COLORS["background"])

        self.camera = Camera()
        self.boid_renderer = BoidRenderer()
        self.target_renderer = TargetRenderer()
        self.text_renderer = TextRenderer(color=config.COLORS["text"])
        self.clock = pygame.time.Clock()

        print(f"[Playback] {session_name}: {self.num_frames:,} frames, "
              f"{self.positions.shape[1]:,} agents")

    def _seek(self, frame: int):
        if self.loop:
            frame %= self.num_frames
        self.frame = max(0, min(self.num_frames - 1, frame))

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == QUIT:
                self.running = False
            elif event.type == KEYDOWN:
                if event.key == K_ESCAPE:
                    self.running = False
                elif event.key == K_SPACE:
                    self.paused = not self.paused
                elif event.key == K_LEFT:
                    self._seek(self.frame - 1)
                elif event.key == K_RIGHT:
                    self._seek(self.frame + 1)
                elif event.key == K_r:
                    self.frame = 0
                    self.boid_renderer.clear_trail()
                elif event.key == K_l:
                    self.loop = not self.loop
            elif event.type == MOUSEWHEEL:
                self.camera.zoom_smooth(1.0 + event.y * config.CAMERA["zoom_step"])

    def _advance(self):
        if self.paused:
            return
        if self.frame + 1 >= self.num_frames:
            if self.loop:
                self.frame = 0
                self.boid_renderer.clear_trail()
            else:
                self.paused = True
            return
        self.frame += 1

    def _render(self):
        glClear(GL_COLOR_BUFFER_BIT)
        self.camera.apply()

        state = RenderState(
            positions=self.positions[self.frame],
            orientations=self.orientations[self.frame],
            target=self.targets[self.frame],
        )
        self.target_renderer.draw(state.target)
        self.boid_renderer.draw(state)

        screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        status = "PAUSED" if self.paused else f"{self.clock.get_fps():.0f} FPS"
        self.text_renderer.draw_lines([
            f"Frame: {self.frame + 1}/{self.num_frames}  |  {status}  |  Loop: {'on' if self.loop else 'off'}",
            f"Target: {self.metadata['target']}  |  Agents: {self.metadata['count']:,}",
        ], 10, 10, screen_size)

        pygame.display.flip()

    def run(self):
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0
            self._handle_events()
            self.camera.update(min(dt, 0.05))
            self._advance()
            self._render()

        pygame.quit()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Seek recording playback")
    parser.add_argument("session", help="Recording session name")
    parser.add_argument("--fps", type=int, default=config.WINDOW["fps"], help="Playback FPS")
    parser.add_argument("--loop", action="store_true", help="Loop playback")
    args = parser.parse_args(argv)

    if not recording_exists(args.session):
        print(f"[Playback] No recording found: {args.session}")
        print("[Playback] List recordings with: python -m tools.record --list")
        return

    try:
        player = Player(args.session, fps=args.fps, loop=args.loop)
    except ValueError as e:
        print(f"[Playback] Cannot play {args.session}: {e}")
        return

    player.run()


if __name__ == "__main__":
    main()
