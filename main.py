"""
Seek Steering Simulation
========================

A single boid steering toward the mouse pointer, one tick per frame.

Usage:
    python main.py                        # Boid follows the pointer
    python main.py --target orbit         # Scripted circular target
    python main.py --target waypoint      # Target hops between corners
    python main.py --count 500            # Many independent seekers
    python main.py --clamp-before-move    # Cap speed before moving

Controls:
    - Mouse: Move the target
    - Mouse wheel: Zoom
    - SPACE: Pause/Resume
    - C: Toggle clamp ordering
    - R: Reset agents
    - ESC: Quit
"""

import argparse

from core import Application
from steering.targets import TARGET_KINDS


def main():
    parser = argparse.ArgumentParser(description="Seek steering simulation")
    parser.add_argument("--target", choices=TARGET_KINDS, default="pointer",
                        help="Target provider (default: pointer)")
    parser.add_argument("--count", "-n", type=int, help="Number of agents")
    parser.add_argument("--clamp-before-move", action="store_true", default=None,
                        help="Cap velocity before computing position and facing")
    args = parser.parse_args()

    app = Application(
        target_kind=args.target,
        count=args.count,
        clamp_before_move=args.clamp_before_move
    )
    app.run()


if __name__ == "__main__":
    main()
