"""Configuration for the 2D seek steering simulation."""

WINDOW = {
    "width": 800,
    "height": 800,
    "title": "Seek",
    "fps": 60
}

CAMERA = {
    "initial_zoom": 1.0,
    "min_zoom": 0.1,
    "max_zoom": 10.0,
    "zoom_step": 0.1,       # Per mouse wheel notch
    "zoom_smoothing": 8.0
}

AGENT = {
    "position": (200.0, 0.0),
    "velocity": (10.0, -10.0),
    "max_speed": 2.0,
    "max_force": 0.1,
    "layer": 100.0,         # Render depth, never steered
    "spread": 150.0         # Spawn jitter radius when count > 1
}

TARGET = {
    "position": (0.0, 0.0),
    "layer": 10.0,
    "orbit_radius": 250.0,
    "orbit_speed": 0.01,    # Radians per tick
    "waypoints": [(-250.0, -250.0), (250.0, -250.0), (250.0, 250.0), (-250.0, 250.0)],
    "hold_ticks": 240
}

SIMULATION = {
    "count": 1,
    "clamp_before_move": False,
    "batch_threshold": 64   # Agent count above which SeekerBatch is used
}

SHAPES = {
    "boid": [(-15.0, -25.0), (15.0, -25.0), (0.0, 25.0)],
    "heading": [(0.0, 0.0), (0.0, 50.0)],
    "target_extent": 10.0,
    "outline_width": 1.0
}

COLORS = {
    "background": (0.04, 0.04, 0.04, 1.0),
    "boid": (0.0, 0.0, 1.0),
    "target": (1.0, 0.0, 0.0),
    "outline": (1.0, 1.0, 1.0),
    "trail": (0.25, 0.25, 0.4),
    "text": (0.9, 0.9, 0.9)
}

RECORD = {
    "ticks": 10000,
    "target": "static",
    "compression_level": 19
}
