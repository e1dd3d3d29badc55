"""
Seek Trajectory Recorder
========================

Runs the steering simulation headless for a fixed number of ticks and saves
the agents' positions and orientations, plus the target, to disk.

Usage:
    python -m tools.record                          # Default session, static target
    python -m tools.record orbit_run --target orbit # Named session, orbiting target
    python -m tools.record --ticks 2000 --count 200 # Shorter run, many seekers
    python -m tools.record --status orbit_run       # Show a recording's summary
    python -m tools.record --list                   # List all recordings

Output:
    recordings/<session_name>/
        metadata.json      - Recording settings and final statistics
        trajectory.zstd    - Compressed positions/orientations/targets
"""

import json
import time
import struct
import argparse
import numpy as np
from datetime import datetime
from pathlib import Path

import zstandard as zstd

from config import seek as config
from steering import build_simulation, make_target
from steering.targets import TARGET_KINDS

# Get project root (parent of tools/)
PROJECT_ROOT = Path(__file__).parent.parent
RECORDINGS_ROOT = PROJECT_ROOT / "recordings"

TRAJECTORY_FILE = "trajectory.zstd"
TRAJECTORY_FORMAT = 1


def get_recording_dir(session_name: str, root: Path = None) -> Path:
    """Get (and create) the directory for a recording session."""
    base = (root or RECORDINGS_ROOT) / session_name
    base.mkdir(parents=True, exist_ok=True)
    return base


def recording_exists(session_name: str, root: Path = None) -> bool:
    return ((root or RECORDINGS_ROOT) / session_name / "metadata.json").exists()


def save_metadata(rec_dir: Path, settings: dict, start_time: float):
    """Save recording metadata."""
    metadata = {
        **settings,
        "start_time": start_time,
        "start_datetime": datetime.fromtimestamp(start_time).isoformat(),
    }
    with open(rec_dir / "metadata.json", "w") as f:
        json.dump(metadata, f, indent=2)


def load_metadata(rec_dir: Path) -> dict:
    """Load recording metadata."""
    with open(rec_dir / "metadata.json", "r") as f:
        return json.load(f)


def compress_trajectory(positions: np.ndarray, orientations: np.ndarray,
                        targets: np.ndarray, level: int = 19) -> bytes:
    """
    Compress a whole trajectory with zstd.

    Format:
    - 1 byte: format (1 = zstd float32)
    - 4 bytes: frame count
    - 4 bytes: agent count
    - then positions (frames, agents, 2), orientations (frames, agents) and
      targets (frames, 2), each as a 4 byte size followed by zstd data
    """
    positions = np.asarray(positions, dtype=np.float32)
    orientations = np.asarray(orientations, dtype=np.float32)
    targets = np.asarray(targets, dtype=np.float32)
    frames, agents = orientations.shape

    if positions.shape != (frames, agents, 2):
        raise ValueError(f"positions shape {positions.shape} does not match {(frames, agents, 2)}")
    if targets.shape != (frames, 2):
        raise ValueError(f"targets shape {targets.shape} does not match {(frames, 2)}")

    cctx = zstd.ZstdCompressor(level=level, threads=1)

    result = struct.pack('<BII', TRAJECTORY_FORMAT, frames, agents)
    for array in (positions, orientations, targets):
        compressed = cctx.compress(array.tobytes())
        result += struct.pack('<I', len(compressed))
        result += compressed

    return result


def decompress_trajectory(data: bytes) -> tuple:
    """Decompress a trajectory into (positions, orientations, targets)."""
    header_size = struct.calcsize('<BII')
    if len(data) < header_size:
        raise ValueError("Invalid compressed trajectory")

    comp_format, frames, agents = struct.unpack('<BII', data[:header_size])
    if comp_format != TRAJECTORY_FORMAT:
        raise ValueError(f"Unknown trajectory format: {comp_format}")

    dctx = zstd.ZstdDecompressor()
    offset = header_size
    sections = []
    for _ in range(3):
        if offset + 4 > len(data):
            raise ValueError("Truncated trajectory data")
        size = struct.unpack('<I', data[offset:offset + 4])[0]
        offset += 4
        sections.append(dctx.decompress(data[offset:offset + size]))
        offset += size

    positions = np.frombuffer(sections[0], dtype=np.float32).reshape(frames, agents, 2)
    orientations = np.frombuffer(sections[1], dtype=np.float32).reshape(frames, agents)
    targets = np.frombuffer(sections[2], dtype=np.float32).reshape(frames, 2)
    return positions, orientations, targets


def save_trajectory(rec_dir: Path, positions, orientations, targets,
                    level: int = 19) -> int:
    """Write trajectory.zstd; returns the compressed size in bytes."""
    data = compress_trajectory(positions, orientations, targets, level)
    with open(rec_dir / TRAJECTORY_FILE, "wb") as f:
        f.write(data)
    return len(data)


def load_trajectory(rec_dir: Path) -> tuple:
    with open(rec_dir / TRAJECTORY_FILE, "rb") as f:
        return decompress_trajectory(f.read())


def load_playable_trajectory(rec_dir: Path) -> tuple:
    """Load a trajectory, rejecting recordings that hold no frames."""
    positions, orientations, targets = load_trajectory(rec_dir)
    if positions.shape[0] == 0:
        raise ValueError(f"Recording has no frames: {rec_dir.name}")
    return positions, orientations, targets


def run_headless(simulation, ticks: int, every: int = 1) -> tuple:
    """
    Step a simulation and sample its render state every `every` ticks.

    Returns:
        (positions, orientations, targets) arrays, one row per sampled tick
    """
    if ticks < 1:
        raise ValueError(f"ticks must be >= 1, got {ticks}")
    if every < 1:
        raise ValueError(f"every must be >= 1, got {every}")
    if every > ticks:
        raise ValueError(f"every ({every}) must not exceed ticks ({ticks})")

    positions, orientations, targets = [], [], []
    for _ in range(ticks):
        simulation.step()
        if simulation.tick % every == 0:
            state = simulation.render_state()
            positions.append(state.positions)
            orientations.append(state.orientations)
            targets.append(state.target)

    n = simulation.num_agents
    return (
        np.array(positions, dtype=np.float32).reshape(-1, n, 2),
        np.array(orientations, dtype=np.float32).reshape(-1, n),
        np.array(targets, dtype=np.float32).reshape(-1, 2),
    )


def summarize(simulation) -> dict:
    """Final distance and speed statistics."""
    state = simulation.render_state()
    distances = np.linalg.norm(state.positions - state.target, axis=1)
    speeds = simulation.speeds()
    return {
        "final_mean_distance": float(distances.mean()),
        "final_max_distance": float(distances.max()),
        "final_max_speed": float(speeds.max()),
    }


def record(settings: dict, root: Path = None) -> Path:
    """Run a recording session described by settings and write it to disk."""
    start_time = time.time()

    target_provider = make_target(settings["target"], config.TARGET)
    simulation = build_simulation(
        config.AGENT, config.SIMULATION, target_provider,
        count=settings["count"], clamp_before_move=settings["clamp_before_move"]
    )

    print(f"[Record] Starting recording: {settings['session_name']}")
    print(f"[Record] Agents: {settings['count']:,}, target: {settings['target']}")
    print(f"[Record] Ticks: {settings['ticks']:,}, sampling every {settings['every']}")

    positions, orientations, targets = run_headless(simulation, settings["ticks"], settings["every"])
    rec_dir = get_recording_dir(settings["session_name"], root)
    size = save_trajectory(rec_dir, positions, orientations, targets, config.RECORD["compression_level"])

    stats = summarize(simulation)
    save_metadata(rec_dir, {
        **settings,
        "frames": int(positions.shape[0]),
        "max_speed": config.AGENT["max_speed"],
        "max_force": config.AGENT["max_force"],
        "compressed_bytes": size,
        **stats,
    }, start_time)

    print(f"[Record] ✓ Recording complete in {time.time() - start_time:.1f}s")
    print(f"[Record] Final distance to target: {stats['final_mean_distance']:.3f} (max {stats['final_max_distance']:.3f})")
    print(f"[Record] Final max speed: {stats['final_max_speed']:.4f}")
    print(f"[Record] Output: {rec_dir} ({size / 1024:.1f} KB)")
    print(f"\n[Record] To playback: python -m tools.playback {settings['session_name']}")
    return rec_dir


def show_status(session_name: str, root: Path = None):
    """Show a recording's metadata summary."""
    if not recording_exists(session_name, root):
        print(f"[Status] No recording found: {session_name}")
        return

    metadata = load_metadata((root or RECORDINGS_ROOT) / session_name)
    print(f"\n[Status] Recording: {session_name}")
    print(f"  Agents: {metadata['count']:,}")
    print(f"  Target: {metadata['target']}")
    print(f"  Frames: {metadata['frames']:,} (ticks: {metadata['ticks']:,})")
    print(f"  Clamp before move: {metadata['clamp_before_move']}")
    print(f"  Final distance: {metadata['final_mean_distance']:.3f}")
    print(f"  Final max speed: {metadata['final_max_speed']:.4f}")
    print(f"  Started: {metadata['start_datetime']}")


def list_recordings(root: Path = None) -> list:
    """Print and return the names of all recordings."""
    base = root or RECORDINGS_ROOT
    sessions = []
    if base.exists():
        sessions = sorted(p.name for p in base.iterdir() if (p / "metadata.json").exists())

    if not sessions:
        print("[Record] No recordings found")
        return sessions

    print("[Record] Recordings:")
    for name in sessions:
        metadata = load_metadata(base / name)
        print(f"  {name:<24} {metadata['count']:>6,} agents  {metadata['frames']:>8,} frames  "
              f"target={metadata['target']}")
    return sessions


def main(argv=None):
    parser = argparse.ArgumentParser(description="Seek trajectory recorder")
    parser.add_argument("session", nargs="?", help="Session name")
    parser.add_argument("--status", action="store_true", help="Show recording status")
    parser.add_argument("--list", action="store_true", help="List all recordings")
    parser.add_argument("--ticks", "-t", type=int, default=config.RECORD["ticks"],
                        help="Number of ticks to simulate")
    parser.add_argument("--every", type=int, default=1, help="Save every Nth tick")
    parser.add_argument("--target", choices=[k for k in TARGET_KINDS if k != "pointer"],
                        default=config.RECORD["target"], help="Target provider")
    parser.add_argument("--count", "-n", type=int, default=config.SIMULATION["count"],
                        help="Number of agents")
    parser.add_argument("--clamp-before-move", action="store_true",
                        help="Cap velocity before computing position and facing")
    args = parser.parse_args(argv)

    if args.list:
        list_recordings()
        return

    if args.status:
        if args.session:
            show_status(args.session)
        else:
            list_recordings()
        return

    if args.ticks < 1 or not 1 <= args.every <= args.ticks:
        print(f"[Record] Error: need --ticks >= 1 and 1 <= --every <= --ticks "
              f"(got ticks={args.ticks}, every={args.every})")
        return

    session_name = args.session or datetime.now().strftime("seek_%Y%m%d_%H%M%S")
    record({
        "session_name": session_name,
        "ticks": args.ticks,
        "every": args.every,
        "target": args.target,
        "count": args.count,
        "clamp_before_move": args.clamp_before_move,
    })


if __name__ == "__main__":
    main()
