#!/usr/bin/env python3
"""
Convenience entry point for trajectory recording.

Usage:
    python record.py                          # Record with default settings
    python record.py orbit_run --target orbit # Named session, orbiting target
    python record.py --status orbit_run       # Check recording status
    python record.py --list                   # List all recordings
"""

from tools.record import main

if __name__ == "__main__":
    main()
