#!/usr/bin/env python3
"""
Glider Demonstration Script

Sends a glider across a closed board and logs its position and live-cell
count until it reaches the far edge, where the dead border stops it.

Usage:
    python scripts/demo_glider.py --size 16 --steps 60
"""

import argparse
import logging
import sys

import numpy as np

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

from lifegrid import ConfigurationError, Grid, render_text
from lifegrid.patterns import GLIDER, place_pattern


def center_of_mass(grid: Grid):
    """(row, col) centroid of live cells, or None for an empty grid."""
    live = np.argwhere(grid.snapshot())
    if len(live) == 0:
        return None
    return tuple(float(v) for v in live.mean(axis=0))


def run_glider_demo(size=16, steps=60, start=1):
    """Evolve a glider and return per-step (live_count, center_of_mass) history."""
    logger.info("=== GLIDER DEMONSTRATION ===")
    logger.info(f"Board: {size}x{size}, steps: {steps}, start: ({start}, {start})")

    grid = Grid(place_pattern(GLIDER, size, size, start, start))
    history = [(grid.count_alive(), center_of_mass(grid))]

    for step in range(1, steps + 1):
        grid.advance()
        live_count, com = grid.count_alive(), center_of_mass(grid)
        history.append((live_count, com))

        if step % 4 == 0 or step == steps:
            position = "none" if com is None else f"({com[0]:.1f}, {com[1]:.1f})"
            logger.info(f"Step {step}: COM={position}, Live={live_count}")

    logger.info("Final board:\n" + render_text(grid, alive_char='#', dead_char='.'))
    return history


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Glider on a closed board")
    parser.add_argument("--size", type=int, default=16, help="Board size (square)")
    parser.add_argument("--steps", type=int, default=60, help="Generations to run")
    parser.add_argument("--start", type=int, default=1, help="Top-left row/column of the glider")
    args = parser.parse_args()

    try:
        run_glider_demo(args.size, args.steps, args.start)
    except ConfigurationError as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)
