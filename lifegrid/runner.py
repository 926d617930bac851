"""Driving loop: render, advance, wait, repeat.

The loop belongs to the caller; nothing here schedules itself in the
background, and ``advance()`` calls never overlap.
"""

import logging
import math
import time
from typing import Callable, Optional

from .core.errors import ConfigurationError
from .core.grid import Grid

logger = logging.getLogger(__name__)


def run(grid: Grid, interval: float = 1.0, max_generations: Optional[int] = None,
        render: Optional[Callable[[Grid], None]] = None,
        sleep: Callable[[float], None] = time.sleep) -> int:
    """Advance ``grid`` repeatedly at a fixed cadence.

    Each tick renders the current generation (when ``render`` is given) and
    then advances it. The loop sleeps ``interval`` seconds between ticks but
    not after the final one.

    Args:
        grid: Grid to evolve in place
        interval: Seconds between ticks
        max_generations: Stop after this many advances (None = forever)
        render: Callback receiving the grid before each advance
        sleep: Wait function, replaceable for tests

    Returns:
        Number of generations advanced

    Raises:
        ConfigurationError: If interval is negative or not finite, or
            max_generations is negative
    """
    if not math.isfinite(interval) or interval < 0:
        raise ConfigurationError(f"Interval must be a finite, non-negative number, got {interval}")
    if max_generations is not None and max_generations < 0:
        raise ConfigurationError(f"Generation limit cannot be negative, got {max_generations}")

    limit = 'unlimited' if max_generations is None else max_generations
    logger.info(f"Running {grid.rows}x{grid.cols} grid: interval={interval}s, generations={limit}")

    advanced = 0
    while max_generations is None or advanced < max_generations:
        if render is not None:
            render(grid)
        grid.advance()
        advanced += 1

        if interval > 0 and (max_generations is None or advanced < max_generations):
            sleep(interval)

    logger.info(f"Stopped after {advanced} generations ({grid.count_alive()} live cells)")
    return advanced
