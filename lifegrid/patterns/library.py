"""Named seed patterns and helpers for placing them on a board.

Patterns are 0/1 uint8 arrays with row-major (row, column) layout.
"""

import logging
from typing import Dict, Optional

import numpy as np

from ..core.errors import ConfigurationError
from ..core.grid import Grid, Matrix, as_board

logger = logging.getLogger(__name__)


# Sample seed from the Wikipedia article; a "tub" still life
SAMPLE_SEED = np.array([
    [0, 0, 0, 0, 0],
    [0, 0, 1, 0, 0],
    [0, 1, 0, 1, 0],
    [0, 0, 1, 0, 0],
    [0, 0, 0, 0, 0]
], dtype=np.uint8)

# Period-2 oscillator, horizontal phase
BLINKER = np.array([[1, 1, 1]], dtype=np.uint8)

# Stable 2x2 still life
BLOCK = np.array([
    [1, 1],
    [1, 1]
], dtype=np.uint8)

# Travels one cell down and one cell right every 4 generations
GLIDER = np.array([
    [0, 1, 0],
    [0, 0, 1],
    [1, 1, 1]
], dtype=np.uint8)

PATTERNS: Dict[str, np.ndarray] = {
    'sample': SAMPLE_SEED,
    'blinker': BLINKER,
    'block': BLOCK,
    'glider': GLIDER,
}


def place_pattern(pattern: Matrix, rows: int, cols: int,
                  row: Optional[int] = None, col: Optional[int] = None) -> np.ndarray:
    """Place a pattern on an otherwise dead board.

    Args:
        pattern: 2D 0/1 pattern
        rows: Board height
        cols: Board width
        row: Top row of the pattern (centered if None)
        col: Left column of the pattern (centered if None)

    Returns:
        New 0/1 uint8 board of shape (rows, cols)

    Raises:
        ConfigurationError: If the pattern does not fit at that position
    """
    cells = as_board(pattern)
    height, width = cells.shape

    if row is None:
        row = (rows - height) // 2
    if col is None:
        col = (cols - width) // 2

    if row < 0 or col < 0 or row + height > rows or col + width > cols:
        raise ConfigurationError(
            f"Pattern {height}x{width} at ({row}, {col}) does not fit on a {rows}x{cols} board")

    board = np.zeros((rows, cols), dtype=np.uint8)
    board[row:row + height, col:col + width] = cells
    return board


def seed_grid(name: str, rows: Optional[int] = None, cols: Optional[int] = None) -> Grid:
    """Build a grid from a named pattern.

    Args:
        name: Key of ``PATTERNS``
        rows: Board height (pattern height if None)
        cols: Board width (pattern width if None)

    Raises:
        ConfigurationError: For unknown names or boards too small for the pattern
    """
    try:
        pattern = PATTERNS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown pattern {name!r}; choose from {sorted(PATTERNS)}") from None

    height, width = pattern.shape
    board = place_pattern(pattern, height if rows is None else rows,
                          width if cols is None else cols)
    logger.debug(f"Seeded {name} pattern on {board.shape[0]}x{board.shape[1]} board")
    return Grid(board)
