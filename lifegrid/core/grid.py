"""Core grid state management for Conway's Game of Life.

The grid owns a fixed-size numpy boolean board (True=alive, False=dead),
indexed by (row, column). It is built once from a rectangular 0/1 matrix
and then only ever changes through ``advance()``, which swaps in a whole
new generation computed from a read-only snapshot of the previous one.
"""

import logging
from typing import Iterable, List, NamedTuple, Optional, Tuple, Union

import numpy as np

from .conway import ConwayEngine, default_engine
from .conway_rules import MutationReason
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

Matrix = Union[np.ndarray, Iterable[Iterable[int]]]


class Cell(NamedTuple):
    """State of one cell plus the rule that produced it.

    ``reason`` is diagnostic only; it describes the most recent ``advance()``
    and is NONE for cells that survived, stayed dead, or were never advanced.
    """
    state: int
    reason: MutationReason


def as_board(matrix: Matrix) -> np.ndarray:
    """Validate a 0/1 matrix and return it as a fresh boolean array.

    Raises:
        ConfigurationError: If the matrix is empty, ragged, not 2D, or holds
            values other than 0 and 1
    """
    if isinstance(matrix, np.ndarray):
        array = matrix
    else:
        try:
            rows = [list(row) for row in matrix]
        except TypeError as exc:
            raise ConfigurationError("Initial state must be an iterable of rows") from exc

        widths = sorted({len(row) for row in rows})
        if len(widths) > 1:
            raise ConfigurationError(f"Rows have inconsistent lengths: {widths}")

        try:
            array = np.array(rows)
        except ValueError as exc:
            raise ConfigurationError(f"Initial state is not a 2D matrix: {exc}") from exc

    if array.size == 0:
        raise ConfigurationError("Initial state must have at least one row and one column")
    if array.ndim != 2:
        raise ConfigurationError(f"Initial state must be 2D, got {array.ndim}D")

    if array.dtype == bool:
        return array.copy()

    if array.dtype.kind not in 'iuf' or not np.isin(array, (0, 1)).all():
        raise ConfigurationError("Initial state values must be 0 or 1")

    return array.astype(bool)


class Grid:
    """2D board of binary cells evolving under Conway's rules.

    Attributes:
        generation: Number of times ``advance()`` has run (starts at 0)
    """

    def __init__(self, initial_state: Matrix, engine: Optional[ConwayEngine] = None):
        """Initialize grid from a rectangular 0/1 matrix.

        Args:
            initial_state: Nested rows of 0/1 (or bool) values, or a 2D array.
                The input is copied.
            engine: Rules engine (shared default engine if None)

        Raises:
            ConfigurationError: If the matrix is malformed
        """
        self._state = as_board(initial_state)
        self._reasons = np.zeros(self._state.shape, dtype=np.int8)
        self._engine = engine if engine is not None else default_engine
        self.generation = 0

        logger.debug(f"Created grid {self.rows}x{self.cols} with {self.count_alive()} live cells")

    @classmethod
    def empty(cls, rows: int, cols: int) -> 'Grid':
        """Create an all-dead grid."""
        if rows < 1 or cols < 1:
            raise ConfigurationError(f"Grid dimensions must be positive, got {rows}x{cols}")
        return cls(np.zeros((rows, cols), dtype=bool))

    @classmethod
    def from_pattern(cls, pattern: Matrix, pad: int = 1) -> 'Grid':
        """Create grid from a pattern surrounded by dead padding.

        Args:
            pattern: 2D 0/1 pattern
            pad: Dead cells added on every side

        Returns:
            Grid: New grid containing the pattern
        """
        if pad < 0:
            raise ConfigurationError(f"Padding cannot be negative, got {pad}")
        return cls(np.pad(as_board(pattern), pad, mode='constant', constant_values=False))

    @classmethod
    def random(cls, rows: int, cols: int, density: float = 0.5,
               seed: Optional[int] = None) -> 'Grid':
        """Create grid with random live cells.

        Args:
            rows: Number of rows
            cols: Number of columns
            density: Probability of a cell being alive (0.0 to 1.0)
            seed: Seed for reproducible boards
        """
        if rows < 1 or cols < 1:
            raise ConfigurationError(f"Grid dimensions must be positive, got {rows}x{cols}")
        if not 0.0 <= density <= 1.0:
            raise ConfigurationError(f"Density must be between 0 and 1, got {density}")

        rng = np.random.default_rng(seed)
        return cls(rng.random((rows, cols)) < density)

    def copy(self) -> 'Grid':
        """Create an independent grid holding the same generation."""
        clone = Grid(self._state, self._engine)
        clone._reasons = self._reasons.copy()
        clone.generation = self.generation
        return clone

    @property
    def rows(self) -> int:
        return self._state.shape[0]

    @property
    def cols(self) -> int:
        return self._state.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self._state.shape

    @property
    def state(self) -> np.ndarray:
        """Read-only view of the current board."""
        view = self._state.view()
        view.flags.writeable = False
        return view

    def get(self, row: int, col: int) -> int:
        """Get cell state at coordinates.

        Returns:
            1 if the cell is alive, 0 if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")
        return int(self._state[row, col])

    def cell(self, row: int, col: int) -> Cell:
        """Cell state together with the rule that produced it."""
        state = self.get(row, col)
        return Cell(state, MutationReason(int(self._reasons[row, col])))

    def neighbor_count(self, row: int, col: int) -> int:
        """Number of live cells around (row, col); off-board cells are dead."""
        return self._engine.count_neighbors(self._state, row, col)

    def advance(self) -> None:
        """Replace the current generation with the next one.

        The next board and its mutation reasons are computed in full from
        the current board before either is published.
        """
        next_state, reasons = self._engine.evolve(self._state)

        self._state = next_state
        self._reasons = reasons
        self.generation += 1

        if logger.isEnabledFor(logging.DEBUG):
            births = int(np.count_nonzero(reasons == MutationReason.REPRODUCTION))
            deaths = int(np.count_nonzero((reasons == MutationReason.UNDERPOPULATION) |
                                          (reasons == MutationReason.OVERPOPULATION)))
            logger.debug(f"Generation {self.generation}: alive={self.count_alive()}, "
                         f"births={births}, deaths={deaths}")

    def transitions(self) -> List[Tuple[int, int, MutationReason]]:
        """Cells that changed on the last ``advance()``, in row-major order."""
        return [(int(row), int(col), MutationReason(int(self._reasons[row, col])))
                for row, col in np.argwhere(self._reasons != MutationReason.NONE)]

    def snapshot(self) -> np.ndarray:
        """Copy of the current board as a 0/1 uint8 array."""
        return self._state.astype(np.uint8)

    def to_list(self) -> List[List[int]]:
        """Current board as nested lists of 0/1."""
        return self.snapshot().tolist()

    def count_alive(self) -> int:
        """Count total number of alive cells."""
        return int(np.count_nonzero(self._state))

    def density(self) -> float:
        """Get fraction of cells that are alive."""
        return self.count_alive() / self._state.size

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not self._state.any()

    def __getitem__(self, key: Tuple[int, int]) -> int:
        """Access cell state using grid[row, col] syntax."""
        row, col = key
        return self.get(row, col)

    def __eq__(self, other: object) -> bool:
        """Grids are equal when they hold the same board."""
        if not isinstance(other, Grid):
            return NotImplemented
        return np.array_equal(self._state, other._state)

    __hash__ = None

    def __str__(self) -> str:
        """String representation showing live cells as X."""
        return '\n'.join(''.join('X' if alive else '.' for alive in row) for row in self._state)

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return (f"Grid({self.rows}x{self.cols}, generation={self.generation}, "
                f"alive={self.count_alive()})")
