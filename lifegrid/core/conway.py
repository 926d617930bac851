"""Conway's Game of Life rules engine.

Computes whole generations from a read-only snapshot of the current board.
The engine never writes to the state it reads; committing the result is
left to the owner of the board (see ``lifegrid.core.grid.Grid.advance``).
"""

import logging
from typing import Dict, Tuple

import numpy as np

from .conway_rules import (
    classify_generation,
    count_live_neighbors,
    live_neighbor_counts,
    next_generation,
    update_cell,
)

logger = logging.getLogger(__name__)


class ConwayEngine:
    """Conway's Game of Life rules engine.

    Implements the classic cellular automaton rules:
    - Live cell survives with 2-3 neighbors
    - Dead cell becomes alive with exactly 3 neighbors
    - All other cells die/become dead

    Cells beyond the board edges are permanently dead.
    """

    def count_neighbors(self, state: np.ndarray, row: int, col: int) -> int:
        """Count living neighbors of a cell using the Moore neighborhood.

        Args:
            state: 2D boolean board
            row: Row of the cell
            col: Column of the cell

        Returns:
            Number of living neighbors (0-8)
        """
        return count_live_neighbors(state, row, col)

    def neighbor_counts(self, state: np.ndarray) -> np.ndarray:
        """Living-neighbor counts for every cell of ``state``."""
        return live_neighbor_counts(state)

    def update_cell(self, alive: bool, live_neighbors: int) -> bool:
        """Next state of a single cell."""
        return update_cell(bool(alive), live_neighbors)

    def evolve(self, state: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
        """Compute one generation of Conway's rules for the entire board.

        Every neighbor count is taken from ``state`` before any next state
        exists, so the result does not depend on cell visiting order.

        Args:
            state: Current board (left untouched)

        Returns:
            (next_state, reasons) - a fresh boolean board and the
            MutationReason code for every cell
        """
        counts = self.neighbor_counts(state)
        return next_generation(state, counts), classify_generation(state, counts)

    def get_rule_table(self) -> Dict[Tuple[bool, int], bool]:
        """Get the rule outcome for every (current_state, neighbor_count) pair.

        Returns:
            Dictionary mapping (current_state, neighbor_count) to next_state
        """
        rules = {}

        for current_state in (False, True):
            for neighbors in range(9):
                rules[(current_state, neighbors)] = update_cell(current_state, neighbors)

        return rules


# Singleton instance for convenience
default_engine = ConwayEngine()
