"""
Pure Conway's Game of Life Rules

The fundamental Conway rules for cellular automaton evolution on a closed
(non-wrapping) board. Positions outside the board are always dead.
"""

from enum import IntEnum
from typing import Set, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy.typing import NDArray


# Standard Conway rules - unmodified
SURVIVAL_SET: Set[int] = {2, 3}  # Live cells survive with 2-3 neighbors
BIRTH_SET: Set[int] = {3}        # Dead cells born with exactly 3 neighbors

# Moore neighborhood as (row, col) offsets, center excluded
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


class MutationReason(IntEnum):
    """Rule that produced a cell's state on the most recent generation."""
    NONE = 0             # survival, or a dead cell staying dead
    UNDERPOPULATION = 1  # live cell with fewer than 2 neighbors
    OVERPOPULATION = 2   # live cell with more than 3 neighbors
    REPRODUCTION = 3     # dead cell with exactly 3 neighbors


def update_cell(alive: bool, live_neighbors: int) -> bool:
    """Apply Conway's rules to determine next cell state.

    Args:
        alive: Current cell state (True=alive, False=dead)
        live_neighbors: Number of live neighbors (0-8)

    Returns:
        Next cell state (True=alive, False=dead)
    """
    if alive:
        return live_neighbors in SURVIVAL_SET
    return live_neighbors in BIRTH_SET


def classify_cell(alive: bool, live_neighbors: int) -> MutationReason:
    """Name the rule that fires for a cell, or NONE when nothing changes."""
    if alive:
        if live_neighbors < 2:
            return MutationReason.UNDERPOPULATION
        if live_neighbors > 3:
            return MutationReason.OVERPOPULATION
        return MutationReason.NONE
    if live_neighbors == 3:
        return MutationReason.REPRODUCTION
    return MutationReason.NONE


def count_live_neighbors(state: 'NDArray', row: int, col: int) -> int:
    """Count live neighbors of the cell at (row, col).

    Neighbors falling outside the board count as dead. The target position
    itself may lie outside the board.

    Args:
        state: 2D boolean numpy array
        row: Cell row index
        col: Cell column index

    Returns:
        Number of live neighbors (0-8)
    """
    height, width = state.shape
    count = 0

    for dr, dc in NEIGHBOR_OFFSETS:
        nr, nc = row + dr, col + dc
        if 0 <= nr < height and 0 <= nc < width and state[nr, nc]:
            count += 1

    return count


def live_neighbor_counts(state: 'NDArray') -> 'NDArray':
    """Live-neighbor count for every cell at once.

    The board is zero-padded by one cell on each side, so the eight shifted
    views never wrap around the edges.

    Returns:
        Integer array with the same shape as ``state``
    """
    height, width = state.shape
    padded = np.pad(state.astype(np.uint8), 1, mode='constant', constant_values=0)
    counts = np.zeros((height, width), dtype=np.uint8)

    for dr, dc in NEIGHBOR_OFFSETS:
        counts += padded[1 + dr:1 + dr + height, 1 + dc:1 + dc + width]

    return counts


def next_generation(state: 'NDArray', counts: 'NDArray') -> 'NDArray':
    """Vectorised form of ``update_cell`` over a whole board."""
    alive = state.astype(bool)
    survives = alive & np.isin(counts, list(SURVIVAL_SET))
    born = ~alive & np.isin(counts, list(BIRTH_SET))
    return survives | born


def classify_generation(state: 'NDArray', counts: 'NDArray') -> 'NDArray':
    """Vectorised form of ``classify_cell``; returns MutationReason codes."""
    alive = state.astype(bool)
    reasons = np.full(state.shape, MutationReason.NONE, dtype=np.int8)
    reasons[alive & (counts < 2)] = MutationReason.UNDERPOPULATION
    reasons[alive & (counts > 3)] = MutationReason.OVERPOPULATION
    reasons[~alive & (counts == 3)] = MutationReason.REPRODUCTION
    return reasons
