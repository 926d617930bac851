"""
Conway Baseline Validation

Tests well-known Game of Life behaviors end to end through Grid.advance(),
including the closed (non-wrapping) board edge.
"""

import pytest
import numpy as np

from lifegrid.core.conway_rules import MutationReason
from lifegrid.core.grid import Cell, Grid
from lifegrid.patterns import BLOCK, GLIDER, SAMPLE_SEED, place_pattern


def live_cells(grid):
    """Set of (row, col) positions that are alive."""
    return {(int(r), int(c)) for r, c in np.argwhere(grid.snapshot())}


def blinker_grid(size):
    """Horizontal blinker at (1,0), (1,1), (1,2)."""
    grid = np.zeros((size, size), dtype=np.uint8)
    grid[1, 0:3] = 1
    return Grid(grid)


class TestConwayBaseline:
    """Test fundamental Conway behaviors to ensure correct implementation."""

    def test_empty_grid_stays_empty(self):
        """No spontaneous generation on an all-dead board."""
        grid = Grid.empty(10, 10)

        for _ in range(10):
            grid.advance()
            assert grid.is_empty()

        assert grid.generation == 10

    def test_isolated_cell_dies(self):
        """A lone live cell dies of underpopulation."""
        grid = Grid(place_pattern([[1]], 5, 5))

        grid.advance()

        assert grid.is_empty()
        assert grid.cell(2, 2) == Cell(0, MutationReason.UNDERPOPULATION)

    def test_overpopulation(self):
        """Center of a plus sign dies with four live neighbors."""
        grid = Grid([[0, 1, 0],
                     [1, 1, 1],
                     [0, 1, 0]])

        grid.advance()

        assert grid.cell(1, 1) == Cell(0, MutationReason.OVERPOPULATION)
        # Each arm keeps 3 neighbors; each corner sees 3 and is born
        assert grid.to_list() == [[1, 1, 1],
                                  [1, 0, 1],
                                  [1, 1, 1]]

    def test_block_stable_still_life(self):
        """2x2 block remains stable."""
        grid = Grid(place_pattern(BLOCK, 6, 6))
        initial = grid.snapshot()

        for generation in range(20):
            grid.advance()
            np.testing.assert_array_equal(grid.snapshot(), initial,
                                          err_msg=f"Block unstable at generation {generation}")
            assert grid.transitions() == []

    @pytest.mark.parametrize("size", [5, 6, 8])
    def test_blinker_oscillates_period_2(self, size):
        """Horizontal blinker turns vertical, then back."""
        grid = blinker_grid(size)
        original = grid.snapshot()

        grid.advance()
        assert live_cells(grid) == {(0, 1), (1, 1), (2, 1)}

        grid.advance()
        assert live_cells(grid) == {(1, 0), (1, 1), (1, 2)}
        np.testing.assert_array_equal(grid.snapshot(), original)

    def test_blinker_transitions(self):
        """Mutation reasons record which rule fired for each changed cell."""
        grid = blinker_grid(5)
        grid.advance()

        assert grid.transitions() == [
            (0, 1, MutationReason.REPRODUCTION),
            (1, 0, MutationReason.UNDERPOPULATION),
            (1, 2, MutationReason.UNDERPOPULATION),
            (2, 1, MutationReason.REPRODUCTION),
        ]
        assert grid.cell(1, 1) == Cell(1, MutationReason.NONE)

    def test_sample_seed_golden_generation(self):
        """The sample seed is a tub still life: one step reproduces it."""
        grid = Grid(SAMPLE_SEED)

        grid.advance()

        assert grid.to_list() == [
            [0, 0, 0, 0, 0],
            [0, 0, 1, 0, 0],
            [0, 1, 0, 1, 0],
            [0, 0, 1, 0, 0],
            [0, 0, 0, 0, 0],
        ]
        assert grid.neighbor_count(2, 2) == 4
        assert grid.cell(2, 2) == Cell(0, MutationReason.NONE)

    @pytest.mark.parametrize("cycles", [1, 2, 3, 4])
    def test_glider_moves_diagonally(self, cycles):
        """Every 4 generations the glider shifts one cell down and right."""
        grid = Grid(place_pattern(GLIDER, 16, 16, 1, 1))

        for _ in range(4 * cycles):
            grid.advance()
            assert grid.count_alive() == 5

        expected = place_pattern(GLIDER, 16, 16, 1 + cycles, 1 + cycles)
        np.testing.assert_array_equal(grid.snapshot(), expected)

    def test_glider_movement_consistency(self):
        """Identical seeds evolve identically."""
        grid1 = Grid(place_pattern(GLIDER, 25, 25, 5, 5))
        grid2 = Grid(place_pattern(GLIDER, 25, 25, 5, 5))

        for step in range(10):
            grid1.advance()
            grid2.advance()
            assert grid1 == grid2, f"Grids diverged at step {step}"


class TestClosedBoundary:
    """Cells beyond the edge are dead; nothing wraps around."""

    def test_blinker_on_top_edge(self):
        """A blinker against the top edge cannot grow upward or wrap."""
        board = np.zeros((5, 5), dtype=np.uint8)
        board[0, 0:3] = 1
        grid = Grid(board)

        grid.advance()
        # A wrapping board would also bring (4, 1) to life
        assert live_cells(grid) == {(0, 1), (1, 1)}

        grid.advance()
        assert grid.is_empty()

    def test_full_board_corners_survive(self):
        """On a fully live board only the corners have few enough neighbors."""
        grid = Grid(np.ones((4, 4), dtype=bool))

        grid.advance()

        assert live_cells(grid) == {(0, 0), (0, 3), (3, 0), (3, 3)}
