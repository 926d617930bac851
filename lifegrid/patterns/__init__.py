"""Classic seed patterns for the Game of Life grid."""

from .library import BLINKER, BLOCK, GLIDER, PATTERNS, SAMPLE_SEED, place_pattern, seed_grid

__all__ = [
    'BLINKER',
    'BLOCK',
    'GLIDER',
    'PATTERNS',
    'SAMPLE_SEED',
    'place_pattern',
    'seed_grid',
]
