"""Conway's Game of Life on a fixed, closed grid."""

__version__ = "0.1.0"

from .config import LifeConfig
from .core import Cell, ConfigurationError, ConwayEngine, Grid, MutationReason
from .render import print_grid, render_text
from .runner import run

__all__ = [
    'Cell',
    'ConfigurationError',
    'ConwayEngine',
    'Grid',
    'LifeConfig',
    'MutationReason',
    'print_grid',
    'render_text',
    'run',
    '__version__',
]
