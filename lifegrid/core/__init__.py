"""
Grid engine: board state, neighbor counting and Conway rule application.
"""

from .conway import ConwayEngine, default_engine
from .conway_rules import BIRTH_SET, SURVIVAL_SET, MutationReason
from .errors import ConfigurationError
from .grid import Cell, Grid

__all__ = [
    'BIRTH_SET',
    'Cell',
    'ConfigurationError',
    'ConwayEngine',
    'Grid',
    'MutationReason',
    'SURVIVAL_SET',
    'default_engine',
]
