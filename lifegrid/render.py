"""Plain-text rendering of a grid, one bracketed line per row."""

import sys
from typing import Optional, TextIO

from .core.grid import Grid


def render_text(grid: Grid, alive_char: str = '@', dead_char: str = ' ') -> str:
    """Render the current generation.

    Each row prints as ``[c, c, ...]`` with ``alive_char`` for live cells and
    ``dead_char`` for dead ones.
    """
    lines = []
    for row in grid.to_list():
        cells = ', '.join(alive_char if alive else dead_char for alive in row)
        lines.append(f"[{cells}]")
    return '\n'.join(lines)


def print_grid(grid: Grid, stream: Optional[TextIO] = None,
               alive_char: str = '@', dead_char: str = ' ') -> None:
    """Write ``render_text`` output followed by a blank separator line."""
    stream = stream if stream is not None else sys.stdout
    stream.write(render_text(grid, alive_char, dead_char) + '\n\n')
    stream.flush()
