"""Command-line entry point: run a seeded grid in the terminal."""

import argparse
import logging
import sys
from functools import partial
from typing import List, Optional

from .config import LifeConfig
from .core.errors import ConfigurationError
from .core.grid import Grid
from .patterns import PATTERNS, seed_grid
from .render import print_grid
from .runner import run

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='lifegrid', description="Conway's Game of Life on a closed grid")
    parser.add_argument("--seed", choices=sorted(PATTERNS) + ['random'], help="Starting pattern")
    parser.add_argument("--rows", type=int, help="Board height (defaults to the pattern height)")
    parser.add_argument("--cols", type=int, help="Board width (defaults to the pattern width)")
    parser.add_argument("--density", type=float, help="Live cell probability for the random seed")
    parser.add_argument("--interval", type=float, help="Seconds between generations")
    parser.add_argument("--generations", type=int, dest="max_generations",
                        help="Stop after this many generations (default: run until Ctrl-C)")
    parser.add_argument("--alive-char", help="Character drawn for live cells")
    parser.add_argument("--dead-char", help="Character drawn for dead cells")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    return parser


def load_config(argv: Optional[List[str]] = None) -> LifeConfig:
    """Environment defaults overridden by command-line flags."""
    args = build_parser().parse_args(argv)
    config = LifeConfig.from_env()

    for field_name, value in vars(args).items():
        if value is not None:
            setattr(config, field_name, value)

    return config.validate()


def build_grid(config: LifeConfig) -> Grid:
    if config.seed == 'random':
        rows = 20 if config.rows is None else config.rows
        cols = 40 if config.cols is None else config.cols
        return Grid.random(rows, cols, config.density)
    return seed_grid(config.seed, config.rows, config.cols)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the render/advance loop; returns the process exit code."""
    try:
        config = load_config(argv)
    except ConfigurationError as exc:
        logging.basicConfig(level=logging.ERROR, format='%(asctime)s - %(levelname)s - %(message)s')
        logger.error(f"Invalid configuration: {exc}")
        return 2

    logging.basicConfig(level=config.log_level.upper(),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        grid = build_grid(config)
    except ConfigurationError as exc:
        logger.error(f"Invalid configuration: {exc}")
        return 2

    render = partial(print_grid, alive_char=config.alive_char, dead_char=config.dead_char)

    try:
        run(grid, config.interval, config.max_generations, render=render)
    except KeyboardInterrupt:
        logger.info(f"Interrupted at generation {grid.generation}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
