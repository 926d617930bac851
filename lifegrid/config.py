"""Configuration for running a Game of Life session."""

import logging
import math
import os
from dataclasses import dataclass
from typing import Callable, Mapping, Optional, TypeVar

from .core.errors import ConfigurationError

T = TypeVar('T')

ENV_PREFIX = 'LIFEGRID_'


def _env_value(environ: Mapping[str, str], name: str, convert: Callable[[str], T]) -> Optional[T]:
    raw = environ.get(ENV_PREFIX + name)
    if raw is None or raw.strip() == '':
        return None
    try:
        return convert(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"Invalid {ENV_PREFIX}{name}={raw!r}: {exc}") from exc


@dataclass
class LifeConfig:
    """Settings for the render/advance loop."""

    # Loop cadence
    interval: float = 1.0
    max_generations: Optional[int] = None  # None runs until interrupted

    # Seed board
    seed: str = 'sample'
    rows: Optional[int] = None
    cols: Optional[int] = None
    density: float = 0.3  # random seed only

    # Rendering
    alive_char: str = '@'
    dead_char: str = ' '

    log_level: str = 'INFO'

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'LifeConfig':
        """Build a config from ``LIFEGRID_*`` variables, defaulting the rest.

        Raises:
            ConfigurationError: If a variable cannot be parsed
        """
        environ = os.environ if environ is None else environ
        config = cls()

        overrides = {
            'interval': _env_value(environ, 'INTERVAL', float),
            'max_generations': _env_value(environ, 'GENERATIONS', int),
            'seed': _env_value(environ, 'SEED', str),
            'rows': _env_value(environ, 'ROWS', int),
            'cols': _env_value(environ, 'COLS', int),
            'density': _env_value(environ, 'DENSITY', float),
            'log_level': _env_value(environ, 'LOG_LEVEL', str.upper),
        }
        for field_name, value in overrides.items():
            if value is not None:
                setattr(config, field_name, value)

        return config

    def validate(self) -> 'LifeConfig':
        """Check value ranges.

        Returns:
            self, for chaining

        Raises:
            ConfigurationError: On the first invalid setting
        """
        if not math.isfinite(self.interval) or self.interval < 0:
            raise ConfigurationError(f"Interval must be a finite, non-negative number, got {self.interval}")
        if self.max_generations is not None and self.max_generations < 0:
            raise ConfigurationError(f"Generation limit cannot be negative, got {self.max_generations}")
        for name in ('rows', 'cols'):
            value = getattr(self, name)
            if value is not None and value < 1:
                raise ConfigurationError(f"{name} must be positive, got {value}")
        if not 0.0 <= self.density <= 1.0:
            raise ConfigurationError(f"Density must be between 0 and 1, got {self.density}")
        if len(self.alive_char) != 1 or len(self.dead_char) != 1:
            raise ConfigurationError("Cell characters must be single characters")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level {self.log_level!r}")
        return self
