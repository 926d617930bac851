"""Error types raised by the lifegrid engine."""


class ConfigurationError(ValueError):
    """Raised when an initial configuration or run setting is invalid.

    Covers non-rectangular or non-binary seed matrices, as well as bad
    driving-loop settings. Always raised before any generation is computed.
    """
