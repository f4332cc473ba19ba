"""Exceptions raised by the fire engine.

Exception Hierarchy:
    DoomFireError (base)
    ├── ConfigurationError - Non-positive grid dimensions or bad env settings
    └── InvariantViolation - Intensity or decay outside its legal range

``InvariantViolation`` means the grid or propagator has a bug; it is never
caught inside the package.
"""


class DoomFireError(Exception):
    """Base exception for all fire engine errors."""

    pass


class ConfigurationError(DoomFireError, ValueError):
    """Raised when width, height or cell size are unusable.

    Example:
        >>> raise ConfigurationError("cell_size must be positive, got 0")
    """

    pass


class InvariantViolation(DoomFireError, AssertionError):
    """Raised when an intensity falls outside ``[0, MAX_INTENSITY]``.

    Attributes:
        value (int): The offending value.
    """

    def __init__(self, message: str, value=None):
        super().__init__(message)
        self.value = value
