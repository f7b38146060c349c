"""Calculation input errors.

Every error here is a caller-correctable input problem. Calculations raise
them at the point the precondition is violated and never return partial
results.
"""

import math


class CalculationError(ValueError):
    """Base class for calculation input errors."""
    pass


class InvalidRangeError(CalculationError):
    """Raised when a date range is inverted (end before start)."""
    pass


class InvalidInputError(CalculationError):
    """Raised when a value is negative or zero where it must not be."""
    pass


class InvalidConfigurationError(CalculationError):
    """Raised when proportions or tax rules are internally inconsistent."""
    pass


def require_non_negative(value: float, name: str) -> float:
    """Return value, or raise InvalidInputError if it is negative or not finite."""
    if not math.isfinite(value) or value < 0:
        raise InvalidInputError(f"{name} must be a non-negative number, got {value}")
    return value


def require_positive(value: float, name: str) -> float:
    """Return value, or raise InvalidInputError if it is zero, negative or not finite."""
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(f"{name} must be greater than 0, got {value}")
    return value
