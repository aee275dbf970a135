"""Exceptions raised by calcprim."""

import math

import numpy as np


class InvalidConfiguration(ValueError):
    """A step size, sample count or other parameter is out of range.

    Raised synchronously, before any evaluation of the caller's function.
    """


def require_positive(name: str, value: float) -> float:
    """Return value as float if it is finite and > 0."""
    if isinstance(value, bool):
        raise InvalidConfiguration(f"{name} must be a real number, got {value!r}")
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidConfiguration(f"{name} must be a real number, got {value!r}") from None
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfiguration(f"{name} must be finite and > 0, got {value}")
    return value


def require_count(name: str, value: int, minimum: int = 1) -> int:
    """Return value if it is an integer >= minimum."""
    # bool is an int subclass but never a meaningful count
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    if value < minimum:
        raise InvalidConfiguration(f"{name} must be >= {minimum}, got {value}")
    return int(value)
