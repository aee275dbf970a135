"""
Finite-Difference Derivative Primitives

Derivative estimates of a scalar function at a point from a pair of
function evaluations. No extrapolation, no adaptive step.
"""

from typing import Callable, Optional

from calcprim.config import CALCULUS_CONFIG as cfg
from calcprim.errors import require_positive

ScalarFunction = Callable[[float], float]


def forward_difference(fn: ScalarFunction, x: float, h: Optional[float] = None) -> float:
    """
    Forward difference (f(x + h) - f(x)) / h.

    Args:
        fn: Scalar function
        x: Evaluation point
        h: Step size (default 0.0001)

    Returns:
        Derivative estimate, O(h) accurate
    """
    if h is None:
        h = cfg.derivative.epsilon
    h = require_positive("h", h)
    return (fn(x + h) - fn(x)) / h


def finite_difference(
    fn: ScalarFunction,
    x: float,
    h: Optional[float] = None,
    method: Optional[str] = None
) -> float:
    """
    Compute first derivative of fn at x.

    Args:
        fn: Scalar function
        x: Evaluation point
        h: Step size (default 0.0001)
        method: 'forward', 'backward', or 'central' difference

    Returns:
        Derivative estimate
    """
    if h is None:
        h = cfg.derivative.epsilon
    if method is None:
        method = cfg.derivative.method
    h = require_positive("h", h)

    if method == 'forward':
        # (f(x+h) - f(x)) / h
        return forward_difference(fn, x, h)

    elif method == 'backward':
        # (f(x) - f(x-h)) / h
        return (fn(x) - fn(x - h)) / h

    elif method == 'central':
        # (f(x+h) - f(x-h)) / (2h)
        return (fn(x + h) - fn(x - h)) / (2 * h)

    else:
        raise ValueError(f"Unknown method: {method}")
