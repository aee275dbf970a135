"""
Trigonometric Primitives

Sine and cosine from a fixed-order Taylor expansion around 0.
"""

import numpy as np
from typing import Optional, Union

from calcprim.config import CALCULUS_CONFIG as cfg
from calcprim.errors import require_count

ArrayLike = Union[float, np.ndarray]


def wrap_angle(x: ArrayLike) -> ArrayLike:
    """
    Wrap an angle into [-pi, pi].

    Parameters
    ----------
    x : float or np.ndarray
        Angle in radians

    Returns
    -------
    float or np.ndarray
        Equivalent angle in [-pi, pi]
    """
    values = np.asarray(x, dtype=np.float64)
    wrapped = np.mod(values + np.pi, 2 * np.pi) - np.pi
    return _unwrap(wrapped, x)


def _unwrap(result: np.ndarray, x: ArrayLike) -> ArrayLike:
    """Return a Python float for scalar input, the array otherwise."""
    if np.ndim(x) == 0:
        return float(result)
    return result


def _prepare(x: ArrayLike, terms: Optional[int], reduce: Optional[bool]):
    if terms is None:
        terms = cfg.taylor.n_terms
    if reduce is None:
        reduce = cfg.taylor.reduce
    terms = require_count("terms", terms, minimum=0)

    values = np.asarray(x, dtype=np.float64)
    if reduce:
        values = np.asarray(wrap_angle(values), dtype=np.float64)
    return values, terms


def sin(
    x: ArrayLike,
    terms: Optional[int] = None,
    reduce: Optional[bool] = None
) -> ArrayLike:
    """
    Approximate sin(x) by its Taylor series.

    Parameters
    ----------
    x : float or np.ndarray
        Argument in radians
    terms : int, optional
        Number of terms after x (default 10)
    reduce : bool, optional
        Wrap x into [-pi, pi] first (default False)

    Returns
    -------
    float or np.ndarray
        Approximation of sin(x)

    Notes
    -----
    term_n = term_{n-1} * -x² / ((2n+1)(2n)),  term_0 = x
    No convergence check. Without reduction accuracy degrades quickly
    for |x| beyond a few pi.
    """
    values, terms = _prepare(x, terms, reduce)

    term = values.copy()
    total = values.copy()
    for n in range(1, terms + 1):
        term = term * (-values * values / ((2 * n + 1) * (2 * n)))
        total = total + term

    return _unwrap(total, x)


def cos(
    x: ArrayLike,
    terms: Optional[int] = None,
    reduce: Optional[bool] = None
) -> ArrayLike:
    """
    Approximate cos(x) by its Taylor series.

    Parameters
    ----------
    x : float or np.ndarray
        Argument in radians
    terms : int, optional
        Number of terms after 1 (default 10)
    reduce : bool, optional
        Wrap x into [-pi, pi] first (default False)

    Returns
    -------
    float or np.ndarray
        Approximation of cos(x)

    Notes
    -----
    term_n = term_{n-1} * -x² / ((2n)(2n-1)),  term_0 = 1
    """
    values, terms = _prepare(x, terms, reduce)

    term = np.ones_like(values)
    total = np.ones_like(values)
    for n in range(1, terms + 1):
        term = term * (-values * values / ((2 * n) * (2 * n - 1)))
        total = total + term

    return _unwrap(total, x)


class TrigApproximator:
    """Taylor sine/cosine with a fixed term count and reduction flag."""

    def __init__(self, terms: Optional[int] = None, reduce: Optional[bool] = None):
        if terms is None:
            terms = cfg.taylor.n_terms
        if reduce is None:
            reduce = cfg.taylor.reduce
        self.terms = require_count("terms", terms, minimum=0)
        self.reduce = bool(reduce)

    def sin(self, x: ArrayLike) -> ArrayLike:
        return sin(x, terms=self.terms, reduce=self.reduce)

    def cos(self, x: ArrayLike) -> ArrayLike:
        return cos(x, terms=self.terms, reduce=self.reduce)

    def __repr__(self):
        return f"TrigApproximator(terms={self.terms}, reduce={self.reduce})"
