"""
Riemann-Sum Integration Primitives

Definite integral of a scalar function from equally spaced samples.

The default 'inclusive' rule sums all n+1 grid points a + i*w for
i = 0..n and multiplies by w. That is one sample more than a left
Riemann sum, so it exceeds the 'left' rule by exactly f(b) * w.
"""

import asyncio
import logging

import numpy as np
from typing import Callable, Optional

from calcprim.config import CALCULUS_CONFIG as cfg
from calcprim.errors import InvalidConfiguration, require_count

logger = logging.getLogger(__name__)

ScalarFunction = Callable[[float], float]

RULES = ('inclusive', 'left', 'trapezoid')


def _grid(a: float, b: float, n: int, rule: str) -> tuple:
    width = (b - a) / n
    if rule == 'left':
        count = n
    elif rule in ('inclusive', 'trapezoid'):
        count = n + 1
    else:
        raise ValueError(f"Unknown rule: {rule}")
    return a + np.arange(count, dtype=np.float64) * width, width


def riemann_integral(
    fn: ScalarFunction,
    a: float,
    b: float,
    n: Optional[int] = None,
    rule: Optional[str] = None
) -> float:
    """
    Approximate the integral of fn over [a, b].

    Parameters
    ----------
    fn : callable
        Scalar function
    a, b : float
        Bounds. a > b is not rejected; the width is then negative.
    n : int
        Number of sub-intervals (default 1000, must be >= 1)
    rule : str
        'inclusive' (n+1 points), 'left' (n points) or 'trapezoid'

    Returns
    -------
    float
        Integral estimate

    Notes
    -----
    inclusive: w * sum(f(a + i*w) for i in 0..n)
    left:      w * sum(f(a + i*w) for i in 0..n-1)
    trapezoid: inclusive - w * (f(a) + f(b)) / 2
    Samples are summed left to right. Exceptions from fn propagate.
    """
    if n is None:
        n = cfg.integration.n_samples
    if rule is None:
        rule = cfg.integration.rule
    n = require_count("n", n)
    points, width = _grid(a, b, n, rule)

    logger.debug("integrating over [%s, %s] with n=%d rule=%s", a, b, n, rule)
    try:
        values = [fn(float(x)) for x in points]
    except Exception as error:
        logger.error("Integration error: %s", error)
        raise

    total = 0.0
    for value in values:
        total += value

    if rule == 'trapezoid':
        total -= (values[0] + values[-1]) / 2

    return total * width


async def riemann_integral_async(
    fn: ScalarFunction,
    a: float,
    b: float,
    n: Optional[int] = None,
    *,
    delay: Optional[float] = None,
    rule: Optional[str] = None
) -> float:
    """Same as riemann_integral, after an optional asyncio.sleep(delay).

    Arguments are validated before suspending.
    """
    if delay is None:
        delay = cfg.integration.delay
    if not delay >= 0:
        raise InvalidConfiguration(f"delay must be >= 0, got {delay}")
    if n is None:
        n = cfg.integration.n_samples
    require_count("n", n)
    if rule is not None and rule not in RULES:
        raise ValueError(f"Unknown rule: {rule}")

    if delay > 0:
        await asyncio.sleep(delay)
    return riemann_integral(fn, a, b, n, rule=rule)
