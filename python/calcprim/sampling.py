"""
Point Sampling Primitives

Lazy (x, f(x)) samples over a range with a fixed step.
"""

import math
from typing import Callable, Iterator, NamedTuple

from calcprim.errors import InvalidConfiguration, require_positive

ScalarFunction = Callable[[float], float]


class Sample(NamedTuple):
    """One evaluation of a scalar function."""

    x: float
    y: float


def _check_range(start: float, end: float, step: float) -> float:
    step = require_positive("step", step)
    if not (math.isfinite(start) and math.isfinite(end)):
        raise InvalidConfiguration(f"Range must be finite, got [{start}, {end}]")
    if start <= end and start + step == start:
        raise InvalidConfiguration(f"step {step} is below float resolution at x={start}")
    return step


def _points(fn: ScalarFunction, start: float, end: float, step: float) -> Iterator[Sample]:
    x = start
    while x <= end:
        yield Sample(x, fn(x))
        # Accumulated, not start + i*step, so rounding matches repeated addition
        nxt = x + step
        if nxt == x:
            raise InvalidConfiguration(f"step {step} is below float resolution at x={x}")
        x = nxt


def generate_points(
    fn: ScalarFunction,
    start: float,
    end: float,
    step: float
) -> Iterator[Sample]:
    """
    Lazily sample fn at start, start+step, ... while x <= end.

    Args:
        fn: Scalar function, evaluated only when a sample is pulled
        start: First x
        end: Inclusive upper limit
        step: Increment, must be finite, > 0 and large enough to move x

    Returns:
        Generator of Sample(x, y). Empty if start > end.
    """
    step = _check_range(start, end, step)
    return _points(fn, start, end, step)


class PointSequence:
    """Restartable view of generate_points: each iteration starts over."""

    def __init__(self, fn: ScalarFunction, start: float, end: float, step: float):
        self.step = _check_range(start, end, step)
        self.fn = fn
        self.start = start
        self.end = end

    def __iter__(self) -> Iterator[Sample]:
        return _points(self.fn, self.start, self.end, self.step)

    def __repr__(self):
        return f"PointSequence(start={self.start}, end={self.end}, step={self.step})"
