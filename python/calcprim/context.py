"""
Function Context

Binds a scalar function to a step size and exposes the derivative,
integral and sampling primitives against it.

Usage:
    from calcprim import FunctionContext

    ctx = FunctionContext(lambda x: x ** 2)
    ctx.derivative(2.0)         # ~4.0
    ctx.integral(0.0, 1.0)      # inclusive Riemann sum, n=1000
    list(ctx.points(0, 1, 0.5)) # [Sample(0, 0), Sample(0.5, 0.25), Sample(1.0, 1.0)]
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from calcprim.config import CALCULUS_CONFIG as cfg
from calcprim.derivatives import finite_difference
from calcprim.errors import InvalidConfiguration, require_positive
from calcprim.integration import riemann_integral, riemann_integral_async
from calcprim.sampling import PointSequence, Sample, generate_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FunctionContext:
    """A scalar function plus the step size used to differentiate it.

    The function is referenced, not copied. Immutable after construction.
    """

    fn: Callable[[float], float]
    epsilon: float = field(default=cfg.derivative.epsilon)

    def __post_init__(self):
        if not callable(self.fn):
            raise InvalidConfiguration(f"fn must be callable, got {self.fn!r}")
        # frozen: bypass __setattr__ to store the normalized value
        object.__setattr__(self, "epsilon", require_positive("epsilon", self.epsilon))
        logger.debug("created context for %r with epsilon=%g", self.fn, self.epsilon)

    def with_epsilon(self, epsilon: float) -> "FunctionContext":
        return dataclasses.replace(self, epsilon=epsilon)

    def __call__(self, x: float) -> float:
        return self.fn(x)

    def derivative(self, x: float, method: Optional[str] = None) -> float:
        """Finite-difference derivative at x with h = epsilon (forward by default)."""
        return finite_difference(self.fn, x, self.epsilon, method=method)

    def integral(
        self,
        a: float,
        b: float,
        n: Optional[int] = None,
        rule: Optional[str] = None
    ) -> float:
        return riemann_integral(self.fn, a, b, n, rule=rule)

    async def integral_async(
        self,
        a: float,
        b: float,
        n: Optional[int] = None,
        delay: Optional[float] = None,
        rule: Optional[str] = None
    ) -> float:
        return await riemann_integral_async(self.fn, a, b, n, delay=delay, rule=rule)

    def generate_points(self, start: float, end: float, step: float) -> Iterator[Sample]:
        return generate_points(self.fn, start, end, step)

    def points(self, start: float, end: float, step: float) -> PointSequence:
        """Restartable sample sequence; iterate it as many times as needed."""
        return PointSequence(self.fn, start, end, step)
