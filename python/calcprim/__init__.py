"""
calcprim — numeric approximation primitives.

Taylor-series trig, finite-difference derivatives, Riemann-sum
integrals and lazy point sampling over a caller-supplied function.

Usage:
    from calcprim import FunctionContext, sin, cos

    ctx = FunctionContext(lambda x: x ** 2, epsilon=1e-4)
    ctx.derivative(2.0)
    ctx.integral(0.0, 1.0, n=1000)

    # Or import by module:
    from calcprim.integration import riemann_integral
    from calcprim.trig import TrigApproximator
"""
__version__ = "0.1.0"

import logging

from calcprim.compose import compose
from calcprim.config import CALCULUS_CONFIG
from calcprim.context import FunctionContext
from calcprim.derivatives import finite_difference, forward_difference
from calcprim.errors import InvalidConfiguration
from calcprim.integration import riemann_integral, riemann_integral_async
from calcprim.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    set_level,
)
from calcprim.sampling import PointSequence, Sample, generate_points
from calcprim.trig import TrigApproximator, cos, sin, wrap_angle

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Configuration and errors
    "CALCULUS_CONFIG",
    "InvalidConfiguration",
    # Wrapper value
    "FunctionContext",
    # Trig
    "TrigApproximator",
    "sin",
    "cos",
    "wrap_angle",
    # Derivatives
    "forward_difference",
    "finite_difference",
    # Integration
    "riemann_integral",
    "riemann_integral_async",
    # Sampling
    "Sample",
    "PointSequence",
    "generate_points",
    # Helpers
    "compose",
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "set_level",
]
