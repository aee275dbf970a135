"""
Calculus Configuration

Centralized defaults for the approximation primitives.
Avoids hardcoded magic numbers scattered across modules.

Usage:
    from calcprim.config import CALCULUS_CONFIG as cfg

    # Access values
    h = cfg.derivative.epsilon
    n = cfg.integration.n_samples
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TaylorConfig:
    """Configuration for series-based trig approximations."""

    # Number of correction terms after the leading term
    n_terms: int = 10

    # Wrap the argument into [-pi, pi] before expansion
    reduce: bool = False


@dataclass(frozen=True)
class DerivativeConfig:
    """Configuration for finite-difference derivatives."""

    # Step size h
    epsilon: float = 0.0001

    # 'forward', 'backward' or 'central'
    method: str = 'forward'


@dataclass(frozen=True)
class IntegrationConfig:
    """Configuration for Riemann-sum integration."""

    # Number of sub-intervals
    n_samples: int = 1000

    # 'inclusive' (n+1 points), 'left' or 'trapezoid'
    rule: str = 'inclusive'

    # Pacing delay (seconds) before the async integral computes
    delay: float = 0.0


@dataclass(frozen=True)
class CalculusConfig:
    """Master configuration for all primitives."""

    taylor: TaylorConfig = TaylorConfig()
    derivative: DerivativeConfig = DerivativeConfig()
    integration: IntegrationConfig = IntegrationConfig()


# Global singleton instance
CALCULUS_CONFIG = CalculusConfig()
