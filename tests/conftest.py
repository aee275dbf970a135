"""
Shared test functions with known calculus.

Every function here has a closed-form derivative and integral.
"""
import math

import pytest


@pytest.fixture
def square():
    """f(x) = x², f'(x) = 2x, integral over [0, 1] = 1/3."""
    return lambda x: x ** 2


@pytest.fixture
def identity():
    """f(x) = x, integral over [0, 1] = 1/2."""
    return lambda x: x


@pytest.fixture
def polynomial():
    """f(x) = x² + 2x + 1, f'(x) = 2x + 2."""
    return lambda x: x ** 2 + 2 * x + 1


@pytest.fixture
def exponential():
    """f(x) = e^x, its own derivative, integral over [0, 1] = e - 1."""
    return math.exp
