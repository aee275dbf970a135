"""Tests for FunctionContext."""
import asyncio
import dataclasses

import pytest


def test_default_epsilon(square):
    from calcprim.context import FunctionContext
    ctx = FunctionContext(square)
    assert ctx.epsilon == 0.0001
    assert ctx.fn is square


def test_derivative_square_at_two(square):
    from calcprim.context import FunctionContext
    ctx = FunctionContext(square, epsilon=0.0001)
    assert abs(ctx.derivative(2.0) - 4.0) < 1e-2


def test_derivative_uses_epsilon(square):
    from calcprim.context import FunctionContext
    h = 0.01
    ctx = FunctionContext(square, epsilon=h)
    assert ctx.derivative(1.0) == (square(1.0 + h) - square(1.0)) / h
    assert ctx.derivative(1.0, method='central') == pytest.approx(2.0, abs=1e-12)


def test_polynomial_derivatives_along_points(polynomial):
    """Derivative at each sampled x tracks 2x + 2."""
    from calcprim.context import FunctionContext
    ctx = FunctionContext(polynomial)
    for sample in ctx.generate_points(0.0, 1.0, 0.1):
        assert ctx.derivative(sample.x) == pytest.approx(2 * sample.x + 2, abs=1e-3)


def test_integral(identity):
    from calcprim.context import FunctionContext
    from calcprim.integration import riemann_integral
    ctx = FunctionContext(identity)
    assert ctx.integral(0.0, 1.0) == riemann_integral(identity, 0.0, 1.0, 1000)
    assert ctx.integral(0.0, 1.0, 100, rule='left') == pytest.approx(0.495)


def test_integral_async(square):
    from calcprim.context import FunctionContext
    ctx = FunctionContext(square)
    result = asyncio.run(ctx.integral_async(0.0, 1.0, 300, delay=0.001))
    assert result == ctx.integral(0.0, 1.0, 300)


def test_points_restartable(square):
    from calcprim.context import FunctionContext
    ctx = FunctionContext(square)
    seq = ctx.points(0, 1, 0.5)
    assert list(seq) == [(0, 0), (0.5, 0.25), (1.0, 1.0)]
    assert list(seq) == list(ctx.generate_points(0, 1, 0.5))


def test_callable(square):
    from calcprim.context import FunctionContext
    assert FunctionContext(square)(3.0) == 9.0


def test_immutable(square):
    from calcprim.context import FunctionContext
    ctx = FunctionContext(square)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ctx.epsilon = 0.5


def test_with_epsilon_returns_new_context(square):
    from calcprim.context import FunctionContext
    ctx = FunctionContext(square)
    other = ctx.with_epsilon(0.01)
    assert other.epsilon == 0.01
    assert ctx.epsilon == 0.0001
    assert other.fn is ctx.fn


@pytest.mark.parametrize("epsilon", [0, -0.0001, float('nan'), float('inf'), "small", True])
def test_invalid_epsilon(square, epsilon):
    from calcprim.context import FunctionContext
    from calcprim.errors import InvalidConfiguration
    with pytest.raises(InvalidConfiguration):
        FunctionContext(square, epsilon=epsilon)


def test_with_epsilon_validates(square):
    from calcprim.context import FunctionContext
    from calcprim.errors import InvalidConfiguration
    with pytest.raises(InvalidConfiguration):
        FunctionContext(square).with_epsilon(0.0)


def test_non_callable_rejected():
    from calcprim.context import FunctionContext
    from calcprim.errors import InvalidConfiguration
    with pytest.raises(InvalidConfiguration):
        FunctionContext(3.0)


def test_invalid_configuration_is_value_error(square):
    from calcprim.context import FunctionContext
    with pytest.raises(ValueError):
        FunctionContext(square, epsilon=-1)


def test_invalid_arguments_raise_before_computing():
    """Non-positive step or n fail without calling fn."""
    from calcprim.context import FunctionContext
    from calcprim.errors import InvalidConfiguration

    calls = []

    def fn(x):
        calls.append(x)
        return x

    ctx = FunctionContext(fn)
    with pytest.raises(InvalidConfiguration):
        ctx.integral(0.0, 1.0, 0)
    with pytest.raises(InvalidConfiguration):
        ctx.generate_points(0.0, 1.0, 0.0)
    with pytest.raises(InvalidConfiguration):
        ctx.points(0.0, 1.0, -1.0)
    assert calls == []
