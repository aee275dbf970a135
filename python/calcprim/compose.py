"""Function composition."""

from functools import reduce
from typing import Callable


def compose(f: Callable, g: Callable, *rest: Callable) -> Callable:
    """
    Compose functions right to left.

    compose(f, g, h)(x) == f(g(h(x)))

    Raises:
        TypeError: If any argument is not callable
    """
    for func in (f, g) + rest:
        if not callable(func):
            raise TypeError(f"compose() arguments must be callable, got {func!r}")

    def inner(acc, func):
        return lambda x: acc(func(x))

    return reduce(inner, rest, lambda x: f(g(x)))
