"""Right-to-left composition of single-argument functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


def compose(*args: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions right to left: ``compose(f, g)(x) == f(g(x))``."""
    if not args:
        raise TypeError("compose() needs at least one function")
    functions = tuple(reversed(args))

    def composed(value: Any) -> Any:
        for fn in functions:
            value = fn(value)
        return value

    return composed