"""Turning a multi-argument function into a chain of one-argument functions."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

MIN_ARITY = 2
MAX_ARITY = 16


def curry(fn: Callable[..., Any], arity: int) -> Callable[[Any], Any]:
    """Return ``fn`` curried over ``arity`` positional arguments.

    ``curry(f, 3)(a)(b)(c)`` calls ``f(a, b, c)``. ``fn`` is not called until
    the last argument has been supplied, and every intermediate function may
    be called any number of times. ``arity`` must be between 2 and 16.
    """
    if isinstance(arity, bool) or not isinstance(arity, int):
        raise TypeError("arity must be an integer")
    if not MIN_ARITY <= arity <= MAX_ARITY:
        raise ValueError(
            f"arity must be between {MIN_ARITY} and {MAX_ARITY}, got {arity}"
        )

    def collect(collected: tuple[Any, ...]) -> Callable[[Any], Any]:
        def take(value: Any) -> Any:
            args = collected + (value,)
            if len(args) == arity:
                return fn(*args)
            return collect(args)

        return take

    return collect(())