"""Generating arithmetic sequences of values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

T = TypeVar("T")


def _rounded_length(start: int, stop: int, step: int) -> int:
    """Return (stop - start) / step rounded half away from zero, exactly."""
    span = stop - start
    negative = (span < 0) != (step < 0)
    magnitude = (2 * abs(span) + abs(step)) // (2 * abs(step))
    return -magnitude if negative else magnitude


def _generate(
    creator: Callable[[int], T], start: int, stop: int, step: int
) -> list[T]:
    if step == 0:
        raise ValueError("step must not be zero")
    length = _rounded_length(start, stop, step)
    if length < 1:
        return []
    return [creator(start + i * step) for i in range(length)]


def sequence_using(creator: Callable[[int], T], *args: int) -> list[T]:
    """Build a list by calling ``creator`` on each number of a range.

    With one argument ``n`` the range is [0, n); with two, [start, stop);
    with three or more, [start, stop) counted by ``step``, and any further
    arguments are ignored. With no arguments the result is empty.

    The number of elements is (stop - start) / step rounded half away from
    zero; a step of zero raises ValueError.
    """
    if len(args) > 2:
        start, stop, step = args[0], args[1], args[2]
    elif len(args) == 2:
        start, stop, step = args[0], args[1], 1
    elif len(args) == 1:
        start, stop, step = 0, args[0], 1
    else:
        return []
    return _generate(creator, start, stop, step)


def sequence(*args: int) -> list[int]:
    """Return the numbers of a range; see sequence_using for the arguments."""
    return sequence_using(lambda i: i, *args)