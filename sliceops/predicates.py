"""Questions asked of sequences: membership, order, equality and search."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from itertools import pairwise
from typing import Any, Optional, TypeVar

T = TypeVar("T")


def all_of(ss: Iterable[T], fn: Callable[[T], bool]) -> bool:
    """Return True if ``fn`` holds for every element; True when empty."""
    return all(fn(value) for value in ss)


def any_of(ss: Iterable[T], fn: Callable[[T], bool]) -> bool:
    """Return True if ``fn`` holds for some element; False when empty."""
    return any(fn(value) for value in ss)


def are_sorted(ss: Iterable[Any]) -> bool:
    """Return True if no element is smaller than the one before it."""
    return not any(later < earlier for earlier, later in pairwise(ss))


def contains(ss: Iterable[T], looking_for: T) -> bool:
    """Return True if some element compares equal to ``looking_for``."""
    return any(item == looking_for for item in ss)


def equals(ss: Optional[Sequence[T]], rhs: Optional[Sequence[T]]) -> bool:
    """Compare two sequences element by element; None counts as empty."""
    left = ss if ss is not None else ()
    right = rhs if rhs is not None else ()
    if len(left) != len(right):
        return False
    return all(a == b for a, b in zip(left, right))


def index_of(ss: Iterable[T], fn: Callable[[T], bool]) -> int:
    """Return the index of the first element satisfying ``fn``, or -1."""
    return next((i for i, value in enumerate(ss) if fn(value)), -1)


def find(ss: Iterable[T], fn: Callable[[T, int], bool]) -> Optional[T]:
    """Return the first element for which ``fn(element, index)`` holds.

    None is returned when no element matches.
    """
    return next((value for i, value in enumerate(ss) if fn(value, i)), None)