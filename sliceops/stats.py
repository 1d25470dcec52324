"""Numeric summaries of sequences: totals, extremes, averages and spread."""

from __future__ import annotations

import math
import operator
import random
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from functools import reduce
from typing import Any, Optional, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)


def absolute(value):
    """Return the absolute value of a number."""
    return -value if value < 0 else value


def total(ss: Iterable[Any]):
    """Return the sum of all elements, added left to right; 0 when empty."""
    return reduce(operator.add, ss, 0)


def product(ss: Iterable[Any]):
    """Return the product of all elements; 0 when empty."""
    items = iter(ss)
    try:
        first = next(items)
    except StopIteration:
        return 0
    return reduce(operator.mul, items, first)


def average(ss: Iterable[Any]) -> float:
    """Return the arithmetic mean as a float; 0.0 when empty."""
    items = list(ss)
    if not items:
        return 0.0
    return total(items) / len(items)


def minimum(ss: Iterable[T]):
    """Return the smallest element (the first of equal ones); 0 when empty."""
    return min(ss, default=0)


def maximum(ss: Iterable[T]):
    """Return the largest element (the first of equal ones); 0 when empty."""
    return max(ss, default=0)


def _halve(value):
    """Halve a number, truncating towards zero for integers."""
    if isinstance(value, int):
        half = abs(value) // 2
        return half if value >= 0 else -half
    return value / 2


def median(ss: Iterable[Any]):
    """Return the median; 0 when empty.

    For an even number of elements the mean of the two middle values is
    returned, truncated towards zero when the values are integers.
    """
    items = sorted(ss)
    n = len(items)
    if n == 0:
        return 0
    if n % 2 == 1:
        return items[n // 2]
    return _halve(items[n // 2 - 1] + items[n // 2])


def mode(ss: Iterable[H]) -> list[H]:
    """Return the most frequent values, in order of first appearance."""
    counts = Counter(ss)
    if not counts:
        return []
    highest = max(counts.values())
    return [value for value, count in counts.items() if count == highest]


def stddev(ss: Iterable[Any]) -> float:
    """Return the population standard deviation; 0.0 when empty."""
    items = list(ss)
    if not items:
        return 0.0
    avg = average(items)
    squares = reduce(
        operator.add, ((x - avg) * (x - avg) for x in items), 0.0
    )
    return math.sqrt(squares / len(items))


def count_values(ss: Iterable[H]) -> dict[H, int]:
    """Return a mapping of each distinct value to how often it occurs."""
    return dict(Counter(ss))


def random_element(ss: Iterable[T], rng: Optional[random.Random] = None):
    """Return an element chosen by ``rng``; 0 when empty.

    A single element is returned without consulting ``rng``. When ``rng`` is
    None the module-level random generator is used.
    """
    items = ss if isinstance(ss, Sequence) else list(ss)
    n = len(items)
    if n < 1:
        return 0
    if n < 2:
        return items[0]
    chooser = rng if rng is not None else random
    return items[chooser.randrange(n)]