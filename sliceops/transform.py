"""Building new sequences and mappings from existing ones."""

from __future__ import annotations

import random
from collections import defaultdict
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from functools import cmp_to_key, reduce
from typing import Any, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
A = TypeVar("A")


def _iter(ss: Optional[Iterable[T]]) -> Iterable[T]:
    """Treat None as an empty iterable."""
    return ss if ss is not None else ()


def each(ss: T, fn: Callable[[Any], Any]) -> T:
    """Call ``fn`` on every element and return ``ss`` itself."""
    for value in _iter(ss):
        fn(value)
    return ss


def filter_items(
    ss: Optional[Iterable[T]], condition: Callable[[T], bool]
) -> list[T]:
    """Return the elements for which ``condition`` holds."""
    return [value for value in _iter(ss) if condition(value)]


def filter_not(
    ss: Optional[Iterable[T]], condition: Callable[[T], bool]
) -> list[T]:
    """Return the elements for which ``condition`` does not hold."""
    return [value for value in _iter(ss) if not condition(value)]


def map_items(ss: Optional[Iterable[T]], fn: Callable[[T, int], U]) -> list[U]:
    """Return ``fn(element, index)`` for every element."""
    return [fn(value, i) for i, value in enumerate(_iter(ss))]


def reduce_items(
    fn: Callable[[A, T, int], A], ss: Optional[Iterable[T]], acc: A
) -> A:
    """Fold left to right with ``fn(acc, element, index)``, starting at ``acc``."""
    return reduce(
        lambda current, pair: fn(current, pair[1], pair[0]),
        enumerate(_iter(ss)),
        acc,
    )


def reverse(ss: Optional[Sequence[T]]) -> list[T]:
    """Return a new list with the elements in reverse order."""
    return list(reversed(ss)) if ss is not None else []


def group_by(
    values: Optional[Iterable[V]], get_key: Callable[[V], K]
) -> dict[K, list[V]]:
    """Group elements into lists keyed by ``get_key(element)``."""
    groups: defaultdict[K, list[V]] = defaultdict(list)
    for value in _iter(values):
        groups[get_key(value)].append(value)
    return dict(groups)


def shuffle(
    ss: Optional[Sequence[T]], rng: Optional[random.Random] = None
) -> list[T]:
    """Return a shuffled copy; the input is left unchanged.

    When ``rng`` is None the module-level random generator is used.
    """
    shuffled = list(_iter(ss))
    if len(shuffled) < 2:
        return shuffled
    (rng if rng is not None else random).shuffle(shuffled)
    return shuffled


def sort_items(ss: Optional[Iterable[T]]) -> list[T]:
    """Return a new list with the elements in ascending order."""
    return sorted(_iter(ss))


def _key_from_less(less: Callable[[T, T], bool]):
    def compare(a: T, b: T) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return cmp_to_key(compare)


def sort_using(
    ss: Optional[Iterable[T]], less: Callable[[T, T], bool]
) -> list[T]:
    """Return a new list ordered by the ``less(a, b)`` predicate."""
    return sorted(_iter(ss), key=_key_from_less(less))


def sort_stable_using(
    ss: Optional[Iterable[T]], less: Callable[[T, T], bool]
) -> list[T]:
    """Like sort_using, keeping equal elements in their original order."""
    return sorted(_iter(ss), key=_key_from_less(less))


def unique(ss: Optional[Iterable[K]]) -> list[K]:
    """Return the distinct elements in order of first appearance."""
    return list(dict.fromkeys(_iter(ss)))


def are_unique(ss: Optional[Sequence[K]]) -> bool:
    """Return True if no element occurs twice."""
    items = list(_iter(ss))
    return len(unique(items)) == len(items)


def _diff_one_way(base: Iterable[K], other: Iterable[K]) -> list[K]:
    remaining = set(base)
    result = []
    for value in other:
        if value in remaining:
            remaining.discard(value)
        else:
            result.append(value)
    return result


def diff(
    ss: Optional[Iterable[K]], against: Optional[Iterable[K]]
) -> tuple[list[K], list[K]]:
    """Return ``(added, removed)`` needed to turn ``ss`` into ``against``.

    Each value in one side matches at most one occurrence in the other;
    further duplicates count as added or removed.
    """
    left = list(_iter(ss))
    right = list(_iter(against))
    return _diff_one_way(left, right), _diff_one_way(right, left)


def intersect(ss: Optional[Iterable[K]], *args: Iterable[K]) -> list[K]:
    """Return the distinct elements of ``ss`` found in every one of ``args``.

    Empty when no other sequences are given.
    """
    if not args:
        return []
    others = [set(_iter(other)) for other in args]
    return [value for value in unique(ss) if all(value in s for s in others)]


def keys(mapping: Optional[Mapping[K, V]]) -> list[K]:
    """Return the keys of ``mapping`` as a list."""
    return list(mapping) if mapping is not None else []


def values(mapping: Optional[Mapping[K, V]]) -> list[V]:
    """Return the values of ``mapping`` as a list."""
    return list(mapping.values()) if mapping is not None else []