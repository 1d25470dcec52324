"""A wrapper for chaining sequence operations."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

from sliceops import access, predicates, transform
from sliceops.channel import send as _send
from sliceops.sequence import sequence_using as _sequence_using


@dataclass
class Chain:
    """Holds a list and offers operations that return new chains.

    Operations that do not produce a single value return a new Chain; the
    final list is available as ``result``.
    """

    result: list = field(default_factory=list)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.result)

    def __len__(self) -> int:
        return len(self.result)

    def all_of(self, fn: Callable[[Any], bool]) -> bool:
        """Return True if ``fn`` holds for every element."""
        return predicates.all_of(self.result, fn)

    def any_of(self, fn: Callable[[Any], bool]) -> bool:
        """Return True if ``fn`` holds for some element."""
        return predicates.any_of(self.result, fn)

    def bottom(self, n: int) -> Chain:
        """Keep up to ``n`` elements from the end, last first."""
        return Chain(access.bottom(self.result, n))

    def drop_top(self, n: int) -> Chain:
        """Drop the first ``n`` elements."""
        return Chain(access.drop_top(self.result, n))

    def each(self, fn: Callable[[Any], Any]) -> Chain:
        """Call ``fn`` on every element and keep the elements unchanged."""
        return Chain(transform.each(self.result, fn))

    def filter_items(self, condition: Callable[[Any], bool]) -> Chain:
        """Keep the elements for which ``condition`` holds."""
        return Chain(transform.filter_items(self.result, condition))

    def filter_not(self, condition: Callable[[Any], bool]) -> Chain:
        """Keep the elements for which ``condition`` does not hold."""
        return Chain(transform.filter_not(self.result, condition))

    def index_of(self, fn: Callable[[Any], bool]) -> int:
        """Return the index of the first element satisfying ``fn``, or -1."""
        return predicates.index_of(self.result, fn)

    def find(self, fn: Callable[[Any, int], bool]) -> Any:
        """Return the first element for which ``fn(element, index)`` holds."""
        return predicates.find(self.result, fn)

    def first(self) -> Any:
        """Return the first element, or None."""
        return access.first(self.result)

    def first_or(self, default: Any) -> Any:
        """Return the first element, or ``default``."""
        return access.first_or(self.result, default)

    def insert(self, index: int, *args: Any) -> Chain:
        """Insert ``args`` before position ``index``."""
        return Chain(access.insert(self.result, index, *args))

    def last(self) -> Any:
        """Return the last element, or None."""
        return access.last(self.result)

    def last_or(self, default: Any) -> Any:
        """Return the last element, or ``default``."""
        return access.last_or(self.result, default)

    def map_items(self, fn: Callable[[Any, int], Any]) -> Chain:
        """Replace every element with ``fn(element, index)``."""
        return Chain(transform.map_items(self.result, fn))

    def reverse(self) -> Chain:
        """Reverse the order of the elements."""
        return Chain(transform.reverse(self.result))

    def send(self, sink: Callable[[Any], Any], cancelled: Any = None) -> Chain:
        """Send the elements to ``sink``; keep those that were sent."""
        return Chain(_send(self.result, sink, cancelled))

    def sequence_using(self, creator: Callable[[int], Any], *args: int) -> Chain:
        """Replace the elements with a generated sequence."""
        return Chain(_sequence_using(creator, *args))

    def shuffle(self, rng: Optional[random.Random] = None) -> Chain:
        """Shuffle a copy of the elements."""
        return Chain(transform.shuffle(self.result, rng))

    def sort_using(self, less: Callable[[Any, Any], bool]) -> Chain:
        """Order the elements by the ``less(a, b)`` predicate."""
        return Chain(transform.sort_using(self.result, less))

    def sub_slice(self, start: int, end: int, fill: Any = None) -> Chain:
        """Keep elements from ``start`` to ``end``, padding with ``fill``."""
        return Chain(access.sub_slice(self.result, start, end, fill))

    def top(self, n: int) -> Chain:
        """Keep up to ``n`` elements from the head."""
        return Chain(access.top(self.result, n))

    def unshift(self, *args: Any) -> Chain:
        """Put ``args`` before the elements."""
        return Chain(access.unshift(self.result, *args))

    def join(self, sep: str) -> str:
        """Join string elements with ``sep``; "" if any element is not a str."""
        if not all(isinstance(value, str) for value in self.result):
            return ""
        return sep.join(self.result)


def of(ss: Optional[Iterable[Any]]) -> Chain:
    """Wrap the elements of ``ss`` for chained operations."""
    return Chain(list(ss) if ss is not None else [])


def of_split_string(s: str, sep: str) -> Chain:
    """Wrap the parts of ``s`` split on ``sep``; an empty ``sep`` splits characters."""
    return Chain(list(s) if sep == "" else s.split(sep))