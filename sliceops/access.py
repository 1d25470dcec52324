"""Picking, dropping and rearranging elements by position."""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence, Sequence
from itertools import chain, dropwhile, islice
from typing import Any, Optional, TypeVar

T = TypeVar("T")


def _seq(ss: Optional[Sequence[T]]) -> Sequence[T]:
    """Treat None as an empty sequence."""
    return ss if ss is not None else ()


def top(ss: Optional[Sequence[T]], n: int) -> list[T]:
    """Return up to ``n`` elements from the head; empty when ``n`` <= 0."""
    return list(islice(_seq(ss), max(n, 0)))


def bottom(ss: Optional[Sequence[T]], n: int) -> list[T]:
    """Return up to ``n`` elements from the end, last element first.

    ``bottom([1, 2, 3], 2)`` is ``[3, 2]``. Empty when ``n`` <= 0.
    """
    return list(islice(reversed(_seq(ss)), max(n, 0)))


def drop_top(ss: Optional[Sequence[T]], n: int) -> list[T]:
    """Return a copy of what is left after dropping the first ``n`` elements.

    Empty when ``n`` is negative or not smaller than the length.
    """
    items = _seq(ss)
    if n < 0 or n >= len(items):
        return []
    return list(items[n:])


def drop_while(ss: Optional[Iterable[T]], fn: Callable[[T], bool]) -> list[T]:
    """Drop elements while ``fn`` holds, then return everything after."""
    return list(dropwhile(fn, ss if ss is not None else ()))


def chunk(ss: Optional[Sequence[T]], chunk_length: int) -> list[list[T]]:
    """Split into lists of ``chunk_length`` elements; the last may be shorter.

    Raises ValueError when ``chunk_length`` is not greater than 0.
    """
    if chunk_length <= 0:
        raise ValueError("chunk_length should be greater than 0")
    items = _seq(ss)
    return [
        list(items[start:start + chunk_length])
        for start in range(0, len(items), chunk_length)
    ]


def first_or(ss: Optional[Sequence[T]], default: T) -> T:
    """Return the first element, or ``default`` when there is none."""
    items = _seq(ss)
    return items[0] if items else default


def first(ss: Optional[Sequence[T]]) -> Optional[T]:
    """Return the first element, or None when there is none."""
    return first_or(ss, None)


def last_or(ss: Optional[Sequence[T]], default: T) -> T:
    """Return the last element, or ``default`` when there is none."""
    items = _seq(ss)
    return items[-1] if items else default


def last(ss: Optional[Sequence[T]]) -> Optional[T]:
    """Return the last element, or None when there is none."""
    return last_or(ss, None)


def flat(ss: Optional[Iterable[Optional[Iterable[T]]]]) -> list[T]:
    """Flatten one level of nesting; None and empty inner parts are skipped."""
    outer = ss if ss is not None else ()
    return list(chain.from_iterable(part or () for part in outer))


def insert(ss: Optional[Sequence[T]], index: int, *args: T) -> list[T]:
    """Return a new list with ``args`` inserted before position ``index``.

    An index at or past the end appends. A negative index raises IndexError.
    """
    items = list(_seq(ss))
    if index < 0:
        raise IndexError(f"index out of range: {index}")
    items[index:index] = args
    return items


def pop(ss: MutableSequence[T]) -> Optional[T]:
    """Remove and return the first element of ``ss``; None when it is empty."""
    if not ss:
        return None
    return ss.pop(0)


def shift(ss: Optional[Sequence[Any]]) -> tuple[Any, list[Any]]:
    """Return the first number (0 when empty) and the rest as a new list."""
    return first_or(ss, 0), drop_top(ss, 1)


def unshift(ss: Optional[Sequence[T]], *args: T) -> list[T]:
    """Return a new list with ``args`` placed before the elements of ``ss``."""
    return [*args, *_seq(ss)]


def sub_slice(
    ss: Optional[Sequence[T]], start: int, end: int, fill: Any = None
) -> list[Any]:
    """Return elements from ``start`` up to ``end`` (excluded).

    Empty when either bound is negative or ``start`` >= ``end``. Positions
    past the end of ``ss`` are filled with ``fill``.
    """
    if start < 0 or end < 0 or start >= end:
        return []
    items = _seq(ss)
    taken = list(items[start:end])
    return taken + [fill] * (end - start - len(taken))