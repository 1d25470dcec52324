"""Handing elements one at a time to a consumer until cancelled."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Optional, Protocol, TypeVar

T = TypeVar("T")


class _Cancellation(Protocol):
    def is_set(self) -> bool: ...


def send(
    items: Optional[Sequence[T]],
    sink: Callable[[T], Any],
    cancelled: Optional[_Cancellation] = None,
) -> list[T]:
    """Pass each element to ``sink`` in order until ``cancelled`` is set.

    ``cancelled`` is checked before each element; it may be a
    ``threading.Event`` or any object with ``is_set()``. ``sink`` may block,
    for example ``queue.Queue.put``. Returns the elements that were sent; a
    result shorter than ``items`` means sending was cancelled.
    """
    sent: list[T] = []
    for value in items if items is not None else ():
        if cancelled is not None and cancelled.is_set():
            break
        sink(value)
        sent.append(value)
    return sent