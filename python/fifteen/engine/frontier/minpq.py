"""Minimum-priority queue used as a search frontier."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable
from operator import attrgetter
from typing import Generic, TypeVar

from fifteen.errors import Underflow

T = TypeVar("T")


class MinPQ(Generic[T]):
    """Binary min-heap keyed by ``key(item)`` (``item.priority`` by default).

    Items with equal keys come out in insertion order.  The sequence
    number in each entry also keeps ``heapq`` from ever comparing two
    items directly.
    """

    def __init__(self, key: Callable[[T], float] = attrgetter("priority")) -> None:
        self._key = key
        self._heap: list[tuple[float, int, T]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def insert(self, item: T) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._counter), item))

    def peek(self) -> T:
        if not self._heap:
            raise Underflow("Priority queue underflow")
        return self._heap[0][2]

    def extract_min(self) -> T:
        """Remove and return the item with the smallest key."""
        if not self._heap:
            raise Underflow("Priority queue underflow")
        return heapq.heappop(self._heap)[2]

    del_min = extract_min
