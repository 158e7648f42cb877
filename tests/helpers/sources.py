"""
Fake sources for exercising the subset builders.

Each fake records how it was consumed, so tests can assert how many
elements were pulled and how many evaluations a query triggered.
"""

from collections.abc import AsyncIterator, Iterator
from typing import Any

# Scenarios over the elements 0..7:
# (page number, page size, expected window, has_next, total when not requested,
#  total from a pushdown query when not requested)
# A pushdown query cannot tell the length from an empty window past the start.
PAGE_SCENARIOS = [
    (1, 3, [0, 1, 2], True, None, None),
    (2, 3, [3, 4, 5], True, None, None),
    (3, 3, [6, 7], False, 8, 8),
    (2, 4, [4, 5, 6, 7], False, 8, 8),
    (2, 8, [], False, 8, None),
    (9, 9, [], False, 8, None),
]


class CountingIterable:
    """A one-shot iterable that counts every element pulled from it."""

    def __init__(self, items: list[Any]) -> None:
        self._items = items
        self._iterated = False
        self.pulled = 0

    def __iter__(self) -> Iterator[Any]:
        if self._iterated:
            raise RuntimeError("CountingIterable can only be iterated once")
        self._iterated = True
        for item in self._items:
            self.pulled += 1
            yield item


class RecordingQuery:
    """A pushdown source over a list that records each evaluation."""

    def __init__(self, items: list[Any]) -> None:
        self._items = items
        self.evaluations: list[tuple[Any, ...]] = []

    def __getitem__(self, val: slice) -> list[Any]:
        self.evaluations.append(("slice", val.start, val.stop))
        return self._items[val]

    def count(self) -> int:
        self.evaluations.append(("count",))
        return len(self._items)


class SlicingQuery:
    """A pushdown source exposing slice(start, end) instead of slicing syntax."""

    def __init__(self, items: list[Any]) -> None:
        self._items = items
        self.slices: list[tuple[int, int | None]] = []

    def slice(self, start: int = 0, end: int | None = None) -> list[Any]:
        self.slices.append((start, end))
        return self._items[start:end]

    def __len__(self) -> int:
        return len(self._items)


class AsyncCountingIterable:
    """A one-shot async iterable that counts every element pulled from it."""

    def __init__(self, items: list[Any]) -> None:
        self._items = items
        self.pulled = 0
        self.closed = False

    def __aiter__(self) -> AsyncIterator[Any]:
        return self._generate()

    async def _generate(self) -> AsyncIterator[Any]:
        try:
            for item in self._items:
                self.pulled += 1
                yield item
        finally:
            self.closed = True


class AsyncRecordingQuery:
    """An async pushdown source over a list that records each evaluation."""

    def __init__(self, items: list[Any]) -> None:
        self._items = items
        self.evaluations: list[tuple[Any, ...]] = []

    async def slice(self, start: int = 0, end: int | None = None) -> list[Any]:
        self.evaluations.append(("slice", start, end))
        return self._items[start:end]

    async def count(self) -> int:
        self.evaluations.append(("count",))
        return len(self._items)


class AsyncCounter:
    """Async total-count provider that records how often it was awaited."""

    def __init__(self, total: int) -> None:
        self.total = total
        self.calls = 0

    async def __call__(self) -> int:
        self.calls += 1
        return self.total
