"""
Asynchronous subset builders.

Every pull of an element, slice or count is awaited in order; nothing runs
concurrently. Cancelling the enclosing task aborts the pending await and
closes the source, and no subset is returned.
"""

from collections.abc import AsyncIterable, Awaitable, Callable, Sequence
from typing import Any, Protocol, TypeVar

import asyncstdlib

from ._logging import build_context, logger
from .builders import guard_source
from .options import SubsetOptions
from .subset import Subset, new_subset

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

_EXHAUSTED: Any = object()


class AsyncQuerySource(Protocol[T_co]):
    """A source that evaluates its own [start:end] range and count asynchronously."""

    async def count(self) -> int: ...
    async def slice(self, start: int = 0, end: int | None = None) -> Sequence[T_co]: ...


async def from_async_iterable(
    source: AsyncIterable[T],
    options: SubsetOptions,
    count: Callable[[], Awaitable[int]] | None = None,
) -> Subset[T]:
    """
    Creates a subset of a lazy, one-shot async iterable.

    Follows the same rules as pagedset.builders.from_iterable, except that
    when the total is requested and not known from paging, the `count`
    provider is awaited instead of draining the source.

    The source is closed when the build finishes, fails or is cancelled.

    Args:
        source: The async source, e.g. an async generator
        options: The subset to take
        count: Async provider of the total count, required with want_total

    Raises:
        MissingSourceError: If the source is None, or want_total is set without
            a count provider. Raised before anything is pulled.
    """
    guard_source(source, "source")
    if options.want_total:
        guard_source(count, "count")

    context = build_context("async_iterable", options.skip, options.size, options.want_total)
    logger.debug("Building subset from async iterable", extra=context)

    # islice() only borrows the scoped iterator, so it stays open between steps
    async with asyncstdlib.scoped_iter(source) as iterator:
        seen = 0
        async for _ in asyncstdlib.islice(iterator, options.skip):
            seen += 1
        if seen < options.skip:
            return new_subset([], options, seen)

        buffer = await asyncstdlib.list(asyncstdlib.islice(iterator, options.size))
        seen += len(buffer)

        # A short buffer proves exhaustion; a full one needs one more pull
        has_next = (
            len(buffer) == options.size
            and await asyncstdlib.anext(iterator, _EXHAUSTED) is not _EXHAUSTED
        )

    if not has_next:
        return new_subset(buffer, options, seen)

    if options.want_total and count is not None:
        total = await count()
        logger.info("Counted async source for total", extra={**context, "total": total})
        return new_subset(buffer, options, total)

    return new_subset(buffer, options)


async def from_async_query(query: AsyncQuerySource[T], options: SubsetOptions) -> Subset[T]:
    """
    Creates a subset of an async source that can evaluate its own range.

    Awaits one slice of size + 1 elements and, only when the total is
    requested and cannot be derived from that slice, one count.

    Raises:
        MissingSourceError: If the query is None
    """
    guard_source(query, "query")

    context = build_context("async_query", options.skip, options.size, options.want_total)
    logger.debug("Building subset from async query", extra=context)

    items_plus_one = list(await query.slice(options.skip, options.skip + options.size + 1))
    buffer = items_plus_one[: options.size]
    has_next = len(items_plus_one) > options.size

    if buffer and not has_next:
        return new_subset(buffer, options, options.skip + len(buffer))

    if not buffer and options.skip == 0:
        return new_subset(buffer, options, 0)

    if options.want_total:
        total = await query.count()
        logger.info("Counted async query for total", extra={**context, "total": total})
        return new_subset(buffer, options, total)

    return new_subset(buffer, options)
