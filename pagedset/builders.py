"""
Synchronous subset builders.

Each builder reconciles the same contract (a bounded window, next-subset
detection, and an optional total count) with a different kind of source:

    from_collection   a finite collection with a cheap len()
    from_iterable     a one-shot, forward-only iterable
    from_query        a source that evaluates its own [start:end] range

The asynchronous counterparts live in pagedset.async_builders.
"""

import inspect
from collections.abc import Callable, Collection, Iterable, Iterator, Sequence
from itertools import islice
from typing import Any, Protocol, TypeVar, cast

from ._logging import build_context, logger
from .exceptions import MissingSourceError
from .options import SubsetOptions
from .subset import Page, Subset, new_subset

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

# Marks an exhausted iterator when looking ahead for a next element
_EXHAUSTED: Any = object()


class QuerySource(Protocol[T_co]):
    """
    A source that applies the [start:end] range at its own evaluation boundary,
    e.g. a Django QuerySet or a remote query. Sources may expose a
    slice(start, end) method instead of supporting slicing.
    """

    def __getitem__(self, val: slice) -> Iterable[T_co]: ...


def guard_source(value: Any, name: str) -> None:
    """Raises MissingSourceError if a required argument is None."""
    if value is None:
        raise MissingSourceError(name)


def skip_items(iterator: Iterator[Any], count: int) -> int:
    """
    Pulls and discards up to `count` elements.

    Returns:
        The number of elements actually skipped, lower than `count`
        if the iterator was exhausted first.
    """
    return sum(1 for _ in islice(iterator, count))


def from_all(collection: Collection[T]) -> Page[T]:
    """
    Creates a single page that contains all elements of the collection.
    The total is always known.
    """
    guard_source(collection, "collection")

    items = list(collection)
    options = SubsetOptions.for_offset(0, max(len(items), 1), want_total=True)
    # Skip 0 is aligned with any size, so this is always a Page
    return cast(Page[T], new_subset(items, options, len(items)))


def from_collection(collection: Collection[T], options: SubsetOptions) -> Subset[T]:
    """
    Creates a subset of a finite collection.

    The total comes from len() at no extra cost, so it is always populated.
    Sequences are read by index, so only the window is touched; other
    collections are iterated once, over at most skip + size elements.

    Args:
        collection: The finite source
        options: The subset to take

    Raises:
        MissingSourceError: If the collection is None
    """
    guard_source(collection, "collection")

    total = len(collection)
    context = build_context("collection", options.skip, options.size, options.want_total)
    logger.debug("Building subset from collection", extra={**context, "total": total})

    end = min(options.skip + options.size, total)
    if isinstance(collection, Sequence):
        buffer = [collection[i] for i in range(options.skip, end)]
    else:
        buffer = list(islice(collection, options.skip, end))

    return new_subset(buffer, options, total)


def from_iterable(iterable: Iterable[T], options: SubsetOptions) -> Subset[T]:
    """
    Creates a subset of a lazy, one-shot iterable without a known length.

    The iterable is read once, forward only. At most skip + size + 1 elements
    are pulled: the extra one only detects a next subset and is never returned.
    When the end of the iterable is reached while filling the window, the total
    is known and always returned. Otherwise the rest of the iterable is only
    drained for a count when options.want_total is set.

    Args:
        iterable: The lazy source
        options: The subset to take

    Raises:
        MissingSourceError: If the iterable is None
    """
    guard_source(iterable, "iterable")

    context = build_context("iterable", options.skip, options.size, options.want_total)
    logger.debug("Building subset from iterable", extra=context)

    iterator = iter(iterable)
    seen = skip_items(iterator, options.skip)

    # Exhausted while skipping: all elements have been seen
    if seen < options.skip:
        return new_subset([], options, seen)

    buffer = list(islice(iterator, options.size))
    seen += len(buffer)

    # A short buffer proves exhaustion; a full one needs one more pull
    has_next = len(buffer) == options.size and next(iterator, _EXHAUSTED) is not _EXHAUSTED

    if not has_next:
        return new_subset(buffer, options, seen)

    if options.want_total:
        # The element pulled ahead counts too
        seen += 1 + sum(1 for _ in iterator)
        logger.info("Counted remaining items for total", extra={**context, "total": seen})
        return new_subset(buffer, options, seen)

    return new_subset(buffer, options)


def method_has_no_args(method: Callable[..., Any]) -> bool:
    """Returns True if a bound method can be called without arguments."""
    try:
        parameters = inspect.signature(method).parameters.values()
    except (TypeError, ValueError):
        return False
    return all(
        p.default is not p.empty or p.kind in (p.VAR_POSITIONAL, p.VAR_KEYWORD)
        for p in parameters
    )


def count_query(query: Any) -> int:
    """
    Counts a query source with a single evaluation.

    Uses a no-argument count() method when the source has one
    (like a Django QuerySet), and falls back to len(). Sequences
    expose count(value), which is not a total and is never called.
    """
    count = getattr(query, "count", None)
    if callable(count) and not inspect.isbuiltin(count) and method_has_no_args(count):
        return count()
    return len(query)


def slice_query(query: Any, start: int, end: int) -> Iterable[Any]:
    """Asks the source to evaluate the [start:end] range itself."""
    if hasattr(query, "slice"):
        return query.slice(start, end)
    return query[start:end]


def from_query(
    query: QuerySource[T],
    options: SubsetOptions,
    count: Callable[[], int] | None = None,
) -> Subset[T]:
    """
    Creates a subset of a source that can evaluate its own range.

    One element more than the subset size is requested, to detect a next
    subset. At most two evaluations of the source are triggered: the bounded
    fetch, and (only if the total is requested and not derivable from the fetch)
    one count.

    Args:
        query: The pushdown source
        options: The subset to take
        count: Optional provider of the total count. Defaults to the source's
            own count() or len()

    Raises:
        MissingSourceError: If the query is None
    """
    guard_source(query, "query")

    context = build_context("query", options.skip, options.size, options.want_total)
    logger.debug("Building subset from query", extra=context)

    iterator = iter(slice_query(query, options.skip, options.skip + options.size + 1))
    buffer = list(islice(iterator, options.size))
    has_next = len(buffer) == options.size and next(iterator, _EXHAUSTED) is not _EXHAUSTED

    if buffer and not has_next:
        return new_subset(buffer, options, options.skip + len(buffer))

    if not buffer and options.skip == 0:
        return new_subset(buffer, options, 0)

    if options.want_total:
        total = count() if count is not None else count_query(query)
        logger.info("Counted query for total", extra={**context, "total": total})
        return new_subset(buffer, options, total)

    return new_subset(buffer, options)
