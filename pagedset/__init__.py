from .async_builders import AsyncQuerySource, from_async_iterable, from_async_query
from .builders import QuerySource, from_all, from_collection, from_iterable, from_query
from .exceptions import (
    InvalidConfigurationError,
    MissingSourceError,
    PagedSetError,
    TotalCountError,
)
from .options import DEFAULT_SUBSET_SIZE, SubsetOptions
from .subset import Page, Subset, new_subset

__all__ = [
    "SubsetOptions",
    "DEFAULT_SUBSET_SIZE",
    "Subset",
    "Page",
    "new_subset",
    # Builders
    "from_all",
    "from_collection",
    "from_iterable",
    "from_query",
    "QuerySource",
    # Async builders
    "from_async_iterable",
    "from_async_query",
    "AsyncQuerySource",
    # Exceptions
    "PagedSetError",
    "InvalidConfigurationError",
    "MissingSourceError",
    "TotalCountError",
]
