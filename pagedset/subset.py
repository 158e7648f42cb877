"""
Subset and Page containers for pagedset.

Both are read-only, fixed-length containers over a materialized window,
carrying the positional metadata of the window. They support indexing,
len(), iteration and `in`, but are not collections.abc.Sequence: count and
index are metadata here, not the Sequence.count(value)/index(value) methods.
Builders never create them directly but through new_subset(), which picks
the shape.
"""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar, overload

from .exceptions import InvalidConfigurationError, TotalCountError
from .options import SubsetOptions

T = TypeVar("T")


@dataclass(frozen=True)
class Subset(Generic[T]):
    """
    Represents a subset (window) of a larger source.

    Attributes:
        items: The materialized elements of the window
        options: The options the window was created for
        total: Total number of elements in the source (None if unknown)
    """

    items: tuple[T, ...]
    options: SubsetOptions
    total: int | None = field(default=None)

    def __post_init__(self) -> None:
        # Freeze whatever buffer the builder handed over
        object.__setattr__(self, "items", tuple(self.items))

        if self.total is None:
            if self.options.want_total:
                raise TotalCountError()
        elif self.total < 0:
            raise InvalidConfigurationError(
                f"'total' should not be negative, got {self.total}", field="total", value=self.total
            )

    @property
    def skip(self) -> int:
        """Number of elements of the source before this subset."""
        return self.options.skip

    @property
    def size(self) -> int:
        """The requested subset size. Only the last subset can hold fewer items."""
        return self.options.size

    @property
    def count(self) -> int:
        """Number of elements actually in this subset."""
        return len(self.items)

    @property
    def has_next(self) -> bool:
        """Returns True if there is data after this subset."""
        return self.count > 0 and (self.total is None or self.total > self.skip + self.size)

    @property
    def has_previous(self) -> bool:
        """Returns True if this subset does not start at the beginning of the source."""
        return self.skip > 0

    # --- READ-ONLY SEQUENCE ACCESS ---

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self.items)

    def __contains__(self, value: object) -> bool:
        return value in self.items


@dataclass(frozen=True)
class Page(Subset[T]):
    """
    A subset whose skip is an exact multiple of its size,
    so it can be addressed by a page index or page number.
    """

    def __post_init__(self) -> None:
        if not self.options.is_page_aligned:
            raise InvalidConfigurationError(
                f"Skip {self.options.skip} is not a multiple of size {self.options.size}; "
                "the subset does not describe a page",
                field="options",
                value=self.options,
            )
        super().__post_init__()

    @property
    def index(self) -> int:
        """Zero-based index of the page."""
        return self.options.page_index

    @property
    def number(self) -> int:
        """One-based number of the page."""
        return self.index + 1

    @property
    def page_count(self) -> int | None:
        """
        Number of available pages, if the total is known.

        An empty source has zero pages, even though the first page of it
        can still be built (empty, with total 0).
        """
        if self.total is None:
            return None
        return math.ceil(self.total / self.size)


def new_subset(items: Iterable[T], options: SubsetOptions, total: int | None = None) -> Subset[T]:
    """
    Creates a Page when the options are page-aligned, otherwise a Subset.

    Args:
        items: The materialized window
        options: The options the window was created for
        total: The total count of the source, if known

    Raises:
        TotalCountError: If options.want_total is set but no total is given
    """
    if options.is_page_aligned:
        return Page(tuple(items), options, total)
    return Subset(tuple(items), options, total)
