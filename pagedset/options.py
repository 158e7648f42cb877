"""
Subset options for pagedset.

A SubsetOptions value describes a requested window on a source: how many
elements to skip, how many to take, and whether the total count must be
determined even when it does not come for free.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidConfigurationError, handle_validation_errors

DEFAULT_SUBSET_SIZE = 50


def _guard_not_negative(value: int, name: str) -> None:
    if value < 0:
        raise InvalidConfigurationError(
            f"'{name}' should not be negative, got {value}", field=name, value=value
        )


def _guard_positive(value: int, name: str) -> None:
    if value <= 0:
        raise InvalidConfigurationError(
            f"'{name}' should be positive, got {value}", field=name, value=value
        )


class SubsetOptions(BaseModel):
    """
    Immutable description of a requested subset.

    Attributes:
        skip: Number of elements to discard from the front of the source
        size: Maximum number of elements in the subset
        want_total: True if the total count must be determined, even when
            that requires consuming the whole source

    The named constructors report invalid values as InvalidConfigurationError.
    Direct construction is validated by pydantic and raises its ValidationError.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    skip: int = Field(default=0, ge=0)
    size: int = Field(default=DEFAULT_SUBSET_SIZE, gt=0)
    want_total: bool = False

    # --- NAMED CONSTRUCTORS ---

    @classmethod
    def _create(cls, **data: Any) -> "SubsetOptions":
        with handle_validation_errors(model=cls.__name__):
            return cls(**data)

    @classmethod
    def for_offset(
        cls, skip: int, size: int = DEFAULT_SUBSET_SIZE, want_total: bool = False
    ) -> "SubsetOptions":
        """Creates options based on a (zero-based) offset and a subset size."""
        _guard_not_negative(skip, "skip")
        _guard_positive(size, "size")
        return cls._create(skip=skip, size=size, want_total=want_total)

    @classmethod
    def for_page_index(
        cls, index: int, size: int = DEFAULT_SUBSET_SIZE, want_total: bool = False
    ) -> "SubsetOptions":
        """Creates options based on a zero-based page index and a page size."""
        _guard_not_negative(index, "index")
        _guard_positive(size, "size")
        return cls._create(skip=index * size, size=size, want_total=want_total)

    @classmethod
    def for_page_number(
        cls, number: int, size: int = DEFAULT_SUBSET_SIZE, want_total: bool = False
    ) -> "SubsetOptions":
        """Creates options based on a one-based page number and a page size."""
        _guard_positive(number, "number")
        _guard_positive(size, "size")
        return cls._create(skip=(number - 1) * size, size=size, want_total=want_total)

    # --- PAGE SEMANTICS ---

    @property
    def is_page_aligned(self) -> bool:
        """Returns True if skip is an exact multiple of size."""
        return self.skip % self.size == 0

    @property
    def page_index(self) -> int:
        """Zero-based page index. Only meaningful when page-aligned."""
        return self.skip // self.size

    @property
    def page_number(self) -> int:
        """One-based page number. Only meaningful when page-aligned."""
        return self.page_index + 1

    # --- NAVIGATION ---

    def first(self) -> "SubsetOptions":
        """Gets the options for the first subset, keeping size and want_total."""
        return self.for_offset(0, self.size, self.want_total)

    def next(self) -> "SubsetOptions":
        """
        Gets the options for the subset after this one.
        Navigation does not depend on the data: skip always grows by size.
        """
        return self.for_offset(self.skip + self.size, self.size, self.want_total)
