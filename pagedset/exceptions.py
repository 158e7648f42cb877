from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from pydantic import ValidationError as PydanticValidationError


class PagedSetError(Exception):
    """Base exception for all pagedset errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class InvalidConfigurationError(PagedSetError, ValueError):
    """
    Raised when a subset is described by invalid arguments:
    a negative skip, a non-positive size, a page number below one,
    or a Page built from options that are not page-aligned.
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.field = field
        self.value = value


class MissingSourceError(PagedSetError, TypeError):
    """Raised when a required source, query or count provider is None."""

    def __init__(self, argument: str, original_error: Exception | None = None) -> None:
        super().__init__(f"Argument '{argument}' is required and cannot be None", original_error)
        self.argument = argument


class TotalCountError(PagedSetError):
    """
    Raised when the total count was requested (want_total) but the subset
    is created without one. This points at a defect in the caller or builder.
    """

    def __init__(
        self,
        message: str = "The total count was requested but has not been determined",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)


@contextmanager
def handle_validation_errors(model: str | None = None) -> Generator[None, None, None]:
    """
    Context manager that catches pydantic.ValidationError
    and raises InvalidConfigurationError instead.

    Args:
        model: Optional model name for better error messages

    Usage:
        with handle_validation_errors(model="SubsetOptions"):
            SubsetOptions.model_validate(data)
    """
    try:
        yield
    except PydanticValidationError as e:
        errors = e.errors()
        first = errors[0] if errors else {}
        loc = first.get("loc", ())
        field = str(loc[0]) if loc else None
        detail = first.get("msg", str(e))

        prefix = f"Invalid {model}" if model else "Invalid configuration"
        if field:
            prefix += f" ({field})"

        raise InvalidConfigurationError(
            message=f"{prefix}: {detail}",
            field=field,
            value=first.get("input"),
            original_error=e,
        ) from e
