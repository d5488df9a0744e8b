from typing import Any


class ApplicationError(Exception):
    """Base application-layer error, independent from transport concerns."""


class ValidationError(ApplicationError):
    """Raised when application-level validation fails."""


class PagingError(ValidationError):
    """Raised when a paging directive cannot be accepted.

    `value` holds the offending raw input so boundary layers can echo it back.
    """

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class InvalidParameterError(PagingError):
    """Raised when limit or offset is not an integer or is out of range."""


class MalformedOrderByError(PagingError):
    """Raised when order_by is not valid JSON or not a sequence of maps."""


class MissingOrderByFieldError(PagingError):
    """Raised when an order_by entry lacks a field name."""


class InvalidOrderDirectionError(PagingError):
    """Raised when an order_by direction is neither asc nor desc."""


class UnknownOrderByKeyError(PagingError):
    """Raised when an order_by entry has a key other than field/order."""


class UnknownSortColumnError(PagingError):
    """Raised when an order_by field is not one of the sortable columns."""

    def __init__(self, message: str, column: str, supported_columns: list[str]):
        super().__init__(message, value=column)
        self.column = column
        self.supported_columns = supported_columns


class InvalidExplainModeError(PagingError):
    """Raised when the explain parameter is present but not supported."""


class InvalidPagingOptionsError(PagingError):
    """Raised when an assembled paging record fails its shape check."""


class UnknownProjectionAliasError(PagingError):
    """Raised when an order_by field has no entry in the projection-alias table."""
