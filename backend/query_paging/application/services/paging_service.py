import re
from collections.abc import Iterable, Sequence
from typing import Any

from query_paging.application.errors import (
    InvalidExplainModeError,
    InvalidPagingOptionsError,
    InvalidParameterError,
    UnknownSortColumnError,
)
from query_paging.application.services.order_by_service import parse_order_by
from query_paging.domain.explain_mode import ExplainMode
from query_paging.interfaces.api.v1.schemas.paging import OrderByEntry, PagingOptions

QUERY_PARAMS = ("query", "limit", "offset", "order_by", "include_total")

_INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def coerce_to_int(value: Any) -> int | None:
    """Return the integer form of `value`, or None when it is not one."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            # int() refuses strings past the interpreter digit limit
            try:
                return int(text)
            except ValueError:
                return None
    return None


def validate_limit(limit: str | int) -> int:
    parsed = coerce_to_int(limit)
    if parsed is None or parsed <= 0:
        raise InvalidParameterError(
            f"Illegal value '{limit}' for limit; expected a positive non-zero integer.", value=limit
        )
    return parsed


def validate_offset(offset: str | int) -> int:
    parsed = coerce_to_int(offset)
    if parsed is None or parsed < 0:
        raise InvalidParameterError(
            f"Illegal value '{offset}' for offset; expected a non-negative integer.", value=offset
        )
    return parsed


def validate_explain_mode(explain: str) -> ExplainMode:
    if explain != ExplainMode.analyze.value:
        raise InvalidExplainModeError(f"Illegal value '{explain}' for explain; expected `analyze`.", value=explain)
    return ExplainMode.analyze


def parse_limit(limit: str | int | None) -> int | None:
    return None if limit is None else validate_limit(limit)


def parse_offset(offset: str | int | None) -> int | None:
    return None if offset is None else validate_offset(offset)


def parse_explain(explain: str | None) -> ExplainMode | None:
    return None if explain is None else validate_explain_mode(explain)


def parse_include_total(include_total: str | bool | None) -> bool:
    if include_total is None:
        return False
    if isinstance(include_total, bool):
        return include_total
    if isinstance(include_total, str) and include_total.strip().lower() in {"true", "false"}:
        return include_total.strip().lower() == "true"
    raise InvalidParameterError(
        f"Illegal value '{include_total}' for include_total; expected 'true' or 'false'.", value=include_total
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check_components(limit: Any, offset: Any, order_by: Any, include_total: Any) -> None:
    if limit is not None and not (_is_int(limit) and limit > 0):
        raise InvalidPagingOptionsError(f"Invalid paging options; limit '{limit}' is not a positive integer.", value=limit)
    if offset is not None and not (_is_int(offset) and offset >= 0):
        raise InvalidPagingOptionsError(
            f"Invalid paging options; offset '{offset}' is not a non-negative integer.", value=offset
        )
    if order_by is not None and not (
        isinstance(order_by, Sequence)
        and not isinstance(order_by, (str, bytes))
        and all(isinstance(entry, OrderByEntry) for entry in order_by)
    ):
        raise InvalidPagingOptionsError(
            f"Invalid paging options; order_by '{order_by}' is not a sequence of order-by entries.", value=order_by
        )
    if not isinstance(include_total, bool):
        raise InvalidPagingOptionsError(
            f"Invalid paging options; include_total '{include_total}' is not a boolean.", value=include_total
        )


def is_valid_paging_options(options: Any) -> bool:
    if not isinstance(options, PagingOptions):
        return False
    try:
        _check_components(options.limit, options.offset, options.order_by, options.include_total)
    except InvalidPagingOptionsError:
        return False
    return True


def assemble_paging_options(
    *,
    limit: int | None = None,
    offset: int | None = None,
    order_by: Sequence[OrderByEntry] | None = None,
    include_total: bool = False,
) -> PagingOptions:
    """Combine individually validated components into one PagingOptions record."""
    _check_components(limit, offset, order_by, include_total)
    return PagingOptions(limit=limit, offset=offset, order_by=tuple(order_by or ()), include_total=include_total)


def validate_paging_options(options: PagingOptions) -> PagingOptions:
    if not isinstance(options, PagingOptions):
        raise InvalidPagingOptionsError(f"Invalid paging options '{options}'.", value=options)
    _check_components(options.limit, options.offset, options.order_by, options.include_total)
    return options


def parse_paging_options(
    *,
    limit: str | int | None = None,
    offset: str | int | None = None,
    order_by: str | Sequence[Any] | None = None,
    include_total: str | bool | None = None,
) -> PagingOptions:
    """Run the full pipeline from raw request parameters to a PagingOptions record."""
    parsed_order_by = parse_order_by(order_by)
    return assemble_paging_options(
        limit=parse_limit(limit),
        offset=parse_offset(offset),
        order_by=parsed_order_by,
        include_total=parse_include_total(include_total),
    )


def validate_order_by_columns(columns: Iterable[str], options: PagingOptions | None) -> PagingOptions | None:
    """Reject order_by fields that are not among `columns`; returns `options` unchanged."""
    if isinstance(columns, (str, bytes)):
        raise TypeError(f"columns must be a collection of column names, not {type(columns).__name__}")
    supported_columns = list(columns)
    if options is None:
        return None
    legal = set(supported_columns)
    for entry in options.order_by:
        if entry.field not in legal:
            joined = "', '".join(supported_columns)
            raise UnknownSortColumnError(
                f"Unrecognized column '{entry.field}' specified in order_by; Supported columns are '{joined}'",
                column=entry.field,
                supported_columns=supported_columns,
            )
    return options


def requires_paging(options: PagingOptions | None) -> bool:
    if options is None:
        return False
    return not (
        options.limit is None
        and options.offset is None
        and not options.order_by
        and not options.include_total
    )
