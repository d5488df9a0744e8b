import json
from collections.abc import Mapping, Sequence
from typing import Any

from query_paging.application.errors import (
    InvalidOrderDirectionError,
    MalformedOrderByError,
    MissingOrderByFieldError,
    UnknownOrderByKeyError,
)
from query_paging.domain.sort_direction import Direction
from query_paging.interfaces.api.v1.schemas.paging import OrderByEntry

ORDER_BY_KEYS = frozenset({"field", "order"})


def is_valid_direction_token(token: Any) -> bool:
    """Legal tokens are None, 'asc' and 'desc' (case-insensitive)."""
    if token is None:
        return True
    return isinstance(token, str) and token.lower() in {"asc", "desc"}


def parse_direction(token: str | None) -> Direction:
    if not is_valid_direction_token(token):
        raise InvalidOrderDirectionError(
            f"Illegal value '{token}' for order; expected either 'asc' or 'desc'", value=token
        )
    if token is None or token.lower() == "asc":
        return Direction.ascending
    return Direction.descending


def parse_order_by_json(raw: str) -> Any:
    try:
        return json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise MalformedOrderByError(
            f"Illegal value '{raw}' for order_by; expected a JSON array of maps.", value=raw
        ) from exc


def validate_order_by_structure(order_by: Any) -> list[Mapping[str, Any]]:
    """Accept None, an empty sequence, or a sequence of maps."""
    if order_by is None:
        return []
    if isinstance(order_by, Sequence) and not isinstance(order_by, (str, bytes)):
        if all(isinstance(entry, Mapping) for entry in order_by):
            return list(order_by)
    raise MalformedOrderByError(
        f"Illegal value '{order_by}' for order_by; expected an array of maps.", value=order_by
    )


def validate_no_unknown_order_by_keys(order_by: list[Mapping[str, Any]]) -> list[Mapping[str, Any]]:
    for entry in order_by:
        unknown_keys = [key for key in entry if key not in ORDER_BY_KEYS]
        if unknown_keys:
            raise UnknownOrderByKeyError(
                f"Illegal value '{dict(entry)}' in order_by; unknown key '{unknown_keys[0]}'.", value=entry
            )
    return order_by


def parse_required_order_by_fields(order_by: list[Mapping[str, Any]]) -> tuple[OrderByEntry, ...]:
    for entry in order_by:
        if entry.get("field") is None:
            raise MissingOrderByFieldError(
                f"Illegal value '{dict(entry)}' in order_by; missing required key 'field'.", value=entry
            )
    for entry in order_by:
        if not is_valid_direction_token(entry.get("order")):
            raise InvalidOrderDirectionError(
                f"Illegal value '{dict(entry)}' in order_by; 'order' must be either 'asc' or 'desc'", value=entry
            )
    for entry in order_by:
        if not isinstance(entry["field"], str):
            raise MalformedOrderByError(
                f"Illegal value '{dict(entry)}' in order_by; 'field' must be a string.", value=entry
            )
    return tuple(OrderByEntry(field=entry["field"], direction=parse_direction(entry.get("order"))) for entry in order_by)


def normalize_order_by(order_by: Any) -> tuple[OrderByEntry, ...]:
    """Validate already-decoded map-shaped order_by data and convert it to entries.

    Checks run in a fixed order over the whole list: structure, unknown keys,
    missing fields, then directions.
    """
    entries = validate_order_by_structure(order_by)
    validate_no_unknown_order_by_keys(entries)
    return parse_required_order_by_fields(entries)


def _pair_direction(token: Any, clause: Any) -> Direction:
    if isinstance(token, Direction):
        return token
    if isinstance(token, str):
        keyword = token[1:] if token.startswith(":") else token
        if is_valid_direction_token(keyword):
            return parse_direction(keyword)
    raise InvalidOrderDirectionError(
        f"Illegal value '{clause}' in order_by; direction must be either 'asc' or 'desc'", value=clause
    )


def normalize_order_by_pairs(clauses: Sequence[Any] | None) -> tuple[OrderByEntry, ...]:
    """Convert the pair shape used by internal callers.

    Each clause is a bare field name, `[field]`, or `[field, direction]` where
    direction is 'asc'/'desc' (optionally written ':asc'/':desc') or a Direction.
    """
    if clauses is None:
        return ()
    if isinstance(clauses, (str, bytes)) or not isinstance(clauses, Sequence):
        raise MalformedOrderByError(
            f"Illegal value '{clauses}' for order_by; expected a list of fields or pairs.", value=clauses
        )
    entries = []
    for clause in clauses:
        if isinstance(clause, str):
            entries.append(OrderByEntry(field=clause, direction=Direction.ascending))
            continue
        if (
            isinstance(clause, Sequence)
            and not isinstance(clause, (str, bytes))
            and len(clause) in (1, 2)
            and isinstance(clause[0], str)
        ):
            direction = _pair_direction(clause[1], clause) if len(clause) == 2 else Direction.ascending
            entries.append(OrderByEntry(field=clause[0], direction=direction))
            continue
        raise MalformedOrderByError(
            f"Illegal value '{clause}' in order_by; expected a field or a [field, direction] pair.", value=clause
        )
    return tuple(entries)


def parse_order_by(raw: str | Sequence[Any] | None) -> tuple[OrderByEntry, ...]:
    """Parse the raw order_by parameter, JSON text or decoded data."""
    if raw is None:
        return ()
    decoded = parse_order_by_json(raw) if isinstance(raw, str) else raw
    return normalize_order_by(decoded)
