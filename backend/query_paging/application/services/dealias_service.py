from collections.abc import Mapping
from typing import Any

from sqlalchemy.sql.expression import ClauseElement

from query_paging.application.errors import UnknownProjectionAliasError
from query_paging.infrastructure.logging import get_logger
from query_paging.interfaces.api.v1.schemas.paging import OrderByEntry, PagingOptions

logger = get_logger(__name__)


def extract_sql(expression: Any) -> str:
    if isinstance(expression, str):
        return expression
    if hasattr(expression, "__clause_element__"):
        expression = expression.__clause_element__()
    if isinstance(expression, ClauseElement):
        return str(expression.compile(compile_kwargs={"literal_binds": True}))
    raise TypeError(f"Cannot extract SQL from projection expression {expression!r}")


def build_alias_table(projections: Mapping[str, Any]) -> dict[str, str]:
    """Map each user-facing alias to the SQL text of its projection expression.

    Values may be SQLAlchemy column expressions, ORM attributes or SQL strings.
    """
    return {alias: extract_sql(expression) for alias, expression in projections.items()}


def dealias_order_by(alias_table: Mapping[str, str], options: PagingOptions | None) -> PagingOptions | None:
    """Rewrite each order_by field to its internal expression.

    Direction and entry order are preserved. A field with no alias entry raises
    UnknownProjectionAliasError; nothing is passed through unresolved.
    """
    if options is None:
        return None
    rewritten = []
    for entry in options.order_by:
        expression = alias_table.get(entry.field)
        if expression is None:
            logger.warning("order_by_alias_missing", field=entry.field, aliases=sorted(alias_table))
            raise UnknownProjectionAliasError(
                f"Unrecognized field '{entry.field}' in order_by; no projection is defined for it.",
                value=entry.field,
            )
        rewritten.append(OrderByEntry(field=expression, direction=entry.direction))
    return options.model_copy(update={"order_by": tuple(rewritten)})
