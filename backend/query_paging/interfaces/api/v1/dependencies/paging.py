from fastapi import Query, Response

from query_paging.application.errors import PagingError
from query_paging.application.services.paging_service import parse_explain, parse_paging_options
from query_paging.config import settings
from query_paging.domain.explain_mode import ExplainMode
from query_paging.infrastructure.logging import get_logger
from query_paging.interfaces.api.v1.schemas.paging import PagingOptions

logger = get_logger(__name__)


def get_paging_options(
    limit: str | None = Query(default=None, description="Positive integer page size."),
    offset: str | None = Query(default=None, description="Non-negative integer row offset."),
    order_by: str | None = Query(
        default=None,
        description='JSON array of sort clauses, e.g. [{"field": "certname", "order": "desc"}].',
    ),
    include_total: str | None = Query(default=None, description="When true, the total count is returned in a header."),
) -> PagingOptions:
    try:
        return parse_paging_options(limit=limit, offset=offset, order_by=order_by, include_total=include_total)
    except PagingError as exc:
        logger.info("paging_options_rejected", error_type=type(exc).__name__, value=str(exc.value))
        raise


def get_explain_mode(explain: str | None = Query(default=None, description="Only `analyze` is supported.")) -> ExplainMode | None:
    try:
        return parse_explain(explain)
    except PagingError as exc:
        logger.info("explain_mode_rejected", value=str(exc.value))
        raise


def apply_total_count_header(response: Response, options: PagingOptions, total: int) -> Response:
    """Hook for query routes: emit the total record count when the caller asked for it."""
    if options.include_total:
        response.headers[settings.count_header] = str(total)
    return response
