from fastapi import APIRouter, Depends, Query

from query_paging.application.services.paging_service import requires_paging, validate_order_by_columns
from query_paging.domain.explain_mode import ExplainMode
from query_paging.interfaces.api.v1.dependencies.paging import get_explain_mode, get_paging_options
from query_paging.interfaces.api.v1.schemas.paging import PagingOptions, PagingOptionsResponse

router = APIRouter(prefix="/paging", tags=["paging"])


@router.get(
    "/options",
    response_model=PagingOptionsResponse,
    summary="Normalize paging options",
    description=(
        "Parse and validate `limit`, `offset`, `order_by` and `include_total` the same way query endpoints do. "
        "When `columns` is given, `order_by` fields must be among them."
    ),
    responses={400: {"description": "Invalid paging parameter"}},
)
def get_normalized_paging_options(
    columns: str | None = Query(default=None, description="Comma separated list of sortable columns."),
    paging: PagingOptions = Depends(get_paging_options),
    explain: ExplainMode | None = Depends(get_explain_mode),
):
    if columns is not None:
        supported_columns = [column.strip() for column in columns.split(",") if column.strip()]
        validate_order_by_columns(supported_columns, paging)
    return {"paging": paging, "requires_paging": requires_paging(paging), "explain": explain}
