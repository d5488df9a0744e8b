from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

from query_paging.domain.explain_mode import ExplainMode
from query_paging.domain.sort_direction import Direction


class OrderByEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    direction: Direction = Direction.ascending


class PagingOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    limit: Annotated[StrictInt, Field(gt=0)] | None = None
    offset: Annotated[StrictInt, Field(ge=0)] | None = None
    order_by: tuple[OrderByEntry, ...] = ()
    include_total: StrictBool = False


class PagingOptionsResponse(BaseModel):
    paging: PagingOptions
    requires_paging: bool
    explain: ExplainMode | None = None
