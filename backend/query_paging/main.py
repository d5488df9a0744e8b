from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from query_paging.application.errors import ValidationError
from query_paging.config import settings
from query_paging.infrastructure.logging import configure_logging, get_logger
from query_paging.interfaces.api.v1.router import api_router

logger = get_logger(__name__)

OPENAPI_DESCRIPTION = """
Paging-parameter front end for a query API.

Query endpoints accept these paging parameters:
- `limit`: positive integer.
- `offset`: non-negative integer.
- `order_by`: JSON array of `{"field": <string>, "order": "asc"|"desc"}`; `order` defaults to `asc`.
- `include_total`: `true` to receive the total record count in the `X-Records` header.

Invalid values are answered with `400` and a message naming the offending value.
"""

OPENAPI_TAGS = [
    {"name": "health", "description": "Service health checks."},
    {"name": "paging", "description": "Paging parameter parsing and validation."},
]


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    logger.info("app_startup", app_name=settings.app_name, version=settings.app_version)
    yield
    logger.info("app_shutdown", app_name=settings.app_name)


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=OPENAPI_DESCRIPTION,
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
)


@app.exception_handler(ValidationError)
async def handle_validation(_: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": str(exc)})


app.include_router(api_router)
