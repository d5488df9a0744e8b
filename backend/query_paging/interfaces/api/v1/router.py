from fastapi import APIRouter

from query_paging.interfaces.api.v1.routes.paging import router as paging_router
from query_paging.interfaces.api.v1.routes.ping import router as ping_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(paging_router)
api_router.include_router(ping_router)
