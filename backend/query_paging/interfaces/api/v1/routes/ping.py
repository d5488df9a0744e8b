from fastapi import APIRouter

from query_paging.application.services.health_service import get_health_status

router = APIRouter(tags=["health"])


@router.get("/ping")
def ping():
    return get_health_status()
