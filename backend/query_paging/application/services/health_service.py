from query_paging.config import settings


def get_health_status() -> dict:
    return {
        "message": f"{settings.app_name} is running",
        "version": settings.app_version,
    }
