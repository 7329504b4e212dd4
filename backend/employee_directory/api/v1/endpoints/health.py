from __future__ import annotations

from fastapi import APIRouter, Depends

from employee_directory.core.config import settings
from employee_directory.core.dependencies import get_directory_service
from employee_directory.services.directory_service import DirectoryService

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(service: DirectoryService = Depends(get_directory_service)):  # noqa: B008
    services: dict[str, str] = {}

    try:
        ok = await service.check_connection()
        services["directory"] = "ok" if ok else "not_initialized"
    except Exception:
        services["directory"] = "error"

    all_ok = all(v == "ok" for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
        "employees": await service.count(),
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": True}
