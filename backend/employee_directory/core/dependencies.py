from __future__ import annotations

from fastapi import HTTPException, status

from employee_directory.services.directory_service import DirectoryService, directory_service


def get_directory_service() -> DirectoryService:
    return directory_service


def require_initialized(service: DirectoryService) -> DirectoryService:
    if not service.initialized:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Employee directory is not available",
        )
    return service
