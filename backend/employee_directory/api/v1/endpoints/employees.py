from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status

from employee_directory.core.dependencies import get_directory_service, require_initialized
from employee_directory.models.employee import (
    EmployeeCreate,
    EmployeeDetail,
    EmployeeSummary,
    MoveRequest,
    RemoveRequest,
)
from employee_directory.services.directory import OutOfRangeError
from employee_directory.services.directory_service import DirectoryService
from employee_directory.services.profile_card import build_detail, build_summary

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeSummary])
async def list_employees(
    q: str = "",
    service: DirectoryService = Depends(get_directory_service),  # noqa: B008
):
    try:
        employees = await service.list_employees(q)
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err
    return [build_summary(e) for e in employees]


@router.post("", response_model=EmployeeDetail, status_code=status.HTTP_201_CREATED)
async def create_employee(
    request: EmployeeCreate,
    service: DirectoryService = Depends(get_directory_service),  # noqa: B008
):
    require_initialized(service)
    employee = await service.add_employee(request)
    return build_detail(employee)


@router.post("/remove", response_model=list[EmployeeSummary])
async def remove_employees(
    request: RemoveRequest,
    service: DirectoryService = Depends(get_directory_service),  # noqa: B008
):
    require_initialized(service)
    try:
        await service.remove_employees(request.positions, query=request.query)
    except OutOfRangeError as e:
        logger.warning("Remove rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    return [build_summary(e) for e in await service.list_employees()]


@router.post("/move", response_model=list[EmployeeSummary])
async def move_employees(
    request: MoveRequest,
    service: DirectoryService = Depends(get_directory_service),  # noqa: B008
):
    require_initialized(service)
    try:
        employees = await service.move_employees(
            request.from_positions,
            request.to_position,
            query=request.query,
        )
    except OutOfRangeError as e:
        logger.warning("Move rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    return [build_summary(e) for e in employees]


@router.get("/{employee_id}", response_model=EmployeeDetail)
async def get_employee(
    employee_id: str,
    service: DirectoryService = Depends(get_directory_service),  # noqa: B008
):
    employee = await service.get_employee(employee_id)
    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{employee_id}' not found",
        )
    return build_detail(employee)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    service: DirectoryService = Depends(get_directory_service),  # noqa: B008
):
    require_initialized(service)
    removed = await service.delete_employee(employee_id)
    if not removed:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee '{employee_id}' not found",
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
