from __future__ import annotations

from fastapi import APIRouter

from employee_directory.services.seed import DEPARTMENTS

router = APIRouter(prefix="/departments", tags=["departments"])


@router.get("", response_model=list[str])
async def list_departments():
    return DEPARTMENTS
