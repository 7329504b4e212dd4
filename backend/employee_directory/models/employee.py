"""Employee models for the in-memory directory."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field


def new_employee_id() -> str:
    return uuid.uuid4().hex


class Employee(BaseModel):
    """One directory record. Immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=new_employee_id)
    name: str
    email: str
    phone: str
    department: str


class EmployeeCreate(BaseModel):
    """Form input for a new employee; fields are stored verbatim."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    department: str | None = Field(default=None, min_length=1)


class EmployeeSummary(BaseModel):
    """Row shown in the employee list."""

    id: str
    name: str
    email: str
    department: str
    initials: str
    avatar_color: str
    phone_suffix: str


class EmployeeDetail(EmployeeSummary):
    """Full employee card with contact links."""

    phone: str
    tel_url: str
    mailto_url: str


class RemoveRequest(BaseModel):
    """Positions to delete.

    Positions index the full list, or the search view for ``query`` when it
    is non-empty.
    """

    positions: list[int] = Field(..., min_length=1)
    query: str = ""


class MoveRequest(BaseModel):
    from_positions: list[int] = Field(..., min_length=1)
    to_position: int
    query: str = ""
