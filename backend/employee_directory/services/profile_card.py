"""Avatar and contact formatting for employee cards."""

from __future__ import annotations

import zlib

from employee_directory.models.employee import Employee, EmployeeDetail, EmployeeSummary

AVATAR_PALETTE: list[str] = ["blue", "green", "orange", "purple", "red", "pink", "indigo", "teal"]

PHONE_SUFFIX_LENGTH = 4


def initials(name: str) -> str:
    tokens = name.split()
    if len(tokens) >= 2:
        return tokens[0][:1] + tokens[1][:1]
    return name[:2]


def avatar_color(name: str) -> str:
    # Stable across processes.
    index = zlib.crc32(name.encode("utf-8")) % len(AVATAR_PALETTE)
    return AVATAR_PALETTE[index]


def phone_suffix(phone: str) -> str:
    return phone[-PHONE_SUFFIX_LENGTH:]


def tel_url(phone: str) -> str:
    digits = "".join(ch for ch in phone if ch.isdigit())
    return f"tel://{digits}"


def mailto_url(email: str) -> str:
    return f"mailto:{email}"


def build_summary(employee: Employee) -> EmployeeSummary:
    return EmployeeSummary(
        id=employee.id,
        name=employee.name,
        email=employee.email,
        department=employee.department,
        initials=initials(employee.name),
        avatar_color=avatar_color(employee.name),
        phone_suffix=phone_suffix(employee.phone),
    )


def build_detail(employee: Employee) -> EmployeeDetail:
    summary = build_summary(employee)
    return EmployeeDetail(
        **summary.model_dump(),
        phone=employee.phone,
        tel_url=tel_url(employee.phone),
        mailto_url=mailto_url(employee.email),
    )
