from __future__ import annotations

from employee_directory.models.employee import Employee

# (name, email, phone, department)
_SEED_ROWS: list[tuple[str, str, str, str]] = [
    ("أحمد محمد", "ahmed@company.com", "0501111111", "تطوير البرمجيات"),
    ("سارة علي", "sara@company.com", "0502222222", "التصميم"),
    ("خالد حسن", "khaled@company.com", "0503333333", "المبيعات"),
    ("فاطمة عمر", "fatima@company.com", "0504444444", "الدعم الفني"),
    ("محمد سعيد", "mohammed@company.com", "0505555555", "التسويق"),
    ("نورة عبدالله", "noura@company.com", "0506666666", "الموارد البشرية"),
    ("يوسف أحمد", "yousef@company.com", "0507777777", "المالية"),
    ("لينا خالد", "lina@company.com", "0508888888", "الجودة"),
    ("عمر محمد", "omar@company.com", "0509999999", "التطوير"),
    ("هدى سليمان", "huda@company.com", "0500000000", "الإدارة"),
]

DEPARTMENTS: list[str] = [
    "تطوير البرمجيات",
    "التصميم",
    "المبيعات",
    "الدعم الفني",
    "التسويق",
    "الموارد البشرية",
    "المالية",
    "الجودة",
    "الإدارة",
]


def build_seed() -> list[Employee]:
    """Fresh seed employees; every call generates new ids."""
    return [
        Employee(name=name, email=email, phone=phone, department=department)
        for name, email, phone, department in _SEED_ROWS
    ]
