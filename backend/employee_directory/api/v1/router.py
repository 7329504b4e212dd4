from fastapi import APIRouter

from employee_directory.api.v1.endpoints import departments, employees, health

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(employees.router)
api_router.include_router(departments.router)
