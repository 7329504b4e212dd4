"""Process-wide owner of the in-memory employee directory."""

from __future__ import annotations

import asyncio
import logging

from employee_directory.core.config import Settings
from employee_directory.models.employee import Employee, EmployeeCreate
from employee_directory.services.directory import Directory
from employee_directory.services.seed import build_seed

logger = logging.getLogger(__name__)


class DirectoryService:
    def __init__(self) -> None:
        self.directory: Directory | None = None
        self.default_department: str = ""
        self.initialized: bool = False
        self._write_lock = asyncio.Lock()

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        seed = build_seed() if settings.DIRECTORY_LOAD_SEED else []
        self.directory = Directory(seed)
        self.default_department = settings.DIRECTORY_DEFAULT_DEPARTMENT
        self._write_lock = asyncio.Lock()
        self.initialized = True
        logger.info("DirectoryService initialized (employees=%d)", len(self.directory))

    async def close(self) -> None:
        if self.directory is not None:
            logger.info("DirectoryService closed, discarding %d employees", len(self.directory))
        self.directory = None
        self.initialized = False

    def _require_directory(self) -> Directory:
        if not self.initialized or self.directory is None:
            raise RuntimeError("DirectoryService not initialized")
        return self.directory

    async def list_employees(self, query: str = "") -> list[Employee]:
        if self.directory is None:
            return []
        return self.directory.search(query)

    async def get_employee(self, employee_id: str) -> Employee | None:
        if self.directory is None:
            return None
        return self.directory.get(employee_id)

    async def count(self) -> int:
        if self.directory is None:
            return 0
        return len(self.directory)

    async def add_employee(self, data: EmployeeCreate) -> Employee:
        directory = self._require_directory()
        employee = Employee(
            name=data.name,
            email=data.email,
            phone=data.phone,
            department=data.department or self.default_department,
        )
        async with self._write_lock:
            stored = directory.append(employee)
        logger.info("Employee %s added (total=%d)", stored.id, len(directory))
        return stored

    async def remove_employees(self, positions: list[int], query: str = "") -> list[Employee]:
        directory = self._require_directory()
        async with self._write_lock:
            full_positions = directory.resolve_view_positions(query, positions)
            removed = directory.remove_at(full_positions)
        logger.info(
            "Removed %d employees at %s (query=%r, remaining=%d)",
            len(removed),
            full_positions,
            query,
            len(directory),
        )
        return removed

    async def move_employees(
        self,
        from_positions: list[int],
        to_position: int,
        query: str = "",
    ) -> list[Employee]:
        directory = self._require_directory()
        async with self._write_lock:
            sources = directory.resolve_view_positions(query, from_positions)
            destination = directory.resolve_view_destination(query, to_position)
            directory.move(sources, destination)
        logger.info("Moved employees %s to %d (query=%r)", sources, destination, query)
        return list(directory.records)

    async def delete_employee(self, employee_id: str) -> Employee | None:
        directory = self._require_directory()
        async with self._write_lock:
            index = directory.index_of(employee_id)
            if index is None:
                return None
            removed = directory.remove_at([index])
        logger.info("Employee %s deleted (remaining=%d)", employee_id, len(directory))
        return removed[0]

    async def check_connection(self) -> bool:
        return self.initialized and self.directory is not None


directory_service = DirectoryService()
