from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.testclient import TestClient

from employee_directory.core.config import Settings
from employee_directory.main import app
from employee_directory.models.employee import Employee
from employee_directory.services.directory import Directory
from employee_directory.services.directory_service import DirectoryService, directory_service
from employee_directory.services.seed import build_seed


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client():
    await directory_service.initialize(Settings())
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await directory_service.close()
    app.dependency_overrides.clear()


@pytest.fixture
def seeded_directory() -> Directory:
    return Directory(build_seed())


@pytest.fixture
def small_directory() -> Directory:
    return Directory(
        [
            Employee(name="Alice Archer", email="alice@example.com", phone="0511000001", department="Sales"),
            Employee(name="Bob Baker", email="bob@example.com", phone="0511000002", department="Design"),
            Employee(name="Carol Cole", email="carol@example.com", phone="0511000003", department="Sales"),
            Employee(name="Dan Drake", email="dan@example.com", phone="0511000004", department="Finance"),
            Employee(name="Eve Evans", email="eve@example.com", phone="0511000005", department="Sales"),
        ]
    )


@pytest.fixture
async def seeded_service():
    service = DirectoryService()
    await service.initialize(Settings())
    yield service
    await service.close()
