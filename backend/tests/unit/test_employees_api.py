from __future__ import annotations

import pytest

from employee_directory.core.dependencies import get_directory_service
from employee_directory.main import app
from employee_directory.services.directory_service import DirectoryService


def _emails(response) -> list[str]:
    return [row["email"] for row in response.json()]


def test_list_employees_returns_seed(client):
    response = client.get("/api/v1/employees")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 10
    assert data[0]["email"] == "ahmed@company.com"
    assert data[0]["initials"] == "أم"
    assert data[0]["phone_suffix"] == "1111"
    assert "phone" not in data[0]


def test_list_employees_with_query(client):
    response = client.get("/api/v1/employees", params={"q": "المبيعات"})
    assert response.status_code == 200
    assert _emails(response) == ["khaled@company.com"]


def test_list_employees_query_is_case_insensitive(client):
    response = client.get("/api/v1/employees", params={"q": "SARA@"})
    assert _emails(response) == ["sara@company.com"]


def test_create_employee(client):
    payload = {"name": "Test", "email": "t@x.com", "phone": "0500000001", "department": "IT"}
    response = client.post("/api/v1/employees", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Test"
    assert data["tel_url"] == "tel://0500000001"
    assert data["mailto_url"] == "mailto:t@x.com"

    listing = client.get("/api/v1/employees").json()
    assert len(listing) == 11
    assert listing[-1]["id"] == data["id"]


def test_create_employee_default_department(client):
    response = client.post("/api/v1/employees", json={"name": "Test", "email": "t@x.com", "phone": "1"})
    assert response.status_code == 201
    assert response.json()["department"] == "تطوير البرمجيات"


@pytest.mark.parametrize("missing", ["name", "email", "phone"])
def test_create_employee_rejects_empty_fields(client, missing):
    payload = {"name": "Test", "email": "t@x.com", "phone": "1", "department": "IT"}
    payload[missing] = ""
    response = client.post("/api/v1/employees", json=payload)
    assert response.status_code == 422


def test_get_employee(client):
    employee_id = client.get("/api/v1/employees").json()[1]["id"]

    response = client.get(f"/api/v1/employees/{employee_id}")
    assert response.status_code == 200
    data = response.json()
    assert data["email"] == "sara@company.com"
    assert data["phone"] == "0502222222"


def test_get_employee_not_found(client):
    response = client.get("/api/v1/employees/does-not-exist")
    assert response.status_code == 404


def test_delete_employee(client):
    employee_id = client.get("/api/v1/employees").json()[0]["id"]

    response = client.delete(f"/api/v1/employees/{employee_id}")
    assert response.status_code == 204
    assert client.get(f"/api/v1/employees/{employee_id}").status_code == 404
    assert client.delete(f"/api/v1/employees/{employee_id}").status_code == 404


def test_remove_employees(client):
    first_id = client.get("/api/v1/employees").json()[0]["id"]

    response = client.post("/api/v1/employees/remove", json={"positions": [0]})
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 9
    assert first_id not in {row["id"] for row in data}


def test_remove_employees_from_filtered_view(client):
    response = client.post("/api/v1/employees/remove", json={"positions": [1], "query": "أحمد"})
    assert response.status_code == 200
    emails = _emails(response)
    assert "yousef@company.com" not in emails
    assert "ahmed@company.com" in emails


def test_remove_employees_out_of_range(client):
    response = client.post("/api/v1/employees/remove", json={"positions": [10]})
    assert response.status_code == 422
    assert "out of range" in response.json()["detail"]
    assert len(client.get("/api/v1/employees").json()) == 10


def test_remove_employees_requires_positions(client):
    response = client.post("/api/v1/employees/remove", json={"positions": []})
    assert response.status_code == 422


def test_move_employees(client):
    response = client.post("/api/v1/employees/move", json={"from_positions": [9], "to_position": 0})
    assert response.status_code == 200
    emails = _emails(response)
    assert emails[0] == "huda@company.com"
    assert emails[1] == "ahmed@company.com"
    assert len(emails) == 10


def test_move_employees_out_of_range(client):
    response = client.post("/api/v1/employees/move", json={"from_positions": [0], "to_position": 11})
    assert response.status_code == 422


def test_writes_unavailable_when_not_initialized(client):
    app.dependency_overrides[get_directory_service] = DirectoryService
    response = client.post("/api/v1/employees", json={"name": "A", "email": "a@x.com", "phone": "1"})
    assert response.status_code == 503
    assert client.get("/api/v1/employees").json() == []


def test_list_departments(client):
    response = client.get("/api/v1/departments")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 9
    assert data[0] == "تطوير البرمجيات"


@pytest.mark.anyio
async def test_list_employees_async(async_client):
    response = await async_client.get("/api/v1/employees", params={"q": "company.com"})
    assert response.status_code == 200
    assert len(response.json()) == 10
