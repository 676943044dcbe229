from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import main

EMPLOYEES = [
    {"id": f"n{i}", "name": f"Nurse {i}", "skills": ["S"], "shifts": {"2025-02-03": "CA"} if i == 0 else {}}
    for i in range(8)
]
CONFIG = {
    "openDays": [0, 1, 2, 3, 4, 5],
    "shiftTargets": {str(d): {"IT": 3, "S": 1} for d in range(6)},
}


@pytest.fixture()
def client(monkeypatch):
    monkeypatch.setattr(main, "API_KEY", None)
    return TestClient(main.app)


def test_health_check(client) -> None:
    response = client.get("/api/health/check")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_generate_range(client) -> None:
    payload = {"employees": EMPLOYEES, "startDate": "2025-02-03", "numDays": 14, "serviceConfig": CONFIG, "seed": 1}

    response = client.post("/api/schedule/generate", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert set(body) == {"employees", "changes", "schedule", "summary", "violations"}
    assert body["employees"][0]["shifts"]["2025-02-03"] == "CA"
    assert len(body["schedule"]) == len(EMPLOYEES)
    assert all(len(emp["shifts"]) == 14 for emp in body["employees"])


def test_generate_is_reproducible_with_seed(client) -> None:
    payload = {"employees": EMPLOYEES, "startDate": "2025-02-03", "numDays": 7, "serviceConfig": CONFIG, "seed": 5}

    first = client.post("/api/schedule/generate", json=payload).json()
    second = client.post("/api/schedule/generate", json=payload).json()

    assert first["employees"] == second["employees"]


def test_generate_month(client) -> None:
    payload = {"employees": EMPLOYEES, "year": 2025, "month": 2, "serviceConfig": CONFIG, "seed": 2}

    response = client.post("/api/schedule/generate", json=payload)

    assert response.status_code == 200
    assert all(len(emp["shifts"]) == 28 for emp in response.json()["employees"])


def test_generate_requires_a_period(client) -> None:
    response = client.post("/api/schedule/generate", json={"employees": EMPLOYEES})

    assert response.status_code == 422


def test_generate_rejects_empty_range(client) -> None:
    payload = {"employees": EMPLOYEES, "startDate": "2025-02-03", "numDays": 0}

    response = client.post("/api/schedule/generate", json=payload)

    assert response.status_code == 400


def test_generate_rejects_unknown_codes(client) -> None:
    employees = [{"id": "n1", "shifts": {"2025-02-03": "XYZ"}}]
    payload = {"employees": employees, "startDate": "2025-02-03", "numDays": 7}

    response = client.post("/api/schedule/generate", json=payload)

    assert response.status_code == 400
    assert "XYZ" in response.json()["detail"]


def test_validate_roster(client) -> None:
    employees = [{"id": "n1", "shifts": {"2025-02-03": "S", "2025-02-04": "IT"}}]
    payload = {"employees": employees, "startDate": "2025-02-03", "numDays": 7}

    response = client.post("/api/schedule/validate", json=payload)

    assert response.status_code == 200
    body = response.json()
    night = [v for v in body["violations"] if v["type"] == "REST_AFTER_NIGHT"]
    assert night == [
        {
            "employeeId": "n1",
            "date": "2025-02-04",
            "type": "REST_AFTER_NIGHT",
            "message": night[0]["message"],
            "severity": "error",
        }
    ]
    assert body["counts"][0]["date"] == "2025-02-03"
    assert body["counts"][0]["S"] == 1


def test_api_key_required_when_configured(monkeypatch) -> None:
    monkeypatch.setattr(main, "API_KEY", "secret")
    client = TestClient(main.app)
    payload = {"employees": [], "startDate": "2025-02-03", "numDays": 7}

    assert client.post("/api/schedule/validate", json=payload).status_code == 401
    assert client.post("/api/schedule/validate", json=payload, headers={"x-api-key": "secret"}).status_code == 200


def test_generate_rejects_unknown_target_codes(client) -> None:
    config = {"shiftTargets": {"0": {"X": 1, "it": 1}}}
    payload = {"employees": EMPLOYEES, "startDate": "2025-02-03", "numDays": 7, "serviceConfig": config}

    response = client.post("/api/schedule/generate", json=payload)

    assert response.status_code == 400
    assert "X" in response.json()["detail"]


def test_validate_accepts_grid_labels(client) -> None:
    employees = [{"id": "n1", "shifts": {"Mon 2025-02-03": "S", "Tue 2025-02-04": "it"}}]
    payload = {"employees": employees, "startDate": "Mon 2025-02-03", "numDays": 7}

    body = client.post("/api/schedule/validate", json=payload).json()

    assert [v["date"] for v in body["violations"] if v["type"] == "REST_AFTER_NIGHT"] == ["2025-02-04"]
