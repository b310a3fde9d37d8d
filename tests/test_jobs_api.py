"""API tests for job management."""

from unittest.mock import patch

import pytest

from recruit_crm.core.errors import StoreError
from recruit_crm.store.base import TENANT_FIELD


@pytest.fixture
def create_job(client, auth_headers):
    def _create(tenant_id="u1", **fields):
        payload = {"title": "Engineer", "client_id": "c1", **fields}
        response = client.post("/api/jobs", json=payload, headers=auth_headers(tenant_id))
        assert response.status_code == 201, response.text
        return response.json()
    return _create


def test_created_job_is_invisible_to_other_tenants(client, auth_headers):
    response = client.post(
        "/api/jobs",
        json={"title": "Engineer", "client_id": "c1"},
        headers=auth_headers("u1")
    )

    assert response.status_code == 201
    job = response.json()
    assert job["status"] == "Open"
    assert job["applications_count"] == 0
    assert job["type"] == "Full-time"
    assert job["posted_date"]

    assert client.get("/api/jobs", headers=auth_headers("u2")).json() == []
    assert [j["id"] for j in client.get("/api/jobs", headers=auth_headers("u1")).json()] == [job["id"]]


class TestJobValidation:

    def test_client_id_is_required(self, client, auth_headers):
        response = client.post("/api/jobs", json={"title": "Engineer"}, headers=auth_headers())

        assert response.status_code == 400
        assert response.json()["detail"] == "client_id is required"

    def test_title_is_required(self, client, auth_headers):
        response = client.post("/api/jobs", json={"client_id": "c1"}, headers=auth_headers())

        assert response.status_code == 400
        assert response.json()["detail"] == "title is required"

    @pytest.mark.parametrize("raw,expected", [
        ("85000", 85000),
        ("85000.50", 85000),
        (120000, 120000),
        ("", None),
        (None, None),
    ])
    def test_salary_is_coerced(self, create_job, raw, expected):
        job = create_job(salary_min=raw)
        assert job["salary_min"] == expected

    @pytest.mark.parametrize("raw", ["lots", "inf", "-inf", "nan", "1e999"])
    def test_non_numeric_salary_is_rejected(self, client, auth_headers, raw):
        response = client.post(
            "/api/jobs",
            json={"title": "Engineer", "client_id": "c1", "salary_max": raw},
            headers=auth_headers()
        )

        assert response.status_code == 400
        assert "Salary must be a number" in response.json()["detail"]

    def test_infinite_salary_update_is_rejected(self, client, auth_headers, create_job):
        job = create_job(salary_min="50000")

        response = client.put(f"/api/jobs/{job['id']}", json={"salary_min": "1e999"}, headers=auth_headers())

        assert response.status_code == 400
        assert "Salary must be a number" in response.json()["detail"]
        assert client.get("/api/jobs", headers=auth_headers()).json()[0]["salary_min"] == 50000

    def test_unknown_type_is_rejected(self, client, auth_headers):
        response = client.post(
            "/api/jobs",
            json={"title": "Engineer", "client_id": "c1", "type": "Gig"},
            headers=auth_headers()
        )

        assert response.status_code == 400
        assert "Type must be one of" in response.json()["detail"]


def test_list_filters_by_client(client, auth_headers, create_job):
    create_job(client_id="c1", title="Backend")
    create_job(client_id="c2", title="Frontend")

    response = client.get("/api/jobs", params={"client_id": "c2"}, headers=auth_headers())

    assert [job["title"] for job in response.json()] == ["Frontend"]


def test_update_merges_fields(client, auth_headers, create_job):
    job = create_job(location="Remote")

    response = client.put(
        f"/api/jobs/{job['id']}",
        json={"status": "On Hold", "salary_max": "150000"},
        headers=auth_headers()
    )

    assert response.status_code == 200
    updated = response.json()
    assert updated["status"] == "On Hold"
    assert updated["salary_max"] == 150000
    assert updated["location"] == "Remote"
    assert updated["client_id"] == "c1"


def test_update_foreign_job_is_forbidden(client, auth_headers, create_job):
    job = create_job("u1")

    response = client.put(f"/api/jobs/{job['id']}", json={"title": "Mine now"}, headers=auth_headers("u2"))

    assert response.status_code == 403


def test_delete_job(client, auth_headers, create_job):
    job = create_job()

    assert client.delete(f"/api/jobs/{job['id']}", headers=auth_headers()).json() == {"success": True}
    assert client.get("/api/jobs", headers=auth_headers()).json() == []
    assert client.delete(f"/api/jobs/{job['id']}", headers=auth_headers()).status_code == 404


def test_legacy_snake_case_timestamps_are_read(client, auth_headers, store):
    store.add("jobs", {
        TENANT_FIELD: "u1",
        "title": "Legacy",
        "client_id": "c1",
        "created_at": "2024-01-01T00:00:00.000Z",
        "updated_at": "2024-01-02T00:00:00.000Z",
    })

    jobs = client.get("/api/jobs", headers=auth_headers()).json()

    assert jobs[0]["created_at"] == "2024-01-01T00:00:00.000Z"
    assert jobs[0]["updated_at"] == "2024-01-02T00:00:00.000Z"
    assert jobs[0]["applications_count"] == 0


def test_store_outage_uses_operation_detail(client, auth_headers, store):
    with patch.object(store, "query", side_effect=StoreError("backend down")):
        response = client.get("/api/jobs", headers=auth_headers())

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to fetch jobs"
    assert "backend down" not in response.text
