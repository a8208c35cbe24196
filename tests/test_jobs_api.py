from __future__ import annotations

import math

from bhashaconnect.database import SessionLocal
from bhashaconnect.models import Job


DEV_JOB = {
    "title": "Dev",
    "description": "1234567890",
    "category": "Tech",
    "location": "Pune",
    "language": "English",
}


def _create(client, headers, **overrides):
    r = client.post("/api/jobs", json={**DEV_JOB, **overrides}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["data"]["job"]


def test_create_then_get_round_trip(client, make_user) -> None:
    owner = make_user("entrepreneur", name="Priya Sharma")
    r = client.post("/api/jobs", json=DEV_JOB, headers=owner["headers"])
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Job created successfully"
    job = body["data"]["job"]
    assert job["created_by"] == owner["id"]
    assert job["created_by_name"] == "Priya Sharma"

    fetched = client.get(f"/api/jobs/{job['id']}").json()["data"]["job"]
    for key, value in DEV_JOB.items():
        assert fetched[key] == value
    assert fetched["created_by"] == owner["id"]


def test_delete_by_non_owner_is_forbidden_and_row_survives(client, make_user) -> None:
    owner = make_user("entrepreneur")
    other = make_user("jobseeker")
    job = _create(client, owner["headers"])

    r = client.delete(f"/api/jobs/{job['id']}", headers=other["headers"])
    assert r.status_code == 403
    assert r.json() == {"success": False, "message": "You can only delete your own jobs"}

    r = client.get(f"/api/jobs/{job['id']}")
    assert r.status_code == 200


def test_update_by_non_owner_leaves_row_unchanged(client, make_user) -> None:
    owner = make_user("entrepreneur")
    other = make_user("jobseeker")
    job = _create(client, owner["headers"])

    r = client.put(f"/api/jobs/{job['id']}", json={**DEV_JOB, "title": "Hijacked"}, headers=other["headers"])
    assert r.status_code == 403
    assert client.get(f"/api/jobs/{job['id']}").json()["data"]["job"]["title"] == "Dev"


def test_owner_and_admin_can_update_and_delete(client, make_user) -> None:
    owner = make_user("entrepreneur")
    admin = make_user("admin")
    job = _create(client, owner["headers"])

    r = client.put(f"/api/jobs/{job['id']}", json={**DEV_JOB, "title": "Senior Dev"}, headers=owner["headers"])
    assert r.status_code == 200
    assert r.json()["data"]["job"]["title"] == "Senior Dev"
    assert r.json()["data"]["job"]["created_by"] == owner["id"]

    r = client.put(f"/api/jobs/{job['id']}", json={**DEV_JOB, "title": "Lead Dev"}, headers=admin["headers"])
    assert r.status_code == 200
    assert r.json()["data"]["job"]["title"] == "Lead Dev"

    r = client.delete(f"/api/jobs/{job['id']}", headers=admin["headers"])
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "Job deleted successfully"}
    assert client.get(f"/api/jobs/{job['id']}").status_code == 404


def test_missing_job_is_not_found_for_everyone(client, make_user) -> None:
    other = make_user("jobseeker")
    assert client.get("/api/jobs/999").status_code == 404
    r = client.put("/api/jobs/999", json=DEV_JOB, headers=other["headers"])
    assert r.status_code == 404
    assert r.json()["message"] == "Job not found"
    assert client.delete("/api/jobs/999", headers=other["headers"]).status_code == 404


def test_create_requires_authentication(client) -> None:
    r = client.post("/api/jobs", json=DEV_JOB)
    assert r.status_code == 401
    assert r.json()["success"] is False


def test_validation_lists_every_invalid_field(client, make_user) -> None:
    user = make_user("jobseeker")
    r = client.post("/api/jobs", json={"title": "x", "description": "short"}, headers=user["headers"])
    assert r.status_code == 400
    body = r.json()
    assert body["success"] is False
    assert body["message"] == "Validation error"
    assert len(body["errors"]) == 5

    with SessionLocal() as db:
        assert db.query(Job).count() == 0


def test_update_validates_before_existence(client, make_user) -> None:
    user = make_user("jobseeker")
    r = client.put("/api/jobs/999", json={"title": "x"}, headers=user["headers"])
    assert r.status_code == 400


def test_list_filters_and_pagination(client, make_user) -> None:
    owner = make_user("entrepreneur")
    _create(client, owner["headers"], title="Tech Pune", category="Technology", location="Pune, Maharashtra")
    _create(client, owner["headers"], title="Sales Delhi", category="Sales", location="Delhi, NCR", language="Hindi")
    _create(client, owner["headers"], title="Tech Mumbai", category="Technology", location="Mumbai", language="Marathi")
    _create(client, owner["headers"], title="Lowercase lang", language="english")

    r = client.get("/api/jobs", params={"language": "English"})
    jobs = r.json()["data"]["jobs"]
    assert {j["language"] for j in jobs} == {"English"}
    assert len(jobs) == 1

    r = client.get("/api/jobs", params={"category": "techno"})
    titles = [j["title"] for j in r.json()["data"]["jobs"]]
    assert titles == ["Tech Mumbai", "Tech Pune"]

    r = client.get("/api/jobs", params={"location": "maharashtra"})
    assert [j["title"] for j in r.json()["data"]["jobs"]] == ["Tech Pune"]

    r = client.get("/api/jobs", params={"category": "Agriculture"})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["jobs"] == []
    assert data["pagination"]["totalItems"] == 0
    assert data["pagination"]["totalPages"] == 0


def test_pagination_arithmetic(client, make_user) -> None:
    owner = make_user("entrepreneur")
    for i in range(7):
        _create(client, owner["headers"], title=f"Job number {i}")

    r = client.get("/api/jobs", params={"page": 3, "limit": 3})
    data = r.json()["data"]
    pagination = data["pagination"]
    assert pagination == {"currentPage": 3, "totalPages": 3, "totalItems": 7, "itemsPerPage": 3}
    assert pagination["totalPages"] == math.ceil(pagination["totalItems"] / pagination["itemsPerPage"])
    assert len(data["jobs"]) == 1
    # Newest first: the first job created lands on the last page.
    assert data["jobs"][0]["title"] == "Job number 0"

    first_page = client.get("/api/jobs").json()["data"]
    assert first_page["pagination"]["itemsPerPage"] == 10
    assert first_page["jobs"][0]["title"] == "Job number 6"


def test_invalid_page_params_are_rejected(client) -> None:
    r = client.get("/api/jobs", params={"page": 0})
    assert r.status_code == 400
    assert r.json()["success"] is False
    r = client.get("/api/jobs", params={"limit": "ten"})
    assert r.status_code == 400
