from __future__ import annotations


VIDEO = {
    "title": "Digital Marketing Basics",
    "type": "video",
    "url": "https://www.youtube.com/watch?v=example1",
    "language": "English",
    "description": "SEO, social media and email campaigns.",
}


def _create(client, headers, **overrides):
    r = client.post("/api/training", json={**VIDEO, **overrides}, headers=headers)
    assert r.status_code == 201, r.text
    return r.json()["data"]["content"]


def test_entrepreneur_creates_training_content(client, make_user) -> None:
    author = make_user("entrepreneur", name="Sunita Devi")
    content = _create(client, author["headers"])
    assert content["created_by"] == author["id"]
    assert content["created_by_name"] == "Sunita Devi"
    assert content["type"] == "video"

    fetched = client.get(f"/api/training/{content['id']}").json()["data"]["content"]
    for key, value in VIDEO.items():
        assert fetched[key] == value


def test_jobseeker_cannot_create_training_content(client, make_user) -> None:
    seeker = make_user("jobseeker")
    r = client.post("/api/training", json=VIDEO, headers=seeker["headers"])
    assert r.status_code == 403
    assert r.json() == {"success": False, "message": "Insufficient permissions"}


def test_admin_can_create_and_remove_others_content(client, make_user) -> None:
    author = make_user("entrepreneur")
    admin = make_user("admin")
    content = _create(client, author["headers"])

    r = client.delete(f"/api/training/{content['id']}", headers=admin["headers"])
    assert r.status_code == 200
    assert r.json()["message"] == "Training content deleted successfully"
    assert client.get(f"/api/training/{content['id']}").status_code == 404


def test_other_entrepreneur_cannot_update(client, make_user) -> None:
    author = make_user("entrepreneur")
    rival = make_user("entrepreneur")
    content = _create(client, author["headers"])

    r = client.put(f"/api/training/{content['id']}", json={**VIDEO, "title": "Mine now"}, headers=rival["headers"])
    assert r.status_code == 403
    assert r.json()["message"] == "You can only update your own training content"


def test_update_replaces_optional_fields(client, make_user) -> None:
    author = make_user("entrepreneur")
    content = _create(client, author["headers"])
    payload = {k: v for k, v in VIDEO.items() if k != "description"}

    r = client.put(f"/api/training/{content['id']}", json={**payload, "type": "pdf"}, headers=author["headers"])
    assert r.status_code == 200
    updated = r.json()["data"]["content"]
    assert updated["type"] == "pdf"
    assert updated["description"] is None


def test_invalid_type_and_url_are_reported_together(client, make_user) -> None:
    author = make_user("entrepreneur")
    r = client.post("/api/training", json={**VIDEO, "type": "audio", "url": "nope"}, headers=author["headers"])
    assert r.status_code == 400
    assert r.json()["errors"] == [
        '"type" must be one of [video, pdf, text, infographic]',
        '"url" must be a valid uri',
    ]


def test_list_filters_by_type_and_language(client, make_user) -> None:
    author = make_user("entrepreneur")
    _create(client, author["headers"], title="English video")
    _create(client, author["headers"], title="Hindi pdf", type="pdf", language="Hindi")
    _create(client, author["headers"], title="Hindi video", language="Hindi")

    data = client.get("/api/training", params={"type": "video"}).json()["data"]
    assert [c["title"] for c in data["trainingContent"]] == ["Hindi video", "English video"]
    assert data["pagination"]["totalItems"] == 2

    data = client.get("/api/training", params={"type": "video", "language": "Hindi"}).json()["data"]
    assert [c["title"] for c in data["trainingContent"]] == ["Hindi video"]

    r = client.get("/api/training", params={"type": "audio"})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["trainingContent"] == []
    assert data["pagination"]["totalItems"] == 0


def test_by_type_endpoint(client, make_user) -> None:
    author = make_user("entrepreneur")
    _create(client, author["headers"], title="Infographic one", type="infographic")
    _create(client, author["headers"], title="Some text", type="text")

    r = client.get("/api/training/type/infographic")
    assert r.status_code == 200
    data = r.json()["data"]
    assert [c["title"] for c in data["content"]] == ["Infographic one"]
    assert data["pagination"]["totalItems"] == 1


def test_by_type_endpoint_with_unknown_type_is_empty(client, make_user) -> None:
    author = make_user("entrepreneur")
    _create(client, author["headers"], title="English video")

    r = client.get("/api/training/type/audio")
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["content"] == []
    assert data["pagination"]["totalItems"] == 0
    assert data["pagination"]["totalPages"] == 0
