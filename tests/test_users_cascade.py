from __future__ import annotations


def test_deleting_a_user_removes_their_listings(client, make_user) -> None:
    owner = make_user("entrepreneur")
    admin = make_user("admin")

    job = client.post(
        "/api/jobs",
        json={"title": "Dev", "description": "1234567890", "category": "Tech", "location": "Pune", "language": "English"},
        headers=owner["headers"],
    ).json()["data"]["job"]
    content = client.post(
        "/api/training",
        json={"title": "Basics", "type": "pdf", "url": "https://example.com/a.pdf", "language": "Hindi"},
        headers=owner["headers"],
    ).json()["data"]["content"]
    entry = client.post(
        "/api/marketplace",
        json={
            "business_name": "Shop",
            "owner_name": "Owner",
            "product_service": "Spices",
            "contact": "98765 43210",
            "language": "Marathi",
        },
        headers=owner["headers"],
    ).json()["data"]["entry"]
    admin_job = client.post(
        "/api/jobs",
        json={"title": "Ops", "description": "1234567890", "category": "Ops", "location": "Nagpur", "language": "Varhadi"},
        headers=admin["headers"],
    ).json()["data"]["job"]

    r = client.delete(f"/users/{owner['id']}", headers=admin["headers"])
    assert r.status_code == 200
    assert r.json() == {"success": True, "message": "User deleted successfully"}

    assert client.get(f"/api/jobs/{job['id']}").status_code == 404
    assert client.get(f"/api/training/{content['id']}").status_code == 404
    assert client.get(f"/api/marketplace/{entry['id']}").status_code == 404
    assert client.get(f"/api/jobs/{admin_job['id']}").status_code == 200

    # The deleted account's token no longer resolves.
    assert client.get("/users/me", headers=owner["headers"]).status_code == 401


def test_users_can_only_delete_themselves(client, make_user) -> None:
    alice = make_user("jobseeker")
    bob = make_user("jobseeker")

    r = client.delete(f"/users/{bob['id']}", headers=alice["headers"])
    assert r.status_code == 403
    assert client.delete("/users/999", headers=alice["headers"]).status_code == 404

    assert client.delete(f"/users/{alice['id']}", headers=alice["headers"]).status_code == 200
