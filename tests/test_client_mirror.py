from __future__ import annotations

import json

import httpx
import pytest

from bhashaconnect.client import (
    ApiRequestError,
    BhashaClient,
    ClientContext,
    ConnectivityState,
    OfflineMirror,
    OfflineMutationBlocked,
)


def _jobs(n: int) -> list[dict]:
    return [{"id": i, "title": f"Job {i}", "language": "English"} for i in range(1, n + 1)]


class RecordingTransport(httpx.MockTransport):
    def __init__(self, rows: list[dict]) -> None:
        self.calls: list[httpx.Request] = []
        self.rows = rows
        super().__init__(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if request.method == "GET":
            body = {"success": True, "data": {"jobs": self.rows, "pagination": {}}}
            return httpx.Response(200, json=body)
        return httpx.Response(201, json={"success": True, "data": {"job": {"id": 99}}})


def _client(rows: list[dict], notices: list[str] | None = None) -> tuple[BhashaClient, RecordingTransport]:
    transport = RecordingTransport(rows)
    http = httpx.Client(base_url="http://api.test", transport=transport)
    client = BhashaClient(http, OfflineMirror(), notify=(notices.append if notices is not None else None))
    return client, transport


def test_offline_list_serves_last_mirrored_rows() -> None:
    rows = _jobs(5)
    client, transport = _client(rows)

    assert client.list("jobs") == rows
    assert len(transport.calls) == 1

    client.mirror.set_online(False)
    assert client.mirror.state is ConnectivityState.offline
    assert client.list("jobs") == rows
    assert len(transport.calls) == 1


def test_offline_create_is_blocked_without_network() -> None:
    notices: list[str] = []
    client, transport = _client(_jobs(5), notices)
    client.list("jobs")
    client.mirror.set_online(False)

    with pytest.raises(OfflineMutationBlocked) as excinfo:
        client.create("jobs", {"title": "Dev"})

    assert "unavailable while offline" in str(excinfo.value)
    assert notices == [str(excinfo.value)]
    assert len(transport.calls) == 1

    with pytest.raises(OfflineMutationBlocked):
        client.delete("jobs", 1)
    with pytest.raises(OfflineMutationBlocked):
        client.update("jobs", 1, {"title": "Dev"})
    assert len(transport.calls) == 1


def test_offline_without_mirror_returns_empty_list() -> None:
    client, transport = _client(_jobs(2))
    client.mirror.set_online(False)
    assert client.list("schemes") == []
    assert transport.calls == []


def test_next_online_fetch_overwrites_mirror() -> None:
    client, transport = _client(_jobs(5))
    client.list("jobs")

    transport.rows = _jobs(2)
    assert client.list("jobs") == _jobs(2)
    client.mirror.set_online(False)
    assert client.list("jobs") == _jobs(2)


def test_transport_failure_falls_back_to_mirror() -> None:
    rows = _jobs(3)
    client, _ = _client(rows)
    client.list("jobs")

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client.http = httpx.Client(base_url="http://api.test", transport=httpx.MockTransport(refuse))
    assert client.list("jobs") == rows


def test_mirror_persists_across_context_lifecycle(tmp_path) -> None:
    path = tmp_path / "mirror.json"
    rows = _jobs(4)

    with ClientContext(mirror_path=path, http=httpx.Client(base_url="http://api.test", transport=RecordingTransport(rows))) as client:
        client.list("jobs")

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert stored["jobs"]["data"] == rows
    assert stored["jobs"]["timestamp"]

    context = ClientContext(mirror_path=path, http=httpx.Client(base_url="http://api.test", transport=RecordingTransport([])))
    client = context.start()
    context.set_online(False)
    assert client.list("jobs") == rows
    assert context.mirror.timestamp("jobs") is not None
    context.stop()


def test_client_against_the_api(client, make_user) -> None:
    user = make_user("entrepreneur")
    token = user["headers"]["Authorization"].split(" ", 1)[1]
    notices: list[str] = []
    api = BhashaClient(client, OfflineMirror(), token=token, notify=notices.append)

    created = api.create(
        "jobs",
        {"title": "Dev", "description": "1234567890", "category": "Tech", "location": "Pune", "language": "English"},
    )
    assert created["job"]["created_by"] == user["id"]

    rows = api.list("jobs", language="English")
    assert [r["title"] for r in rows] == ["Dev"]

    with pytest.raises(ApiRequestError) as excinfo:
        api.create("jobs", {"title": "x"})
    assert excinfo.value.status_code == 400
    assert len(excinfo.value.errors) == 5
    assert notices == ["Validation error"]

    api.mirror.set_online(False)
    assert api.list("jobs") == rows
