"""HTTP client for the listing API with an offline fallback."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

import httpx

from bhashaconnect.client.mirror import OfflineMirror


logger = logging.getLogger(__name__)

# resource name -> (path, envelope key holding the rows)
RESOURCES: dict[str, tuple[str, str]] = {
    "jobs": ("/api/jobs", "jobs"),
    "training": ("/api/training", "trainingContent"),
    "marketplace": ("/api/marketplace", "marketplace"),
    "schemes": ("/api/schemes", "schemes"),
}

Notifier = Callable[[str], None]


class ClientError(Exception):
    pass


class OfflineMutationBlocked(ClientError):
    def __init__(self, resource: str, action: str) -> None:
        self.resource = resource
        self.action = action
        super().__init__(f"{action.capitalize()} {resource} is unavailable while offline")


class ApiRequestError(ClientError):
    def __init__(self, status_code: int, message: str, errors: list[str] | None = None) -> None:
        self.status_code = status_code
        self.message = message
        self.errors = list(errors or [])
        super().__init__(f"{status_code}: {message}")


def _log_notifier(message: str) -> None:
    logger.warning("%s", message)


class BhashaClient:
    def __init__(
        self,
        http: httpx.Client,
        mirror: OfflineMirror,
        *,
        token: str | None = None,
        notify: Notifier | None = None,
    ) -> None:
        self.http = http
        self.mirror = mirror
        self.token = token
        self.notify = notify or _log_notifier

    def _resource(self, resource: str) -> tuple[str, str]:
        try:
            return RESOURCES[resource]
        except KeyError as exc:
            raise ValueError(f"Unknown resource: {resource}") from exc

    def _headers(self) -> dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def _unwrap(self, response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            body = {}
        if response.is_error:
            message = body.get("message") if isinstance(body, dict) else None
            errors = body.get("errors") if isinstance(body, dict) else None
            err = ApiRequestError(response.status_code, message or response.reason_phrase, errors)
            self.notify(err.message)
            raise err
        return body if isinstance(body, dict) else {}

    def _guard_mutation(self, resource: str, action: str) -> None:
        if not self.mirror.is_online:
            blocked = OfflineMutationBlocked(resource, action)
            self.notify(str(blocked))
            raise blocked

    # Reads

    def list(self, resource: str, **params: Any) -> list[dict[str, Any]]:
        """Return listing rows, from the API when online or the mirror when offline."""

        path, key = self._resource(resource)
        if not self.mirror.is_online:
            return self.mirror.load(resource)

        query = {k: v for k, v in params.items() if v is not None}
        try:
            response = self.http.get(path, params=query, headers=self._headers())
        except httpx.TransportError:
            logger.warning("list %s failed, serving offline mirror", resource, exc_info=True)
            return self.mirror.load(resource)

        body = self._unwrap(response)
        rows = list((body.get("data") or {}).get(key) or [])
        self.mirror.save(resource, rows)
        return rows

    def get(self, resource: str, item_id: int) -> dict[str, Any]:
        path, _ = self._resource(resource)
        body = self._unwrap(self.http.get(f"{path}/{item_id}", headers=self._headers()))
        return body.get("data") or {}

    # Writes

    def create(self, resource: str, payload: Mapping[str, Any]) -> dict[str, Any]:
        self._guard_mutation(resource, "create")
        path, _ = self._resource(resource)
        body = self._unwrap(self.http.post(path, json=dict(payload), headers=self._headers()))
        return body.get("data") or {}

    def update(self, resource: str, item_id: int, payload: Mapping[str, Any]) -> dict[str, Any]:
        self._guard_mutation(resource, "update")
        path, _ = self._resource(resource)
        body = self._unwrap(self.http.put(f"{path}/{item_id}", json=dict(payload), headers=self._headers()))
        return body.get("data") or {}

    def delete(self, resource: str, item_id: int) -> str:
        self._guard_mutation(resource, "delete")
        path, _ = self._resource(resource)
        body = self._unwrap(self.http.delete(f"{path}/{item_id}", headers=self._headers()))
        return str(body.get("message") or "")
