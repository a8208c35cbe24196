from __future__ import annotations

import logging
from pathlib import Path

import httpx

from bhashaconnect.client.api_client import BhashaClient, Notifier
from bhashaconnect.client.mirror import DEFAULT_MIRROR_FILENAME, OfflineMirror


logger = logging.getLogger(__name__)


class ClientContext:
    """Top-level owner of the offline mirror and the API client.

    ``start()`` restores the persisted mirror, ``stop()`` writes it back and
    closes the HTTP client. Use as a context manager to tie both to a block.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        *,
        mirror_path: Path | str | None = None,
        http: httpx.Client | None = None,
        token: str | None = None,
        notify: Notifier | None = None,
        timeout: float = 10.0,
    ) -> None:
        path = Path(mirror_path) if mirror_path is not None else Path.home() / ".bhashaconnect" / DEFAULT_MIRROR_FILENAME
        self.mirror = OfflineMirror(path)
        self._owns_http = http is None
        self.http = http if http is not None else httpx.Client(base_url=base_url, timeout=timeout)
        self.client = BhashaClient(self.http, self.mirror, token=token, notify=notify)
        self.started = False

    def start(self) -> BhashaClient:
        self.mirror.restore()
        self.started = True
        logger.info("client started, mirrored resources=%s", self.mirror.keys())
        return self.client

    def stop(self) -> None:
        if not self.started:
            return
        self.mirror.flush()
        if self._owns_http:
            self.http.close()
        self.started = False

    def set_online(self, online: bool) -> None:
        self.mirror.set_online(online)

    def __enter__(self) -> BhashaClient:
        return self.start()

    def __exit__(self, *exc_info: object) -> None:
        self.stop()
