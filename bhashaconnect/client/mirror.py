"""Local mirror of the last successful listing per resource.

The mirror is an explicit object owned by :class:`~bhashaconnect.client.context.ClientContext`
and handed to whatever needs it. It never merges: each successful online fetch
replaces the stored rows for that resource.
"""

from __future__ import annotations

import enum
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


logger = logging.getLogger(__name__)

DEFAULT_MIRROR_FILENAME = "bhashaconnect_offline_data.json"


class ConnectivityState(str, enum.Enum):
    online = "online"
    offline = "offline"


class OfflineMirror:
    def __init__(self, path: Path | str | None = None, *, online: bool = True) -> None:
        self.path = Path(path) if path is not None else None
        self.state = ConnectivityState.online if online else ConnectivityState.offline
        self._entries: dict[str, dict[str, Any]] = {}

    @property
    def is_online(self) -> bool:
        return self.state is ConnectivityState.online

    def set_online(self, online: bool) -> ConnectivityState:
        new_state = ConnectivityState.online if online else ConnectivityState.offline
        if new_state is not self.state:
            logger.info("connectivity %s -> %s", self.state.value, new_state.value)
            self.state = new_state
        return self.state

    def save(self, key: str, rows: list[Any]) -> None:
        self._entries[key] = {
            "data": list(rows),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        self.flush()

    def load(self, key: str) -> list[Any]:
        entry = self._entries.get(key)
        if not entry:
            return []
        return list(entry.get("data") or [])

    def timestamp(self, key: str) -> datetime | None:
        entry = self._entries.get(key)
        if not entry or not entry.get("timestamp"):
            return None
        return datetime.fromisoformat(entry["timestamp"])

    def keys(self) -> list[str]:
        return sorted(self._entries)

    def clear(self) -> None:
        self._entries = {}
        if self.path is not None and self.path.exists():
            self.path.unlink()

    # Persistence

    def restore(self) -> None:
        if self.path is None or not self.path.exists():
            return
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            # A corrupt mirror is not worth failing start-up for; the next fetch rewrites it.
            logger.warning("Ignoring unreadable offline mirror at %s", self.path, exc_info=True)
            return
        if isinstance(raw, dict):
            self._entries = {str(k): v for k, v in raw.items() if isinstance(v, dict)}

    def flush(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._entries, ensure_ascii=False), encoding="utf-8")
