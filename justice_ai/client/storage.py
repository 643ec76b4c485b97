from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
import uuid
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Client-local string storage used for the query draft"""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def remove(self, key: str) -> None:
        ...


class InMemoryStore:
    """Dict-backed store, lost when the process exits"""

    def __init__(self, initial: Dict[str, str] | None = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: str) -> bool:
        return key in self._data


class JsonFileStore:
    """
    Store backed by a single JSON object on disk.

    One file belongs to one draft owner; use `session_store` to get the
    file for a browser session. Writes go to a private temporary file that
    atomically replaces the target, so readers only ever see a complete
    file. A missing or unreadable file behaves like an empty store.
    """

    # Serializes read-modify-write cycles across Streamlit session threads
    _lock = threading.Lock()

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable draft store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring draft store %s: not a JSON object", self.path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self.path.parent,
            prefix=f".{self.path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            json.dump(data, tmp, ensure_ascii=False)
        os.replace(tmp.name, self.path)

    def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key in data:
                del data[key]
                self._write(data)


def new_draft_id() -> str:
    return uuid.uuid4().hex


def normalize_draft_id(value: Optional[str]) -> Optional[str]:
    """Canonical form of a client-supplied draft id, or None if it is not a UUID."""
    if not value:
        return None
    try:
        return uuid.UUID(str(value)).hex
    except ValueError:
        return None


def session_store(directory: Path | str, draft_id: str) -> JsonFileStore:
    """The draft file owned by one client, identified by its draft id"""
    canonical = normalize_draft_id(draft_id)
    if canonical is None:
        raise ValueError(f"Invalid draft id: {draft_id!r}")
    return JsonFileStore(Path(directory).expanduser() / f"{canonical}.json")
