"""Session token storage.

The session token lives under a primary key with a legacy fallback key that
older helpers still read. Writes go to both keys; reads prefer the primary.

Storage failures never propagate: a store that cannot be read behaves as
empty, and a failed write is logged.

SECURITY: Never logs token values.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)

AUTH_TOKEN_STORAGE_KEY = "APP_SESSION_TOKEN"
LEGACY_AUTH_TOKEN_STORAGE_KEY = "auth_token"


@runtime_checkable
class CredentialStore(Protocol):
    """Injectable holder for the session token."""

    def get(self) -> str | None: ...

    def set(self, token: str | None) -> None: ...

    def clear(self) -> None: ...


class _KeyValueCredentialStore(ABC):
    """Primary/legacy key semantics over a string key-value mapping."""

    @abstractmethod
    def _load(self) -> dict[str, str]: ...

    @abstractmethod
    def _save(self, values: dict[str, str]) -> None: ...

    def get(self) -> str | None:
        values = self._load()
        return values.get(AUTH_TOKEN_STORAGE_KEY) or values.get(LEGACY_AUTH_TOKEN_STORAGE_KEY) or None

    def set(self, token: str | None) -> None:
        if not token:
            self.clear()
            return
        values = self._load()
        values[AUTH_TOKEN_STORAGE_KEY] = token
        # Maintain legacy key for older readers
        values[LEGACY_AUTH_TOKEN_STORAGE_KEY] = token
        self._save(values)

    def clear(self) -> None:
        values = self._load()
        if AUTH_TOKEN_STORAGE_KEY not in values and LEGACY_AUTH_TOKEN_STORAGE_KEY not in values:
            return
        values.pop(AUTH_TOKEN_STORAGE_KEY, None)
        values.pop(LEGACY_AUTH_TOKEN_STORAGE_KEY, None)
        self._save(values)


class MemoryCredentialStore(_KeyValueCredentialStore):
    """In-process token storage. Optionally seeded with raw key/value pairs."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def _load(self) -> dict[str, str]:
        return dict(self._values)

    def _save(self, values: dict[str, str]) -> None:
        self._values = dict(values)

    def snapshot(self) -> dict[str, str]:
        """Copy of the raw stored keys."""
        return dict(self._values)


class FileCredentialStore(_KeyValueCredentialStore):
    """Token storage persisted as a JSON object on disk.

    Other keys present in the file are preserved across writes.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict[str, str]:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Unreadable credential store at %s: %s", self._path, exc)
            return {}

        if not isinstance(raw, dict):
            logger.warning("Credential store at %s is not a JSON object, ignoring", self._path)
            return {}
        return {k: v for k, v in raw.items() if isinstance(v, str)}

    def _save(self, values: dict[str, str]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(values, sort_keys=True), encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write credential store at %s: %s", self._path, exc)


def create_credential_store(token_storage_path: str | None) -> CredentialStore:
    """File-backed store when a path is configured, in-memory otherwise."""
    if token_storage_path:
        return FileCredentialStore(token_storage_path)
    return MemoryCredentialStore()
