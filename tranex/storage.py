"""
Durable key-value storage backends.

The cart and the site preferences persist string blobs under fixed keys,
the same way the browser site uses local storage. Backends:

- MemoryStorage: dict-backed, for tests and short-lived sessions
- FileStorage: one JSON file on disk holding every key
- RedisStorage: Upstash Redis via the sync REST client

Backends raise StorageError on failure; callers decide how to degrade.
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

from tranex.db import STORAGE_PATH, StorageKeys, get_redis_sync
from tranex.errors import ERROR_STORAGE_READ, ERROR_STORAGE_WRITE, StorageError
from tranex.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class KeyValueStorage(Protocol):
    """Minimal string-keyed blob storage."""

    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    """In-process storage backed by a dict."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class FileStorage:
    """
    Storage persisted to a single JSON file.

    The file holds one object mapping keys to string values. A missing or
    unreadable file reads as empty; writes go through a temp file and an
    atomic replace so a crash never leaves half a file behind.
    """

    def __init__(self, path: str | os.PathLike = STORAGE_PATH) -> None:
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Storage file {self.path} is corrupted, treating as empty: {e}")
            return {}
        except OSError as e:
            raise StorageError(f"{ERROR_STORAGE_READ}: {e}") from e
        if not isinstance(data, dict):
            logger.warning(f"Storage file {self.path} does not hold an object, treating as empty")
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write_all(self, data: dict[str, str]) -> None:
        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tranex-", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageError(f"{ERROR_STORAGE_WRITE}: {e}") from e

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def remove(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)


class RedisStorage:
    """Storage in Upstash Redis, keys namespaced with a prefix."""

    def __init__(self, client=None, prefix: str = StorageKeys.REDIS_PREFIX) -> None:
        self._client = client  # Lazy initialization
        self.prefix = prefix

    @property
    def client(self):
        """Get Redis client (lazy initialization)."""
        if self._client is None:
            try:
                self._client = get_redis_sync()
            except ValueError as e:
                raise StorageError(f"Redis not available: {e}") from e
        return self._client

    def _key(self, key: str) -> str:
        return StorageKeys.redis_key(key, self.prefix)

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.client.get(self._key(key))
        except StorageError:
            raise
        except Exception as e:
            raise StorageError(f"{ERROR_STORAGE_READ}: {e}") from e
        if value is None:
            return None
        return value.decode("utf-8") if isinstance(value, bytes) else str(value)

    def set(self, key: str, value: str) -> None:
        try:
            self.client.set(self._key(key), value)
        except StorageError:
            raise
        except Exception as e:
            raise StorageError(f"{ERROR_STORAGE_WRITE}: {e}") from e

    def remove(self, key: str) -> None:
        try:
            self.client.delete(self._key(key))
        except StorageError:
            raise
        except Exception as e:
            raise StorageError(f"{ERROR_STORAGE_WRITE}: {e}") from e
