"""Client-local key/value storage backends for the session.

Two backends:
  - MemoryStorage: process-local dict, used by tests and short-lived scripts
  - FileStorage: JSON file on disk, survives restarts (the "browser storage")

Multi-key writes go through set_many/remove_many so FileStorage can persist
them in a single atomic file replace.
"""

import json
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

log = logging.getLogger(__name__)


class Storage(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        pass

    def set_many(self, items: dict[str, str]) -> None:
        for key, value in items.items():
            self.set(key, value)

    def remove_many(self, keys: list[str]) -> None:
        for key in keys:
            self.remove(key)


class MemoryStorage(Storage):
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def set_many(self, items: dict[str, str]) -> None:
        self._data.update(items)

    def remove_many(self, keys: list[str]) -> None:
        for key in keys:
            self._data.pop(key, None)


class FileStorage(Storage):
    """JSON object on disk. Every write replaces the whole file atomically."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log.warning("Session file %s unreadable, treating as empty: %s", self.path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".session-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def remove(self, key: str) -> None:
        self.remove_many([key])

    def set_many(self, items: dict[str, str]) -> None:
        data = self._read()
        data.update(items)
        self._write(data)

    def remove_many(self, keys: list[str]) -> None:
        data = self._read()
        if not any(k in data for k in keys):
            return
        for key in keys:
            data.pop(key, None)
        self._write(data)
