"""String key-value stores used to persist best score and leaderboard."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    """Process-local store; nothing survives the interpreter."""

    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    """Store backed by a single JSON object on disk, rewritten on every change."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)
        self._data: Dict[str, str] = self._load()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> Dict[str, str]:
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            # ValueError covers both JSONDecodeError and UnicodeDecodeError.
            logger.warning("Discarding unreadable store file %s: %s", self._path, exc)
            return {}
        if not isinstance(payload, dict):
            logger.warning("Discarding store file %s: expected a JSON object", self._path)
            return {}
        return {str(key): str(value) for key, value in payload.items()}

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("w", encoding="utf-8") as handle:
            json.dump(self._data, handle, indent=2)

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)
        self._save()

    def remove(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._save()
