"""Key/value persistence for score and question priorities."""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, Mapping, Protocol

logger = logging.getLogger(__name__)

PRIORITY_KEY = "miniAkinatorPriorities"
SCORE_KEY = "miniAkinatorScore"


class KeyValueStore(Protocol):
    """String key/value storage injected into the game services."""

    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore:
    """In-process store, used for tests and throwaway sessions."""

    def __init__(self, initial: Mapping[str, str] | None = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileStore:
    """Stores all keys in a single JSON object file on disk."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        payload = self._read_all()
        payload[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=self._path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(json.dumps(payload, indent=2, sort_keys=True))
            os.replace(tmp_name, self._path)
        except BaseException:
            os.unlink(tmp_name)
            raise

    def _read_all(self) -> Dict[str, object]:
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable store file %s: %s", self._path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring store file %s without a top-level object", self._path)
            return {}
        return raw


class ProgressStore:
    """Typed view over a KeyValueStore for priorities and score."""

    def __init__(self, store: KeyValueStore) -> None:
        self._store = store

    def read_priorities(self) -> Dict[str, int]:
        raw = self._store.get(PRIORITY_KEY)
        if not raw:
            return {}
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored priorities are not valid JSON; starting from dataset values")
            return {}
        if not isinstance(payload, dict):
            logger.warning("Stored priorities are not an object; starting from dataset values")
            return {}
        return {
            key: value
            for key, value in payload.items()
            if isinstance(key, str) and isinstance(value, int) and not isinstance(value, bool)
        }

    def write_priorities(self, priorities: Mapping[str, int]) -> None:
        self._store.set(PRIORITY_KEY, json.dumps(dict(priorities), sort_keys=True))

    def read_score(self) -> int | None:
        raw = self._store.get(SCORE_KEY)
        if raw is None:
            return None
        try:
            return int(raw.strip())
        except ValueError:
            logger.warning("Stored score %r is not an integer", raw)
            return None

    def write_score(self, score: int) -> None:
        self._store.set(SCORE_KEY, str(score))
