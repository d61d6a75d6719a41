import json
import os
from pathlib import Path

import pytest

from miniakinator.data.stores import (
    PRIORITY_KEY,
    SCORE_KEY,
    JsonFileStore,
    MemoryStore,
    ProgressStore,
)


def test_json_file_store_round_trip(tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "nested" / "progress.json")

    assert store.get(SCORE_KEY) is None
    store.set(SCORE_KEY, "3")
    store.set(PRIORITY_KEY, "{}")

    reopened = JsonFileStore(tmp_path / "nested" / "progress.json")
    assert reopened.get(SCORE_KEY) == "3"
    assert reopened.get(PRIORITY_KEY) == "{}"
    assert list(tmp_path.joinpath("nested").glob("*.tmp")) == []


def test_json_file_store_ignores_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "progress.json"
    path.write_text("[1, 2", encoding="utf-8")
    store = JsonFileStore(path)

    assert store.get(SCORE_KEY) is None
    store.set(SCORE_KEY, "1")
    assert json.loads(path.read_text(encoding="utf-8")) == {SCORE_KEY: "1"}


def test_progress_store_priorities_round_trip() -> None:
    progress = ProgressStore(MemoryStore())

    assert progress.read_priorities() == {}
    progress.write_priorities({"animals": 3, "animals.birds": 1})
    assert progress.read_priorities() == {"animals": 3, "animals.birds": 1}


def test_progress_store_drops_invalid_priority_payloads() -> None:
    assert ProgressStore(MemoryStore({PRIORITY_KEY: "not json"})).read_priorities() == {}
    assert ProgressStore(MemoryStore({PRIORITY_KEY: "[1, 2]"})).read_priorities() == {}
    mixed = json.dumps({"animals": 2, "food": "x", "plants": True})
    assert ProgressStore(MemoryStore({PRIORITY_KEY: mixed})).read_priorities() == {"animals": 2}


def test_progress_store_score_absent_until_written() -> None:
    progress = ProgressStore(MemoryStore())

    assert progress.read_score() is None
    progress.write_score(-5)
    assert progress.read_score() == -5


def test_json_file_store_removes_temp_file_when_replace_fails(monkeypatch, tmp_path: Path) -> None:
    store = JsonFileStore(tmp_path / "progress.json")

    def _fail_replace(src, dst) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", _fail_replace)

    with pytest.raises(OSError, match="disk full"):
        store.set(SCORE_KEY, "1")
    assert list(tmp_path.iterdir()) == []
