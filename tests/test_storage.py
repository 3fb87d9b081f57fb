"""
Tests for key-value storage adapters.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from beauty_advisor.application.exceptions import PersistenceError
from beauty_advisor.application.use_cases.selection_store import SELECTED_PRODUCTS_KEY, SelectionStore
from beauty_advisor.infrastructure.store.json_storage import JsonFileKeyValueStorage
from beauty_advisor.infrastructure.store.memory_storage import MemoryKeyValueStorage


def test_memory_storage_round_trip():
    storage = MemoryKeyValueStorage()
    assert storage.get("theme") is None
    storage.set("theme", "dark")
    assert storage.get("theme") == "dark"
    storage.delete("theme")
    storage.delete("theme")
    assert storage.get("theme") is None


def test_json_storage_persists_across_instances():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = str(Path(tmpdir) / "nested" / "storage.json")
        JsonFileKeyValueStorage(path).set("theme", "dark")

        reopened = JsonFileKeyValueStorage(path)
        assert reopened.get("theme") == "dark"
        assert reopened.get("missing") is None
        assert not Path(path).with_suffix(".json.tmp").exists()


def test_json_storage_delete(tmp_path):
    storage = JsonFileKeyValueStorage(str(tmp_path / "storage.json"))
    storage.set("a", "1")
    storage.set("b", "2")
    storage.delete("a")
    assert json.loads((tmp_path / "storage.json").read_text(encoding="utf-8")) == {"b": "2"}


def test_json_storage_corrupt_file_fails_reads_but_is_replaced_on_write(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{oops", encoding="utf-8")
    storage = JsonFileKeyValueStorage(str(path))
    with pytest.raises(PersistenceError):
        storage.get("theme")

    storage.set("theme", "dark")
    assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}
    assert storage.get("theme") == "dark"


def test_json_storage_delete_over_corrupt_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("[1, 2]", encoding="utf-8")
    JsonFileKeyValueStorage(str(path)).delete("theme")
    assert json.loads(path.read_text(encoding="utf-8")) == {}


def test_json_storage_returns_non_string_values_encoded(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({SELECTED_PRODUCTS_KEY: [{"id": 1}]}), encoding="utf-8")
    assert json.loads(JsonFileKeyValueStorage(str(path)).get(SELECTED_PRODUCTS_KEY)) == [{"id": 1}]


def test_selection_survives_restart_with_json_storage(tmp_path, products):
    path = str(tmp_path / "storage.json")
    first = SelectionStore(JsonFileKeyValueStorage(path))
    first.toggle(products[3])
    first.toggle(products[0])

    second = SelectionStore(JsonFileKeyValueStorage(path))
    assert [p.id for p in second.restore()] == [products[3].id, products[0].id]


def test_selection_over_corrupt_storage_file_starts_empty(tmp_path, products):
    path = tmp_path / "storage.json"
    path.write_text("[]", encoding="utf-8")
    store = SelectionStore(JsonFileKeyValueStorage(str(path)))
    assert store.restore() == []
    assert store.toggle(products[0]) is True
    assert _stored_selection_ids(path) == [products[0].id]


@pytest.mark.parametrize("garbage", ["{truncated", "[]", "null"])
def test_selection_writes_reach_disk_after_corrupt_file(tmp_path, products, garbage):
    """A corrupt storage file restores as empty and every later mutation is persisted again."""
    path = tmp_path / "storage.json"
    path.write_text(garbage, encoding="utf-8")
    store = SelectionStore(JsonFileKeyValueStorage(str(path)))
    assert store.restore() == []

    store.toggle(products[0])
    assert _stored_selection_ids(path) == [products[0].id]
    store.toggle(products[1])
    assert _stored_selection_ids(path) == [products[0].id, products[1].id]
    store.clear()
    assert _stored_selection_ids(path) == []

    reopened = SelectionStore(JsonFileKeyValueStorage(str(path)))
    assert reopened.restore() == []


def _stored_selection_ids(path) -> list[int]:
    data = json.loads(path.read_text(encoding="utf-8"))
    return [item["id"] for item in json.loads(data[SELECTED_PRODUCTS_KEY])]
