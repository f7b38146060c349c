"""Unit tests for the key-value stores."""

import json

import pytest

from fincalc.sdk.store import JsonFileStore, MemoryStore


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_get_default_when_missing(self):
        store = MemoryStore()
        assert store.get("missing") is None
        assert store.get("missing", []) == []

    def test_set_get_remove(self):
        store = MemoryStore()
        store.set("income-streams", [{"name": "Job"}])

        assert store.get("income-streams") == [{"name": "Job"}]
        assert store.remove("income-streams") is True
        assert store.remove("income-streams") is False
        assert store.get("income-streams") is None

    def test_values_are_copied(self):
        value = {"monthly_rate": 5000}
        store = MemoryStore()
        store.set("state", value)
        value["monthly_rate"] = 0

        assert store.get("state") == {"monthly_rate": 5000}

    def test_initial_values(self):
        store = MemoryStore({"b": 2, "a": 1})
        assert store.keys() == ["a", "b"]

    def test_unserializable_value_raises(self):
        with pytest.raises(TypeError):
            MemoryStore().set("bad", object())


class TestJsonFileStore:
    """Tests for JsonFileStore."""

    def test_missing_file_reads_empty(self, tmp_path):
        store = JsonFileStore(tmp_path / "state.json")
        assert store.get("anything") is None
        assert store.keys() == []

    def test_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "state.json"
        JsonFileStore(path).set("income-calc-state", {"ytd_income": 1000})

        assert JsonFileStore(path).get("income-calc-state") == {"ytd_income": 1000}
        assert json.loads(path.read_text()) == {"income-calc-state": {"ytd_income": 1000}}

    def test_set_replaces_whole_value(self, tmp_path):
        store = JsonFileStore(tmp_path / "state.json")
        store.set("income-streams", [{"id": "a"}, {"id": "b"}])
        store.set("income-streams", [{"id": "b"}])

        assert store.get("income-streams") == [{"id": "b"}]

    def test_remove_keeps_other_keys(self, tmp_path):
        store = JsonFileStore(tmp_path / "state.json")
        store.set("one", 1)
        store.set("two", 2)

        assert store.remove("one") is True
        assert store.remove("one") is False
        assert store.keys() == ["two"]

    def test_no_temp_file_left_behind(self, tmp_path):
        store = JsonFileStore(tmp_path / "state.json")
        store.set("key", "value")
        assert [p.name for p in tmp_path.iterdir()] == ["state.json"]
