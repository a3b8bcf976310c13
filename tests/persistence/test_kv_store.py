"""Tests for key-value persistence."""

import sqlite3
from unittest.mock import patch

import pytest

from pomogarden.errors import PersistenceError
from pomogarden.persistence.kv_store import InMemoryKeyValueStore, SqliteKeyValueStore


class TestInMemoryKeyValueStore:
    """Test InMemoryKeyValueStore."""

    def test_get_missing(self):
        assert InMemoryKeyValueStore().get("farmData") is None

    def test_set_overwrites(self):
        store = InMemoryKeyValueStore({"plantCount": "1"})
        store.set("plantCount", "2")
        assert store.get("plantCount") == "2"

    def test_initial_is_copied(self):
        initial = {"k": "v"}
        store = InMemoryKeyValueStore(initial)
        store.set("k", "w")
        assert initial == {"k": "v"}


class TestSqliteKeyValueStore:
    """Test SqliteKeyValueStore."""

    @pytest.fixture
    def db_path(self, tmp_path):
        return str(tmp_path / "data" / "garden.db")

    def test_creates_schema(self, db_path):
        SqliteKeyValueStore(db_path)
        with sqlite3.connect(db_path) as conn:
            tables = [row[0] for row in conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table'"
            )]
        assert "entries" in tables

    def test_get_missing(self, db_path):
        assert SqliteKeyValueStore(db_path).get("farmData") is None

    def test_set_and_get(self, db_path):
        store = SqliteKeyValueStore(db_path)
        store.set("farmData", '[{"id": "a", "stage": 1}]')
        assert store.get("farmData") == '[{"id": "a", "stage": 1}]'

    def test_overwrite_keeps_single_row(self, db_path):
        store = SqliteKeyValueStore(db_path)
        store.set("plantCount", "1")
        store.set("plantCount", "2")
        assert store.get("plantCount") == "2"
        with sqlite3.connect(db_path) as conn:
            count = conn.execute("SELECT COUNT(*) FROM entries").fetchone()[0]
        assert count == 1

    def test_survives_reopen(self, db_path):
        SqliteKeyValueStore(db_path).set("plantCount", "9")
        assert SqliteKeyValueStore(db_path).get("plantCount") == "9"

    def test_write_failure_raises_persistence_error(self, db_path):
        store = SqliteKeyValueStore(db_path)
        with patch("pomogarden.persistence.kv_store.sqlite3.connect",
                   side_effect=sqlite3.OperationalError("database is locked")):
            with pytest.raises(PersistenceError) as exc_info:
                store.set("plantCount", "1")
        assert exc_info.value.operation == "set"
        assert exc_info.value.recoverable is False

    def test_read_failure_raises_persistence_error(self, db_path):
        store = SqliteKeyValueStore(db_path)
        with patch("pomogarden.persistence.kv_store.sqlite3.connect",
                   side_effect=sqlite3.OperationalError("unable to open database file")):
            with pytest.raises(PersistenceError) as exc_info:
                store.get("plantCount")
        assert exc_info.value.operation == "get"
