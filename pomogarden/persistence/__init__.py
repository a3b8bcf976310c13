"""Durable string-keyed storage for the garden."""

from .kv_store import InMemoryKeyValueStore, KeyValueStore, SqliteKeyValueStore

__all__ = ["KeyValueStore", "InMemoryKeyValueStore", "SqliteKeyValueStore"]
