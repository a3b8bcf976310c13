"""
Error handling tests.

Covers the error classification and the places where errors are recovered
(garden decode, garden persistence) or propagated (configuration).
"""

from unittest.mock import Mock

import pytest

from pomogarden.app import PomodoroApp
from pomogarden.errors import (
    ConfigurationError,
    DataQualityError,
    MalformedDataError,
    MissingDataError,
    PersistenceError,
    SystemFailureError,
)
from pomogarden.garden.models import GrowthPolicy, PlantCount
from pomogarden.garden.store import GardenStore
from pomogarden.persistence.kv_store import KeyValueStore
from pomogarden.ticking import ManualTickSource


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        missing = MissingDataError("nothing stored", storage_key="farmData")
        assert isinstance(missing, DataQualityError)
        assert missing.storage_key == "farmData"

        malformed = MalformedDataError("bad", raw_data="{", expected_format="JSON")
        assert isinstance(malformed, DataQualityError)
        assert malformed.raw_data == "{"
        assert malformed.expected_format == "JSON"

    def test_system_failure_error_hierarchy(self):
        persistence = PersistenceError("write failed", operation="set", target="g.db")
        assert isinstance(persistence, SystemFailureError)
        assert persistence.recoverable is False
        assert persistence.target == "g.db"

        config = ConfigurationError("bad", profile="demo", errors=["x"])
        assert isinstance(config, SystemFailureError)
        assert config.errors == ["x"]
        assert ConfigurationError("bad").errors == []

    def test_context_is_kept(self):
        error = PersistenceError("fail", context={"attempt": 1})
        assert error.context == {"attempt": 1}


class TestRecovery:
    """Test where errors are recovered."""

    def test_clock_completion_survives_persist_failure(self, tmp_path):
        failing = Mock(spec=KeyValueStore)
        failing.get.return_value = None
        failing.set.side_effect = PersistenceError("disk full", operation="set")
        ticks = ManualTickSource()

        app = PomodoroApp.create(
            profile="counter", config_dir=tmp_path, store=failing, tick_source=ticks,
            overrides={"timer": {"work_duration_sec": 2}},
        )
        app.start()
        ticks.advance(3)

        assert app.snapshot()["session_label"] == "Break"
        assert app.garden.garden == PlantCount(1)

    def test_encode_failure_is_swallowed(self, kv_store, monkeypatch):
        store = GardenStore(kv_store, "plantCount", policy=GrowthPolicy.UNBOUNDED)
        store.load()

        def bad_encode(garden):
            raise TypeError("not serializable")

        monkeypatch.setattr("pomogarden.garden.store.encode_garden", bad_encode)
        assert store.record_growth() is True
        assert kv_store.get("plantCount") is None

    def test_unknown_profile_propagates(self, tmp_path):
        with pytest.raises(ConfigurationError):
            PomodoroApp.create(profile="marathon", config_dir=tmp_path, tick_source=ManualTickSource())
