"""Pytest configuration and shared fixtures."""

import pytest

from pomogarden.garden.models import GrowthPolicy
from pomogarden.garden.store import GardenStore
from pomogarden.persistence.kv_store import InMemoryKeyValueStore
from pomogarden.session.clock import SessionClock
from pomogarden.session.models import SessionDurations
from pomogarden.ticking.base import ManualTickSource


class GrowthRecorder:
    """Growth sink that counts completed work sessions."""

    def __init__(self):
        self.calls = 0

    def __call__(self) -> None:
        self.calls += 1


@pytest.fixture
def durations() -> SessionDurations:
    """Short durations matching the worked example: 5s work, 2s break."""
    return SessionDurations(work_seconds=5, break_seconds=2)


@pytest.fixture
def ticks() -> ManualTickSource:
    return ManualTickSource()


@pytest.fixture
def growth() -> GrowthRecorder:
    return GrowthRecorder()


@pytest.fixture
def clock(durations, ticks, growth) -> SessionClock:
    return SessionClock(durations=durations, tick_source=ticks, on_work_completed=growth)


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def staged_store(kv_store) -> GardenStore:
    store = GardenStore(
        store=kv_store,
        storage_key="farmData",
        policy=GrowthPolicy.STAGED,
        garden_size=6,
        max_stage=3,
    )
    store.load()
    return store


@pytest.fixture
def counter_store(kv_store) -> GardenStore:
    store = GardenStore(
        store=kv_store,
        storage_key="plantCount",
        policy=GrowthPolicy.UNBOUNDED,
    )
    store.load()
    return store
