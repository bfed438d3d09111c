"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from sportsevents.domain.errors import StoreError
from sportsevents.observability import RecordingObserver
from sportsevents.services import (
    EventCatalogService,
    ReferenceDataService,
    RegistrationService,
)
from sportsevents.stores.memory_store import InMemoryDocumentStore

CUP_FIELDS = {
    "name": "5-a-side Cup",
    "sport": "Football",
    "location": "Central Park",
    "date": "2025-06-01",
    "time": "18:00",
}


class FrozenClock:
    """Deterministic clock that moves forward only when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2025, 5, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: int = 60) -> datetime:
        self.now += timedelta(seconds=seconds)
        return self.now


class FlakyStore(InMemoryDocumentStore):
    """In-memory store that fails the named operations."""

    def __init__(self) -> None:
        super().__init__()
        self.failing: set[str] = set()

    def _maybe_fail(self, operation: str, collection: str) -> None:
        if operation in self.failing:
            raise StoreError(operation, collection)

    def create(self, collection, doc):
        self._maybe_fail("create", collection)
        return super().create(collection, doc)

    def get(self, collection, doc_id):
        self._maybe_fail("get", collection)
        return super().get(collection, doc_id)

    def query(self, collection, where=None, order_by=None):
        self._maybe_fail("query", collection)
        return super().query(collection, where, order_by)

    def update(self, collection, doc_id, patch):
        self._maybe_fail("update", collection)
        super().update(collection, doc_id, patch)

    def delete(self, collection, doc_id):
        self._maybe_fail("delete", collection)
        super().delete(collection, doc_id)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def store() -> FlakyStore:
    return FlakyStore()


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def catalog(store, observer, clock) -> EventCatalogService:
    return EventCatalogService(store, observer, clock)


@pytest.fixture
def registrations(store, observer, clock) -> RegistrationService:
    return RegistrationService(store, observer, clock)


@pytest.fixture
def reference(store, observer, clock) -> ReferenceDataService:
    return ReferenceDataService(store, observer, clock)
