"""Contract tests shared by every DocumentStore implementation.

Run with: pytest tests/test_stores.py -v
"""

from unittest import mock

import pytest
from django.db import DatabaseError

from sportsevents.domain.errors import StoreError
from sportsevents.models import Document
from sportsevents.stores.django_store import DjangoDocumentStore
from sportsevents.stores.memory_store import InMemoryDocumentStore


@pytest.fixture(params=["memory", "django"])
def doc_store(request):
    if request.param == "django":
        request.getfixturevalue("db")
        return DjangoDocumentStore()
    return InMemoryDocumentStore()


class TestDocumentStoreContract:
    def test_create_then_get(self, doc_store):
        doc_id = doc_store.create("events", {"name": "Cup", "sport": "Football"})
        assert isinstance(doc_id, str) and doc_id
        assert doc_store.get("events", doc_id) == {"name": "Cup", "sport": "Football"}

    def test_get_missing_or_malformed_id_is_none(self, doc_store):
        assert doc_store.get("events", "0" * 32) is None
        assert doc_store.get("events", "not-an-id") is None

    def test_collections_are_separate(self, doc_store):
        doc_id = doc_store.create("events", {"name": "Cup"})
        assert doc_store.get("cities", doc_id) is None
        assert doc_store.query("cities") == []

    def test_returned_documents_are_copies(self, doc_store):
        doc_id = doc_store.create("events", {"name": "Cup"})
        doc_store.get("events", doc_id)["name"] = "Changed"
        assert doc_store.get("events", doc_id)["name"] == "Cup"

    def test_query_filters_by_equality(self, doc_store):
        doc_store.create("events", {"name": "A", "createdBy": "u1"})
        doc_store.create("events", {"name": "B", "createdBy": "u2"})
        doc_store.create("events", {"name": "C", "createdBy": "u1"})
        names = sorted(doc["name"] for _, doc in doc_store.query("events", {"createdBy": "u1"}))
        assert names == ["A", "C"]

    def test_query_orders_by_field(self, doc_store):
        for stamp in ("2025-01-02", "2025-01-03", "2025-01-01"):
            doc_store.create("events", {"createdAt": stamp})
        descending = [doc["createdAt"] for _, doc in doc_store.query("events", order_by="-createdAt")]
        ascending = [doc["createdAt"] for _, doc in doc_store.query("events", order_by="createdAt")]
        assert descending == ["2025-01-03", "2025-01-02", "2025-01-01"]
        assert ascending == list(reversed(descending))

    def test_query_returns_ids_usable_with_get(self, doc_store):
        doc_id = doc_store.create("users", {"uid": "u1"})
        [(found_id, doc)] = doc_store.query("users", {"uid": "u1"})
        assert found_id == doc_id
        assert doc_store.get("users", found_id) == doc

    def test_update_merges_patch(self, doc_store):
        doc_id = doc_store.create("events", {"name": "Cup", "sport": "Football"})
        doc_store.update("events", doc_id, {"name": "Summer Cup", "updatedAt": "now"})
        assert doc_store.get("events", doc_id) == {
            "name": "Summer Cup",
            "sport": "Football",
            "updatedAt": "now",
        }

    def test_update_missing_document_raises_key_error(self, doc_store):
        with pytest.raises(KeyError):
            doc_store.update("events", "0" * 32, {"name": "x"})

    def test_delete_is_idempotent(self, doc_store):
        doc_id = doc_store.create("events", {"name": "Cup"})
        doc_store.delete("events", doc_id)
        doc_store.delete("events", doc_id)
        doc_store.delete("events", "not-an-id")
        assert doc_store.get("events", doc_id) is None


@pytest.mark.django_db
class TestDjangoDocumentStore:
    def test_rows_are_tagged_with_collection(self):
        doc_id = DjangoDocumentStore().create("cities", {"name": "Oslo"})
        row = Document.objects.get(pk=doc_id)
        assert row.collection == "cities"
        assert str(row) == "cities/Oslo"

    def test_database_errors_become_store_errors(self):
        store = DjangoDocumentStore()
        with mock.patch.object(
            Document.objects, "create", side_effect=DatabaseError("disk full")
        ):
            with pytest.raises(StoreError) as excinfo:
                store.create("events", {"name": "Cup"})
        assert excinfo.value.operation == "create"
        assert "disk full" not in excinfo.value.message
