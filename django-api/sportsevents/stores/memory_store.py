"""In-memory implementation of the DocumentStore.

Used by unit tests and local experiments. Documents are deep-copied on the
way in and out so callers never share state with the store.
"""

import copy
import uuid
from collections.abc import Mapping
from typing import Any

from sportsevents.stores.interfaces import Document, DocumentStore


def _sort_key(field: str):
    def key(item: tuple[str, Document]) -> tuple[bool, Any]:
        value = item[1].get(field)
        return (value is not None, value)

    return key


class InMemoryDocumentStore(DocumentStore):
    """Process-local document store keyed by collection name."""

    def __init__(self) -> None:
        self._collections: dict[str, dict[str, Document]] = {}

    def create(self, collection: str, doc: Mapping[str, Any]) -> str:
        doc_id = uuid.uuid4().hex
        self._collections.setdefault(collection, {})[doc_id] = copy.deepcopy(dict(doc))
        return doc_id

    def get(self, collection: str, doc_id: str) -> Document | None:
        doc = self._collections.get(collection, {}).get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    def query(
        self,
        collection: str,
        where: Mapping[str, Any] | None = None,
        order_by: str | None = None,
    ) -> list[tuple[str, Document]]:
        items = [
            (doc_id, copy.deepcopy(doc))
            for doc_id, doc in self._collections.get(collection, {}).items()
            if all(doc.get(key) == value for key, value in (where or {}).items())
        ]
        if order_by:
            descending = order_by.startswith("-")
            items.sort(key=_sort_key(order_by.lstrip("-")), reverse=descending)
        return items

    def update(self, collection: str, doc_id: str, patch: Mapping[str, Any]) -> None:
        docs = self._collections.get(collection, {})
        if doc_id not in docs:
            raise KeyError(doc_id)
        docs[doc_id].update(copy.deepcopy(dict(patch)))

    def delete(self, collection: str, doc_id: str) -> None:
        self._collections.get(collection, {}).pop(doc_id, None)
