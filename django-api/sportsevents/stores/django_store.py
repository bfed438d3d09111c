"""Django ORM implementation of the DocumentStore."""

import logging
import uuid
from collections.abc import Mapping
from typing import Any

from django.db import DatabaseError, transaction

from sportsevents.domain.errors import StoreError
from sportsevents.models import Document as DocumentModel
from sportsevents.stores.interfaces import Document, DocumentStore

logger = logging.getLogger(__name__)


def _parse_id(doc_id: str) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(doc_id))
    except ValueError:
        return None


class DjangoDocumentStore(DocumentStore):
    """Database-backed document store using Django ORM.

    Documents are saved through ``Model.save``/``Model.delete`` so that
    ``post_save``/``post_delete`` receivers see every mutation.
    """

    def create(self, collection: str, doc: Mapping[str, Any]) -> str:
        try:
            row = DocumentModel.objects.create(collection=collection, data=dict(doc))
        except DatabaseError as exc:
            logger.exception("Document create failed in %s", collection)
            raise StoreError("create", collection) from exc
        return row.id.hex

    def get(self, collection: str, doc_id: str) -> Document | None:
        pk = _parse_id(doc_id)
        if pk is None:
            return None
        try:
            row = DocumentModel.objects.filter(collection=collection, pk=pk).first()
        except DatabaseError as exc:
            logger.exception("Document get failed in %s", collection)
            raise StoreError("get", collection) from exc
        return dict(row.data) if row is not None else None

    def query(
        self,
        collection: str,
        where: Mapping[str, Any] | None = None,
        order_by: str | None = None,
    ) -> list[tuple[str, Document]]:
        rows = DocumentModel.objects.filter(collection=collection)
        for key, value in (where or {}).items():
            rows = rows.filter(**{f"data__{key}": value})
        if order_by:
            prefix = "-" if order_by.startswith("-") else ""
            rows = rows.order_by(f"{prefix}data__{order_by.lstrip('-')}", f"{prefix}created_at")
        try:
            return [(row.id.hex, dict(row.data)) for row in rows]
        except DatabaseError as exc:
            logger.exception("Document query failed in %s", collection)
            raise StoreError("query", collection) from exc

    def update(self, collection: str, doc_id: str, patch: Mapping[str, Any]) -> None:
        pk = _parse_id(doc_id)
        if pk is None:
            raise KeyError(doc_id)
        try:
            with transaction.atomic():
                row = (
                    DocumentModel.objects.select_for_update()
                    .filter(collection=collection, pk=pk)
                    .first()
                )
                if row is None:
                    raise KeyError(doc_id)
                row.data = {**row.data, **patch}
                row.save(update_fields=["data", "updated_at"])
        except DatabaseError as exc:
            logger.exception("Document update failed in %s", collection)
            raise StoreError("update", collection) from exc

    def delete(self, collection: str, doc_id: str) -> None:
        pk = _parse_id(doc_id)
        if pk is None:
            return
        try:
            row = DocumentModel.objects.filter(collection=collection, pk=pk).first()
            if row is not None:
                row.delete()
        except DatabaseError as exc:
            logger.exception("Document delete failed in %s", collection)
            raise StoreError("delete", collection) from exc
