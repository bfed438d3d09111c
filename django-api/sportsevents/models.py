"""Django ORM models (persistence layer).

The application persists every collection as schemaless JSON documents in a
single table. Domain logic lives in domain/ and services/.
"""

import uuid

from django.db import models


class Document(models.Model):
    """Persistence model for one document of a collection."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    collection = models.CharField(max_length=64)
    data = models.JSONField(default=dict)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["collection", "-created_at"], name="document_collection_idx"),
        ]

    def __str__(self) -> str:
        label = self.data.get("name") or self.data.get("teamName") or self.data.get("email")
        return f"{self.collection}/{label or self.id}"
