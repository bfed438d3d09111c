"""Store interfaces (repository pattern).

Stores must be swappable. The document store is schemaless: it persists
plain dicts per collection and assigns opaque string identifiers. Turning
documents into domain models is the services' job.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

EVENTS = "events"
TEAM_REGISTRATIONS = "teamRegistrations"
USERS = "users"
SPORTS_CATEGORIES = "sportsCategories"
CITIES = "cities"
AREAS = "areas"

Document = dict[str, Any]


class DocumentStore(ABC):
    """Interface for document persistence operations.

    Implementations raise StoreError when the backend fails. Looking up or
    removing an id that does not exist is not a failure.
    """

    @abstractmethod
    def create(self, collection: str, doc: Mapping[str, Any]) -> str:
        """Persist a new document and return its generated id."""
        ...

    @abstractmethod
    def get(self, collection: str, doc_id: str) -> Document | None:
        """Return a document by id, or None if not found."""
        ...

    @abstractmethod
    def query(
        self,
        collection: str,
        where: Mapping[str, Any] | None = None,
        order_by: str | None = None,
    ) -> list[tuple[str, Document]]:
        """Return ``(id, document)`` pairs matching every ``where`` equality.

        ``order_by`` names a document field; prefix it with ``-`` for
        descending order.
        """
        ...

    @abstractmethod
    def update(self, collection: str, doc_id: str, patch: Mapping[str, Any]) -> None:
        """Merge ``patch`` into an existing document.

        Raises KeyError if the document does not exist.
        """
        ...

    @abstractmethod
    def delete(self, collection: str, doc_id: str) -> None:
        """Remove a document. Removing a missing document is a no-op."""
        ...
