from sportsevents.stores.interfaces import DocumentStore
from sportsevents.stores.memory_store import InMemoryDocumentStore

__all__ = ["DocumentStore", "InMemoryDocumentStore"]
