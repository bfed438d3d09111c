"""Cache keys for fetched collections.

Cached lists are dropped whole whenever a document of their collection is
saved or deleted; they are never patched in place.
"""

from django.core.cache import cache

from sportsevents.stores.interfaces import EVENTS, SPORTS_CATEGORIES

CACHED_COLLECTIONS = (EVENTS, SPORTS_CATEGORIES)


def list_key(collection: str) -> str:
    return f"{collection}:list"


def invalidate_collection(collection: str) -> None:
    if collection in CACHED_COLLECTIONS:
        cache.delete(list_key(collection))
