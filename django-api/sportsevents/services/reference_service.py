"""Reference data used by the admin configuration screens.

Categories extend the list of sports events can be filed under. Cities and
areas are plain lookup tables. Nothing cascades: deleting a city leaves its
areas (and their copied city names) untouched.
"""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from sportsevents.domain.errors import NotFoundError
from sportsevents.domain.models import Area, Category, City
from sportsevents.domain.schemas import AreaFields, CategoryFields, CityFields
from sportsevents.domain.value_objects import format_timestamp, utc_now
from sportsevents.observability import LoggingObserver, Observer
from sportsevents.services.documents import (
    area_from_document,
    category_from_document,
    city_from_document,
)
from sportsevents.stores.interfaces import AREAS, CITIES, SPORTS_CATEGORIES, DocumentStore


class ReferenceDataService:
    """CRUD over categories, cities and areas."""

    def __init__(
        self,
        store: DocumentStore,
        observer: Observer | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._observer = observer or LoggingObserver()
        self._clock = clock

    # Categories

    def list_categories(self) -> list[Category]:
        with self._observer.failures("Failed to fetch categories", "FETCH_CATEGORIES_FAILED"):
            rows = self._store.query(SPORTS_CATEGORIES, order_by="name")
        return [category_from_document(doc_id, doc) for doc_id, doc in rows]

    def create_category(self, fields: Mapping[str, Any], actor_id: str) -> Category:
        with self._failures("CREATE", "CATEGORY", actor_id):
            parsed = CategoryFields.from_mapping(fields)
            doc = {"name": parsed.name, "description": parsed.description}
            doc_id, doc = self._create(SPORTS_CATEGORIES, "CATEGORY", doc, actor_id)
        return category_from_document(doc_id, doc)

    def update_category(
        self, category_id: str, fields: Mapping[str, Any], actor_id: str
    ) -> Category:
        with self._failures("UPDATE", "CATEGORY", actor_id, category_id):
            current = self._get(SPORTS_CATEGORIES, "Category", category_id)
            parsed = CategoryFields(current["name"], current.get("description", "")).merged(fields)
            doc = self._update(
                SPORTS_CATEGORIES,
                "CATEGORY",
                category_id,
                {"name": parsed.name, "description": parsed.description},
                actor_id,
            )
        return category_from_document(category_id, {**current, **doc})

    def delete_category(self, category_id: str, actor_id: str) -> None:
        with self._failures("DELETE", "CATEGORY", actor_id, category_id):
            self._delete(SPORTS_CATEGORIES, "CATEGORY", category_id, actor_id)

    # Cities

    def list_cities(self) -> list[City]:
        with self._observer.failures("Failed to fetch cities", "FETCH_CITIES_FAILED"):
            rows = self._store.query(CITIES, order_by="name")
        return [city_from_document(doc_id, doc) for doc_id, doc in rows]

    def create_city(self, fields: Mapping[str, Any], actor_id: str) -> City:
        with self._failures("CREATE", "CITY", actor_id):
            parsed = CityFields.from_mapping(fields)
            doc_id, doc = self._create(
                CITIES, "CITY", {"name": parsed.name, "country": parsed.country}, actor_id
            )
        return city_from_document(doc_id, doc)

    def update_city(self, city_id: str, fields: Mapping[str, Any], actor_id: str) -> City:
        with self._failures("UPDATE", "CITY", actor_id, city_id):
            current = self._get(CITIES, "City", city_id)
            parsed = CityFields(current["name"], current["country"]).merged(fields)
            doc = self._update(
                CITIES, "CITY", city_id, {"name": parsed.name, "country": parsed.country}, actor_id
            )
        return city_from_document(city_id, {**current, **doc})

    def delete_city(self, city_id: str, actor_id: str) -> None:
        """Delete a city. Areas pointing at it are kept as they are."""
        with self._failures("DELETE", "CITY", actor_id, city_id):
            self._delete(CITIES, "CITY", city_id, actor_id)

    # Areas

    def list_areas(self, city_id: str | None = None) -> list[Area]:
        where = {"cityId": city_id} if city_id else None
        with self._observer.failures(
            "Failed to fetch areas", "FETCH_AREAS_FAILED", cityId=city_id
        ):
            rows = self._store.query(AREAS, where=where, order_by="name")
        return [area_from_document(doc_id, doc) for doc_id, doc in rows]

    def create_area(self, fields: Mapping[str, Any], actor_id: str) -> Area:
        with self._failures("CREATE", "AREA", actor_id):
            parsed = AreaFields.from_mapping(fields)
            city = self._get(CITIES, "City", parsed.city_id)
            doc = {"name": parsed.name, "cityId": parsed.city_id, "cityName": city["name"]}
            doc_id, doc = self._create(AREAS, "AREA", doc, actor_id)
        return area_from_document(doc_id, doc)

    def update_area(self, area_id: str, fields: Mapping[str, Any], actor_id: str) -> Area:
        """Update an area. The city name is copied again only when the city changes."""
        with self._failures("UPDATE", "AREA", actor_id, area_id):
            current = self._get(AREAS, "Area", area_id)
            parsed = AreaFields(current["name"], current["cityId"]).merged(fields)
            patch = {"name": parsed.name, "cityId": parsed.city_id}
            if parsed.city_id != current["cityId"]:
                patch["cityName"] = self._get(CITIES, "City", parsed.city_id)["name"]
            doc = self._update(AREAS, "AREA", area_id, patch, actor_id)
        return area_from_document(area_id, {**current, **doc})

    def delete_area(self, area_id: str, actor_id: str) -> None:
        with self._failures("DELETE", "AREA", actor_id, area_id):
            self._delete(AREAS, "AREA", area_id, actor_id)

    # Shared plumbing

    def _failures(self, operation: str, label: str, actor_id: str, item_id: str | None = None):
        return self._observer.failures(
            f"Failed to {operation.lower()} {label.lower()}",
            f"{operation}_{label}_FAILED",
            userId=actor_id,
            itemId=item_id,
        )

    def _get(self, collection: str, kind: str, doc_id: str) -> dict[str, Any]:
        doc = self._store.get(collection, doc_id)
        if doc is None:
            raise NotFoundError(kind, doc_id)
        return doc

    def _create(
        self, collection: str, label: str, doc: dict[str, Any], actor_id: str
    ) -> tuple[str, dict[str, Any]]:
        doc = {**doc, "createdAt": format_timestamp(self._clock())}
        doc_id = self._store.create(collection, doc)
        self._observer.info(
            f"{label.lower()} created", f"CREATE_{label}", userId=actor_id, itemId=doc_id
        )
        return doc_id, doc

    def _update(
        self, collection: str, label: str, doc_id: str, patch: dict[str, Any], actor_id: str
    ) -> dict[str, Any]:
        patch = {**patch, "updatedAt": format_timestamp(self._clock())}
        try:
            self._store.update(collection, doc_id, patch)
        except KeyError:
            raise NotFoundError(label.title(), doc_id) from None
        self._observer.info(
            f"{label.lower()} updated", f"UPDATE_{label}", userId=actor_id, itemId=doc_id
        )
        return patch

    def _delete(self, collection: str, label: str, doc_id: str, actor_id: str) -> None:
        self._store.delete(collection, doc_id)
        self._observer.info(
            f"{label.lower()} deleted", f"DELETE_{label}", userId=actor_id, itemId=doc_id
        )
