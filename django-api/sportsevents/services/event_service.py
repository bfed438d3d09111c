"""Event catalog service - all event business logic lives here.

Services:
- Depend only on interfaces (stores, observer)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or raise domain errors

Every list call is a fresh fetch; nothing here caches events.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Self

from sportsevents.domain.errors import EventNotFoundError, ValidationError
from sportsevents.domain.models import Event
from sportsevents.domain.schemas import DEFAULT_SPORTS, EventFields
from sportsevents.domain.value_objects import format_timestamp, utc_now
from sportsevents.observability import LoggingObserver, Observer
from sportsevents.services.documents import (
    event_fields,
    event_fields_document,
    event_from_document,
)
from sportsevents.stores.interfaces import EVENTS, SPORTS_CATEGORIES, DocumentStore


@dataclass(frozen=True)
class EventScope:
    """Which events a listing covers: all of them, or one creator's."""

    created_by: str | None = None

    @classmethod
    def all(cls) -> Self:
        return cls()

    @classmethod
    def owned_by(cls, principal_id: str) -> Self:
        return cls(created_by=principal_id)

    @classmethod
    def parse(cls, value: str) -> Self:
        """Parse ``all`` or ``createdBy=<principal id>``."""
        if value == "all":
            return cls.all()
        key, sep, principal_id = value.partition("=")
        if key != "createdBy" or not sep or not principal_id:
            raise ValidationError.for_field("scope", "Scope must be 'all' or 'createdBy=<id>'")
        return cls.owned_by(principal_id)

    def where(self) -> dict[str, str] | None:
        return {"createdBy": self.created_by} if self.created_by else None


class EventCatalogService:
    """Service for event catalog operations."""

    def __init__(
        self,
        store: DocumentStore,
        observer: Observer | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._observer = observer or LoggingObserver()
        self._clock = clock

    def available_sports(self) -> list[str]:
        """Return the default sports followed by admin-managed categories."""
        with self._observer.failures("Failed to fetch sports", "FETCH_SPORTS_FAILED"):
            return self._sports()

    def list_events(self, scope: EventScope | None = None) -> list[Event]:
        """Return events in the scope, newest first."""
        scope = scope or EventScope.all()
        with self._observer.failures(
            "Failed to fetch events", "FETCH_EVENTS_FAILED", createdBy=scope.created_by
        ):
            rows = self._store.query(EVENTS, where=scope.where(), order_by="-createdAt")
        events = [event_from_document(doc_id, doc) for doc_id, doc in rows]
        self._observer.info(
            "Events fetched successfully",
            "FETCH_EVENTS",
            count=len(events),
            createdBy=scope.created_by,
        )
        return events

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            EventNotFoundError: If the event does not exist.
        """
        with self._observer.failures(
            "Failed to fetch sports event", "FETCH_EVENT_FAILED", eventId=event_id
        ):
            return self._load(event_id)

    def create_event(self, fields: Mapping[str, Any], creator_id: str) -> Event:
        """Validate and persist a new event owned by ``creator_id``.

        Raises:
            ValidationError: If a required field is missing or malformed.
            StoreError: If the store write fails.
        """
        with self._observer.failures(
            "Failed to save sports event",
            "ADMIN_SAVE_EVENT_FAILED",
            userId=creator_id,
            eventName=fields.get("name"),
        ):
            parsed = EventFields.from_mapping(fields)
            self._check_sport(parsed.sport)
            doc = {
                **event_fields_document(parsed),
                "createdBy": creator_id,
                "createdAt": format_timestamp(self._clock()),
            }
            event_id = self._store.create(EVENTS, doc)
        self._observer.info(
            "Sports event created by admin",
            "ADMIN_CREATE_EVENT",
            userId=creator_id,
            eventId=event_id,
            eventName=parsed.name,
        )
        return event_from_document(event_id, doc)

    def update_event(self, event_id: str, fields: Mapping[str, Any]) -> Event:
        """Merge ``fields`` into an existing event. Last write wins.

        ``createdBy`` and ``createdAt`` are never changed.

        Raises:
            EventNotFoundError: If the event does not exist.
            ValidationError: If the merged event is invalid.
            StoreError: If the store write fails.
        """
        with self._observer.failures(
            "Failed to save sports event", "ADMIN_SAVE_EVENT_FAILED", eventId=event_id
        ):
            current = self._load(event_id)
            merged = event_fields(current).merged(fields)
            if merged.sport != current.sport:
                self._check_sport(merged.sport)
            updated_at = self._clock()
            patch = {**event_fields_document(merged), "updatedAt": format_timestamp(updated_at)}
            try:
                self._store.update(EVENTS, event_id, patch)
            except KeyError:
                raise EventNotFoundError(event_id) from None
        self._observer.info(
            "Sports event updated by admin",
            "ADMIN_UPDATE_EVENT",
            eventId=event_id,
            eventName=merged.name,
        )
        return replace(
            current,
            name=merged.name,
            sport=merged.sport,
            location=merged.location,
            date=merged.date,
            time=merged.time,
            description=merged.description,
            updated_at=updated_at,
        )

    def delete_event(self, event_id: str) -> None:
        """Hard-delete an event. Its team registrations are left in place."""
        with self._observer.failures(
            "Failed to delete sports event", "ADMIN_DELETE_EVENT_FAILED", eventId=event_id
        ):
            self._store.delete(EVENTS, event_id)
        self._observer.info("Sports event deleted by admin", "ADMIN_DELETE_EVENT", eventId=event_id)

    def _load(self, event_id: str) -> Event:
        doc = self._store.get(EVENTS, event_id)
        if doc is None:
            raise EventNotFoundError(event_id)
        return event_from_document(event_id, doc)

    def _sports(self) -> list[str]:
        sports = list(DEFAULT_SPORTS)
        for _, doc in self._store.query(SPORTS_CATEGORIES, order_by="name"):
            name = (doc.get("name") or "").strip()
            if name and name not in sports:
                sports.append(name)
        return sports

    def _check_sport(self, sport: str) -> None:
        if sport not in self._sports():
            raise ValidationError.for_field("sport", f"Unknown sport: {sport}")
