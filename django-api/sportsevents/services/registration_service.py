"""Team registration service."""

from collections import Counter
from collections.abc import Callable, Iterable
from dataclasses import replace
from datetime import datetime

from sportsevents.domain.errors import EventNotFoundError
from sportsevents.domain.models import TeamRegistration
from sportsevents.domain.schemas import RegistrationFields
from sportsevents.domain.value_objects import utc_now
from sportsevents.observability import LoggingObserver, Observer
from sportsevents.services.documents import (
    registration_document,
    registration_from_document,
)
from sportsevents.stores.interfaces import EVENTS, TEAM_REGISTRATIONS, DocumentStore


def list_registrations_for_event(
    event_id: str, all_registrations: Iterable[TeamRegistration]
) -> list[TeamRegistration]:
    return [reg for reg in all_registrations if reg.event_id == event_id]


def count_registrations(event_id: str, all_registrations: Iterable[TeamRegistration]) -> int:
    return len(list_registrations_for_event(event_id, all_registrations))


def count_by_event(all_registrations: Iterable[TeamRegistration]) -> dict[str, int]:
    return dict(Counter(reg.event_id for reg in all_registrations))


class RegistrationService:
    """Registers teams for events and reads registrations back."""

    list_registrations_for_event = staticmethod(list_registrations_for_event)
    count_registrations = staticmethod(count_registrations)
    count_by_event = staticmethod(count_by_event)

    def __init__(
        self,
        store: DocumentStore,
        observer: Observer | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._store = store
        self._observer = observer or LoggingObserver()
        self._clock = clock

    def register_team(
        self,
        event_id: str,
        team_name: str,
        total_members: int,
        phone_number: str,
        joiner_id: str,
    ) -> TeamRegistration:
        """Register a team for an event.

        Input is validated before the store is touched. The event is then
        re-read so a registration is never written for an event that is
        already gone; its current name is copied onto the registration.

        Raises:
            ValidationError: If the team details are invalid.
            EventNotFoundError: If the event no longer exists.
            StoreError: If the store read or write fails.
        """
        with self._observer.failures(
            "Failed to join event", "TEAM_JOIN_EVENT_FAILED", userId=joiner_id, eventId=event_id
        ):
            fields = RegistrationFields.from_mapping(
                {
                    "team_name": team_name,
                    "total_members": total_members,
                    "phone_number": phone_number,
                }
            )
            event_doc = self._store.get(EVENTS, event_id)
            if event_doc is None:
                raise EventNotFoundError(event_id)
            registration = TeamRegistration(
                id="",
                team_name=fields.team_name,
                total_members=fields.total_members,
                phone_number=fields.phone_number,
                event_id=event_id,
                event_name=event_doc["name"],
                joined_by=joiner_id,
                joined_at=self._clock(),
            )
            registration_id = self._store.create(
                TEAM_REGISTRATIONS, registration_document(registration)
            )
        self._observer.info(
            "Team joined event successfully",
            "TEAM_JOIN_EVENT",
            userId=joiner_id,
            eventId=event_id,
            teamName=fields.team_name,
            totalMembers=fields.total_members.value,
        )
        return replace(registration, id=registration_id)

    def list_registrations(self) -> list[TeamRegistration]:
        """Return every registration, most recent first."""
        with self._observer.failures("Failed to fetch team joins", "FETCH_TEAM_JOINS_FAILED"):
            rows = self._store.query(TEAM_REGISTRATIONS, order_by="-joinedAt")
        registrations = [registration_from_document(doc_id, doc) for doc_id, doc in rows]
        self._observer.info(
            "Team joins fetched successfully", "FETCH_TEAM_JOINS", count=len(registrations)
        )
        return registrations
