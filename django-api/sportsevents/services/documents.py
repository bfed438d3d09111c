"""Conversion between stored documents and domain models.

Documents use the camelCase field names of the stored collections.
"""

from typing import Any

from sportsevents.domain.models import (
    Area,
    Category,
    City,
    Event,
    TeamRegistration,
    UserProfile,
)
from sportsevents.domain.schemas import EventFields
from sportsevents.domain.value_objects import (
    EventDate,
    EventTime,
    TeamSize,
    format_timestamp,
    parse_timestamp,
)
from sportsevents.stores.interfaces import Document


def _optional_timestamp(doc: Document, key: str):
    value = doc.get(key)
    return parse_timestamp(value) if value else None


def event_fields_document(fields: EventFields) -> dict[str, Any]:
    return {
        "name": fields.name,
        "sport": fields.sport,
        "location": fields.location,
        "date": str(fields.date),
        "time": str(fields.time),
        "description": fields.description,
    }


def event_from_document(doc_id: str, doc: Document) -> Event:
    return Event(
        id=doc_id,
        name=doc["name"],
        sport=doc["sport"],
        location=doc["location"],
        date=EventDate.from_string(doc["date"]),
        time=EventTime.from_string(doc["time"]),
        description=doc.get("description") or "",
        created_by=doc["createdBy"],
        created_at=parse_timestamp(doc["createdAt"]),
        updated_at=_optional_timestamp(doc, "updatedAt"),
    )


def event_fields(event: Event) -> EventFields:
    return EventFields(
        name=event.name,
        sport=event.sport,
        location=event.location,
        date=event.date,
        time=event.time,
        description=event.description,
    )


def registration_document(registration: TeamRegistration) -> dict[str, Any]:
    return {
        "teamName": registration.team_name,
        "totalMembers": registration.total_members.value,
        "phoneNumber": registration.phone_number,
        "eventId": registration.event_id,
        "eventName": registration.event_name,
        "joinedBy": registration.joined_by,
        "joinedAt": format_timestamp(registration.joined_at),
    }


def registration_from_document(doc_id: str, doc: Document) -> TeamRegistration:
    return TeamRegistration(
        id=doc_id,
        team_name=doc["teamName"],
        total_members=TeamSize(int(doc["totalMembers"])),
        phone_number=doc["phoneNumber"],
        event_id=doc["eventId"],
        event_name=doc.get("eventName", ""),
        joined_by=doc["joinedBy"],
        joined_at=parse_timestamp(doc["joinedAt"]),
    )


def profile_document(profile: UserProfile) -> dict[str, Any]:
    return {
        "uid": profile.uid,
        "email": profile.email,
        "displayName": profile.display_name,
        "isAdmin": profile.is_admin,
        "createdAt": format_timestamp(profile.created_at),
    }


def profile_from_document(doc: Document) -> UserProfile:
    return UserProfile(
        uid=doc["uid"],
        email=doc["email"],
        display_name=doc.get("displayName", ""),
        is_admin=bool(doc.get("isAdmin", False)),
        created_at=parse_timestamp(doc["createdAt"]),
    )


def category_from_document(doc_id: str, doc: Document) -> Category:
    return Category(
        id=doc_id,
        name=doc["name"],
        description=doc.get("description") or "",
        created_at=parse_timestamp(doc["createdAt"]),
        updated_at=_optional_timestamp(doc, "updatedAt"),
    )


def city_from_document(doc_id: str, doc: Document) -> City:
    return City(
        id=doc_id,
        name=doc["name"],
        country=doc["country"],
        created_at=parse_timestamp(doc["createdAt"]),
        updated_at=_optional_timestamp(doc, "updatedAt"),
    )


def area_from_document(doc_id: str, doc: Document) -> Area:
    return Area(
        id=doc_id,
        name=doc["name"],
        city_id=doc["cityId"],
        city_name=doc.get("cityName", ""),
        created_at=parse_timestamp(doc["createdAt"]),
        updated_at=_optional_timestamp(doc, "updatedAt"),
    )
