"""Domain models representing persisted state.

These are pure domain objects with no API input rules. Conversion to and
from stored documents lives in services/documents.py.
"""

from dataclasses import dataclass
from datetime import datetime

from sportsevents.domain.value_objects import EventDate, EventTime, TeamSize


@dataclass(frozen=True)
class Event:
    """Domain representation of a sports Event."""

    id: str
    name: str
    sport: str
    location: str
    date: EventDate
    time: EventTime
    description: str
    created_by: str
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True)
class TeamRegistration:
    """A team's submission to take part in an Event.

    ``event_name`` is copied from the event when the team registers and is
    never refreshed afterwards.
    """

    id: str
    team_name: str
    total_members: TeamSize
    phone_number: str
    event_id: str
    event_name: str
    joined_by: str
    joined_at: datetime


@dataclass(frozen=True)
class Principal:
    """Identity handed out by the identity provider."""

    uid: str
    email: str


@dataclass(frozen=True)
class UserProfile:
    """Application profile of a principal, including its role flag."""

    uid: str
    email: str
    display_name: str
    is_admin: bool
    created_at: datetime


@dataclass(frozen=True)
class Category:
    id: str
    name: str
    description: str
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True)
class City:
    id: str
    name: str
    country: str
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Area:
    """A district of a City. ``city_name`` is a display copy taken on write."""

    id: str
    name: str
    city_id: str
    city_name: str
    created_at: datetime
    updated_at: datetime | None = None
