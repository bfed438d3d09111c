"""Input schemas, one per entity kind.

Each schema validates a plain mapping of user-supplied fields on its own
and raises ValidationError listing every offending field.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any, Self

from sportsevents.domain.errors import ValidationError
from sportsevents.domain.value_objects import EventDate, EventTime, TeamSize

DEFAULT_SPORTS = (
    "Football",
    "Basketball",
    "Tennis",
    "Soccer",
    "Baseball",
    "Volleyball",
    "Cricket",
    "Badminton",
    "Swimming",
    "Running",
    "Cycling",
    "Other",
)


def _text(data: Mapping[str, Any], key: str, errors: dict[str, str], label: str) -> str:
    value = data.get(key)
    if value is None or not str(value).strip():
        errors[key] = f"{label} is required"
        return ""
    return str(value).strip()


def _optional_text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value).strip()


@dataclass(frozen=True)
class EventFields:
    """User-editable fields of an Event."""

    name: str
    sport: str
    location: str
    date: EventDate
    time: EventTime
    description: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        errors: dict[str, str] = {}
        name = _text(data, "name", errors, "Name")
        sport = _text(data, "sport", errors, "Sport")
        location = _text(data, "location", errors, "Location")

        event_date = None
        raw_date = _text(data, "date", errors, "Date")
        if raw_date:
            try:
                event_date = EventDate.from_string(raw_date)
            except ValueError as exc:
                errors["date"] = str(exc)

        event_time = None
        raw_time = _text(data, "time", errors, "Time")
        if raw_time:
            try:
                event_time = EventTime.from_string(raw_time)
            except ValueError as exc:
                errors["time"] = str(exc)

        if errors:
            raise ValidationError(errors)
        return cls(
            name=name,
            sport=sport,
            location=location,
            date=event_date,
            time=event_time,
            description=_optional_text(data, "description"),
        )

    def merged(self, patch: Mapping[str, Any]) -> Self:
        """Apply a partial update and validate the result as a whole."""
        current = {
            "name": self.name,
            "sport": self.sport,
            "location": self.location,
            "date": str(self.date),
            "time": str(self.time),
            "description": self.description,
        }
        current.update({key: value for key, value in patch.items() if key in current})
        return self.from_mapping(current)


@dataclass(frozen=True)
class RegistrationFields:
    """Fields a team submits when registering for an event."""

    team_name: str
    total_members: TeamSize
    phone_number: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        errors: dict[str, str] = {}
        team_name = _text(data, "team_name", errors, "Team name")
        phone_number = _text(data, "phone_number", errors, "Phone number")

        total_members = None
        try:
            total_members = TeamSize(data.get("total_members"))
        except ValueError as exc:
            errors["total_members"] = str(exc)

        if errors:
            raise ValidationError(errors)
        return cls(
            team_name=team_name,
            total_members=total_members,
            phone_number=phone_number,
        )


@dataclass(frozen=True)
class CategoryFields:
    name: str
    description: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        errors: dict[str, str] = {}
        name = _text(data, "name", errors, "Name")
        if errors:
            raise ValidationError(errors)
        return cls(name=name, description=_optional_text(data, "description"))

    def merged(self, patch: Mapping[str, Any]) -> Self:
        return self.from_mapping({**asdict(self), **patch})


@dataclass(frozen=True)
class CityFields:
    name: str
    country: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        errors: dict[str, str] = {}
        name = _text(data, "name", errors, "Name")
        country = _text(data, "country", errors, "Country")
        if errors:
            raise ValidationError(errors)
        return cls(name=name, country=country)

    def merged(self, patch: Mapping[str, Any]) -> Self:
        return self.from_mapping({**asdict(self), **patch})


@dataclass(frozen=True)
class AreaFields:
    name: str
    city_id: str

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        errors: dict[str, str] = {}
        name = _text(data, "name", errors, "Name")
        city_id = _text(data, "city_id", errors, "City")
        if errors:
            raise ValidationError(errors)
        return cls(name=name, city_id=city_id)

    def merged(self, patch: Mapping[str, Any]) -> Self:
        return self.from_mapping({**asdict(self), **patch})
