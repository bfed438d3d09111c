"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Self

MIN_TEAM_MEMBERS = 1
MAX_TEAM_MEMBERS = 50

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_TIME_PATTERN = re.compile(r"\d{2}:\d{2}")


@dataclass(frozen=True)
class EventDate:
    """Calendar day an event takes place on (ISO 8601)."""

    value: date

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not _DATE_PATTERN.fullmatch(value):
            raise ValueError("Date must use the YYYY-MM-DD format")
        return cls(value=date.fromisoformat(value))

    def __str__(self) -> str:
        return self.value.isoformat()


@dataclass(frozen=True)
class EventTime:
    """Local start time of an event, minute precision."""

    value: time

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not _TIME_PATTERN.fullmatch(value):
            raise ValueError("Time must use the HH:MM format")
        return cls(value=time.fromisoformat(value))

    def __str__(self) -> str:
        return self.value.strftime("%H:%M")


@dataclass(frozen=True)
class TeamSize:
    """Number of members on a registered team."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Team size must be a whole number")
        if not MIN_TEAM_MEMBERS <= self.value <= MAX_TEAM_MEMBERS:
            raise ValueError(
                f"Team size must be between {MIN_TEAM_MEMBERS} and {MAX_TEAM_MEMBERS}"
            )

    def __int__(self) -> int:
        return self.value


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Serialize a timestamp so that string order matches time order."""
    return value.astimezone(timezone.utc).isoformat(timespec="microseconds")


def parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value)
