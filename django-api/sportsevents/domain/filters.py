"""Event filter engine.

Criteria are pure predicates over Event. Every criterion that is set must
match (AND); unset or blank criteria match everything. Filtering never
reorders its input.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol, Self

from sportsevents.domain.errors import ValidationError
from sportsevents.domain.models import Event
from sportsevents.domain.value_objects import EventDate


class EventCriteria(Protocol):
    def matches(self, event: Event) -> bool: ...


@dataclass(frozen=True)
class EventFilter:
    """Free-text, sport and single-day criteria for the discovery view."""

    text: str | None = None
    sport: str | None = None
    date: EventDate | None = None

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> Self:
        """Build a filter from ``q``, ``sport`` and ``date`` query parameters."""
        raw_date = (params.get("date") or "").strip()
        event_date = None
        if raw_date:
            try:
                event_date = EventDate.from_string(raw_date)
            except ValueError as exc:
                raise ValidationError.for_field("date", str(exc)) from exc
        return cls(
            text=params.get("q") or None,
            sport=(params.get("sport") or "").strip() or None,
            date=event_date,
        )

    def matches(self, event: Event) -> bool:
        needle = (self.text or "").strip().casefold()
        if needle and not any(
            needle in haystack.casefold()
            for haystack in (event.name, event.location, event.description)
        ):
            return False
        if self.sport and event.sport != self.sport:
            return False
        if self.date is not None and event.date != self.date:
            return False
        return True

    def __and__(self, other: EventCriteria) -> "AllOf":
        return AllOf((self, other))


@dataclass(frozen=True)
class AllOf:
    """Conjunction of several criteria."""

    parts: tuple[EventCriteria, ...]

    def matches(self, event: Event) -> bool:
        return all(part.matches(event) for part in self.parts)

    def __and__(self, other: EventCriteria) -> "AllOf":
        return AllOf(self.parts + (other,))


def filter_events(
    events: Iterable[Event], criteria: EventCriteria | None = None
) -> list[Event]:
    if criteria is None:
        return list(events)
    return [event for event in events if criteria.matches(event)]
