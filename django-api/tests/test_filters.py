"""Unit tests for the event filter engine.

Run with: pytest tests/test_filters.py -v
"""

from datetime import date, datetime, time, timezone
from itertools import product

import pytest

from sportsevents.domain.errors import ValidationError
from sportsevents.domain.filters import EventFilter, filter_events
from sportsevents.domain.models import Event
from sportsevents.domain.value_objects import EventDate, EventTime


def make_event(event_id, name, sport, location, day, description=""):
    return Event(
        id=event_id,
        name=name,
        sport=sport,
        location=location,
        date=EventDate(day),
        time=EventTime(time(18, 0)),
        description=description,
        created_by="admin-1",
        created_at=datetime(2025, 5, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def events():
    return [
        make_event("e1", "Morning Doubles", "Tennis", "Riverside Courts", date(2025, 6, 1)),
        make_event("e2", "Evening Singles", "Tennis", "Central Park", date(2025, 6, 2)),
        make_event(
            "e3", "5-a-side Cup", "Football", "Central Park", date(2025, 6, 1), "Bring shin pads"
        ),
        make_event("e4", "Park Run", "Running", "Harbour", date(2025, 6, 3), "Easy 5k, all paces"),
    ]


def ids(events):
    return [event.id for event in events]


class TestEventFilter:
    def test_empty_filter_returns_everything_in_order(self, events):
        assert ids(filter_events(events, EventFilter())) == ["e1", "e2", "e3", "e4"]

    def test_no_criteria_returns_copy(self, events):
        result = filter_events(events)
        assert result == events
        assert result is not events

    def test_text_matches_name_case_insensitively(self, events):
        assert ids(filter_events(events, EventFilter(text="DOUBLES"))) == ["e1"]

    def test_text_matches_location(self, events):
        assert ids(filter_events(events, EventFilter(text="central park"))) == ["e2", "e3"]

    def test_text_matches_description(self, events):
        assert ids(filter_events(events, EventFilter(text="all paces"))) == ["e4"]

    def test_blank_text_is_ignored(self, events):
        assert len(filter_events(events, EventFilter(text="   "))) == 4

    def test_sport_is_exact_match(self, events):
        assert ids(filter_events(events, EventFilter(sport="Tennis"))) == ["e1", "e2"]
        assert filter_events(events, EventFilter(sport="tennis")) == []

    def test_date_is_single_day(self, events):
        criteria = EventFilter(date=EventDate(date(2025, 6, 1)))
        assert ids(filter_events(events, criteria)) == ["e1", "e3"]

    def test_sport_and_date_returns_only_matching_event(self):
        matching = make_event("m", "Club Night", "Tennis", "Court 2", date(2025, 6, 1))
        other = make_event("o", "Club Night", "Tennis", "Court 2", date(2025, 6, 8))
        criteria = EventFilter(sport="Tennis", date=EventDate(date(2025, 6, 1)))
        assert filter_events([matching, other], criteria) == [matching]

    def test_criteria_are_conjunctive(self, events):
        criteria = EventFilter(text="central", sport="Football")
        assert ids(filter_events(events, criteria)) == ["e3"]

    def test_filter_is_deterministic_and_leaves_input_alone(self, events):
        before = list(events)
        criteria = EventFilter(text="park")
        assert filter_events(events, criteria) == filter_events(events, criteria)
        assert events == before


CRITERIA = [
    EventFilter(),
    EventFilter(text="park"),
    EventFilter(sport="Tennis"),
    EventFilter(sport="Football"),
    EventFilter(date=EventDate(date(2025, 6, 1))),
    EventFilter(text="central", date=EventDate(date(2025, 6, 2))),
]


@pytest.mark.parametrize("first,second", list(product(CRITERIA, repeat=2)))
def test_filtering_twice_equals_filtering_by_conjunction(events, first, second):
    twice = filter_events(filter_events(events, first), second)
    assert twice == filter_events(events, first & second)


def test_conjunction_chains(events):
    criteria = EventFilter(text="park") & EventFilter(sport="Football") & EventFilter(
        date=EventDate(date(2025, 6, 1))
    )
    assert ids(filter_events(events, criteria)) == ["e3"]


class TestFromParams:
    def test_reads_query_parameters(self):
        criteria = EventFilter.from_params({"q": "cup", "sport": "Football", "date": "2025-06-01"})
        assert criteria == EventFilter(
            text="cup", sport="Football", date=EventDate(date(2025, 6, 1))
        )

    def test_missing_and_blank_parameters_are_unset(self):
        assert EventFilter.from_params({"q": "", "sport": " ", "date": ""}) == EventFilter()

    def test_malformed_date_is_a_validation_error(self):
        with pytest.raises(ValidationError) as excinfo:
            EventFilter.from_params({"date": "tomorrow"})
        assert "date" in excinfo.value.fields
