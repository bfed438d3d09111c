from sportsevents.domain.models import (
    Area,
    Category,
    City,
    Event,
    Principal,
    TeamRegistration,
    UserProfile,
)
from sportsevents.domain.value_objects import EventDate, EventTime, TeamSize

__all__ = [
    "Event",
    "TeamRegistration",
    "Principal",
    "UserProfile",
    "Category",
    "City",
    "Area",
    "EventDate",
    "EventTime",
    "TeamSize",
]
