from sportsevents.services.auth_service import AuthService
from sportsevents.services.event_service import EventCatalogService, EventScope
from sportsevents.services.reference_service import ReferenceDataService
from sportsevents.services.registration_service import RegistrationService

__all__ = [
    "AuthService",
    "EventCatalogService",
    "EventScope",
    "ReferenceDataService",
    "RegistrationService",
]
