"""Wire services for a request.

The store and observer classes come from settings.SPORTBUDDY so either can
be swapped without touching the handlers.
"""

from django.conf import settings
from django.utils.module_loading import import_string
from rest_framework.request import Request

from sportsevents.domain.models import UserProfile
from sportsevents.identity.django_provider import DjangoIdentityProvider
from sportsevents.observability import Observer
from sportsevents.services import (
    AuthService,
    EventCatalogService,
    ReferenceDataService,
    RegistrationService,
)
from sportsevents.stores.interfaces import DocumentStore


def app_setting(name: str):
    return settings.SPORTBUDDY[name]


def get_store() -> DocumentStore:
    return import_string(app_setting("DOCUMENT_STORE"))()


def get_observer() -> Observer:
    return import_string(app_setting("OBSERVER"))()


def event_service() -> EventCatalogService:
    return EventCatalogService(get_store(), get_observer())


def registration_service() -> RegistrationService:
    return RegistrationService(get_store(), get_observer())


def reference_service() -> ReferenceDataService:
    return ReferenceDataService(get_store(), get_observer())


def auth_service(request: Request) -> AuthService:
    return AuthService(DjangoIdentityProvider(request), get_store(), get_observer())


def current_profile(request: Request) -> UserProfile | None:
    """Profile of the signed-in user, looked up once per request."""
    if not request.user or not request.user.is_authenticated:
        return None
    if not hasattr(request, "_sportbuddy_profile"):
        request._sportbuddy_profile = auth_service(request).get_profile(str(request.user.pk))
    return request._sportbuddy_profile
