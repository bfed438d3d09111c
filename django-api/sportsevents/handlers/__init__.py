from sportsevents.handlers.views import (
    AdminEventDetailView,
    AdminEventListView,
    AdminEventRegistrationListView,
    AdminRegistrationListView,
    EventListView,
    LoginView,
    LogoutView,
    MeView,
    NavigationView,
    ReferenceDetailView,
    ReferenceListView,
    RegisterView,
    SportListView,
    TeamRegistrationCreateView,
)

__all__ = [
    "AdminEventDetailView",
    "AdminEventListView",
    "AdminEventRegistrationListView",
    "AdminRegistrationListView",
    "EventListView",
    "LoginView",
    "LogoutView",
    "MeView",
    "NavigationView",
    "ReferenceDetailView",
    "ReferenceListView",
    "RegisterView",
    "SportListView",
    "TeamRegistrationCreateView",
]
