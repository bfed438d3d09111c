from django.urls import path

from sportsevents.handlers import (
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

urlpatterns = [
    path("auth/register", RegisterView.as_view(), name="auth-register"),
    path("auth/login", LoginView.as_view(), name="auth-login"),
    path("auth/logout", LogoutView.as_view(), name="auth-logout"),
    path("auth/me", MeView.as_view(), name="auth-me"),
    path("navigation", NavigationView.as_view(), name="navigation"),
    path("sports", SportListView.as_view(), name="sport-list"),
    path("events", EventListView.as_view(), name="event-list"),
    path(
        "events/<str:event_id>/registrations",
        TeamRegistrationCreateView.as_view(),
        name="event-register-team",
    ),
    path("admin/events", AdminEventListView.as_view(), name="admin-event-list"),
    path(
        "admin/events/<str:event_id>",
        AdminEventDetailView.as_view(),
        name="admin-event-detail",
    ),
    path(
        "admin/events/<str:event_id>/registrations",
        AdminEventRegistrationListView.as_view(),
        name="admin-event-registrations",
    ),
    path(
        "admin/registrations",
        AdminRegistrationListView.as_view(),
        name="admin-registration-list",
    ),
]

for kind in ("categories", "cities", "areas"):
    urlpatterns += [
        path(
            f"admin/{kind}",
            ReferenceListView.as_view(kind=kind),
            name=f"admin-{kind}-list",
        ),
        path(
            f"admin/{kind}/<str:item_id>",
            ReferenceDetailView.as_view(kind=kind),
            name=f"admin-{kind}-detail",
        ),
    ]
