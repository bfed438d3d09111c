"""Role-based access for API views.

Each view declares the app view it belongs to. A request is allowed only
when the role router would let the caller stay on that view.
"""

from rest_framework.permissions import BasePermission

from sportsevents.domain.routing import View, resolve_view
from sportsevents.handlers.dependencies import current_profile


def resolve_for_request(request, requested: View) -> View:
    authenticated = bool(request.user and request.user.is_authenticated)
    profile = current_profile(request) if authenticated else None
    return resolve_view(authenticated, bool(profile and profile.is_admin), requested)


class RoleRoutedAccess(BasePermission):
    message = "This area is not available for your account."

    def has_permission(self, request, view) -> bool:
        requested = getattr(view, "app_view", View.HOME)
        return resolve_for_request(request, requested) is requested
