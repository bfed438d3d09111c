"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors reach the exception handler (handlers/errors.py)
- Never contain business logic
- Never expose internal error details
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from sportsevents.cache import list_key
from sportsevents.domain.errors import ValidationError
from sportsevents.domain.filters import EventFilter, filter_events
from sportsevents.domain.routing import View
from sportsevents.handlers import serializers
from sportsevents.handlers.dependencies import (
    app_setting,
    auth_service,
    current_profile,
    event_service,
    reference_service,
    registration_service,
)
from sportsevents.handlers.permissions import RoleRoutedAccess, resolve_for_request
from sportsevents.services import EventScope
from sportsevents.services.registration_service import (
    count_by_event,
    list_registrations_for_event,
)
from sportsevents.stores.interfaces import EVENTS, SPORTS_CATEGORIES


def _parse(serializer_class, request: Request, partial: bool = False) -> dict:
    serializer = serializer_class(data=request.data, partial=partial)
    serializer.is_valid(raise_exception=True)
    return serializer.validated_data


def _session_payload(request: Request) -> dict:
    profile = current_profile(request)
    return {
        "profile": serializers.UserProfileSerializer(profile).data if profile else None,
        "view": resolve_for_request(request, View.HOME).value,
    }


# Auth


class RegisterView(APIView):
    """Handler for POST /api/auth/register"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        data = _parse(serializers.RegisterInputSerializer, request)
        auth_service(request).register(
            data["email"], data["password"], data["display_name"], data["is_admin"]
        )
        return Response(_session_payload(request), status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """Handler for POST /api/auth/login"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        data = _parse(serializers.LoginInputSerializer, request)
        auth_service(request).login(data["email"], data["password"])
        return Response(_session_payload(request))


class LogoutView(APIView):
    """Handler for POST /api/auth/logout"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        auth_service(request).logout()
        return Response({"profile": None, "view": View.HOME.value})


class MeView(APIView):
    """Handler for GET /api/auth/me"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        return Response(_session_payload(request))


class NavigationView(APIView):
    """Handler for POST /api/navigation

    Returns the view the caller actually lands on for a requested view.
    """

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        data = _parse(serializers.NavigationInputSerializer, request)
        try:
            requested = View(data["view"])
        except ValueError:
            raise ValidationError.for_field("view", "Unknown view") from None
        return Response({"view": resolve_for_request(request, requested).value})


# Discovery


class SportListView(APIView):
    """Handler for GET /api/sports"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        sports = cache.get(list_key(SPORTS_CATEGORIES))
        if sports is None:
            sports = event_service().available_sports()
            cache.set(list_key(SPORTS_CATEGORIES), sports, app_setting("EVENTS_CACHE_TTL"))
        return Response({"sports": sports})


class EventListView(APIView):
    """Handler for GET /api/events?q=&sport=&date="""

    permission_classes = [RoleRoutedAccess]
    app_view = View.EVENTS

    def get(self, request: Request) -> Response:
        criteria = EventFilter.from_params(request.query_params)
        events = cache.get(list_key(EVENTS))
        if events is None:
            events = event_service().list_events(EventScope.all())
            cache.set(list_key(EVENTS), events, app_setting("EVENTS_CACHE_TTL"))
        matching = filter_events(events, criteria)
        return Response(
            {
                "count": len(matching),
                "results": serializers.EventSerializer(matching, many=True).data,
            }
        )


class TeamRegistrationCreateView(APIView):
    """Handler for POST /api/events/{event_id}/registrations"""

    permission_classes = [RoleRoutedAccess]
    app_view = View.EVENTS

    def post(self, request: Request, event_id: str) -> Response:
        data = _parse(serializers.TeamRegistrationInputSerializer, request)
        registration = registration_service().register_team(
            event_id,
            data["team_name"],
            data["total_members"],
            data["phone_number"],
            str(request.user.pk),
        )
        return Response(
            serializers.TeamRegistrationSerializer(registration).data,
            status=status.HTTP_201_CREATED,
        )


# Admin: events


class AdminEventListView(APIView):
    """Handler for GET, POST /api/admin/events"""

    permission_classes = [RoleRoutedAccess]
    app_view = View.ADMIN

    def get(self, request: Request) -> Response:
        scope = request.query_params.get("scope", "all")
        if scope == "mine":
            scope = f"createdBy={request.user.pk}"
        events = event_service().list_events(EventScope.parse(scope))
        counts = count_by_event(registration_service().list_registrations())
        data = serializers.EventSummarySerializer(
            events, many=True, context={"counts": counts}
        ).data
        return Response({"count": len(events), "results": data})

    def post(self, request: Request) -> Response:
        data = _parse(serializers.EventInputSerializer, request)
        event = event_service().create_event(data, str(request.user.pk))
        return Response(serializers.EventSerializer(event).data, status=status.HTTP_201_CREATED)


class AdminEventDetailView(APIView):
    """Handler for GET, PATCH, DELETE /api/admin/events/{event_id}"""

    permission_classes = [RoleRoutedAccess]
    app_view = View.ADMIN

    def get(self, request: Request, event_id: str) -> Response:
        event = event_service().get_event(event_id)
        return Response(serializers.EventSerializer(event).data)

    def patch(self, request: Request, event_id: str) -> Response:
        data = _parse(serializers.EventInputSerializer, request, partial=True)
        event = event_service().update_event(event_id, data)
        return Response(serializers.EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        event_service().delete_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class AdminEventRegistrationListView(APIView):
    """Handler for GET /api/admin/events/{event_id}/registrations"""

    permission_classes = [RoleRoutedAccess]
    app_view = View.ADMIN

    def get(self, request: Request, event_id: str) -> Response:
        registrations = list_registrations_for_event(
            event_id, registration_service().list_registrations()
        )
        return Response(
            {
                "count": len(registrations),
                "results": serializers.TeamRegistrationSerializer(registrations, many=True).data,
            }
        )


class AdminRegistrationListView(APIView):
    """Handler for GET /api/admin/registrations"""

    permission_classes = [RoleRoutedAccess]
    app_view = View.ADMIN

    def get(self, request: Request) -> Response:
        registrations = registration_service().list_registrations()
        return Response(
            {
                "count": len(registrations),
                "results": serializers.TeamRegistrationSerializer(registrations, many=True).data,
            }
        )


# Admin: reference data

_REFERENCE_KINDS = {
    "categories": (
        serializers.CategoryInputSerializer,
        serializers.CategorySerializer,
        "category",
    ),
    "cities": (serializers.CityInputSerializer, serializers.CitySerializer, "city"),
    "areas": (serializers.AreaInputSerializer, serializers.AreaSerializer, "area"),
}


class ReferenceListView(APIView):
    """Handler for GET, POST /api/admin/{categories,cities,areas}"""

    permission_classes = [RoleRoutedAccess]
    app_view = View.ADMIN
    kind = "categories"

    def get(self, request: Request) -> Response:
        _, output_serializer, _ = _REFERENCE_KINDS[self.kind]
        service = reference_service()
        if self.kind == "areas":
            items = service.list_areas(request.query_params.get("cityId") or None)
        else:
            items = getattr(service, f"list_{self.kind}")()
        return Response(
            {"count": len(items), "results": output_serializer(items, many=True).data}
        )

    def post(self, request: Request) -> Response:
        input_serializer, output_serializer, singular = _REFERENCE_KINDS[self.kind]
        data = _parse(input_serializer, request)
        item = getattr(reference_service(), f"create_{singular}")(data, str(request.user.pk))
        return Response(output_serializer(item).data, status=status.HTTP_201_CREATED)


class ReferenceDetailView(APIView):
    """Handler for PATCH, DELETE /api/admin/{categories,cities,areas}/{item_id}"""

    permission_classes = [RoleRoutedAccess]
    app_view = View.ADMIN
    kind = "categories"

    def patch(self, request: Request, item_id: str) -> Response:
        input_serializer, output_serializer, singular = _REFERENCE_KINDS[self.kind]
        data = _parse(input_serializer, request, partial=True)
        item = getattr(reference_service(), f"update_{singular}")(
            item_id, data, str(request.user.pk)
        )
        return Response(output_serializer(item).data)

    def delete(self, request: Request, item_id: str) -> Response:
        _, _, singular = _REFERENCE_KINDS[self.kind]
        getattr(reference_service(), f"delete_{singular}")(item_id, str(request.user.pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
