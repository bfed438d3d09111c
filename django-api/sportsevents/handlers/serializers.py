"""Serializers for request parsing and for turning domain models into API responses.

Input serializers only check shape and types. Domain rules (required
fields, team size bounds, known sports) are enforced by the services.
Field names on the wire are camelCase.
"""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    sport = serializers.CharField()
    location = serializers.CharField()
    date = serializers.CharField()
    time = serializers.CharField()
    description = serializers.CharField()
    createdBy = serializers.CharField(source="created_by")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at", allow_null=True)


class EventSummarySerializer(EventSerializer):
    """Event plus the number of teams registered for it."""

    registrationCount = serializers.SerializerMethodField()

    def get_registrationCount(self, event) -> int:
        return self.context.get("counts", {}).get(event.id, 0)


class TeamRegistrationSerializer(serializers.Serializer):
    """Serializer for TeamRegistration domain model."""

    id = serializers.CharField()
    teamName = serializers.CharField(source="team_name")
    totalMembers = serializers.IntegerField(source="total_members.value")
    phoneNumber = serializers.CharField(source="phone_number")
    eventId = serializers.CharField(source="event_id")
    eventName = serializers.CharField(source="event_name")
    joinedBy = serializers.CharField(source="joined_by")
    joinedAt = serializers.DateTimeField(source="joined_at")


class UserProfileSerializer(serializers.Serializer):
    uid = serializers.CharField()
    email = serializers.EmailField()
    displayName = serializers.CharField(source="display_name")
    isAdmin = serializers.BooleanField(source="is_admin")
    createdAt = serializers.DateTimeField(source="created_at")


class CategorySerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    description = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at", allow_null=True)


class CitySerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    country = serializers.CharField()
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at", allow_null=True)


class AreaSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    cityId = serializers.CharField(source="city_id")
    cityName = serializers.CharField(source="city_name")
    createdAt = serializers.DateTimeField(source="created_at")
    updatedAt = serializers.DateTimeField(source="updated_at", allow_null=True)


# Request bodies


class EventInputSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    sport = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(required=False, allow_blank=True)
    date = serializers.CharField(required=False, allow_blank=True)
    time = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)


class TeamRegistrationInputSerializer(serializers.Serializer):
    teamName = serializers.CharField(source="team_name", allow_blank=True)
    totalMembers = serializers.IntegerField(source="total_members")
    phoneNumber = serializers.CharField(source="phone_number", allow_blank=True)


class CategoryInputSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    description = serializers.CharField(required=False, allow_blank=True)


class CityInputSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    country = serializers.CharField(required=False, allow_blank=True)


class AreaInputSerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True)
    cityId = serializers.CharField(source="city_id", required=False, allow_blank=True)


class RegisterInputSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False)
    displayName = serializers.CharField(source="display_name")
    isAdmin = serializers.BooleanField(source="is_admin", default=False)


class LoginInputSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(trim_whitespace=False)


class NavigationInputSerializer(serializers.Serializer):
    view = serializers.CharField()
