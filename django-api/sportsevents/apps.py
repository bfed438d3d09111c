from django.apps import AppConfig


class SportsEventsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "sportsevents"
    verbose_name = "Sports events"

    def ready(self) -> None:
        from sportsevents import signals  # noqa: F401
