from django.contrib import admin

from sportsevents.models import Document


@admin.register(Document)
class DocumentAdmin(admin.ModelAdmin):
    list_display = ["__str__", "collection", "created_at", "updated_at"]
    list_filter = ["collection"]
    search_fields = ["data"]
    readonly_fields = ["id", "created_at", "updated_at"]
