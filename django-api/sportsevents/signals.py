"""Django signals for cache invalidation."""

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from sportsevents.cache import invalidate_collection
from sportsevents.models import Document


@receiver([post_save, post_delete], sender=Document)
def invalidate_document_cache(sender, instance, **kwargs):
    """Invalidate cached lists when a document is saved or deleted."""
    invalidate_collection(instance.collection)
