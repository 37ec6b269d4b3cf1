import logging

from django.contrib.contenttypes.models import ContentType
from django.db import DatabaseError, models
from django.utils import timezone

from .exceptions import StoreUnavailableError

logger = logging.getLogger(__name__)


class TranslationQuerySet(models.QuerySet):
    """Custom QuerySet for Translation model"""

    def for_owner(self, owner):
        content_type = ContentType.objects.get_for_model(owner)
        return self.filter(content_type=content_type, object_id=owner.pk)

    def for_locale(self, locale):
        return self.filter(locale=locale)


class TranslationManager(models.Manager):
    """
    Data access for translation rows, always scoped to one owning record.

    Database failures surface as ``StoreUnavailableError``.
    """

    def get_queryset(self):
        return TranslationQuerySet(self.model, using=self._db)

    def for_owner(self, owner):
        return self.get_queryset().for_owner(owner)

    def find(self, owner, field, locale):
        """
        Get the translation of ``field`` in ``locale`` for ``owner``.

        :return: Translation instance or None when nothing is stored
        """
        try:
            return self.for_owner(owner).filter(field=field, locale=locale).first()
        except DatabaseError as e:
            logger.error(f"Failed to read translation {field}/{locale} for {owner!r}: {e}")
            raise StoreUnavailableError(str(e)) from e

    def upsert(self, owner, field, locale, value):
        """
        Insert or update the translation of ``field`` in ``locale`` for ``owner``.

        Runs as a single INSERT ... ON CONFLICT DO UPDATE against the
        unique (content_type, object_id, field, locale) constraint.

        :return: The stored Translation instance
        """
        content_type = ContentType.objects.get_for_model(owner)
        now = timezone.now()
        try:
            self.bulk_create(
                [
                    self.model(
                        content_type=content_type,
                        object_id=owner.pk,
                        field=field,
                        locale=locale,
                        value=value,
                        created_at=now,
                        updated_at=now,
                    )
                ],
                update_conflicts=True,
                unique_fields=["content_type", "object_id", "field", "locale"],
                update_fields=["value", "updated_at"],
            )
            return self.get(
                content_type=content_type,
                object_id=owner.pk,
                field=field,
                locale=locale,
            )
        except DatabaseError as e:
            logger.error(f"Failed to store translation {field}/{locale} for {owner!r}: {e}")
            raise StoreUnavailableError(str(e)) from e

    def delete_all_for_owner(self, owner):
        """
        Delete every translation of ``owner``.

        :return: Number of deleted translations
        """
        try:
            deleted, _ = self.for_owner(owner).delete()
        except DatabaseError as e:
            logger.error(f"Failed to delete translations for {owner!r}: {e}")
            raise StoreUnavailableError(str(e)) from e
        if deleted:
            logger.info(f"Deleted {deleted} translations for {owner!r}")
        return deleted

    def list_for_owner(self, owner):
        try:
            return list(self.for_owner(owner))
        except DatabaseError as e:
            logger.error(f"Failed to load translations for {owner!r}: {e}")
            raise StoreUnavailableError(str(e)) from e


class TranslatableQuerySet(models.QuerySet):
    """QuerySet for models using TranslatableModel"""

    def with_translations(self):
        """Load every translation of the fetched records in one extra query."""
        return self.prefetch_related("translations")


class TranslatableManager(models.Manager.from_queryset(TranslatableQuerySet)):
    pass
