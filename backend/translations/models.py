from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType
from django.db import models
from django.utils.translation import gettext_lazy as _

from .managers import TranslationManager


class Translation(models.Model):
    """
    One localized value: the text of ``field`` in ``locale`` for the
    record identified by ``content_type`` and ``object_id``.
    """

    content_type = models.ForeignKey(
        ContentType, on_delete=models.CASCADE, verbose_name=_("owner type")
    )
    object_id = models.PositiveBigIntegerField(_("owner id"))
    owner = GenericForeignKey("content_type", "object_id")

    field = models.CharField(_("field"), max_length=255)
    locale = models.CharField(_("locale"), max_length=15)
    value = models.TextField(_("value"), null=True, blank=True)

    created_at = models.DateTimeField(_("created at"), auto_now_add=True)
    updated_at = models.DateTimeField(_("updated at"), auto_now=True)

    objects = TranslationManager()

    class Meta:
        verbose_name = _("translation")
        verbose_name_plural = _("translations")
        ordering = ["content_type", "object_id", "field", "locale"]
        indexes = [
            models.Index(fields=["content_type", "object_id"], name="translation_owner_idx"),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=["content_type", "object_id", "field", "locale"],
                name="unique_translation_per_owner_field_locale",
            ),
        ]

    def __str__(self):
        return f"{self.content_type.model}#{self.object_id}.{self.field}/{self.locale}"
