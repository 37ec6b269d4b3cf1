import logging

from rest_framework import serializers

from .conf import get_current_locale
from .exceptions import CoercionError
from .models import Translation

logger = logging.getLogger(__name__)


class TranslationSerializer(serializers.ModelSerializer):
    owner_type = serializers.CharField(source="content_type.model", read_only=True)

    class Meta:
        model = Translation
        fields = ["id", "owner_type", "object_id", "field", "locale", "value", "created_at", "updated_at"]
        read_only_fields = fields


class TranslatableModelSerializer(serializers.ModelSerializer):
    """
    ModelSerializer rendering translatable fields in the requested locale.

    The locale is taken from ``context["locale"]``, then from the request
    language, then from the active language. A field whose stored value
    cannot be coerced is rendered as None and reported in
    ``translation_errors`` keyed by instance pk. With ``many=True`` the
    list serializer exposes the same ``translation_errors`` dict.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.translation_errors = {}

    @classmethod
    def many_init(cls, *args, **kwargs):
        list_serializer = super().many_init(*args, **kwargs)
        list_serializer.translation_errors = list_serializer.child.translation_errors
        return list_serializer

    def get_locale(self):
        if self.context.get("locale"):
            return self.context["locale"]
        request = self.context.get("request")
        if request is not None and getattr(request, "LANGUAGE_CODE", None):
            return request.LANGUAGE_CODE
        return get_current_locale()

    def to_representation(self, instance):
        data = super().to_representation(instance)
        locale = self.get_locale()
        translatable = instance.get_translatable_fields()

        for field_name, field in self.fields.items():
            if field.write_only or field.source not in translatable:
                continue
            try:
                value = instance.get_translation(field.source, locale)
            except CoercionError as e:
                logger.warning(f"Rendering {field_name} of {instance!r} as None: {e}")
                self.translation_errors.setdefault(instance.pk, {})[field_name] = str(e)
                data[field_name] = None
                continue
            data[field_name] = None if value is None else field.to_representation(value)
        return data
