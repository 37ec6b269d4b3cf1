import copy
import logging

from django.contrib.contenttypes.fields import GenericRelation
from django.core import checks
from django.core.exceptions import FieldDoesNotExist
from django.db import models, transaction

from . import casts
from .conf import get_current_locale, get_default_locale, get_routing_policy
from .exceptions import CoercionError, NotTranslatableError
from .managers import TranslatableManager
from .models import Translation

logger = logging.getLogger(__name__)

EMPTY_VALUES = (None, "")


class Localized:
    """
    Read-through view of a translatable record in one locale.

    Translatable field names resolve through ``get_translation``; any other
    attribute is read from the record unchanged. When ``locale`` is None the
    current locale is used at access time.

    Usage:
        post.localized("es").title
        post.localized().get("title")
    """

    def __init__(self, instance, locale=None):
        self._instance = instance
        self._locale = locale

    def __getattr__(self, name):
        instance = self._instance
        if name in instance.get_translatable_fields():
            return instance.get_translation(name, self._locale)
        return getattr(instance, name)

    def get(self, field):
        return self._instance.get_translation(field, self._locale)

    def set(self, field, value):
        locale = self._locale or get_current_locale()
        return self._instance.set_translation(field, locale, value)

    def __repr__(self):
        return f"<Localized {self._instance!r} locale={self._locale or get_current_locale()}>"


class TranslatableModel(models.Model):
    """
    Abstract model storing per-locale values of chosen fields in the
    Translation table.

    Usage:
        class Post(TranslatableModel):
            title = models.CharField(max_length=200)
            notes = models.TextField(blank=True)

            class Translatable:
                fields = ["title", "notes"]
                casts = {"notes": "encrypted"}

    Requirements:
        - Translatable fields must be concrete, non relational fields
        - ``casts`` is optional, missing entries are inferred from the field type
    """

    translations = GenericRelation(Translation)

    objects = TranslatableManager()

    class Meta:
        abstract = True

    class Translatable:
        fields = []
        casts = {}

    @classmethod
    def from_db(cls, db, field_names, values):
        instance = super().from_db(db, field_names, values)
        instance._snapshot_base_values()
        return instance

    def refresh_from_db(self, using=None, fields=None, **kwargs):
        super().refresh_from_db(using=using, fields=fields, **kwargs)
        if fields is None:
            self.__dict__.pop("_translation_cache", None)
            self._snapshot_base_values()
            return
        # Deferred field loads only add the loaded base values.
        base_values = self.__dict__.setdefault("_base_values", {})
        translatable = self.get_translatable_fields()
        for field in fields:
            if field in translatable and field in self.__dict__:
                base_values[field] = copy.deepcopy(self.__dict__[field])

    # Declaration

    @classmethod
    def get_translatable_fields(cls):
        return list(cls.Translatable.fields)

    @classmethod
    def get_translation_cast(cls, field):
        declared = getattr(cls.Translatable, "casts", {})
        if field in declared:
            return casts.Cast(declared[field])
        return casts.cast_for_field(cls._meta.get_field(field))

    def _check_translatable(self, field):
        if field not in self.get_translatable_fields():
            raise NotTranslatableError(type(self), field)

    # Read path

    def get_translation(self, field, locale=None):
        """
        Get the value of ``field`` in ``locale``.

        Falls back to the base attribute when no translation is stored.

        :param field: Translatable field name
        :param locale: Locale, defaults to the current locale
        :return: Value coerced to the field's type
        """
        self._check_translatable(field)
        locale = locale or get_current_locale()
        translation = self._find_translation(field, locale)
        if translation is None:
            return getattr(self, field)
        return casts.from_storage(
            self.get_translation_cast(field), translation.value, field=field, locale=locale
        )

    def _find_translation(self, field, locale):
        if self.pk is None:
            return None
        loaded = self._loaded_translations()
        if loaded is not None:
            return loaded.get((field, locale))
        return Translation.objects.find(self, field, locale)

    def _loaded_translations(self):
        cache = self.__dict__.get("_translation_cache")
        if cache is None:
            prefetched = getattr(self, "_prefetched_objects_cache", {}).get("translations")
            if prefetched is None:
                return None
            cache = {(t.field, t.locale): t for t in prefetched}
            self._translation_cache = cache
        return cache

    def load_translations(self):
        """Fetch every stored translation of this record in one query."""
        translations = Translation.objects.list_for_owner(self)
        self._translation_cache = {(t.field, t.locale): t for t in translations}
        return translations

    def localized(self, locale=None):
        return Localized(self, locale)

    def resolve_translations(self, locale=None):
        """
        Resolve every translatable field in ``locale``.

        A field whose stored value cannot be coerced is reported in ``errors``
        and left out of ``values``; the other fields still resolve.

        :return: (values, errors) dicts keyed by field name
        """
        locale = locale or get_current_locale()
        values, errors = {}, {}
        for field in self.get_translatable_fields():
            try:
                values[field] = self.get_translation(field, locale)
            except CoercionError as e:
                logger.warning(f"Could not resolve {field} for {self!r} in {locale}: {e}")
                errors[field] = str(e)
        return values, errors

    # Write path

    def set_translation(self, field, locale, value):
        """
        Store ``value`` as the translation of ``field`` in ``locale``.

        :return: The stored Translation instance
        """
        self._check_translatable(field)
        if self.pk is None:
            raise ValueError(
                f"{self._meta.object_name} must be saved before translations can be stored"
            )
        stored = casts.to_storage(
            self.get_translation_cast(field), value, field=field, locale=locale
        )
        translation = Translation.objects.upsert(self, field, locale, stored)
        loaded = self._loaded_translations()
        if loaded is not None:
            loaded[(field, locale)] = translation
        return translation

    def save(self, *args, **kwargs):
        locale = get_current_locale()
        if not get_routing_policy()(self, locale):
            super().save(*args, **kwargs)
            self._snapshot_base_values()
            return

        write_base = self._state.adding or locale == get_default_locale()
        pending = self._pending_translations(kwargs.get("update_fields"), only_changed=not write_base)
        logger.debug(
            f"Routing {sorted(pending)} of {self._meta.label} to translations ({locale})"
        )

        with transaction.atomic(using=kwargs.get("using")):
            if write_base:
                super().save(*args, **kwargs)
            else:
                kwargs["update_fields"] = self._base_update_fields(kwargs.get("update_fields"))
                super().save(*args, **kwargs)
            for field, value in pending.items():
                self.set_translation(field, locale, value)

        if not write_base:
            # Storage still holds the base values of translatable fields.
            base_values = self.__dict__.get("_base_values", {})
            for field in self.get_translatable_fields():
                if field in base_values:
                    setattr(self, field, copy.deepcopy(base_values[field]))
        self._snapshot_base_values()

    save.alters_data = True

    def delete(self, *args, **kwargs):
        with transaction.atomic(using=kwargs.get("using")):
            Translation.objects.delete_all_for_owner(self)
            return super().delete(*args, **kwargs)

    delete.alters_data = True

    def _pending_translations(self, update_fields=None, only_changed=False):
        base_values = self.__dict__.get("_base_values", {})
        deferred = self.get_deferred_fields()
        pending = {}
        for field in self.get_translatable_fields():
            if update_fields is not None and field not in update_fields:
                continue
            if field in deferred and update_fields is None:
                continue
            value = getattr(self, field)
            if value in EMPTY_VALUES:
                continue
            if only_changed and field in base_values and base_values[field] == value:
                continue
            pending[field] = value
        return pending

    def _base_update_fields(self, update_fields=None):
        translatable = set(self.get_translatable_fields())
        names = [
            f.name for f in self._meta.concrete_fields
            if not f.primary_key and f.name not in translatable
        ]
        if update_fields is not None:
            names = [name for name in names if name in update_fields]
        return names

    def _snapshot_base_values(self):
        self._base_values = {
            field: copy.deepcopy(self.__dict__[field])
            for field in self.get_translatable_fields()
            if field in self.__dict__
        }

    # System checks

    @classmethod
    def check(cls, **kwargs):
        errors = super().check(**kwargs)
        if not cls._meta.abstract:
            errors.extend(cls._check_translatable_fields())
        return errors

    @classmethod
    def _check_translatable_fields(cls):
        errors = []
        declared_casts = getattr(cls.Translatable, "casts", {})
        for name in cls.get_translatable_fields():
            try:
                field = cls._meta.get_field(name)
            except FieldDoesNotExist:
                errors.append(
                    checks.Error(
                        f"Translatable field '{name}' does not exist.",
                        obj=cls,
                        id="translations.E001",
                    )
                )
                continue
            if field.is_relation or not field.concrete:
                errors.append(
                    checks.Error(
                        f"Translatable field '{name}' must be a concrete, non relational field.",
                        obj=cls,
                        id="translations.E002",
                    )
                )
        for name, cast in declared_casts.items():
            if name not in cls.get_translatable_fields():
                errors.append(
                    checks.Error(
                        f"Cast declared for '{name}' which is not translatable.",
                        obj=cls,
                        id="translations.E003",
                    )
                )
            if cast not in casts.Cast.values:
                errors.append(
                    checks.Error(
                        f"Unknown cast '{cast}' for '{name}'.",
                        hint=f"Use one of: {', '.join(casts.Cast.values)}.",
                        obj=cls,
                        id="translations.E004",
                    )
                )
        return errors
