"""
Routing policies decide, on save, whether the translatable fields of a record
are written to the translation table for the current locale.

A policy is any callable ``policy(instance, locale) -> bool`` and is selected
with ``TRANSLATABLE["ROUTING_POLICY"]``.
"""

from .conf import get_default_locale, get_setting


def route_non_default_locale(instance, locale):
    if locale != get_default_locale():
        return True
    return bool(get_setting("CREATE_TRANSLATION_FOR_DEFAULT_LOCALE"))


def route_always(instance, locale):
    return True


def route_never(instance, locale):
    return False
