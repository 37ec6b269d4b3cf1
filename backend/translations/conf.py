from django.conf import settings
from django.utils import translation
from django.utils.module_loading import import_string

DEFAULTS = {
    "CREATE_TRANSLATION_FOR_DEFAULT_LOCALE": False,
    "DEFAULT_LOCALE_KEY": "LANGUAGE_CODE",
    "ROUTING_POLICY": "translations.policies.route_non_default_locale",
    "ENCRYPTION_KEY": None,
}


def get_setting(name):
    """
    Read an option from the ``TRANSLATABLE`` settings dict.

    :param name: Option name, one of ``DEFAULTS``
    :return: Configured value or its default
    """
    options = getattr(settings, "TRANSLATABLE", {})
    return options.get(name, DEFAULTS[name])


def get_default_locale():
    """Locale whose values live on the base record."""
    return getattr(settings, get_setting("DEFAULT_LOCALE_KEY"), None) or settings.LANGUAGE_CODE


def get_current_locale():
    return translation.get_language() or get_default_locale()


def get_routing_policy():
    policy = get_setting("ROUTING_POLICY")
    if callable(policy):
        return policy
    return import_string(policy)
