import json
from decimal import Decimal, InvalidOperation

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime
from django.utils.translation import gettext_lazy as _

from .cryptomanager import CryptoManager
from .exceptions import CoercionError

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


class Cast(models.TextChoices):
    STRING = "string", _("String")
    BOOLEAN = "boolean", _("Boolean")
    INTEGER = "integer", _("Integer")
    FLOAT = "float", _("Float")
    DECIMAL = "decimal", _("Decimal")
    JSON = "json", _("JSON")
    DATETIME = "datetime", _("Date and time")
    DATE = "date", _("Date")
    ENCRYPTED = "encrypted", _("Encrypted")


# Order matters: DateTimeField subclasses DateField.
FIELD_CASTS = [
    (models.BooleanField, Cast.BOOLEAN),
    (models.IntegerField, Cast.INTEGER),
    (models.FloatField, Cast.FLOAT),
    (models.DecimalField, Cast.DECIMAL),
    (models.JSONField, Cast.JSON),
    (models.DateTimeField, Cast.DATETIME),
    (models.DateField, Cast.DATE),
]


def cast_for_field(model_field):
    for field_class, cast in FIELD_CASTS:
        if isinstance(model_field, field_class):
            return cast
    return Cast.STRING


def _parse_boolean(raw):
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError("not a boolean")


def _parse_datetime(raw):
    value = parse_datetime(raw)
    if value is None:
        raise ValueError("not an ISO-8601 datetime")
    if settings.USE_TZ and timezone.is_naive(value):
        value = timezone.make_aware(value)
    return value


def _parse_date(raw):
    value = parse_date(raw)
    if value is None:
        raise ValueError("not an ISO-8601 date")
    return value


def _decimal(raw):
    try:
        return Decimal(str(raw))
    except InvalidOperation as e:
        raise ValueError("not a decimal") from e


def _decrypt(raw):
    return CryptoManager().decrypt_data(raw)


def _encrypt(value):
    return CryptoManager().encrypt_data(str(value))


def _float_to_text(value):
    return repr(float(value))


def _boolean_to_text(value):
    return "1" if _parse_boolean(value) else "0"


def _integer_to_text(value):
    if isinstance(value, (bool, str)):
        return str(int(value))
    number = int(value)
    if number != value:
        raise ValueError(f"{value!r} is not an integral value")
    return str(number)


def _datetime_to_text(value):
    if isinstance(value, str):
        value = _parse_datetime(value)
    return value.isoformat()


def _date_to_text(value):
    if isinstance(value, str):
        value = _parse_date(value)
    return value.isoformat()


READERS = {
    Cast.STRING: str,
    Cast.BOOLEAN: _parse_boolean,
    Cast.INTEGER: int,
    Cast.FLOAT: float,
    Cast.DECIMAL: _decimal,
    Cast.JSON: json.loads,
    Cast.DATETIME: _parse_datetime,
    Cast.DATE: _parse_date,
    Cast.ENCRYPTED: _decrypt,
}

WRITERS = {
    Cast.STRING: str,
    Cast.BOOLEAN: _boolean_to_text,
    Cast.INTEGER: _integer_to_text,
    Cast.FLOAT: _float_to_text,
    Cast.DECIMAL: lambda value: str(_decimal(value)),
    Cast.JSON: lambda value: json.dumps(value, cls=DjangoJSONEncoder),
    Cast.DATETIME: _datetime_to_text,
    Cast.DATE: _date_to_text,
    Cast.ENCRYPTED: _encrypt,
}


def from_storage(cast, raw, field=None, locale=None):
    """
    Convert stored translation text to the semantic type of ``cast``.

    :raises CoercionError: when ``raw`` is malformed for ``cast``
    """
    if raw is None:
        return None
    try:
        return READERS[Cast(cast)](raw)
    except (ValueError, TypeError) as e:
        raise CoercionError(field, locale, raw, cast, reason=str(e)) from e


def to_storage(cast, value, field=None, locale=None):
    """
    Convert a value of the semantic type of ``cast`` to its stored text.

    :raises CoercionError: when ``value`` cannot be represented as ``cast``
    """
    if value is None:
        return None
    try:
        return WRITERS[Cast(cast)](value)
    except (ValueError, TypeError, AttributeError) as e:
        raise CoercionError(field, locale, value, cast, reason=str(e)) from e
