class TranslationError(Exception):
    """Base class for errors raised while storing or resolving translations."""


class NotTranslatableError(TranslationError):
    """The field is not declared in the model's translatable fields."""

    def __init__(self, model, field):
        self.model = model
        self.field = field
        model_name = getattr(getattr(model, "_meta", None), "label", model)
        super().__init__(f"Field '{field}' is not translatable on {model_name}")


class CoercionError(TranslationError, ValueError):
    """
    A value could not be converted between its textual storage form
    and the semantic type of the field it belongs to.
    """

    def __init__(self, field, locale, raw, cast, reason=None):
        self.field = field
        self.locale = locale
        self.raw = raw
        self.cast = cast
        self.reason = reason
        message = f"Cannot coerce {raw!r} as {cast} for field '{field}' (locale '{locale}')"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class StoreUnavailableError(TranslationError):
    """The translation table could not be read or written."""
