from rest_framework.response import Response
from rest_framework import status
from rest_framework.views import exception_handler
from django.utils.translation import gettext_lazy as _
from translations.exceptions import CoercionError, NotTranslatableError, StoreUnavailableError
import logging
import traceback

logger = logging.getLogger(__name__)

TRANSLATION_ERROR_STATUS = [
    (NotTranslatableError, status.HTTP_400_BAD_REQUEST),
    (CoercionError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (StoreUnavailableError, status.HTTP_503_SERVICE_UNAVAILABLE),
]


def custom_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is not None:
        return response

    for error_class, error_status in TRANSLATION_ERROR_STATUS:
        if isinstance(exc, error_class):
            logger.warning(f"Translation error in API view: {exc}")
            data = {"detail": str(exc)}
            if isinstance(exc, CoercionError):
                data.update({"field": exc.field, "locale": exc.locale})
            return Response(data, status=error_status)

    logger.exception("Unhandled exception in API view", exc_info=exc)

    return Response(
        {
            "detail": _("An unhandled error has occured"),
            "traceback": "".join(traceback.format_exception(exc)),
        },
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
