"""Project-wide DRF exception handler.

DRF already renders its own ``APIException`` family (malformed JSON,
unsupported media type, method not allowed).  Anything else that escapes a
view is logged and rendered as a 500 so a failing request never takes down
more than itself.
"""

from __future__ import annotations

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from modules.core.constants import INTERNAL_SERVER_ERROR

logger = structlog.get_logger(__name__)


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    set_rollback()
    view = context.get("view")
    logger.error(
        "request.unhandled_exception",
        view=type(view).__name__ if view is not None else None,
        error=str(exc),
        exc_info=exc,
    )
    return Response(
        {"detail": INTERNAL_SERVER_ERROR.format(exc)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
