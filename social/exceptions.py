"""Error taxonomy surfaced by services and the API exception handler."""

import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, PermissionDenied, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

__all__ = [
    "InvalidIdentifier",
    "NotFound",
    "PermissionDenied",
    "StoreError",
    "ValidationError",
    "api_exception_handler",
]


class InvalidIdentifier(ValidationError):
    """A missing, non-integer or non-positive identifier."""
    default_detail = "Identifier must be a positive integer."
    default_code = "invalid_identifier"


class StoreError(APIException):
    """The persistence layer failed; not retried."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "The data store could not complete the request."
    default_code = "store_error"


def api_exception_handler(exc, context):
    """
    Thin wrapper around DRF's default handler:
    - database failures become StoreError (500)
    - payloads are normalized to {"message": "...", "error": ...}
    """
    if isinstance(exc, DatabaseError):
        logger.error("Store failure in %s: %s", _view_name(context), exc)
        exc = StoreError()

    resp = drf_exception_handler(exc, context)
    if resp is None:
        return None

    data = resp.data
    message = None
    if isinstance(data, dict):
        message = data.get("detail") or data.get("message")
    elif isinstance(data, list) and data:
        message = data[0]

    return Response(
        {"message": message or "Request failed.", "error": data},
        status=resp.status_code,
    )


def _view_name(context):
    view = (context or {}).get("view")
    return type(view).__name__ if view is not None else "unknown view"
