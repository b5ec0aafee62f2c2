# core/handlers.py
"""
DRF exception handler.

Every API error body has the shape {"error": "<message>"}:
- SchoolManagementException -> its status_code; message only if user_friendly
- DRF APIException (auth, permission, parse, 404, 405) -> its status code
- anything else -> None, so DRF re-raises and the middleware answers 500
"""
import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from .exceptions import SchoolManagementException

logger = logging.getLogger(__name__)

GENERIC_ERROR = "Operation failed"


def _flatten_detail(detail):
    """First readable message from a DRF error detail."""
    if isinstance(detail, (list, tuple)):
        return _flatten_detail(detail[0]) if detail else GENERIC_ERROR
    if isinstance(detail, dict):
        for value in detail.values():
            return _flatten_detail(value)
        return GENERIC_ERROR
    return str(detail)


def error_response(exc: SchoolManagementException, fallback_message=GENERIC_ERROR) -> Response:
    """Response for a domain exception, hiding internal messages."""
    message = exc.message if exc.user_friendly else fallback_message
    return Response({'error': message}, status=exc.status_code)


def api_exception_handler(exc, context):
    if isinstance(exc, SchoolManagementException):
        view = context.get('view')
        fallback = getattr(view, 'error_message', GENERIC_ERROR)
        if exc.status_code >= 500:
            logger.error(f"{type(exc).__name__}: {exc.message}", exc_info=exc)
        else:
            logger.info(f"{type(exc).__name__}: {exc.message}")
        return error_response(exc, fallback)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        message = "Unauthorized"
    elif response.status_code == status.HTTP_403_FORBIDDEN:
        message = "Insufficient permissions"
    else:
        message = _flatten_detail(getattr(exc, 'detail', GENERIC_ERROR))

    response.data = {'error': message}
    return response
