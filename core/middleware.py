# core/middleware.py
"""
API MIDDLEWARE - security headers, JSON error fallback, request logging
NO model imports, WELL LOGGED
"""
import logging

from django.conf import settings
from django.http import JsonResponse

from .exceptions import SchoolManagementException

logger = logging.getLogger(__name__)


# ============ SECURITY HEADERS MIDDLEWARE ============

class SecurityHeadersMiddleware:
    """Adds baseline security headers to every response."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        if response is None:
            return response

        response["X-Content-Type-Options"] = "nosniff"
        response["X-Frame-Options"] = "DENY"
        response["Referrer-Policy"] = "strict-origin-when-cross-origin"
        # Token-bearing JSON must never be cached by intermediaries
        response.setdefault("Cache-Control", "no-store")

        return response


# ============ EXCEPTION HANDLING MIDDLEWARE ============

class ExceptionHandlingMiddleware:
    """
    Last-resort JSON errors for exceptions that escape outside DRF views.
    DRF views are covered by core.handlers.api_exception_handler.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        # Business logic error
        if isinstance(exception, SchoolManagementException):
            logger.warning(f"Business exception: {exception}")
            message = exception.message if exception.user_friendly else "Operation failed"
            return JsonResponse({'error': message}, status=exception.status_code)

        # System error
        logger.error(f"System exception on {request.path}: {exception}", exc_info=True)
        return JsonResponse({'error': 'Internal server error'}, status=500)


# ============ REQUEST LOGGING MIDDLEWARE ============

class RequestLoggingMiddleware:
    """Debug-level structured request/response logging."""

    SKIP_PATHS = ('/static/', '/favicon.ico', '/health/')

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        if not settings.DEBUG or self._should_skip_logging(request):
            return self.get_response(request)

        logger.debug("Request", extra={
            "method": request.method,
            "path": request.path,
            "ip": self._get_client_ip(request),
        })

        response = self.get_response(request)

        logger.debug("Response", extra={
            "method": request.method,
            "path": request.path,
            "status": getattr(response, 'status_code', None),
        })

        return response

    def _should_skip_logging(self, request) -> bool:
        return any(request.path.startswith(path) for path in self.SKIP_PATHS)

    def _get_client_ip(self, request) -> str:
        xff = request.META.get("HTTP_X_FORWARDED_FOR")
        return xff.split(",")[0].strip() if xff else request.META.get("REMOTE_ADDR", "unknown")
