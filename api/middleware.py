"""
Middleware for request logging.
"""
import logging
import time

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """
    Log one line per request: method, path, status, duration and user.

    Responses with status >= 400 are logged at WARNING, others at INFO.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = (time.monotonic() - started) * 1000

        # DRF authenticates inside the view; its user is stored on the response's request
        drf_request = (getattr(response, 'renderer_context', None) or {}).get('request')
        user = getattr(drf_request, 'user', None) or getattr(request, 'user', None)
        user_label = user.email if user is not None and getattr(user, 'is_authenticated', False) else 'anonymous'

        message = (
            f"{request.method} {request.get_full_path()} {response.status_code} "
            f"{duration_ms:.0f}ms user={user_label}"
        )
        if response.status_code >= 400:
            logger.warning(message)
        else:
            logger.info(message)

        return response
