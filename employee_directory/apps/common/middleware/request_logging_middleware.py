import logging
import time

logger = logging.getLogger('django.server')


class RequestLoggingMiddleware:
    """
    Logs method, path, client IP, status code and duration of every request.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        elapsed_ms = (time.monotonic() - started) * 1000

        logger.info(
            "%s %s from %s -> %s (%.1f ms)",
            request.method,
            request.path,
            self.get_client_ip(request),
            response.status_code,
            elapsed_ms,
        )
        return response

    def get_client_ip(self, request):
        """
        IP address of the client, honouring X-Forwarded-For.
        """
        x_forwarded_for = request.META.get('HTTP_X_FORWARDED_FOR')
        if x_forwarded_for:
            ip = x_forwarded_for.split(',')[0].strip()
        else:
            ip = request.META.get('REMOTE_ADDR')
        return ip
