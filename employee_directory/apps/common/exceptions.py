"""
Error handling shared by all API endpoints.

``api_exception_handler`` is registered as DRF's ``EXCEPTION_HANDLER`` and
turns every exception raised by a view into the same JSON body::

    {"timestamp": ..., "message": ..., "path": ..., "errorCode": ...}

Domain lookups that match nothing raise a ``ResourceNotFound`` subclass and
become 404s.  Errors DRF already knows about (validation, parse errors,
unsupported methods) keep their status code.  Anything else is a 500 with the
exception message; the traceback only goes to the log.

``page_not_found`` and ``server_error`` are the project's ``handler404`` and
``handler500``.  They give unmatched API paths and errors raised outside DRF
the same body; other paths keep Django's default pages.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from http import HTTPStatus

from django.http import JsonResponse
from django.utils import timezone
from django.views import defaults
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from employee_directory.apps.common.api.serializers import ExceptionDetailsSerializer

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR = 'INTERNAL_SERVER_ERROR'
VALIDATION_ERROR = 'VALIDATION_ERROR'
API_PREFIX = '/api/'


class ResourceNotFound(Exception):
    """Base class for domain lookups that matched nothing."""
    error_code = 'NOT_FOUND'


@dataclass
class ExceptionDetails:
    timestamp: datetime
    message: str
    path: str
    error_code: str


def api_exception_handler(exc, context):
    request = context.get('request')
    path = request.path if request is not None else ''

    if isinstance(exc, ResourceNotFound):
        logger.info("%s [%s]", exc, path)
        return _error_response(str(exc), path, exc.error_code, status.HTTP_404_NOT_FOUND)

    response = exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, ValidationError):
            error_code = VALIDATION_ERROR
        else:
            error_code = HTTPStatus(response.status_code).name
        logger.info("Request to %s rejected with %s: %s", path, response.status_code, response.data)
        response.data = _details(_flatten(response.data), path, error_code)
        return response

    method = request.method if request is not None else ''
    logger.exception("Unhandled error while processing %s %s", method, path, exc_info=exc)
    set_rollback()
    return _error_response(
        str(exc) or exc.__class__.__name__,
        path,
        INTERNAL_SERVER_ERROR,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def _error_response(message, path, error_code, status_code) -> Response:
    return Response(_details(message, path, error_code), status=status_code)


def _details(message, path, error_code):
    details = ExceptionDetails(
        timestamp=timezone.localtime(),
        message=message,
        path=path,
        error_code=error_code,
    )
    return ExceptionDetailsSerializer(details).data


def _flatten(data) -> str:
    """Collapse DRF error data (dicts and lists of ErrorDetail) into one line."""
    if isinstance(data, dict):
        if list(data) == ['detail']:
            return _flatten(data['detail'])
        return '; '.join(f"{field}: {_flatten(errors)}" for field, errors in data.items())
    if isinstance(data, (list, tuple)):
        return ' '.join(_flatten(item) for item in data)
    return str(data)


def page_not_found(request, exception):
    if not request.path.startswith(API_PREFIX):
        return defaults.page_not_found(request, exception)

    logger.info("No route matches %s %s", request.method, request.path)
    details = _details(
        f"No endpoint matches {request.method} {request.path}",
        request.path,
        HTTPStatus.NOT_FOUND.name,
    )
    return JsonResponse(details, status=status.HTTP_404_NOT_FOUND)


def server_error(request):
    if not request.path.startswith(API_PREFIX):
        return defaults.server_error(request)

    details = _details(
        HTTPStatus.INTERNAL_SERVER_ERROR.phrase,
        request.path,
        INTERNAL_SERVER_ERROR,
    )
    return JsonResponse(details, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
