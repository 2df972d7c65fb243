"""
Error taxonomy and the DRF exception handler producing the error envelope.

Every exception raised inside a DRF view ends up here. Known exceptions
map to their HTTP status and error code; anything else becomes a 500 and
is logged with its traceback.
"""
import logging
import traceback

from django.conf import settings
from django.core.exceptions import (
    PermissionDenied as DjangoPermissionDenied,
    ValidationError as DjangoValidationError,
)
from django.db import DatabaseError, IntegrityError
from django.http import Http404
from django_ratelimit.exceptions import Ratelimited
from rest_framework import exceptions, status

from .responses import ErrorCode, error_response

logger = logging.getLogger(__name__)


class Unauthorized(exceptions.AuthenticationFailed):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Unauthorized access'
    error_code = ErrorCode.UNAUTHORIZED


class InvalidCredentials(Unauthorized):
    default_detail = 'Invalid credentials'
    error_code = ErrorCode.INVALID_CREDENTIALS


class Forbidden(exceptions.PermissionDenied):
    default_detail = 'Insufficient permissions'
    error_code = ErrorCode.FORBIDDEN


class TeamAccessDenied(Forbidden):
    default_detail = 'Access to this artist is denied'
    error_code = ErrorCode.TEAM_ACCESS_DENIED


class ResourceNotFound(exceptions.NotFound):
    default_detail = 'Resource not found'
    error_code = ErrorCode.RESOURCE_NOT_FOUND


class ResourceConflict(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Resource conflict'
    default_code = 'conflict'
    error_code = ErrorCode.RESOURCE_CONFLICT


class ResourceAlreadyExists(ResourceConflict):
    default_detail = 'Resource already exists'
    error_code = ErrorCode.RESOURCE_ALREADY_EXISTS


class UnprocessableEntity(exceptions.ValidationError):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_detail = 'Validation failed'
    error_code = ErrorCode.VALIDATION_ERROR


class InternalServerError(exceptions.APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Internal server error'
    default_code = 'internal_error'
    error_code = ErrorCode.INTERNAL_SERVER_ERROR


def flatten_validation_errors(detail, prefix=''):
    """
    Turn DRF/Django validation detail into [{'field', 'message'}, ...].

    Nested serializer errors are flattened with dotted field paths;
    non-field errors use the field name 'non_field_errors'.
    """
    errors = []

    if isinstance(detail, dict):
        for field, value in detail.items():
            path = f"{prefix}.{field}" if prefix else str(field)
            errors.extend(flatten_validation_errors(value, path))
    elif isinstance(detail, (list, tuple)):
        for index, item in enumerate(detail):
            if isinstance(item, (dict, list, tuple)):
                errors.extend(flatten_validation_errors(item, f"{prefix}.{index}" if prefix else str(index)))
            else:
                errors.append({'field': prefix or 'non_field_errors', 'message': str(item)})
    else:
        errors.append({'field': prefix or 'non_field_errors', 'message': str(detail)})

    return errors


def exception_message(exc, fallback):
    detail = getattr(exc, 'detail', None)
    if isinstance(detail, str):
        return str(detail)
    if isinstance(detail, list) and len(detail) == 1 and isinstance(detail[0], str):
        return str(detail[0])
    return str(exc) or fallback


def expose_stack():
    return settings.DEBUG and not getattr(settings, 'IS_PRODUCTION', False)


def envelope_exception_handler(exc, context):
    """
    DRF EXCEPTION_HANDLER returning the error envelope.
    """
    if isinstance(exc, (exceptions.ValidationError, DjangoValidationError)):
        if isinstance(exc, DjangoValidationError):
            raw = exc.message_dict if hasattr(exc, 'error_dict') else exc.messages
        else:
            raw = exc.detail
        return error_response(
            'Validation failed',
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            code=ErrorCode.VALIDATION_ERROR,
            details=flatten_validation_errors(raw),
        )

    if isinstance(exc, (exceptions.NotAuthenticated, exceptions.AuthenticationFailed)):
        response = error_response(
            exception_message(exc, 'Unauthorized access'),
            status_code=status.HTTP_401_UNAUTHORIZED,
            code=getattr(exc, 'error_code', ErrorCode.UNAUTHORIZED),
        )
        auth_header = getattr(exc, 'auth_header', None)
        if auth_header:
            response['WWW-Authenticate'] = auth_header
        return response

    # Ratelimited subclasses Django's PermissionDenied; check it first
    if isinstance(exc, (Ratelimited, exceptions.Throttled)):
        return error_response(
            'Too many requests from this IP, please try again later.',
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            code=ErrorCode.RATE_LIMIT_EXCEEDED,
        )

    if isinstance(exc, (exceptions.PermissionDenied, DjangoPermissionDenied)):
        return error_response(
            exception_message(exc, 'Insufficient permissions') if isinstance(exc, exceptions.PermissionDenied)
            else 'Insufficient permissions',
            status_code=status.HTTP_403_FORBIDDEN,
            code=getattr(exc, 'error_code', ErrorCode.FORBIDDEN),
        )

    if isinstance(exc, (exceptions.NotFound, Http404)):
        return error_response(
            exception_message(exc, 'Resource not found') if isinstance(exc, exceptions.NotFound)
            else 'Resource not found',
            status_code=status.HTTP_404_NOT_FOUND,
            code=getattr(exc, 'error_code', ErrorCode.RESOURCE_NOT_FOUND),
        )

    if isinstance(exc, IntegrityError):
        logger.warning(f"Integrity error: {exc}")
        return error_response(
            'Resource conflict',
            status_code=status.HTTP_409_CONFLICT,
            code=ErrorCode.RESOURCE_CONFLICT,
        )

    if isinstance(exc, exceptions.APIException) and not isinstance(exc, InternalServerError):
        return error_response(
            exception_message(exc, 'Request failed'),
            status_code=exc.status_code,
            code=getattr(exc, 'error_code', str(exc.default_code).upper()),
        )

    view = context.get('view')
    logger.error(
        f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
        exc_info=(type(exc), exc, exc.__traceback__),
    )

    code = ErrorCode.DATABASE_ERROR if isinstance(exc, DatabaseError) else ErrorCode.INTERNAL_SERVER_ERROR
    message = str(exc) if expose_stack() and str(exc) else 'Internal server error'
    stack = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__)) if expose_stack() else None

    return error_response(
        message,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code=code,
        stack=stack,
    )
