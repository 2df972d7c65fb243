"""
Uniform JSON envelope for every API response.

Success: {success: true, data, message, meta: {timestamp, version}}
Error:   {success: false, error, code, message, meta, details?, stack?}
"""
from django.conf import settings
from django.utils import timezone
from rest_framework import status
from rest_framework.response import Response


class ErrorCode:
    UNAUTHORIZED = 'UNAUTHORIZED'
    FORBIDDEN = 'FORBIDDEN'
    TOKEN_EXPIRED = 'TOKEN_EXPIRED'
    INVALID_CREDENTIALS = 'INVALID_CREDENTIALS'

    VALIDATION_ERROR = 'VALIDATION_ERROR'

    RESOURCE_NOT_FOUND = 'RESOURCE_NOT_FOUND'
    RESOURCE_ALREADY_EXISTS = 'RESOURCE_ALREADY_EXISTS'
    RESOURCE_CONFLICT = 'RESOURCE_CONFLICT'

    INSUFFICIENT_PERMISSIONS = 'INSUFFICIENT_PERMISSIONS'
    TEAM_ACCESS_DENIED = 'TEAM_ACCESS_DENIED'

    RATE_LIMIT_EXCEEDED = 'RATE_LIMIT_EXCEEDED'
    INTERNAL_SERVER_ERROR = 'INTERNAL_SERVER_ERROR'
    DATABASE_ERROR = 'DATABASE_ERROR'


def build_meta(**extra):
    meta = {
        'timestamp': timezone.now().isoformat(),
        'version': getattr(settings, 'API_VERSION', 'v1'),
    }
    meta.update(extra)
    return meta


def success_body(data=None, message='Operation completed successfully', **extra):
    body = {
        'success': True,
        'data': data,
        'message': message,
        'meta': build_meta(),
    }
    body.update(extra)
    return body


def error_body(message, code=ErrorCode.INTERNAL_SERVER_ERROR, details=None, stack=None, error=None):
    body = {
        'success': False,
        'error': message if error is None else error,
        'code': code,
        'message': message,
        'meta': build_meta(),
    }
    if details is not None:
        body['details'] = details
    if stack is not None:
        body['stack'] = stack
    return body


def success_response(data=None, message='Operation completed successfully',
                     status_code=status.HTTP_200_OK, **extra):
    """
    Wrap `data` in the success envelope.

    Extra keyword arguments are added at the top level (auth responses put
    user/token/refreshToken/expiresIn there).
    """
    return Response(success_body(data, message, **extra), status=status_code)


def error_response(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                   code=ErrorCode.INTERNAL_SERVER_ERROR, details=None, stack=None, error=None):
    """
    Wrap `message` in the error envelope.

    `error` defaults to `message`; handlers that catch an exception pass
    its text there and keep a fixed `message`.
    """
    return Response(
        error_body(message, code=code, details=details, stack=stack, error=error),
        status=status_code,
    )
