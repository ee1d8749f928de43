"""
Custom exception handlers for DRF.
"""
import logging
import traceback

from django.conf import settings
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
    PermissionDeniedError,
    ConflictError,
    InvalidOperationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = '서버 내부 오류가 발생했습니다.'


def _error_body(status_code: int, message: str, code: str, **extra) -> dict:
    body = {
        'status': status_code,
        'message': message,
        'code': code,
    }
    body.update(extra)
    return body


def _first_message(detail) -> str:
    """Extract the first human readable message from DRF error details."""
    if isinstance(detail, dict):
        for messages in detail.values():
            return _first_message(messages)
    elif isinstance(detail, list) and detail:
        return _first_message(detail[0])
    return str(detail)


def _handle_domain_exception(exc: DomainException) -> Response:
    if isinstance(exc, EntityNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
        extra = {'entity': exc.entity_name, 'entityId': str(exc.entity_id)}
    elif isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
        extra = {'field': exc.field}
    elif isinstance(exc, PermissionDeniedError):
        status_code = status.HTTP_403_FORBIDDEN
        extra = {}
    elif isinstance(exc, ConflictError):
        status_code = status.HTTP_409_CONFLICT
        extra = getattr(exc, 'extra', {})
    elif isinstance(exc, InvalidOperationError):
        status_code = status.HTTP_400_BAD_REQUEST
        extra = {'operation': exc.operation, 'state': exc.state}
    else:
        status_code = getattr(exc, 'status_code', status.HTTP_400_BAD_REQUEST)
        extra = {}

    return Response(_error_body(status_code, exc.message, exc.code, **extra), status=status_code)


def custom_exception_handler(exc, context):
    """Handle domain exceptions and normalize every error body."""
    if isinstance(exc, DomainException):
        return _handle_domain_exception(exc)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is not None:
        code = exc.get_codes() if isinstance(exc, drf_exceptions.APIException) else 'error'
        if isinstance(exc, drf_exceptions.ValidationError):
            response.data = _error_body(
                response.status_code,
                _first_message(exc.detail),
                'VALIDATION_ERROR',
                errors=exc.detail,
            )
        else:
            response.data = _error_body(
                response.status_code,
                _first_message(getattr(exc, 'detail', str(exc))),
                code if isinstance(code, str) else 'error',
            )
        return response

    view = context.get('view')
    logger.error(
        f"처리되지 않은 서버 오류 발생 ({view.__class__.__name__ if view else 'unknown'}): {str(exc)}",
        exc_info=True,
    )
    extra = {}
    if settings.DEBUG:
        extra['trace'] = traceback.format_exception(type(exc), exc, exc.__traceback__)
    return Response(
        _error_body(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            str(exc) or INTERNAL_ERROR_MESSAGE,
            'INTERNAL_SERVER_ERROR',
            **extra,
        ),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
