"""Map domain errors to HTTP responses.

Installed as REST_FRAMEWORK["EXCEPTION_HANDLER"]. Response bodies carry the
error code and the user-safe message only, never internal details.
"""

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from sportsevents.domain.errors import (
    AuthError,
    DomainError,
    ErrorCode,
    NotFoundError,
    StoreError,
    ValidationError,
)

_STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthError, status.HTTP_401_UNAUTHORIZED),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (StoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def _body(code: str, message: str, fields=None) -> dict:
    error = {"code": code, "message": message}
    if fields:
        error["fields"] = fields
    return {"error": error}


def wire_field_name(name: str) -> str:
    """Spell a domain field name the way request bodies do (``team_name`` -> ``teamName``)."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def domain_error_response(error: DomainError) -> Response:
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            break
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    fields = None
    if isinstance(error, ValidationError):
        fields = {wire_field_name(name): reason for name, reason in error.fields.items()}
    return Response(_body(error.code.value, error.message, fields), status=status_code)


def exception_handler(exc, context):
    if isinstance(exc, DomainError):
        return domain_error_response(exc)

    response = drf_exception_handler(exc, context)
    if response is None:
        return None
    if isinstance(exc, exceptions.ValidationError):
        response.data = _body(
            ErrorCode.VALIDATION_FAILED.value, "Invalid input", exc.detail
        )
    else:
        response.data = _body(
            getattr(exc, "default_code", "error").upper(), str(getattr(exc, "detail", exc))
        )
    return response
