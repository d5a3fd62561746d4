"""Error taxonomy shared by every module, plus the DRF exception handler.

Domain exceptions carry a transport-neutral ``status_code`` and ``code``.
Each transport renders them in its own envelope:

- HTTP: :func:`exception_handler` turns them (and DRF's own exceptions)
  into ``{"type": ..., "errors": [{"code", "detail", "attr"}]}``.
- RPC: ``modules.core.rpc`` turns them into ``RpcException``.

Persistence errors (``django.db.DatabaseError``) are not part of the
taxonomy and propagate unmodified.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from pydantic import ValidationError as PydanticValidationError
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


class DomainError(Exception):
    """Base class for errors raised by the service layer."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid"


class NotFoundError(DomainError):
    """The requested entity does not exist or is no longer active."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"


class InvalidReferenceError(DomainError):
    """A batch of references does not fully resolve to existing entities."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_reference"


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------


def validation_details(exc: PydanticValidationError) -> list[dict[str, Any]]:
    """Flatten a pydantic error into ``{"code", "detail", "attr"}`` entries."""
    details = []
    for error in exc.errors():
        attr = ".".join(str(part) for part in error["loc"]) or None
        details.append({"code": error["type"], "detail": error["msg"], "attr": attr})
    return details


def validation_message(exc: PydanticValidationError) -> str:
    """One-line summary of a pydantic error, e.g. ``price: Input should be ...``."""
    return "; ".join(
        f"{entry['attr']}: {entry['detail']}" if entry["attr"] else entry["detail"]
        for entry in validation_details(exc)
    )


# ---------------------------------------------------------------------------
# DRF exception handler
# ---------------------------------------------------------------------------


def _error_type(status_code: int) -> str:
    if status_code == status.HTTP_400_BAD_REQUEST:
        return "validation_error"
    if status_code >= 500:
        return "server_error"
    return "client_error"


def _flatten_drf_detail(detail: Any, attr: str | None = None) -> list[dict[str, Any]]:
    if isinstance(detail, dict):
        errors = []
        for key, value in detail.items():
            name = key if attr is None else f"{attr}.{key}"
            if key == "non_field_errors":
                name = attr
            errors.extend(_flatten_drf_detail(value, name))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(_flatten_drf_detail(item, attr))
        return errors
    code = getattr(detail, "code", None) or "error"
    return [{"code": code, "detail": str(detail), "attr": attr}]


def exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Render every handled error in the standard ``{type, errors}`` envelope.

    Unhandled exceptions (``None`` from DRF) are left to Django so that
    persistence failures surface as-is.
    """
    if isinstance(exc, DomainError):
        logger.info(
            "api.domain_error",
            error=exc.__class__.__name__,
            status_code=exc.status_code,
        )
        return Response(
            {
                "type": _error_type(exc.status_code),
                "errors": [{"code": exc.code, "detail": str(exc), "attr": None}],
            },
            status=exc.status_code,
        )

    if isinstance(exc, PydanticValidationError):
        return Response(
            {"type": "validation_error", "errors": validation_details(exc)},
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, Http404):
        exc = drf_exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = drf_exceptions.PermissionDenied()

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, drf_exceptions.APIException):
        response.data = {
            "type": _error_type(response.status_code),
            "errors": _flatten_drf_detail(exc.detail),
        }
    return response
