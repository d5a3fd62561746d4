"""RPC error envelope.

``RpcException`` is what crosses process boundaries on the Celery
transport.  Its constructor arguments are exactly ``(message, status)`` so
Celery's JSON result backend can rebuild it on the calling side.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

import structlog
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status as http_status

from modules.core.exceptions import DomainError, validation_message

logger = structlog.get_logger(__name__)


class RpcException(Exception):
    """Structured RPC error: ``{"message": ..., "status": ...}``."""

    def __init__(self, message: str, status: int = http_status.HTTP_400_BAD_REQUEST) -> None:
        super().__init__(message, status)
        self.message = message
        self.status = status

    @property
    def error(self) -> dict[str, Any]:
        return {"message": self.message, "status": self.status}

    def __str__(self) -> str:
        return self.message


@contextmanager
def rpc_errors(pattern: str) -> Iterator[None]:
    """Translate domain and validation errors raised inside the block.

    Anything outside the taxonomy (persistence errors included) propagates
    unmodified.
    """
    try:
        yield
    except DomainError as exc:
        logger.info("rpc.domain_error", pattern=pattern, error=exc.__class__.__name__)
        raise RpcException(str(exc), exc.status_code) from exc
    except PydanticValidationError as exc:
        logger.info("rpc.validation_error", pattern=pattern)
        raise RpcException(
            validation_message(exc), http_status.HTTP_400_BAD_REQUEST
        ) from exc
