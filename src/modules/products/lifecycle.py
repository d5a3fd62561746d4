"""Lifetime of the product service in long-running processes.

``open_product_service`` is the scoped form: it connects the repository,
yields a ``ProductService`` and releases the connection on exit.

``startup`` / ``shutdown`` keep one such scope open for the whole life of
a worker process (wired to Celery's worker signals in
``modules.products.tasks``).  The service is registered only after the
connection has been established, so a failed startup leaves nothing
reachable through ``get_service``.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from typing import Iterator, Optional

import structlog

from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.repositories.interfaces import IProductRepository
from modules.products.services import ProductService

logger = structlog.get_logger(__name__)


class ServiceNotStarted(RuntimeError):
    """``get_service`` was called before ``startup`` (or after ``shutdown``)."""


class ServiceAlreadyStarted(RuntimeError):
    """``startup`` was called twice without a ``shutdown`` in between."""


@contextmanager
def open_product_service(
    repository: Optional[IProductRepository] = None,
) -> Iterator[ProductService]:
    repository = repository or ProductDjangoRepository()
    repository.connect()
    try:
        yield ProductService(repository=repository)
    finally:
        repository.close()


_stack: Optional[ExitStack] = None
_service: Optional[ProductService] = None


def startup(repository: Optional[IProductRepository] = None) -> ProductService:
    """Connect and register the process-wide service."""
    global _stack, _service
    if _service is not None:
        raise ServiceAlreadyStarted("Product service is already running.")

    with ExitStack() as stack:
        service = stack.enter_context(open_product_service(repository))
        _stack = stack.pop_all()
    _service = service
    logger.info("products.service_started")
    return service


def shutdown() -> None:
    """Release the process-wide service. Safe to call when not started."""
    global _stack, _service
    stack, _stack, _service = _stack, None, None
    if stack is not None:
        stack.close()
        logger.info("products.service_stopped")


def get_service() -> ProductService:
    if _service is None:
        raise ServiceNotStarted("Product service has not been started.")
    return _service
