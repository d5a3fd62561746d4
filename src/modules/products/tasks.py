"""Celery tasks exposing the product catalog as an RPC transport.

Each task is one message pattern; its name is what other services pass
to ``send_task`` (see ``modules.products.client``).  The worker process
owns one ``ProductService`` for its whole life: it is started on
``worker_process_init`` and released on ``worker_process_shutdown``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from celery import shared_task
from celery.signals import worker_process_init, worker_process_shutdown

from modules.products import lifecycle
from modules.products.patterns import (
    CREATE_PRODUCT,
    DELETE_PRODUCT,
    FIND_ALL_PRODUCTS,
    FIND_ONE_PRODUCT,
    UPDATE_PRODUCT,
    VALIDATE_PRODUCTS,
)
from modules.products.rpc import ProductRpcController

logger = structlog.get_logger(__name__)


@worker_process_init.connect
def _start_product_service(**kwargs) -> None:
    lifecycle.startup()


@worker_process_shutdown.connect
def _stop_product_service(**kwargs) -> None:
    lifecycle.shutdown()


def _controller(task_id: Optional[str], pattern: str) -> ProductRpcController:
    structlog.contextvars.bind_contextvars(task_id=task_id, pattern=pattern)
    logger.info("rpc.message_received")
    return ProductRpcController(lifecycle.get_service())


@shared_task(name=CREATE_PRODUCT, bind=True)
def create_product(self, payload: Dict[str, Any]) -> Dict[str, Any]:
    return _controller(self.request.id, CREATE_PRODUCT).create(payload)


@shared_task(name=FIND_ALL_PRODUCTS, bind=True)
def find_all_products(self, payload: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return _controller(self.request.id, FIND_ALL_PRODUCTS).find_all(payload)


@shared_task(name=FIND_ONE_PRODUCT, bind=True)
def find_one_product(self, payload: Dict[str, Any]) -> Dict[str, Any]:
    return _controller(self.request.id, FIND_ONE_PRODUCT).find_one(payload)


@shared_task(name=UPDATE_PRODUCT, bind=True)
def update_product(self, payload: Dict[str, Any]) -> Dict[str, Any]:
    return _controller(self.request.id, UPDATE_PRODUCT).update(payload)


@shared_task(name=DELETE_PRODUCT, bind=True)
def delete_product(self, payload: Dict[str, Any]) -> Dict[str, Any]:
    return _controller(self.request.id, DELETE_PRODUCT).remove(payload)


@shared_task(name=VALIDATE_PRODUCTS, bind=True)
def validate_products(self, payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    return _controller(self.request.id, VALIDATE_PRODUCTS).validate_products(payload)
