"""Client for the product RPC transport.

Other services use ``ProductsClient`` to call the catalog by task name
over the Celery broker, most commonly ``validate_products`` to check a
batch of product references before accepting them.  ``RpcException``
raised by the catalog is rebuilt by Celery's result backend and
re-raised here unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from celery import Celery
from django.conf import settings

from config.celery import app as celery_app
from modules.products import patterns

logger = structlog.get_logger(__name__)


class ProductsClient:
    def __init__(self, app: Optional[Celery] = None, timeout: Optional[float] = None) -> None:
        self._app = app if app is not None else celery_app
        self._timeout = timeout if timeout is not None else settings.PRODUCTS_RPC_TIMEOUT

    def send(self, pattern: str, payload: Any) -> Any:
        """Send ``payload`` to the task named ``pattern`` and wait for the reply."""
        logger.debug("rpc.send", pattern=pattern)
        result = self._app.send_task(pattern, args=[payload])
        return result.get(timeout=self._timeout)

    def create(self, name: str, price: Any) -> Dict[str, Any]:
        return self.send(patterns.CREATE_PRODUCT, {"name": name, "price": price})

    def find_all(self, page: int = 1, limit: Optional[int] = None) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"page": page}
        if limit is not None:
            payload["limit"] = limit
        return self.send(patterns.FIND_ALL_PRODUCTS, payload)

    def find_one(self, id: int) -> Dict[str, Any]:
        return self.send(patterns.FIND_ONE_PRODUCT, {"id": id})

    def update(self, id: int, **fields: Any) -> Dict[str, Any]:
        return self.send(patterns.UPDATE_PRODUCT, {"id": id, **fields})

    def remove(self, id: int) -> Dict[str, Any]:
        return self.send(patterns.DELETE_PRODUCT, {"id": id})

    def validate_products(self, ids: List[int]) -> List[Dict[str, Any]]:
        return self.send(patterns.VALIDATE_PRODUCTS, {"ids": list(ids)})
