"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising; the Service Layer decides how to translate a missing
entity into a domain error.  Database errors propagate unmodified.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import structlog
from django.db import DEFAULT_DB_ALIAS, connections

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def __init__(self, using: str = DEFAULT_DB_ALIAS) -> None:
        self._using = using

    @property
    def _objects(self):
        return Product.objects.db_manager(self._using)

    # ------------------------------------------------------------------
    # Connection lifecycle
    # ------------------------------------------------------------------

    def connect(self) -> None:
        connection = connections[self._using]
        connection.ensure_connection()
        logger.info(
            "products.database_connected",
            alias=self._using,
            vendor=connection.vendor,
        )

    def close(self) -> None:
        connections[self._using].close()
        logger.info("products.database_closed", alias=self._using)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve an active product by primary key."""
        return self._objects.alive().filter(id=id).first()

    def get_for_update(self, id: int) -> Optional[Product]:
        return self._objects.alive().select_for_update().filter(id=id).first()

    def list(self, offset: int = 0, limit: Optional[int] = None) -> List[Product]:
        """List active products in default ordering (by ``id``)."""
        queryset = self._objects.alive()
        if limit is None:
            return list(queryset[offset:])
        return list(queryset[offset : offset + limit])

    def count(self) -> int:
        return self._objects.alive().count()

    def get_many(self, ids: Iterable[int]) -> List[Product]:
        return list(self._objects.filter(id__in=list(ids)))

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save(using=self._using)
        return entity

    def delete(self, entity: Product) -> Product:
        """Soft-delete a product, returning it with ``deleted_at`` set."""
        entity.delete(using=self._using)
        logger.info("product.soft_deleted", product_id=entity.id)
        return entity
