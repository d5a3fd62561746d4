"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.  Both transport
adapters (HTTP views and RPC tasks) call into this one class.

Business rules enforced here:
- Reads, lists and updates only ever target active (non-deleted) products.
- update / remove look the product up first; a missing product fails
  before any write is attempted.
- Removal is a soft delete; there is no hard delete and no restore.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog
from django.db import transaction

from modules.core.pagination import Page, PaginationDTO
from modules.products.exceptions import InvalidProductIds, ProductNotFound
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    @property
    def repository(self) -> IProductRepository:
        return self._repo

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, dto: CreateProductDTO) -> Product:
        """Create a new, active product."""
        product = Product(name=dto.name, price=dto.price)
        product = self._repo.save(product)
        logger.info("product.created", product_id=product.id)
        return product

    @transaction.atomic
    def update(self, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an active product.

        Raises:
            ProductNotFound: if the product does not exist or is soft-deleted.
        """
        product = self._find_for_update(dto.id)
        log = logger.bind(product_id=dto.id)

        changes = dto.changes()
        for field, value in changes.items():
            setattr(product, field, value)

        product = self._repo.save(product)
        log.info("product.updated", fields=sorted(changes))
        return product

    @transaction.atomic
    def remove(self, id: int) -> Product:
        """Soft-delete an active product and return it.

        Raises:
            ProductNotFound: if the product does not exist or is already deleted.
        """
        product = self._find_for_update(id)
        product = self._repo.delete(product)
        logger.info("product.removed", product_id=id)
        return product

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_all(self, pagination: PaginationDTO) -> Page[Product]:
        """Return one page of active products plus the totals for ``meta``."""
        total = self._repo.count()
        data = self._repo.list(offset=pagination.offset, limit=pagination.limit)
        return Page(data=data, total=total, page=pagination.page, limit=pagination.limit)

    def find_one(self, id: int) -> Product:
        """Retrieve a single active product by ID.

        Raises:
            ProductNotFound: if the product does not exist or is soft-deleted.
        """
        product = self._repo.get_by_id(id)
        if not product:
            logger.warning("product.not_found", product_id=id)
            raise ProductNotFound(id)
        return product

    def validate_products(self, ids: List[int]) -> List[Product]:
        """Check that every ID references a product; return the matches.

        Duplicated IDs count once.  Soft-deleted products are *not*
        filtered out here, unlike ``find_one``.

        Raises:
            InvalidProductIds: if any ID has no matching product.
        """
        unique_ids = list(dict.fromkeys(ids))
        products = self._repo.get_many(unique_ids)
        if len(products) != len(unique_ids):
            missing = set(unique_ids) - {product.id for product in products}
            logger.warning("product.invalid_ids", missing_ids=sorted(missing))
            raise InvalidProductIds(missing)
        return sorted(products, key=lambda product: product.id)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _find_for_update(self, id: int) -> Product:
        product = self._repo.get_for_update(id)
        if not product:
            logger.warning("product.not_found", product_id=id)
            raise ProductNotFound(id)
        return product
