"""Product repository interface.

Extends ``IRepository[Product]`` with the connection lifecycle owned by
the service and the look-ups used by ``validate_products`` and the
locked read-then-write paths.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def connect(self) -> None:
        """Open the underlying connection. Raises if the store is unreachable."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying connection."""

    @abstractmethod
    def get_for_update(self, id: int) -> Optional["Product"]:
        """Retrieve an active product with a row-level lock (SELECT FOR UPDATE).

        Must be called inside a transaction.  Returns ``None`` if no active
        product has this ID.
        """

    @abstractmethod
    def get_many(self, ids: Iterable[int]) -> List["Product"]:
        """Retrieve every product whose ID is in ``ids``, soft-deleted ones included."""
