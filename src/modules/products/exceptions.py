"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The transport adapters translate them into their own error envelope
(HTTP response or ``RpcException``) using ``status_code``.
"""

from __future__ import annotations

from typing import Iterable

from modules.core.exceptions import InvalidReferenceError, NotFoundError


class ProductNotFound(NotFoundError):
    """The requested product does not exist or has been soft-deleted."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class InvalidProductIds(InvalidReferenceError):
    """Some of the referenced product IDs do not resolve to a product."""

    def __init__(self, missing_ids: Iterable[int]) -> None:
        super().__init__("Invalid product IDs")
        self.missing_ids = sorted(missing_ids)
