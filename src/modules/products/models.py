"""Product model.

Business rules implemented:
- ``name`` is required.
- ``price`` has at most 4 decimal places and is never negative
  (database check constraint).
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).

Input validation (blank names, price format) happens in the DTOs before
a ``Product`` is ever built.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from modules.core.models import SoftDeleteModel

PRICE_MAX_DIGITS = 14
PRICE_DECIMAL_PLACES = 4


class Product(SoftDeleteModel):
    """Product aggregate root.

    No uniqueness constraint on ``name``: two products may share it.
    Ordered by ``id`` so pagination is stable.
    """

    name = models.CharField(max_length=255)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        validators=[MinValueValidator(Decimal("0"))],
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gte=0),
                name="products_price_non_negative",
            ),
        ]

    def __str__(self) -> str:
        return f"#{self.id} - {self.name}"
