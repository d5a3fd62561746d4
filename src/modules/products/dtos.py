"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the transport adapters (DRF views and
Celery RPC tasks) and the Service layer.  DTOs are immutable
(``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for partial product updates.
- ``ProductIdDTO``: input for single-product look-ups and removal.
- ``ValidateProductsDTO``: input for the batch reference check.
- ``ProductOutputDTO``: output with all product fields (camelCase on the wire).
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Dict, List, Optional

from pydantic import (
    AliasGenerator,
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel

from modules.products.models import PRICE_DECIMAL_PLACES, PRICE_MAX_DIGITS, Product


Price = Annotated[
    Decimal,
    Field(ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=PRICE_DECIMAL_PLACES),
]

# Range of the BigAutoField primary key.
MAX_PRODUCT_ID = 2**63 - 1

ProductId = Annotated[int, Field(gt=0, le=MAX_PRODUCT_ID)]

# Anything the id column can hold; values with no matching row are reported
# as missing, not rejected.
ProductIdReference = Annotated[int, Field(ge=-MAX_PRODUCT_ID - 1, le=MAX_PRODUCT_ID)]


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is a non-blank string (other types are not coerced).
    - ``price`` is coerced from string/number to ``Decimal``, has at most
      4 decimal places and is not negative.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    price: Price

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Name must not be empty.")
        return v


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    ``id`` selects the product; every other field is optional and only
    supplied (non-null) fields are applied.
    """

    model_config = ConfigDict(frozen=True)

    id: ProductId
    name: Optional[str] = None
    price: Optional[Price] = None

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("Name must not be empty.")
        return v

    def changes(self) -> Dict[str, Any]:
        """Fields to apply, ``id`` excluded."""
        return self.model_dump(exclude={"id"}, exclude_none=True)


class ProductIdDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: ProductId


class ValidateProductsDTO(BaseModel):
    model_config = ConfigDict(frozen=True)

    ids: List[ProductIdReference]


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product responses on the RPC transport."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id: int
    name: str
    price: Decimal
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    @field_serializer("price")
    def price_as_number(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            created_at=product.created_at,
            updated_at=product.updated_at,
            deleted_at=product.deleted_at,
        )

    def to_wire(self) -> Dict[str, Any]:
        """JSON-safe dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
