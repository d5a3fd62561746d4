"""Unit tests for Product DRF serializers.

Covers:
- Field presence and camelCase keys.
- Serialization of active and soft-deleted products.
- Price rendered as a JSON number.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from freezegun import freeze_time

from modules.products.serializers import ProductPageSerializer, ProductSerializer

pytestmark = pytest.mark.unit


class TestProductSerializerFields:
    def test_fields(self):
        assert set(ProductSerializer().fields.keys()) == {
            "id",
            "name",
            "price",
            "createdAt",
            "updatedAt",
            "deletedAt",
        }

    def test_all_timestamps_read_only(self):
        fields = ProductSerializer().fields
        for name in ("id", "createdAt", "updatedAt", "deletedAt"):
            assert fields[name].read_only

    def test_price_minimum_comes_from_model_validator(self):
        assert ProductSerializer().fields["price"].min_value == Decimal("0")


class TestProductSerialization:
    def test_serializes_active_product(self, make_product):
        product = make_product(name="Pen", price=Decimal("1.5"))
        data = ProductSerializer(product).data

        assert data["id"] == product.id
        assert data["name"] == "Pen"
        assert data["deletedAt"] is None

    def test_price_is_a_number(self, make_product):
        product = make_product(price=Decimal("19.99"))
        data = ProductSerializer(product).data
        assert isinstance(data["price"], (float, Decimal))
        assert Decimal(str(data["price"])) == Decimal("19.99")

    def test_serializes_soft_deleted_product(self, make_product):
        product = make_product()
        with freeze_time("2024-03-01T12:00:00Z"):
            product.delete()
        data = ProductSerializer(product).data
        assert data["deletedAt"].startswith("2024-03-01T12:00:00")

    def test_timestamps_rendered(self, make_product):
        with freeze_time("2024-01-15T08:30:00Z"):
            product = make_product()
        data = ProductSerializer(product).data
        assert data["createdAt"].startswith("2024-01-15T08:30:00")
        assert data["updatedAt"].startswith("2024-01-15T08:30:00")


class TestProductPageSerializer:
    def test_fields(self):
        fields = ProductPageSerializer().fields
        assert set(fields.keys()) == {"data", "meta"}
        assert set(fields["meta"].fields.keys()) == {"total", "page", "lastPage"}
