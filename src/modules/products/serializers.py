"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and renders
the wire shape with camelCase keys.  Input validation lives in the
Pydantic DTOs from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource."""

    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)
    deletedAt = serializers.DateTimeField(source="deleted_at", read_only=True)

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "price",
            "createdAt",
            "updatedAt",
            "deletedAt",
        ]
        read_only_fields = ["id"]


class PageMetaSerializer(serializers.Serializer):
    total = serializers.IntegerField()
    page = serializers.IntegerField()
    lastPage = serializers.IntegerField()


class ProductPageSerializer(serializers.Serializer):
    """Schema of the paginated list response (``{data, meta}``)."""

    data = ProductSerializer(many=True)
    meta = PageMetaSerializer()
