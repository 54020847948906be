"""Product DRF serializers for API output.

The serializer operates at the Interface layer (API Views) and only
renders products; input goes through the Pydantic DTOs in ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource (camelCase stock field)."""

    stockAvailable = serializers.IntegerField(source="stock_available")

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "stockAvailable",
        ]
        read_only_fields = ["id"]
