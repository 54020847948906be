"""Unit tests for the Product model.

Covers:
- Valid creation with an explicit 6-digit id.
- full_clean field rules (name pattern/length, price, stock, id range).
- Price > 0 database constraint.
- version default, ordering and __str__.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError

from modules.products.models import Product

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_product(**overrides) -> Product:
    """Build an unsaved Product."""
    defaults = {
        "id": 123456,
        "name": "Test Product",
        "description": "Something to sell",
        "price": Decimal("29.90"),
        "stock_available": 100,
    }
    defaults.update(overrides)
    return Product(**defaults)


# ===========================================================================
# Creation
# ===========================================================================


class TestProductCreation:
    def test_create_valid_product(self):
        product = _build_product()
        product.full_clean()
        product.save(force_insert=True)
        stored = Product.objects.get(id=123456)
        assert stored.name == "Test Product"
        assert stored.price == Decimal("29.90")
        assert stored.stock_available == 100

    def test_version_defaults_to_zero(self):
        product = _build_product()
        product.save(force_insert=True)
        assert product.version == 0

    def test_description_may_be_null(self):
        product = _build_product(description=None)
        product.full_clean()
        product.save(force_insert=True)
        assert Product.objects.get(id=product.id).description is None

    def test_ordering_is_by_id(self):
        _build_product(id=300000).save(force_insert=True)
        _build_product(id=200000).save(force_insert=True)
        assert [p.id for p in Product.objects.all()] == [200000, 300000]

    def test_str(self):
        assert str(_build_product()) == "123456 - Test Product"


# ===========================================================================
# Validation
# ===========================================================================


class TestProductValidation:
    def test_name_pattern(self):
        product = _build_product(name="Bad#Name")
        with pytest.raises(ValidationError) as exc_info:
            product.full_clean()
        assert "name" in exc_info.value.message_dict

    def test_name_too_long(self):
        product = _build_product(name="a" * 101)
        with pytest.raises(ValidationError) as exc_info:
            product.full_clean()
        assert "name" in exc_info.value.message_dict

    def test_blank_name(self):
        product = _build_product(name="   ")
        with pytest.raises(ValidationError) as exc_info:
            product.full_clean()
        assert "name" in exc_info.value.message_dict

    def test_description_too_long(self):
        product = _build_product(description="d" * 501)
        with pytest.raises(ValidationError) as exc_info:
            product.full_clean()
        assert "description" in exc_info.value.message_dict

    def test_price_must_be_positive(self):
        product = _build_product(price=Decimal("0"))
        with pytest.raises(ValidationError) as exc_info:
            product.full_clean()
        assert "price" in exc_info.value.message_dict

    def test_stock_must_be_at_least_one(self):
        product = _build_product(stock_available=0)
        with pytest.raises(ValidationError) as exc_info:
            product.full_clean()
        assert "stock_available" in exc_info.value.message_dict

    @pytest.mark.parametrize("product_id", [99999, 999999, 1000000])
    def test_id_outside_six_digit_range(self, product_id):
        product = _build_product(id=product_id)
        with pytest.raises(ValidationError) as exc_info:
            product.full_clean()
        assert "id" in exc_info.value.message_dict


# ===========================================================================
# Database constraints
# ===========================================================================


class TestProductConstraints:
    def test_price_constraint_enforced_by_database(self):
        product = _build_product(price=Decimal("0"))
        with pytest.raises(IntegrityError):
            product.save(force_insert=True)

    def test_duplicate_id_rejected(self):
        _build_product().save(force_insert=True)
        with pytest.raises(IntegrityError):
            _build_product(name="Other").save(force_insert=True)
