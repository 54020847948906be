"""Unit tests for ProductDjangoRepository.

Covers:
- Look-ups (get_by_id, exists, list).
- insert: success and id collision as a storage fault.
- replace: success, version guard and missing row (both concurrency faults).
- save: stock write-back bumps the version.
- delete: removal and missing row.
- Database errors surfacing as ProductStorageError.
"""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from modules.products.exceptions import (
    ProductConcurrencyError,
    ProductStorageError,
)
from modules.products.models import Product
from modules.products.repositories import IProductRepository, ProductDjangoRepository

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_product(**overrides) -> Product:
    defaults = {
        "id": 100001,
        "name": "Widget",
        "price": Decimal("19.99"),
        "stock_available": 10,
    }
    defaults.update(overrides)
    return Product.objects.create(**defaults)


def _fields(**overrides):
    fields = {
        "name": "Replaced",
        "description": "Replaced description",
        "price": Decimal("5.00"),
        "stock_available": 7,
    }
    fields.update(overrides)
    return fields


@pytest.fixture()
def repo():
    return ProductDjangoRepository()


# ===========================================================================
# Instantiation
# ===========================================================================


class TestRepositoryInstantiation:
    def test_is_instance_of_interface(self, repo):
        assert isinstance(repo, IProductRepository)


# ===========================================================================
# Look-ups
# ===========================================================================


class TestGetById:
    def test_returns_product_when_found(self, repo):
        product = _make_product()
        result = repo.get_by_id(product.id)
        assert result is not None
        assert result.id == product.id

    def test_returns_none_when_not_found(self, repo):
        assert repo.get_by_id(999998) is None


class TestExists:
    def test_true_for_stored_id(self, repo):
        _make_product(id=123456)
        assert repo.exists(123456) is True

    def test_false_for_unknown_id(self, repo):
        assert repo.exists(123456) is False


class TestList:
    def test_returns_all_products(self, repo):
        _make_product(id=200000)
        _make_product(id=100000)
        results = repo.list()
        assert [p.id for p in results] == [100000, 200000]

    def test_returns_empty_list_when_no_products(self, repo):
        assert repo.list() == []

    def test_database_error_becomes_storage_error(self, repo):
        with patch.object(
            Product.objects, "all", side_effect=DatabaseError("connection lost")
        ):
            with pytest.raises(ProductStorageError, match="connection lost"):
                repo.list()


# ===========================================================================
# insert
# ===========================================================================


class TestInsert:
    def test_persists_new_product(self, repo):
        product = Product(
            id=654321, name="New", price=Decimal("9.99"), stock_available=5
        )
        saved = repo.insert(product)
        assert saved is product
        assert Product.objects.filter(id=654321).exists()

    def test_colliding_id_is_storage_error(self, repo):
        _make_product(id=654321)
        duplicate = Product(
            id=654321, name="Dup", price=Decimal("1.00"), stock_available=1
        )
        with pytest.raises(ProductStorageError):
            repo.insert(duplicate)
        assert Product.objects.get(id=654321).name == "Widget"


# ===========================================================================
# replace
# ===========================================================================


class TestReplace:
    def test_overwrites_all_fields(self, repo):
        product = _make_product()
        result = repo.replace(product.id, _fields(), expected_version=product.version)

        assert result.name == "Replaced"
        assert result.description == "Replaced description"
        assert result.price == Decimal("5.00")
        assert result.stock_available == 7
        assert result.version == product.version + 1

    def test_stale_version_is_concurrency_error(self, repo):
        product = _make_product()
        Product.objects.filter(id=product.id).update(stock_available=99, version=5)

        with pytest.raises(ProductConcurrencyError, match="Concurrency error"):
            repo.replace(product.id, _fields(), expected_version=0)

        stored = Product.objects.get(id=product.id)
        assert stored.name == "Widget"
        assert stored.stock_available == 99

    def test_missing_product_is_concurrency_error(self, repo):
        with pytest.raises(ProductConcurrencyError, match="does not exist"):
            repo.replace(100001, _fields(), expected_version=0)


# ===========================================================================
# save
# ===========================================================================


class TestSave:
    def test_writes_back_stock_and_bumps_version(self, repo):
        product = _make_product(stock_available=10)
        product.stock_available = 3
        saved = repo.save(product)

        assert saved.version == 1
        stored = Product.objects.get(id=product.id)
        assert stored.stock_available == 3
        assert stored.version == 1

    def test_save_invalidates_earlier_reads_for_replace(self, repo):
        product = _make_product()
        stale_version = product.version
        product.stock_available += 1
        repo.save(product)

        with pytest.raises(ProductConcurrencyError):
            repo.replace(product.id, _fields(), expected_version=stale_version)


# ===========================================================================
# delete
# ===========================================================================


class TestDelete:
    def test_deletes_existing_product(self, repo):
        product = _make_product()
        assert repo.delete(product.id) is True
        assert not Product.objects.filter(id=product.id).exists()

    def test_returns_false_for_nonexistent(self, repo):
        assert repo.delete(999998) is False
