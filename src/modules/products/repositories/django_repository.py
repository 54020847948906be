"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Lookups follow the Null Object pattern (``None`` instead of raising);
database failures are re-raised as ``ProductStorageError`` so the Service
Layer never sees backend exceptions.

Full replacement is guarded by the ``version`` column: the UPDATE only
matches the row at the version the caller read.  ``save`` (used by the
stock operations) is a plain write-back with no such guard.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

import structlog
from django.db import DatabaseError, transaction
from django.db.models import F

from modules.products.exceptions import (
    ProductConcurrencyError,
    ProductStorageError,
)
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)

_REPLACEABLE_FIELDS = ("name", "description", "price", "stock_available")


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a product by primary key, ``None`` when absent."""
        try:
            return Product.objects.filter(id=id).first()
        except DatabaseError as exc:
            raise ProductStorageError(str(exc)) from exc

    def list(self) -> List[Product]:
        try:
            return list(Product.objects.all())
        except DatabaseError as exc:
            raise ProductStorageError(str(exc)) from exc

    def exists(self, id: int) -> bool:
        try:
            return Product.objects.filter(id=id).exists()
        except DatabaseError as exc:
            raise ProductStorageError(str(exc)) from exc

    def insert(self, entity: Product) -> Product:
        """Persist a new product with a forced INSERT."""
        try:
            with transaction.atomic():
                entity.save(force_insert=True)
        except DatabaseError as exc:
            logger.error("product.insert_failed", product_id=entity.id, error=str(exc))
            raise ProductStorageError(str(exc)) from exc
        logger.info("product.inserted", product_id=entity.id)
        return entity

    def replace(
        self, id: int, fields: Mapping[str, Any], expected_version: int
    ) -> Product:
        values = {name: fields[name] for name in _REPLACEABLE_FIELDS}
        try:
            with transaction.atomic():
                updated = Product.objects.filter(
                    id=id, version=expected_version
                ).update(**values, version=F("version") + 1)
                if not updated:
                    if not Product.objects.filter(id=id).exists():
                        raise ProductConcurrencyError(f"Product {id} does not exist.")
                    logger.warning(
                        "product.replace_conflict",
                        product_id=id,
                        expected_version=expected_version,
                    )
                    raise ProductConcurrencyError(
                        f"Product {id} was modified by another request."
                    )
                product = Product.objects.get(id=id)
        except DatabaseError as exc:
            raise ProductStorageError(str(exc)) from exc
        logger.info("product.replaced", product_id=id, version=product.version)
        return product

    def save(self, entity: Product) -> Product:
        """Write back the stock of a product that was read earlier."""
        entity.version = F("version") + 1
        try:
            with transaction.atomic():
                entity.save(update_fields=["stock_available", "version"])
        except DatabaseError as exc:
            raise ProductStorageError(str(exc)) from exc
        entity.refresh_from_db(fields=["version"])
        logger.info(
            "product.saved",
            product_id=entity.id,
            stock_available=entity.stock_available,
        )
        return entity

    def delete(self, id: int) -> bool:
        """Delete a product by ID.

        Returns ``True`` if a row was removed, ``False`` if no product
        exists with the given ID.
        """
        try:
            with transaction.atomic():
                deleted, _ = Product.objects.filter(id=id).delete()
        except DatabaseError as exc:
            raise ProductStorageError(str(exc)) from exc
        if deleted:
            logger.info("product.deleted", product_id=id)
        return bool(deleted)
