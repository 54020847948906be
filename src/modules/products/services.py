"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository``.

Rules enforced here:
- Identifiers are random 6-digit integers, redrawn until unused.
- A full update must name the product it replaces (id mismatch otherwise)
  and only succeeds against the version that was read.  Updating a product
  that does not exist is a concurrency fault, not a not-found.
- Stock cannot be decremented below zero.  Quantities are not checked for
  sign, so a negative quantity reverses the operation.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any, List, Optional

import structlog
from django.db import transaction

from modules.products.constants import PRODUCT_ID_MAX, PRODUCT_ID_MIN
from modules.products.exceptions import (
    InsufficientStock,
    ProductConcurrencyError,
    ProductIdMismatch,
    ProductNotFound,
    ProductStorageError,
    UniqueIdGenerationError,
)
from modules.products.models import Product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO, UpdateProductDTO
    from modules.products.repositories.interfaces import IProductRepository


class ProductService:
    """Application service for Product use-cases.

    Collaborators are passed explicitly: the repository, an optional
    structlog-style logger and an optional ``random.Random`` used to draw
    identifiers.  Without one, the service seeds its own generator once at
    construction.
    """

    def __init__(
        self,
        repository: IProductRepository,
        logger: Optional[Any] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._repo = repository
        self._log = logger if logger is not None else structlog.get_logger(__name__)
        self._rng = rng if rng is not None else random.Random()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[Product]:
        """Return every product."""
        return self._repo.list()

    def get_product(self, id: int) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if product is None:
            raise ProductNotFound(f"Product {id} not found.")
        return product

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> Product:
        """Assign a fresh identifier and persist a new product.

        Raises:
            UniqueIdGenerationError: the id probe failed.
            ProductStorageError: the insert failed.
        """
        product = Product(id=self.generate_unique_id(), **dto.to_fields())
        product = self._repo.insert(product)
        self._log.info("product.created", product_id=product.id, name=product.name)
        return product

    @transaction.atomic
    def update_product(self, id: int, dto: UpdateProductDTO) -> None:
        """Replace every public field of an existing product.

        Raises:
            ProductIdMismatch: ``dto.id`` is not ``id``.
            ProductConcurrencyError: the product is absent or changed after
                it was read.
        """
        log = self._log.bind(product_id=id)
        if dto.id != id:
            log.warning("product.id_mismatch", payload_id=dto.id)
            raise ProductIdMismatch()

        current = self._repo.get_by_id(id)
        if current is None:
            log.warning("product.update_missing")
            raise ProductConcurrencyError(f"Product {id} does not exist.")
        self._repo.replace(id, dto.to_fields(), expected_version=current.version)
        log.info("product.updated")

    @transaction.atomic
    def delete_product(self, id: int) -> None:
        """Remove a product.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        self.get_product(id)
        self._repo.delete(id)
        self._log.info("product.deleted", product_id=id)

    @transaction.atomic
    def decrement_stock(self, id: int, quantity: int) -> Product:
        """Take ``quantity`` units out of stock.

        Raises:
            ProductNotFound: if the product does not exist.
            InsufficientStock: fewer than ``quantity`` units are available.
        """
        product = self.get_product(id)
        log = self._log.bind(product_id=id, quantity=quantity)
        if product.stock_available < quantity:
            log.warning(
                "product.insufficient_stock", stock_available=product.stock_available
            )
            raise InsufficientStock()

        product.stock_available -= quantity
        product = self._repo.save(product)
        log.info("product.stock_decremented", stock_available=product.stock_available)
        return product

    @transaction.atomic
    def add_to_stock(self, id: int, quantity: int) -> Product:
        """Put ``quantity`` units into stock.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self.get_product(id)
        product.stock_available += quantity
        product = self._repo.save(product)
        self._log.info(
            "product.stock_added",
            product_id=id,
            quantity=quantity,
            stock_available=product.stock_available,
        )
        return product

    # ------------------------------------------------------------------
    # Identifiers
    # ------------------------------------------------------------------

    def generate_unique_id(self) -> int:
        """Draw 6-digit ids until one is not taken.

        The loop is unbounded; the id space is far larger than the catalogue.

        Raises:
            UniqueIdGenerationError: the store could not be probed.
        """
        try:
            candidate = self._rng.randrange(PRODUCT_ID_MIN, PRODUCT_ID_MAX)
            while self._repo.exists(candidate):
                self._log.debug("product.id_collision", candidate=candidate)
                candidate = self._rng.randrange(PRODUCT_ID_MIN, PRODUCT_ID_MAX)
        except ProductStorageError as exc:
            self._log.error("product.id_generation_failed", error=str(exc))
            raise UniqueIdGenerationError(str(exc)) from exc
        return candidate
