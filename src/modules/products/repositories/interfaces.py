"""Product repository interface.

Extends ``IRepository[Product, int]`` with the id probe used by identifier
generation and the insert/replace pair that create and full update rely on.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, List, Mapping

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductRepository(IRepository["Product", int]):
    """Repository contract for the Product aggregate.

    Implementations raise ``ProductStorageError`` when the underlying store
    fails, never a backend-specific exception.
    """

    @abstractmethod
    def list(self) -> List["Product"]:
        """List all products."""

    @abstractmethod
    def exists(self, id: int) -> bool:
        """Return whether a product with this id is stored."""

    @abstractmethod
    def insert(self, entity: "Product") -> "Product":
        """Persist a new product; a colliding id is a storage fault."""

    @abstractmethod
    def replace(
        self, id: int, fields: Mapping[str, Any], expected_version: int
    ) -> "Product":
        """Overwrite a product if it is still at ``expected_version``.

        Raises:
            ProductConcurrencyError: no product with this id, or the product
                was written since it was read.
        """
