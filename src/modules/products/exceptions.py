"""Product domain exceptions.

Raised by the Service Layer (and the repository, for storage faults) when
an operation cannot complete.  The API layer (Views) catches these and
translates them into HTTP responses.
"""

from __future__ import annotations

from modules.products.constants import (
    CONCURRENCY_ERROR,
    NOT_ENOUGH_STOCK,
    PRODUCT_ID_MISMATCH,
    UNIQUE_ID_ERROR,
)


class ProductNotFound(Exception):
    """The requested product does not exist."""


class ProductIdMismatch(Exception):
    """The id in an update payload differs from the id being updated."""

    def __init__(self, message: str = PRODUCT_ID_MISMATCH) -> None:
        super().__init__(message)


class InsufficientStock(Exception):
    """A decrement would drive the available stock below zero."""

    def __init__(self, message: str = NOT_ENOUGH_STOCK) -> None:
        super().__init__(message)


class ProductStorageError(Exception):
    """The database rejected or failed a read or write."""


class ProductConcurrencyError(Exception):
    """The row changed between being read and being replaced."""

    def __init__(self, reason: str) -> None:
        super().__init__(CONCURRENCY_ERROR.format(reason))


class UniqueIdGenerationError(Exception):
    """Probing the store for a free identifier failed."""

    def __init__(self, reason: str) -> None:
        super().__init__(UNIQUE_ID_ERROR.format(reason))
