"""Product model.

Rules enforced at the model level (mirrored by the DTOs):
- ``id`` is a 6-digit identifier assigned by ``ProductService``.
- ``name`` holds letters, digits and whitespace only, up to 100 characters.
- ``description`` is optional, up to 500 characters.
- ``price`` must be greater than zero.
- ``stock_available`` must be at least one when the record is validated.

``version`` is an internal optimistic-concurrency token; every write bumps
it and full replacements only succeed against the version that was read.
"""

from __future__ import annotations

from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import (
    MaxValueValidator,
    MinValueValidator,
    RegexValidator,
)
from django.db import models

from modules.products.constants import (
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NAME_PATTERN,
    PRODUCT_ID_MAX,
    PRODUCT_ID_MIN,
)


class Product(models.Model):
    """Catalogue product with its available stock."""

    id = models.PositiveIntegerField(
        primary_key=True,
        validators=[
            MinValueValidator(PRODUCT_ID_MIN),
            MaxValueValidator(PRODUCT_ID_MAX - 1),
        ],
    )
    name = models.CharField(
        max_length=NAME_MAX_LENGTH,
        validators=[
            RegexValidator(
                rf"^{NAME_PATTERN}\Z",
                "Name can only contain letters, numbers, and spaces.",
            )
        ],
    )
    description = models.CharField(
        max_length=DESCRIPTION_MAX_LENGTH,
        null=True,
        blank=True,
    )
    price = models.DecimalField(max_digits=18, decimal_places=2)
    stock_available = models.IntegerField()
    version = models.PositiveIntegerField(default=0, editable=False)

    class Meta:
        db_table = "products"
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name="products_price_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def clean(self) -> None:
        super().clean()
        if self.name is not None and not self.name.strip():
            raise ValidationError({"name": "Name is required."})
        if self.price is not None and self.price <= Decimal("0"):
            raise ValidationError({"price": "Price must be greater than 0."})
        if self.stock_available is not None and self.stock_available < 1:
            raise ValidationError(
                {"stock_available": "StockAvailable must be greater than 0."}
            )

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
