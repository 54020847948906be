"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``) and accept the
public camelCase field names (``stockAvailable``) as well as the Python
ones.

- ``CreateProductDTO``: input for product creation (any ``id`` is ignored).
- ``UpdateProductDTO``: input for a full replacement; carries the ``id``.

Every rule reports under the JSON field name with a fixed message, so a
client gets the same text whatever the offending value was.  A missing
``price`` or ``stockAvailable`` counts as zero and fails the range check.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from modules.products.constants import (
    DESCRIPTION_MAX_LENGTH,
    INT32_MAX,
    NAME_MAX_LENGTH,
    NAME_PATTERN,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
    PRICE_MIN,
)

_NAME_RE = re.compile(NAME_PATTERN)
_PRICE_QUANTUM = Decimal(1).scaleb(-PRICE_DECIMAL_PLACES)
_PRICE_MAX_INTEGER_DIGITS = PRICE_MAX_DIGITS - PRICE_DECIMAL_PLACES


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests.

    Validates:
    - ``name`` is present, at most 100 characters, letters/digits/spaces.
    - ``description`` is at most 500 characters.
    - ``price`` is at least 0.01 and fits decimal(18, 2).
    - ``stock_available`` is between one and the 32-bit integer maximum.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: Optional[str] = Field(default=None, validate_default=True)
    description: Optional[str] = None
    price: Optional[Decimal] = Field(default=None, validate_default=True)
    stock_available: Optional[int] = Field(
        default=None, alias="stockAvailable", validate_default=True
    )

    @field_validator("name")
    @classmethod
    def name_rules(cls, v: Optional[str]) -> str:
        if v is None or not v.strip():
            raise PydanticCustomError("name_required", "Name is required.")
        if len(v) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "name_too_long", "Name cannot exceed 100 characters."
            )
        if not _NAME_RE.fullmatch(v):
            raise PydanticCustomError(
                "name_pattern",
                "Name can only contain letters, numbers, and spaces.",
            )
        return v

    @field_validator("description")
    @classmethod
    def description_max_length(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and len(v) > DESCRIPTION_MAX_LENGTH:
            raise PydanticCustomError(
                "description_too_long",
                "Description cannot exceed 500 characters.",
            )
        return v

    @field_validator("price")
    @classmethod
    def price_must_be_positive(cls, v: Optional[Decimal]) -> Decimal:
        if v is None or v < PRICE_MIN or v.adjusted() >= _PRICE_MAX_INTEGER_DIGITS:
            raise PydanticCustomError(
                "price_not_positive", "Price must be greater than 0."
            )
        if v != v.quantize(_PRICE_QUANTUM):
            raise PydanticCustomError(
                "price_precision", "Price cannot have more than 2 decimal places."
            )
        return v

    @field_validator("stock_available")
    @classmethod
    def stock_must_be_positive(cls, v: Optional[int]) -> int:
        if v is None or not 1 <= v <= INT32_MAX:
            raise PydanticCustomError(
                "stock_not_positive", "StockAvailable must be greater than 0."
            )
        return v

    @classmethod
    def field_errors(cls, exc: ValidationError) -> Dict[str, List[str]]:
        """Group error messages by JSON field name.

        Defaults that fail validation are reported under the Python name,
        so locations are mapped back through the field alias.
        """
        errors: Dict[str, List[str]] = {}
        for error in exc.errors():
            loc = error["loc"]
            if loc:
                field = cls.model_fields.get(str(loc[0]))
                head = field.alias if field is not None and field.alias else loc[0]
                key = ".".join(str(part) for part in (head, *loc[1:]))
            else:
                key = "non_field_errors"
            errors.setdefault(key, []).append(error["msg"])
        return errors

    def to_fields(self) -> Dict[str, Any]:
        """Model field values carried by this DTO."""
        return {
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "stock_available": self.stock_available,
        }


class UpdateProductDTO(CreateProductDTO):
    """Immutable DTO for full product replacement.

    ``id`` is optional here so that a missing id surfaces as an id
    mismatch rather than a field error.
    """

    id: Optional[int] = None
