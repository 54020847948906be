"""Product domain constants.

Response messages used by the service and API layers, and the range
product identifiers are drawn from.
"""

from decimal import Decimal

PRODUCT_ID_MISMATCH = "Product ID mismatch"
NOT_ENOUGH_STOCK = "Not enough stock"
DATABASE_UPDATE_ERROR = "Database update error: {0}"
CONCURRENCY_ERROR = "Concurrency error: {0}"
UNIQUE_ID_ERROR = "Error generating unique ID: {0}"
VALIDATION_FAILED = "One or more validation errors occurred."

# Identifiers are 6 digits; the upper bound is exclusive.
PRODUCT_ID_MIN = 100_000
PRODUCT_ID_MAX = 999_999

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
NAME_PATTERN = r"[a-zA-Z0-9\s]+"

# Prices are stored as decimal(18, 2).
PRICE_MIN = Decimal("0.01")
PRICE_MAX_DIGITS = 18
PRICE_DECIMAL_PLACES = 2

# Stock and path integers share the 32-bit signed range.
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
