"""
Domain entities for the catalog bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from product_service.domain.catalog.errors import InvalidProductError

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000

# Prices are stored as NUMERIC(12, 2).
PRICE_QUANTUM = Decimal("0.01")
MAX_PRICE = Decimal("9999999999.99")
# Smallest value that still rounds to one cent.
MIN_PRICE = Decimal("0.005")


def round_price(value: Decimal) -> Decimal:
    """Round ``value`` to whole cents, halves away from zero."""
    return value.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Product:
    """A product offered by a store.

    ``id``, ``created_at`` and ``updated_at`` are assigned by the store
    and stay ``None`` until the product has been persisted.

    ``description`` is ``None`` when absent, which is a different state
    from an empty string.

    ``store_id`` is not checked against any Store entity.
    """

    store_id: int
    name: str
    amount: int
    price: Decimal
    description: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def validate(self) -> None:
        """Check the field rules in order and stop at the first violation.

        Raises:
            InvalidProductError: With the reason of the first failing rule.
        """
        if self.store_id <= 0:
            raise InvalidProductError("store_id must be positive")

        if self.name == "":
            raise InvalidProductError("name is required")

        if len(self.name) > NAME_MAX_LENGTH:
            raise InvalidProductError(
                f"name must not exceed {NAME_MAX_LENGTH} characters"
            )

        if (
            self.description is not None
            and len(self.description) > DESCRIPTION_MAX_LENGTH
        ):
            raise InvalidProductError(
                f"description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
            )

        if self.amount < 0:
            raise InvalidProductError("amount must be non-negative")

        if not self.has_valid_price():
            raise InvalidProductError("price must be positive")

        if self.price > MAX_PRICE:
            raise InvalidProductError(f"price must not exceed {MAX_PRICE}")

    def has_valid_price(self) -> bool:
        """Return True when the price is still positive once rounded to cents."""
        return self.price >= MIN_PRICE
