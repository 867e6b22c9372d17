"""
Data Transfer Objects for the catalog application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class CreateProductCommand:
    """Input DTO for creating a product.

    Attributes:
        store_id: Owning store identifier.
        name: Product name (1-100 characters).
        amount: Units in stock.
        price: Unit price, strictly positive.
        description: Optional free text. None means absent.
    """

    store_id: int
    name: str
    amount: int
    price: Decimal
    description: Optional[str] = None


@dataclass(frozen=True)
class UpdateProductCommand:
    """Input DTO for replacing every mutable field of a product."""

    store_id: int
    name: str
    amount: int
    price: Decimal
    description: Optional[str] = None


@dataclass(frozen=True)
class ListProductsQuery:
    """Input DTO for paging through products.

    Out-of-range values are corrected by the use case, not rejected.
    """

    limit: int = 10
    offset: int = 0


@dataclass(frozen=True)
class ProductResult:
    """Output DTO for a stored product."""

    id: int
    store_id: int
    name: str
    description: Optional[str]
    amount: int
    price: Decimal
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ProductPage:
    """Output DTO for one page of products.

    Attributes:
        products: Products on this page, most recent first.
        limit: The page size actually applied.
        offset: The offset actually applied.
    """

    products: list[ProductResult]
    limit: int
    offset: int
