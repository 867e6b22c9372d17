"""
Helpers shared by the catalog use cases.
"""

from product_service.application.catalog.dtos import ProductResult
from product_service.domain.catalog.entities import Product
from product_service.domain.catalog.errors import InvalidProductError


def require_valid_id(product_id: int) -> None:
    """Reject identifiers that can never match a stored product."""
    if product_id <= 0:
        raise InvalidProductError("invalid product ID")


def to_result(product: Product) -> ProductResult:
    """Map a persisted Product entity to its output DTO."""
    return ProductResult(
        id=product.id,
        store_id=product.store_id,
        name=product.name,
        description=product.description,
        amount=product.amount,
        price=product.price,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )
