"""
Dependency injection for the catalog bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection. The engine is
built once at startup and read from ``app.state``.
"""

import re

from fastapi import Depends, Path, Request

from product_service.application.catalog.create_product import CreateProductUseCase
from product_service.application.catalog.delete_product import DeleteProductUseCase
from product_service.application.catalog.get_product import GetProductUseCase
from product_service.application.catalog.list_products import ListProductsUseCase
from product_service.application.catalog.update_product import UpdateProductUseCase
from product_service.domain.catalog.errors import InvalidProductIdError
from product_service.domain.catalog.ports import ProductRepository
from product_service.infrastructure.catalog.product_repository import (
    ProductRepositoryAdapter,
)

_BASE10_INT = re.compile(r"[+-]?[0-9]+")
# Signed 64-bit range.
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


def get_product_repository(request: Request) -> ProductRepository:
    """Build the product repository on the shared connection pool."""
    return ProductRepositoryAdapter(
        engine=request.app.state.engine,
        statement_timeout_ms=request.app.state.settings.request_timeout_ms,
    )


def get_product_id(product_id: str = Path(..., description="Product ID")) -> int:
    """Parse the ``{product_id}`` path segment as a signed 64-bit integer.

    Raises:
        InvalidProductIdError: If the segment is not an integer or is
            outside the 64-bit range.
    """
    if not _BASE10_INT.fullmatch(product_id):
        raise InvalidProductIdError(product_id)
    value = int(product_id, 10)
    if not ID_MIN <= value <= ID_MAX:
        raise InvalidProductIdError(product_id)
    return value


def get_create_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> CreateProductUseCase:
    return CreateProductUseCase(product_repo=repo)


def get_get_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> GetProductUseCase:
    return GetProductUseCase(product_repo=repo)


def get_list_products_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> ListProductsUseCase:
    return ListProductsUseCase(product_repo=repo)


def get_update_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> UpdateProductUseCase:
    return UpdateProductUseCase(product_repo=repo)


def get_delete_product_use_case(
    repo: ProductRepository = Depends(get_product_repository),
) -> DeleteProductUseCase:
    return DeleteProductUseCase(product_repo=repo)
