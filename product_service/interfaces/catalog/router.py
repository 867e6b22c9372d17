"""
FastAPI router for the catalog bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from product_service.application.catalog.create_product import CreateProductUseCase
from product_service.application.catalog.delete_product import DeleteProductUseCase
from product_service.application.catalog.dtos import (
    CreateProductCommand,
    ListProductsQuery,
    ProductResult,
    UpdateProductCommand,
)
from product_service.application.catalog.get_product import GetProductUseCase
from product_service.application.catalog.list_products import (
    DEFAULT_LIMIT,
    ListProductsUseCase,
)
from product_service.application.catalog.update_product import UpdateProductUseCase
from product_service.domain.catalog.entities import round_price
from product_service.interfaces.catalog.dependencies import (
    get_create_product_use_case,
    get_delete_product_use_case,
    get_get_product_use_case,
    get_list_products_use_case,
    get_product_id,
    get_update_product_use_case,
)
from product_service.interfaces.catalog.schemas import (
    CreateProductRequest,
    ErrorResponse,
    ProductListResponse,
    ProductResponse,
    UpdateProductRequest,
)

router = APIRouter(prefix="/products", tags=["products"])

_ERRORS = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}
_ERRORS_WITH_404 = {**_ERRORS, 404: {"model": ErrorResponse}}


def _rfc3339(value: datetime) -> str:
    """Format a timestamp as RFC 3339. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="seconds")


def _lenient_int(raw: Optional[str], default: int, minimum: int) -> int:
    """Parse a query value, falling back to ``default`` instead of failing."""
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


def _to_response(result: ProductResult) -> ProductResponse:
    return ProductResponse(
        id=result.id,
        store_id=result.store_id,
        name=result.name,
        description=result.description or "",
        amount=result.amount,
        price=float(result.price),
        created_at=_rfc3339(result.created_at),
        updated_at=_rfc3339(result.updated_at),
    )


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses={**_ERRORS, 409: {"model": ErrorResponse}},
    summary="Create a product",
)
def create_product(
    request: CreateProductRequest,
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
) -> ProductResponse:
    """Create a product and return it with its server-assigned fields."""
    command = CreateProductCommand(
        store_id=request.store_id,
        name=request.name,
        description=request.description,
        amount=request.amount,
        price=round_price(Decimal(str(request.price))),
    )
    result = use_case.execute(command)
    return _to_response(result)


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses=_ERRORS_WITH_404,
    summary="Get a product",
)
def get_product(
    product_id: int = Depends(get_product_id),
    use_case: GetProductUseCase = Depends(get_get_product_use_case),
) -> ProductResponse:
    """Return one product by id."""
    result = use_case.execute(product_id)
    return _to_response(result)


@router.get(
    "",
    response_model=ProductListResponse,
    responses=_ERRORS,
    summary="List products",
    description="Page through products, most recently created first. "
    "Invalid limit/offset values fall back to their defaults.",
)
def list_products(
    limit: Optional[str] = Query(default=None, description="Page size (max 100)"),
    offset: Optional[str] = Query(default=None, description="Rows to skip"),
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
) -> ProductListResponse:
    """List products with lenient pagination parameters."""
    query = ListProductsQuery(
        limit=_lenient_int(limit, DEFAULT_LIMIT, minimum=1),
        offset=_lenient_int(offset, 0, minimum=0),
    )
    page = use_case.execute(query)
    products = [_to_response(r) for r in page.products]
    return ProductListResponse(
        products=products,
        total=len(products),
        limit=page.limit,
        offset=page.offset,
    )


@router.put(
    "/{product_id}",
    response_model=ProductResponse,
    responses={**_ERRORS_WITH_404, 409: {"model": ErrorResponse}},
    summary="Replace a product",
)
def update_product(
    request: UpdateProductRequest,
    product_id: int = Depends(get_product_id),
    use_case: UpdateProductUseCase = Depends(get_update_product_use_case),
) -> ProductResponse:
    """Replace every mutable field of a product."""
    command = UpdateProductCommand(
        store_id=request.store_id,
        name=request.name,
        description=request.description,
        amount=request.amount,
        price=round_price(Decimal(str(request.price))),
    )
    result = use_case.execute(product_id, command)
    return _to_response(result)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERRORS_WITH_404,
    summary="Delete a product",
)
def delete_product(
    product_id: int = Depends(get_product_id),
    use_case: DeleteProductUseCase = Depends(get_delete_product_use_case),
) -> Response:
    """Delete a product permanently."""
    use_case.execute(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
