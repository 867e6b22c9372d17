"""
Pydantic schemas for catalog API request/response validation.

These schemas enforce input validation and define the API contract.
All fields use strict typing with constraints.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, Field

NAME_DESCRIPTION = "Product name (1-100 characters)"
DESCRIPTION_MAX_LEN = 1000
# Upper bounds of the INTEGER and NUMERIC(12, 2) columns.
INT_COLUMN_MAX = 2**31 - 1
PRICE_MAX = 9_999_999_999.99
PRICE_DESCRIPTION = "Unit price, rounded to cents"


class CreateProductRequest(BaseModel):
    """Request schema for the create product endpoint.

    Attributes:
        store_id: Owning store (>= 1).
        name: Product name (1-100 chars).
        description: Optional free text (<= 1000 chars).
        amount: Units in stock (>= 0).
        price: Unit price (> 0, <= PRICE_MAX), rounded to cents.
    """

    store_id: int = Field(
        ..., ge=1, le=INT_COLUMN_MAX, description="Owning store identifier"
    )
    name: str = Field(..., min_length=1, max_length=100, description=NAME_DESCRIPTION)
    description: Optional[str] = Field(
        default=None, max_length=DESCRIPTION_MAX_LEN, description="Optional description"
    )
    amount: int = Field(..., ge=0, le=INT_COLUMN_MAX, description="Units in stock")
    price: float = Field(..., gt=0, le=PRICE_MAX, description=PRICE_DESCRIPTION)


class UpdateProductRequest(BaseModel):
    """Request schema for the update product endpoint (full replace)."""

    store_id: int = Field(
        ..., ge=1, le=INT_COLUMN_MAX, description="Owning store identifier"
    )
    name: str = Field(..., min_length=1, max_length=100, description=NAME_DESCRIPTION)
    description: Optional[str] = Field(
        default=None, max_length=DESCRIPTION_MAX_LEN, description="Optional description"
    )
    amount: int = Field(..., ge=0, le=INT_COLUMN_MAX, description="Units in stock")
    price: float = Field(..., gt=0, le=PRICE_MAX, description=PRICE_DESCRIPTION)


class ProductResponse(BaseModel):
    """A single product in API responses.

    Timestamps are RFC 3339 strings; a missing description is "".
    """

    id: int
    store_id: int
    name: str
    description: str
    amount: int
    price: float
    created_at: str
    updated_at: str


class ProductListResponse(BaseModel):
    """Response schema for the list products endpoint."""

    products: list[ProductResponse]
    total: int
    limit: int
    offset: int


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    message: str
