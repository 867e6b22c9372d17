"""
Centralized error handlers for FastAPI.

Maps catalog domain errors to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses use the ErrorResponse shape: {error, message}.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from product_service.domain.catalog.errors import (
    CatalogDomainError,
    DuplicateProductError,
    InvalidProductError,
    InvalidProductIdError,
    ProductNotFoundError,
    ProductOperationTimeoutError,
    ProductPersistenceError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_404 = 404
HTTP_409 = 409
HTTP_500 = 500
HTTP_504 = 504

INTERNAL_MESSAGE = "An internal error occurred"

_HTTP_ERROR_CODES = {
    404: "not_found",
    405: "method_not_allowed",
}


def _error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """Build a consistent JSON error response."""
    return JSONResponse(
        status_code=status_code, content={"error": error, "message": message}
    )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    """Summarize validation errors as ``field: reason`` pairs.

    Input values are left out so payloads never reach the logs.
    """
    parts = []
    for err in exc.errors():
        loc = [str(p) for p in err.get("loc", ()) if p != "body"]
        field = ".".join(loc) or "body"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts) or "invalid request"


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed or incomplete request payloads."""
        message = _describe_validation_errors(exc)
        logger.warning(
            "Request validation failed: %s %s: %s",
            request.method,
            request.url.path,
            message,
        )
        return _error_response(HTTP_400, "validation_error", message)

    @app.exception_handler(InvalidProductIdError)
    async def handle_invalid_product_id(
        request: Request, exc: InvalidProductIdError
    ) -> JSONResponse:
        """Handle path ids that are not base-10 integers."""
        logger.warning(
            "Invalid product id in path %s: %r", request.url.path, exc.raw_value
        )
        return _error_response(HTTP_400, "invalid_id", exc.reason)

    @app.exception_handler(InvalidProductError)
    async def handle_invalid_product(
        request: Request, exc: InvalidProductError
    ) -> JSONResponse:
        """Handle business rule violations."""
        logger.warning(
            "Invalid product: %s %s: %s", request.method, request.url.path, exc.reason
        )
        return _error_response(HTTP_400, "invalid_product", exc.message)

    @app.exception_handler(ProductNotFoundError)
    async def handle_product_not_found(
        _request: Request, exc: ProductNotFoundError
    ) -> JSONResponse:
        """Handle missing products."""
        logger.warning("Product not found: %d", exc.product_id)
        return _error_response(HTTP_404, "product_not_found", "Product not found")

    @app.exception_handler(DuplicateProductError)
    async def handle_duplicate_product(
        _request: Request, exc: DuplicateProductError
    ) -> JSONResponse:
        """Handle uniqueness violations."""
        logger.warning("Duplicate product: %s", exc.name)
        return _error_response(
            HTTP_409, "duplicate_product", "Product with this name already exists"
        )

    @app.exception_handler(ProductOperationTimeoutError)
    async def handle_operation_timeout(
        _request: Request, exc: ProductOperationTimeoutError
    ) -> JSONResponse:
        """Handle persistence calls that ran past the request deadline."""
        logger.error("Product operation timed out: %s", exc.operation)
        return _error_response(
            HTTP_504, "request_timeout", "The request took too long to complete"
        )

    @app.exception_handler(ProductPersistenceError)
    async def handle_persistence(
        _request: Request, exc: ProductPersistenceError
    ) -> JSONResponse:
        """Handle store failures. The reason is logged, never returned."""
        logger.error("Persistence failure during %s: %s", exc.operation, exc.reason)
        return _error_response(HTTP_500, "internal_server_error", INTERNAL_MESSAGE)

    @app.exception_handler(CatalogDomainError)
    async def handle_catalog_domain(
        _request: Request, exc: CatalogDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled catalog domain errors."""
        logger.error("Unhandled catalog domain error: %s", exc.message)
        return _error_response(HTTP_500, "internal_server_error", INTERNAL_MESSAGE)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Give routing errors (unknown path, wrong method) the same body shape."""
        logger.info(
            "HTTP %d on %s %s", exc.status_code, request.method, request.url.path
        )
        response = _error_response(
            exc.status_code,
            _HTTP_ERROR_CODES.get(exc.status_code, "http_error"),
            str(exc.detail),
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response


class UnhandledErrorMiddleware(BaseHTTPMiddleware):
    """Turn exceptions no handler claimed into the standard 500 body.

    Must be the innermost middleware so that these responses still get
    the security headers and a request log line.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception(
                "Unexpected error on %s %s: %s",
                request.method,
                request.url.path,
                type(exc).__name__,
            )
            return _error_response(HTTP_500, "internal_server_error", INTERNAL_MESSAGE)
