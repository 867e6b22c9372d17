"""
Domain-specific errors for the catalog bounded context.

All errors raised from the domain and application layers must be
defined here. Infrastructure adapters translate driver failures into
these errors. They are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class InvalidProductError(CatalogDomainError):
    """Raised when product data or a product identifier breaks a business rule."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid product data: {reason}")
        self.reason = reason


class InvalidProductIdError(InvalidProductError):
    """Raised when a product identifier cannot be parsed as a base-10 integer."""

    def __init__(self, raw_value: str) -> None:
        super().__init__("Product ID must be a valid number")
        self.raw_value = raw_value


class ProductNotFoundError(CatalogDomainError):
    """Raised when no product matches the requested identifier."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"product not found: {product_id}")
        self.product_id = product_id


class DuplicateProductError(CatalogDomainError):
    """Raised when persisting a product violates a uniqueness constraint."""

    def __init__(self, name: str) -> None:
        super().__init__(f"product with this name already exists: {name}")
        self.name = name


class ProductOperationTimeoutError(CatalogDomainError):
    """Raised when a persistence call is cancelled or exceeds its deadline."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} product timed out")
        self.operation = operation


class ProductPersistenceError(CatalogDomainError):
    """Raised when the product store fails for any unclassified reason."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(f"failed to {operation} product: {reason}")
        self.operation = operation
        self.reason = reason
