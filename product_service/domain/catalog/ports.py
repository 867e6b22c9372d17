"""
Port interfaces (ABCs) for the catalog bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from product_service.domain.catalog.entities import Product


class ProductRepository(ABC):
    """Port for persisting and retrieving products.

    Implementations translate storage failures into catalog domain errors:
    a missing row becomes ProductNotFoundError, a uniqueness violation
    DuplicateProductError, an expired deadline ProductOperationTimeoutError
    and anything else ProductPersistenceError.
    """

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Insert a product and return it with id and timestamps assigned."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product:
        """Return the product with the given id.

        Raises:
            ProductNotFoundError: If no row matches.
        """
        raise NotImplementedError

    @abstractmethod
    def get_all(self, limit: int, offset: int) -> list[Product]:
        """Return one page of products, most recently created first.

        Args:
            limit: Maximum number of products to return.
            offset: Number of products to skip.

        Returns:
            Possibly empty list of products.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, product_id: int, product: Product) -> Product:
        """Replace the mutable fields of a product and refresh updated_at.

        Raises:
            ProductNotFoundError: If no row matches.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a product permanently.

        Raises:
            ProductNotFoundError: If no row matches.
        """
        raise NotImplementedError
