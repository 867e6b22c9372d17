"""
Use case: Create a product.

Input: CreateProductCommand
Output: ProductResult
Side effects: Inserts one row through the ProductRepository port.
Failure cases: InvalidProductError, DuplicateProductError,
    ProductOperationTimeoutError, ProductPersistenceError.
"""

import logging

from product_service.application.catalog.common import to_result
from product_service.application.catalog.dtos import (
    CreateProductCommand,
    ProductResult,
)
from product_service.domain.catalog.entities import Product
from product_service.domain.catalog.errors import (
    CatalogDomainError,
    ProductPersistenceError,
)
from product_service.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Orchestrates product creation.

    Validates the new product against the domain rules, then hands it
    to the repository which assigns the id and timestamps.
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        """Initialize the use case.

        Args:
            product_repo: Repository used to persist the product.
        """
        self._product_repo = product_repo

    def execute(self, command: CreateProductCommand) -> ProductResult:
        """Run the create product use case.

        Args:
            command: Field values of the new product.

        Returns:
            The stored product, including its server-assigned fields.

        Raises:
            InvalidProductError: If a field rule is violated.
            ProductPersistenceError: If the store fails for an
                unclassified reason.
        """
        logger.info(
            "Creating product: store_id=%d, name=%s",
            command.store_id,
            command.name,
        )

        product = Product(
            store_id=command.store_id,
            name=command.name,
            description=command.description,
            amount=command.amount,
            price=command.price,
        )

        try:
            product.validate()
        except CatalogDomainError as exc:
            logger.warning("Product validation failed: %s", exc.message)
            raise

        try:
            created = self._product_repo.create(product)
        except CatalogDomainError as exc:
            logger.error("Failed to create product in repository: %s", exc.message)
            raise
        except Exception as exc:
            logger.error("Failed to create product in repository: %s", exc)
            raise ProductPersistenceError("create", str(exc)) from exc

        logger.info("Product created: product_id=%d", created.id)
        return to_result(created)
