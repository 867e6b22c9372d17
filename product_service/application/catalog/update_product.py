"""
Use case: Replace a product's mutable fields.

Input: product id, UpdateProductCommand
Output: ProductResult
Side effects: Updates one row through the ProductRepository port.
Failure cases: InvalidProductError, ProductNotFoundError,
    DuplicateProductError, ProductOperationTimeoutError,
    ProductPersistenceError.
"""

import logging

from product_service.application.catalog.common import require_valid_id, to_result
from product_service.application.catalog.dtos import (
    ProductResult,
    UpdateProductCommand,
)
from product_service.domain.catalog.entities import Product
from product_service.domain.catalog.errors import CatalogDomainError
from product_service.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Orchestrates a full replace of a product.

    The id and created_at of the stored product are preserved;
    every other field comes from the command.
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, product_id: int, command: UpdateProductCommand) -> ProductResult:
        """Run the update product use case.

        Args:
            product_id: Identifier of the product to replace.
            command: The replacement field values.

        Returns:
            The product as stored after the update.

        Raises:
            InvalidProductError: If the id is not positive or a field
                rule is violated.
            ProductNotFoundError: If no product has this id.
        """
        logger.info("Updating product: product_id=%d", product_id)

        require_valid_id(product_id)

        replacement = Product(
            store_id=command.store_id,
            name=command.name,
            description=command.description,
            amount=command.amount,
            price=command.price,
        )

        try:
            replacement.validate()
        except CatalogDomainError as exc:
            logger.warning(
                "Product validation failed for product_id=%d: %s",
                product_id,
                exc.message,
            )
            raise

        try:
            updated = self._product_repo.update(product_id, replacement)
        except CatalogDomainError as exc:
            logger.error(
                "Failed to update product %d in repository: %s",
                product_id,
                exc.message,
            )
            raise

        logger.info("Product updated: product_id=%d", updated.id)
        return to_result(updated)
