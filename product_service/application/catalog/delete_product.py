"""
Use case: Delete a product.

Input: product id
Output: None
Side effects: Removes one row permanently (no soft delete).
Failure cases: InvalidProductError, ProductNotFoundError.
"""

import logging

from product_service.application.catalog.common import require_valid_id
from product_service.domain.catalog.errors import CatalogDomainError
from product_service.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Orchestrates deleting a product by id."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, product_id: int) -> None:
        """Run the delete product use case.

        Raises:
            InvalidProductError: If the id is not positive.
            ProductNotFoundError: If no product has this id.
        """
        logger.info("Deleting product: product_id=%d", product_id)

        require_valid_id(product_id)

        try:
            self._product_repo.delete(product_id)
        except CatalogDomainError as exc:
            logger.error(
                "Failed to delete product %d from repository: %s",
                product_id,
                exc.message,
            )
            raise

        logger.info("Product deleted: product_id=%d", product_id)
