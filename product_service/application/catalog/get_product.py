"""
Use case: Retrieve a single product.

Input: product id
Output: ProductResult
Side effects: None (read-only query).
Failure cases: InvalidProductError, ProductNotFoundError.
"""

import logging

from product_service.application.catalog.common import require_valid_id, to_result
from product_service.application.catalog.dtos import ProductResult
from product_service.domain.catalog.errors import CatalogDomainError
from product_service.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)


class GetProductUseCase:
    """Orchestrates looking up one product by id."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, product_id: int) -> ProductResult:
        """Run the get product use case.

        Args:
            product_id: Identifier of the product.

        Returns:
            The stored product.

        Raises:
            InvalidProductError: If the id is not positive.
            ProductNotFoundError: If no product has this id.
        """
        logger.info("Retrieving product: product_id=%d", product_id)

        require_valid_id(product_id)

        try:
            product = self._product_repo.get_by_id(product_id)
        except CatalogDomainError as exc:
            logger.error(
                "Failed to get product %d from repository: %s",
                product_id,
                exc.message,
            )
            raise

        return to_result(product)
