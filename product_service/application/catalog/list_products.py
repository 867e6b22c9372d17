"""
Use case: Page through products.

Input: ListProductsQuery (limit, offset)
Output: ProductPage
Side effects: None (read-only query).
Failure cases: ProductOperationTimeoutError, ProductPersistenceError.
    Bad pagination values are corrected, never rejected.
"""

import logging

from product_service.application.catalog.common import to_result
from product_service.application.catalog.dtos import ListProductsQuery, ProductPage
from product_service.domain.catalog.errors import (
    CatalogDomainError,
    ProductPersistenceError,
)
from product_service.domain.catalog.ports import ProductRepository

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def normalize_pagination(limit: int, offset: int) -> tuple[int, int]:
    """Clamp paging values into the supported window.

    A non-positive limit falls back to DEFAULT_LIMIT, a limit above
    MAX_LIMIT is capped, and a negative offset becomes 0.

    Returns:
        The (limit, offset) pair to hand to the repository.
    """
    if limit <= 0:
        limit = DEFAULT_LIMIT
    if limit > MAX_LIMIT:
        limit = MAX_LIMIT
    if offset < 0:
        offset = 0
    return limit, offset


class ListProductsUseCase:
    """Orchestrates listing products, most recently created first."""

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def execute(self, query: ListProductsQuery) -> ProductPage:
        """Run the list products use case.

        Args:
            query: Requested page size and offset.

        Returns:
            The page of products together with the applied limit and offset.
        """
        logger.info(
            "Retrieving products: limit=%d, offset=%d", query.limit, query.offset
        )

        limit, offset = normalize_pagination(query.limit, query.offset)

        try:
            products = self._product_repo.get_all(limit=limit, offset=offset)
        except CatalogDomainError as exc:
            logger.error("Failed to get products from repository: %s", exc.message)
            raise
        except Exception as exc:
            logger.error("Failed to get products from repository: %s", exc)
            raise ProductPersistenceError("list", str(exc)) from exc

        return ProductPage(
            products=[to_result(p) for p in products],
            limit=limit,
            offset=offset,
        )
