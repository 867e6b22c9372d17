"""
Adapter: Product repository.

Implements the ProductRepository port against PostgreSQL with
parameterized SQL. Driver failures are classified here and raised
as catalog domain errors; nothing above this module sees SQLAlchemy.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, Optional

from sqlalchemy import Numeric, bindparam, text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import DBAPIError, IntegrityError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from product_service.domain.catalog.entities import Product
from product_service.domain.catalog.errors import (
    DuplicateProductError,
    InvalidProductError,
    ProductNotFoundError,
    ProductOperationTimeoutError,
    ProductPersistenceError,
)
from product_service.domain.catalog.ports import ProductRepository
from product_service.infrastructure.catalog.schema import products
from product_service.infrastructure.database import apply_statement_timeout

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"
QUERY_CANCELED = "57014"
NUMERIC_VALUE_OUT_OF_RANGE = "22003"


_ROW_COLUMNS = (
    products.c.id,
    products.c.store_id,
    products.c.name,
    products.c.description,
    products.c.amount,
    products.c.price,
    products.c.created_at,
    products.c.updated_at,
)

_INSERT = (
    text(
        """
        INSERT INTO products
            (store_id, name, description, amount, price, created_at, updated_at)
        VALUES
            (:store_id, :name, :description, :amount, :price,
             CURRENT_TIMESTAMP, CURRENT_TIMESTAMP)
        RETURNING id, store_id, name, description, amount, price,
                  created_at, updated_at
        """
    )
    .bindparams(bindparam("price", type_=Numeric(12, 2)))
    .columns(*_ROW_COLUMNS)
)

_SELECT_BY_ID = text(
    """
    SELECT id, store_id, name, description, amount, price, created_at, updated_at
    FROM products
    WHERE id = :id
    """
).columns(*_ROW_COLUMNS)

_SELECT_PAGE = text(
    """
    SELECT id, store_id, name, description, amount, price, created_at, updated_at
    FROM products
    ORDER BY created_at DESC, id DESC
    LIMIT :limit OFFSET :offset
    """
).columns(*_ROW_COLUMNS)

_UPDATE = (
    text(
        """
        UPDATE products
        SET store_id = :store_id,
            name = :name,
            description = :description,
            amount = :amount,
            price = :price,
            updated_at = CURRENT_TIMESTAMP
        WHERE id = :id
        RETURNING id, store_id, name, description, amount, price,
                  created_at, updated_at
        """
    )
    .bindparams(bindparam("price", type_=Numeric(12, 2)))
    .columns(*_ROW_COLUMNS)
)

_DELETE = text("DELETE FROM products WHERE id = :id")


def _sqlstate(exc: DBAPIError) -> Optional[str]:
    """Return the SQLSTATE carried by the driver error, if any."""
    return getattr(exc.orig, "pgcode", None)


def _is_unique_violation(exc: IntegrityError) -> bool:
    if _sqlstate(exc) == UNIQUE_VIOLATION:
        return True
    # SQLite reports no SQLSTATE, only a message.
    return "UNIQUE constraint failed" in str(exc.orig)


def _reason(exc: SQLAlchemyError) -> str:
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _to_entity(row: Mapping[str, Any]) -> Product:
    return Product(
        id=row["id"],
        store_id=row["store_id"],
        name=row["name"],
        description=row["description"],
        amount=row["amount"],
        price=row["price"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _write_params(product: Product) -> dict[str, Any]:
    return {
        "store_id": product.store_id,
        "name": product.name,
        "description": product.description,
        "amount": product.amount,
        "price": product.price,
    }


class ProductRepositoryAdapter(ProductRepository):
    """PostgreSQL implementation of the product repository.

    Every call runs in its own short transaction on a pooled connection,
    bounded by ``statement_timeout_ms``.
    """

    def __init__(self, engine: Engine, statement_timeout_ms: int = 30_000) -> None:
        self._engine = engine
        self._statement_timeout_ms = statement_timeout_ms

    @contextmanager
    def _transaction(self, operation: str, name: str = "") -> Iterator[Connection]:
        """Open a deadline-bound transaction and classify driver failures.

        Args:
            operation: Verb used in error messages (create, get, ...).
            name: Product name reported by DuplicateProductError.
        """
        try:
            with self._engine.begin() as conn:
                apply_statement_timeout(conn, self._statement_timeout_ms)
                yield conn
        except IntegrityError as exc:
            if _is_unique_violation(exc):
                raise DuplicateProductError(name) from exc
            raise ProductPersistenceError(operation, _reason(exc)) from exc
        except PoolTimeoutError as exc:
            logger.warning("No pooled connection available for %s", operation)
            raise ProductOperationTimeoutError(operation) from exc
        except DBAPIError as exc:
            if _sqlstate(exc) == QUERY_CANCELED:
                logger.warning(
                    "Statement cancelled after %d ms during %s",
                    self._statement_timeout_ms,
                    operation,
                )
                raise ProductOperationTimeoutError(operation) from exc
            if _sqlstate(exc) == NUMERIC_VALUE_OUT_OF_RANGE:
                raise InvalidProductError("numeric value out of range") from exc
            raise ProductPersistenceError(operation, _reason(exc)) from exc
        except SQLAlchemyError as exc:
            raise ProductPersistenceError(operation, _reason(exc)) from exc

    def create(self, product: Product) -> Product:
        """Insert a product and return the stored row.

        Args:
            product: Validated product without id or timestamps.

        Returns:
            The product with id, created_at and updated_at assigned.
        """
        with self._transaction("create", product.name) as conn:
            row = conn.execute(_INSERT, _write_params(product)).mappings().one()
        return _to_entity(row)

    def get_by_id(self, product_id: int) -> Product:
        with self._transaction("get") as conn:
            row = conn.execute(_SELECT_BY_ID, {"id": product_id}).mappings().first()
        if row is None:
            raise ProductNotFoundError(product_id)
        return _to_entity(row)

    def get_all(self, limit: int, offset: int) -> list[Product]:
        """Return one page of products ordered by created_at descending.

        Ties on created_at are broken by id, newest first.
        """
        with self._transaction("list") as conn:
            rows = (
                conn.execute(_SELECT_PAGE, {"limit": limit, "offset": offset})
                .mappings()
                .all()
            )
        logger.debug("Fetched %d products (limit=%d, offset=%d)", len(rows), limit, offset)
        return [_to_entity(row) for row in rows]

    def update(self, product_id: int, product: Product) -> Product:
        """Replace the mutable columns of a product and refresh updated_at.

        Raises:
            ProductNotFoundError: If no row has this id.
        """
        params = _write_params(product)
        params["id"] = product_id
        with self._transaction("update", product.name) as conn:
            row = conn.execute(_UPDATE, params).mappings().first()
        if row is None:
            raise ProductNotFoundError(product_id)
        return _to_entity(row)

    def delete(self, product_id: int) -> None:
        with self._transaction("delete") as conn:
            result = conn.execute(_DELETE, {"id": product_id})
        if result.rowcount == 0:
            raise ProductNotFoundError(product_id)
