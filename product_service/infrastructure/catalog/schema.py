"""
Schema of the products table.

This is the single forward-only migration of the service.
``store_id`` deliberately has no foreign key.
"""

import logging

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

metadata = MetaData()

products = Table(
    "products",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("store_id", Integer, nullable=False),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("amount", Integer, nullable=False, server_default="0"),
    Column("price", Numeric(12, 2), nullable=False),
    Column(
        "created_at",
        DateTime,
        nullable=False,
        server_default=func.current_timestamp(),
    ),
    Column(
        "updated_at",
        DateTime,
        nullable=False,
        server_default=func.current_timestamp(),
    ),
    Index("idx_products_store_id", "store_id"),
    Index("idx_products_created_at", "created_at"),
)


def apply_schema(engine: Engine) -> None:
    """Create the products table and its indexes if they do not exist."""
    metadata.create_all(engine, checkfirst=True)
    logger.info("Schema applied: tables=%s", ", ".join(metadata.tables))
