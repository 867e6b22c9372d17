"""
Database engine construction.

The engine owns the connection pool. It is built once at startup
(see ``product_service.main``) and handed to repository adapters.
Call sites borrow a connection for a single statement and return it.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine

from product_service.core.config import Settings

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> Engine:
    """Build a pooled SQLAlchemy engine from application settings.

    The pool ceiling is ``db_pool_size + db_max_overflow`` connections.
    Connections older than ``db_pool_recycle_seconds`` are replaced.
    """
    return create_engine(
        settings.get_database_url(),
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle_seconds,
        pool_timeout=settings.db_pool_timeout_seconds,
    )


def verify_connection(engine: Engine) -> None:
    """Run ``SELECT 1`` so that an unreachable database fails fast.

    Raises:
        sqlalchemy.exc.SQLAlchemyError: If the database cannot be reached.
    """
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))

    url = engine.url
    logger.info(
        "Connected to database: host=%s, port=%s, database=%s",
        url.host,
        url.port,
        url.database,
    )


def apply_statement_timeout(conn: Connection, timeout_ms: int) -> None:
    """Bound every statement of the current transaction by ``timeout_ms``.

    Only PostgreSQL supports this; other dialects are left untouched.
    The setting is transaction-local and is dropped on commit or rollback.
    """
    if conn.dialect.name != "postgresql":
        return
    conn.execute(
        text("SELECT set_config('statement_timeout', :timeout, true)"),
        {"timeout": str(timeout_ms)},
    )
