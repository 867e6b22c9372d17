"""
CLI entry point for the product service.

Usage:
    # Start the HTTP server
    product-service serve

    # Start on another interface/port
    product-service serve --host 127.0.0.1 --port 9000

    # Create the products table and its indexes
    product-service migrate

    # Check that the configured database is reachable
    product-service check-db
"""

import argparse
import logging
import sys

from sqlalchemy.exc import SQLAlchemyError

from product_service.core.config import settings
from product_service.infrastructure.catalog.schema import apply_schema
from product_service.infrastructure.database import build_engine, verify_connection
from product_service.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the API under uvicorn."""
    import uvicorn

    logger.info("Starting %s at http://%s:%d", settings.app_name, args.host, args.port)
    uvicorn.run(
        "product_service.main:app",
        host=args.host,
        port=args.port,
        reload=False,
        access_log=False,
    )


def cmd_migrate(_args: argparse.Namespace) -> None:
    """Apply the products schema to the configured database."""
    engine = build_engine(settings)
    try:
        apply_schema(engine)
    finally:
        engine.dispose()


def cmd_check_db(_args: argparse.Namespace) -> None:
    """Exit with status 1 when the database cannot be reached."""
    engine = build_engine(settings)
    try:
        verify_connection(engine)
    except SQLAlchemyError as exc:
        logger.error("Database check failed: %s", exc)
        sys.exit(1)
    finally:
        engine.dispose()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="product-service", description="Product Service CLI"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument(
        "--host", default=settings.http_addr, help="Interface to bind (HTTP_ADDR)"
    )
    serve_parser.add_argument(
        "--port", type=int, default=settings.http_port, help="Port to bind (HTTP_PORT)"
    )
    serve_parser.set_defaults(func=cmd_serve)

    migrate_parser = subparsers.add_parser(
        "migrate", help="Create the products table if missing"
    )
    migrate_parser.set_defaults(func=cmd_migrate)

    check_parser = subparsers.add_parser(
        "check-db", help="Verify database connectivity"
    )
    check_parser.set_defaults(func=cmd_check_db)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
