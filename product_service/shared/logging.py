"""
Process-wide logging setup for the product service.

One line per record on stdout, pipe-separated. Product payloads,
connection strings and passwords are never passed to a logger.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Requests are logged by RequestLoggingMiddleware; SQL echo stays off.
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "sqlalchemy.pool")


def configure_logging(level: str = "info") -> None:
    """Install the root handler at ``level`` (LOG_LEVEL).

    Unknown level names fall back to INFO. Safe to call more than once;
    the previous handler is replaced.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.INFO

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
