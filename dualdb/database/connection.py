"""
Database connection management module.

This module handles connection pool (engine) creation, the startup
liveness check, and pool disposal.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..constants import MAX_IDLE_CONNECTIONS, MAX_OPEN_CONNECTIONS, PING_QUERY
from .config import parse_dsn
from .errors import DatabaseConnectionError

logger = logging.getLogger(__name__)


def create_db_engine(dsn: str) -> Engine:
    """
    Create a pooled database engine for a DSN.

    The pool keeps up to MAX_IDLE_CONNECTIONS idle connections and opens at
    most MAX_OPEN_CONNECTIONS in total.

    Args:
        dsn: DSN string

    Returns:
        SQLAlchemy Engine

    Raises:
        DatabaseConnectionError: If the DSN is malformed or the driver rejects it
    """
    url = parse_dsn(dsn)

    try:
        logger.info(
            f"Creating database connection pool (host={url.host}, database={url.database}, "
            f"max_open={MAX_OPEN_CONNECTIONS}, max_idle={MAX_IDLE_CONNECTIONS})"
        )
        engine = create_engine(
            url,
            pool_size=MAX_IDLE_CONNECTIONS,
            max_overflow=MAX_OPEN_CONNECTIONS - MAX_IDLE_CONNECTIONS,
        )
    except (SQLAlchemyError, ImportError, ValueError) as e:
        logger.error(f"Failed to create database connection pool: {str(e)}")
        raise DatabaseConnectionError(f"failed to open connection: {e}") from e

    logger.info("Database connection pool created successfully")
    return engine


def ping_database(engine: Engine) -> None:
    """
    Check that the database answers a trivial query.

    Args:
        engine: Engine to check

    Raises:
        DatabaseConnectionError: If the database cannot be reached or the
            driver rejects the connect arguments
    """
    try:
        with engine.connect() as connection:
            connection.execute(text(PING_QUERY))
        logger.debug("Database ping succeeded")
    except (SQLAlchemyError, TypeError, ValueError) as e:
        logger.error(f"Database ping failed: {str(e)}")
        raise DatabaseConnectionError(f"failed to ping database: {e}") from e


def close_db_engine(engine: Engine) -> None:
    """
    Dispose of the engine's connection pool.

    Args:
        engine: Engine to dispose (ignored if None)
    """
    if engine is None:
        logger.debug("Engine is None, nothing to close")
        return

    logger.info("Closing database connection pool")
    engine.dispose()
    logger.info("Database connection pool closed successfully")
