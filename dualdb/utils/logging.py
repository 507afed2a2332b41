"""
Logging utilities for dualdb.

This module provides centralized logging configuration and utilities
to ensure consistent logging behavior across the application.
"""

import json
import logging
import time
from typing import Optional


def setup_logging(verbose: bool = False):
    """Setup logging configuration with appropriate level and format."""
    level = logging.DEBUG if verbose else logging.INFO
    format_string = "%(asctime)s - %(levelname)s - %(message)s"

    logging.basicConfig(level=level, format=format_string, datefmt="%Y-%m-%d %H:%M:%S")

    # Set specific logger levels
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)  # SQL echo is logged by the client
    logging.getLogger("pymysql").setLevel(logging.WARNING)


def log_statement_success(
    operation: str,
    table: str,
    row_count: int,
    duration: float,
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None
):
    """
    Log a structured, machine-readable record for a completed statement.

    Args:
        operation: Statement kind (INSERT, SELECT, UPDATE, DELETE)
        table: Target table name
        row_count: Rows returned (SELECT), affected (UPDATE/DELETE) or inserted
        duration: Time spent executing the statement (seconds)
        timestamp: Record timestamp (defaults to current time)
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    statement_record = {
        "event_type": "database_statement",
        "timestamp": timestamp,
        "operation": operation,
        "table": table,
        "row_count": row_count,
        "duration_seconds": round(duration, 3),
        "success": True,
    }

    logger.info(f"STATEMENT: {json.dumps(statement_record, ensure_ascii=False)}")


def log_statement_failure(
    operation: str,
    table: str,
    error_type: str,
    error_message: str,
    duration: float,
    timestamp: Optional[float] = None,
    logger: Optional[logging.Logger] = None
):
    """
    Log a structured record for a failed statement.

    Args:
        operation: Statement kind (INSERT, SELECT, UPDATE, DELETE)
        table: Target table name
        error_type: Classification from classify_database_error
        error_message: Description of the error that occurred
        duration: Time spent before failure (seconds)
        timestamp: Failure timestamp (defaults to current time)
        logger: Logger instance to use (defaults to current module logger)
    """
    if logger is None:
        logger = logging.getLogger(__name__)

    if timestamp is None:
        timestamp = time.time()

    failure_record = {
        "event_type": "statement_failure",
        "timestamp": timestamp,
        "operation": operation,
        "table": table,
        "error_type": error_type,
        "error_message": error_message,
        "duration_seconds": round(duration, 3),
        "success": False,
    }

    logger.error(f"STATEMENT_FAILURE: {json.dumps(failure_record, ensure_ascii=False)}")
