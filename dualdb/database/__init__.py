#!/usr/bin/env python3
"""
Database package for dualdb.

This package provides DSN parsing, connection pool management, statement
assembly, and the generic CRUD client.
"""

from .client import DatabaseClient

from .connection import (
    create_db_engine,
    ping_database,
    close_db_engine,
)

from .config import (
    parse_dsn,
)

from .errors import (
    DatabaseError,
    DatabaseConnectionError,
    InputValidationError,
    EmptyDataError,
    EmptyFilterError,
    StatementExecutionError,
    ResultDecodeError,
)

from .statements import (
    build_insert,
    build_select,
    build_update,
    build_delete,
)

from .utils import (
    classify_database_error,
    decode_value,
)

__all__ = [
    # Client
    "DatabaseClient",
    # Connection management
    "create_db_engine",
    "ping_database",
    "close_db_engine",
    # Configuration
    "parse_dsn",
    # Errors
    "DatabaseError",
    "DatabaseConnectionError",
    "InputValidationError",
    "EmptyDataError",
    "EmptyFilterError",
    "StatementExecutionError",
    "ResultDecodeError",
    # Statements
    "build_insert",
    "build_select",
    "build_update",
    "build_delete",
    # Utilities
    "classify_database_error",
    "decode_value",
]
