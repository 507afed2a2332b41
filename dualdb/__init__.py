#!/usr/bin/env python3
"""
dualdb Package

A minimal generic data-access layer for MySQL: environment-driven
configuration for an OLTP and an OLAP database, and a client exposing
Create/Read/Update/Delete operations built from column/value maps.
"""

__version__ = "1.0.0"
__author__ = "dualdb"
__description__ = (
    "Environment-configured OLTP/OLAP MySQL connections with a generic CRUD client"
)
__license__ = "MIT"

# Import models for public API
from .models import (
    DatabaseConfig,
    Config,
    Statement,
    Row,
)

# Import constants for public API
from .constants import (
    MAX_OPEN_CONNECTIONS,
    MAX_IDLE_CONNECTIONS,
)

# Import configuration for public API
from .config import (
    ConfigError,
    load,
    current,
)

# Import database functionality for public API
from .database import (
    DatabaseClient,
    DatabaseError,
    DatabaseConnectionError,
    InputValidationError,
    EmptyDataError,
    EmptyFilterError,
    StatementExecutionError,
    ResultDecodeError,
)

# Import utilities for public API
from .utils import setup_logging

# Public API exports
__all__ = [
    # Package metadata
    "__version__",
    "__author__",
    "__description__",
    # Data models
    "DatabaseConfig",
    "Config",
    "Statement",
    "Row",
    # Constants
    "MAX_OPEN_CONNECTIONS",
    "MAX_IDLE_CONNECTIONS",
    # Configuration
    "ConfigError",
    "load",
    "current",
    # Database
    "DatabaseClient",
    "DatabaseError",
    "DatabaseConnectionError",
    "InputValidationError",
    "EmptyDataError",
    "EmptyFilterError",
    "StatementExecutionError",
    "ResultDecodeError",
    # Utilities
    "setup_logging",
]
