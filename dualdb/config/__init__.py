"""
Configuration management for dualdb.

This module provides environment-driven configuration for the OLTP and
OLAP connection targets, with optional .env.local support.

Uses a schema-driven approach with Pydantic for validation.
"""

from .env import ConfigError, load, current
from .schema import DatabaseSchema, OltpDatabaseSchema, OlapDatabaseSchema
from .loader import ConfigLoader

__all__ = [
    "ConfigError",
    "load",
    "current",
    "DatabaseSchema",
    "OltpDatabaseSchema",
    "OlapDatabaseSchema",
    "ConfigLoader",
]
