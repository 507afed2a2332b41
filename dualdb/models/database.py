#!/usr/bin/env python3
"""
Database Models

This module contains data structures related to database configuration
and statement assembly.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Dict, NamedTuple, Union

from ..constants import DSN_OPTIONS, DSN_PROTOCOL

# Scalar kinds accepted as column values and returned in rows
SqlValue = Union[str, int, float, bool, bytes, Decimal, date, datetime, time, timedelta, None]

# A single result row: column name -> decoded value, in result-set column order
Row = Dict[str, Any]


class DatabaseConfig(NamedTuple):
    """
    Connection target for one logical database.

    Attributes:
        host: Database server hostname
        port: Database server port (kept as text, never validated)
        user: Login user
        password: Login password
        name: Database (schema) name
    """

    host: str
    port: str
    user: str
    password: str
    name: str

    def dsn(self) -> str:
        """
        Format the connection target as a DSN string.

        Returns:
            ``user:password@tcp(host:port)/name?parseTime=true&charset=utf8mb4``
        """
        return (
            f"{self.user}:{self.password}@{DSN_PROTOCOL}({self.host}:{self.port})"
            f"/{self.name}?{DSN_OPTIONS}"
        )

    def mask(self) -> dict:
        """Return a dict safe for logging (password hidden)."""
        return {
            "host": self.host,
            "port": self.port,
            "user": self.user,
            "password": "***" if self.password else None,
            "name": self.name,
        }


class Config(NamedTuple):
    """
    Process-wide configuration: the OLTP and OLAP connection targets.

    Attributes:
        oltp: Transactional database target
        olap: Analytical database target
    """

    oltp: DatabaseConfig
    olap: DatabaseConfig


class Statement(NamedTuple):
    """
    A parameterized SQL statement ready for execution.

    Attributes:
        sql: Statement text with named placeholders (``:p0``, ``:p1``, ...)
        params: Placeholder name -> bound value
    """

    sql: str
    params: Dict[str, Any]
