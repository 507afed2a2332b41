#!/usr/bin/env python3
"""
Data Models Module

This module contains the data structures shared by the configuration
loader and the database client.
"""

from .database import DatabaseConfig, Config, Statement, Row, SqlValue

__all__ = [
    "DatabaseConfig",
    "Config",
    "Statement",
    "Row",
    "SqlValue",
]
