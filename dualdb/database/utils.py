"""
Database utilities module.

This module provides utility functions for database operations including
error classification and result value decoding.
"""

from typing import Any, Iterable, Sequence

from ..models import Row


def classify_database_error(exception: Exception) -> str:
    """
    Classify database errors into permanent, transient, or systemic categories.

    The classification is informational: it is attached to log lines and
    never changes whether an error is raised.

    Args:
        exception: Database exception to classify

    Returns:
        Error type: "permanent", "transient", or "systemic"
    """
    error_str = str(exception).lower()

    # Permanent errors - the same statement will fail again
    permanent_indicators = [
        "duplicate entry",
        "foreign key constraint",
        "check constraint",
        "cannot be null",
        "doesn't exist",
        "unknown column",
        "you have an error in your sql syntax",
        "no such table",
        "no such column",
        "unique constraint failed",
        "not null constraint failed",
        "syntax error",
    ]

    for indicator in permanent_indicators:
        if indicator in error_str:
            return "permanent"

    # Systemic errors - configuration or credentials are wrong
    systemic_indicators = [
        "access denied",
        "unknown database",
        "command denied",
        "authentication",
        "ssl connection error",
    ]

    for indicator in systemic_indicators:
        if indicator in error_str:
            return "systemic"

    # Default to transient
    # Includes: lost connection, lock wait timeout, deadlocks, etc.
    return "transient"


def decode_value(value: Any) -> Any:
    """
    Decode a raw column value for a result row.

    Byte sequences are surfaced as text; every other value is returned as is.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    return value


def decode_row(columns: Sequence[str], values: Iterable[Any]) -> Row:
    """Pair result-set column names with decoded values, preserving column order."""
    return {column: decode_value(value) for column, value in zip(columns, values)}
