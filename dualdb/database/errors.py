"""
Database error types.

Every failure raised by the database package derives from DatabaseError,
so callers can catch the whole family or a single category.
"""


class DatabaseError(Exception):
    """Base class for all database package errors."""
    pass


class DatabaseConnectionError(DatabaseError):
    """The DSN was rejected, the engine could not be created, or the ping failed."""
    pass


class InputValidationError(DatabaseError):
    """Caller input was rejected before any statement was built."""
    pass


class EmptyDataError(InputValidationError):
    """Create or Update received no column data."""
    pass


class EmptyFilterError(InputValidationError):
    """Update or Delete received no filter; unscoped statements are refused."""
    pass


class StatementExecutionError(DatabaseError):
    """The driver failed to execute a statement."""
    pass


class ResultDecodeError(DatabaseError):
    """Column introspection or row iteration failed while reading results."""
    pass
