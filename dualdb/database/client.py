"""
Generic CRUD client.

This module provides DatabaseClient, which turns caller-supplied table names
and column/value maps into parameterized INSERT, SELECT, UPDATE and DELETE
statements and runs each one as a single autocommitted unit.

Security note: values are always bound as parameters, but table and column
names are inlined into the SQL text exactly as given. Callers own those
identifiers and must never pass untrusted input as a table or column name.
"""

import logging
import time
from typing import Any, Callable, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import text
from sqlalchemy.engine import CursorResult, Engine
from sqlalchemy.exc import SQLAlchemyError

from ..models import DatabaseConfig, Row, SqlValue, Statement
from ..utils.logging import log_statement_failure, log_statement_success
from .connection import close_db_engine, create_db_engine, ping_database
from .errors import ResultDecodeError, StatementExecutionError
from .statements import build_delete, build_insert, build_select, build_update
from .utils import classify_database_error, decode_row

logger = logging.getLogger(__name__)


class DatabaseClient:
    """
    CRUD access to one database through a pooled engine.

    Safe for concurrent callers to the extent the connection pool is.
    """

    def __init__(self, dsn: Optional[str] = None, *, engine: Optional[Engine] = None):
        """
        Open a pooled connection to the database and check that it answers.

        Args:
            dsn: DSN string (``user:password@tcp(host:port)/dbname?...``)
            engine: Existing engine to wrap instead of opening one; no ping is made

        Raises:
            DatabaseConnectionError: If the DSN is rejected or the ping fails
        """
        if engine is not None:
            self._engine = engine
            return

        if dsn is None:
            raise ValueError("either dsn or engine is required")

        self._engine = create_db_engine(dsn)
        try:
            ping_database(self._engine)
        except Exception:
            close_db_engine(self._engine)
            raise

    @classmethod
    def from_config(cls, config: DatabaseConfig) -> "DatabaseClient":
        """Connect to the target described by a DatabaseConfig."""
        logger.info(f"Connecting to database: {config.mask()}")
        return cls(config.dsn())

    @classmethod
    def from_engine(cls, engine: Engine) -> "DatabaseClient":
        """Wrap an already configured engine."""
        return cls(engine=engine)

    @property
    def engine(self) -> Engine:
        return self._engine

    def close(self) -> None:
        """Release the connection pool."""
        close_db_engine(self._engine)

    def __enter__(self) -> "DatabaseClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def create(self, table: str, data: Mapping[str, SqlValue]) -> int:
        """
        Insert one row.

        Args:
            table: Target table
            data: Column -> value map, must not be empty

        Returns:
            The identifier the driver reports for the inserted row

        Raises:
            EmptyDataError: If data is empty (nothing is executed)
            StatementExecutionError: If the driver fails
        """
        statement = build_insert(table, data)
        return self._execute("INSERT", table, statement, _last_insert_id)

    def read(
        self,
        table: str,
        columns: Optional[Sequence[str]] = None,
        filters: Optional[Mapping[str, SqlValue]] = None,
    ) -> List[Row]:
        """
        Select rows matching every filter condition.

        Args:
            table: Source table
            columns: Columns to return; empty or None selects all
            filters: Column -> required value map; empty or None matches all rows

        Returns:
            One dict per row in result-set order, keyed by column name in
            result-set column order; byte values are decoded to text

        Raises:
            StatementExecutionError: If the driver fails to run the query
            ResultDecodeError: If columns or rows cannot be read
        """
        statement = build_select(table, columns, filters)
        return self._execute("SELECT", table, statement, _decode_rows)

    def update(self, table: str, data: Mapping[str, SqlValue], filters: Mapping[str, SqlValue]) -> int:
        """
        Update rows matching every filter condition.

        Args:
            table: Target table
            data: Column -> new value map, must not be empty
            filters: Column -> required value map, must not be empty

        Returns:
            Affected-row count as reported by the driver

        Raises:
            EmptyDataError: If data is empty (nothing is executed)
            EmptyFilterError: If filters is empty (nothing is executed)
            StatementExecutionError: If the driver fails
        """
        statement = build_update(table, data, filters)
        return self._execute("UPDATE", table, statement, _affected_rows)

    def delete(self, table: str, filters: Mapping[str, SqlValue]) -> int:
        """
        Delete rows matching every filter condition.

        Args:
            table: Target table
            filters: Column -> required value map, must not be empty

        Returns:
            Affected-row count as reported by the driver

        Raises:
            EmptyFilterError: If filters is empty (nothing is executed)
            StatementExecutionError: If the driver fails
        """
        statement = build_delete(table, filters)
        return self._execute("DELETE", table, statement, _affected_rows)

    def _execute(
        self,
        operation: str,
        table: str,
        statement: Statement,
        handler: Callable[[CursorResult], Tuple[Any, int]],
    ) -> Any:
        """Run one statement in its own transaction and hand the result to handler."""
        logger.debug(f"Executing SQL: {statement.sql}")
        start_time = time.time()

        try:
            with self._engine.begin() as connection:
                result = connection.execute(text(statement.sql), statement.params)
                value, row_count = handler(result)
        except ResultDecodeError as e:
            error_type = classify_database_error(e.__cause__ or e)
            log_statement_failure(operation, table, error_type, str(e), time.time() - start_time, logger=logger)
            raise
        except SQLAlchemyError as e:
            error_type = classify_database_error(e)
            log_statement_failure(operation, table, error_type, str(e), time.time() - start_time, logger=logger)
            raise StatementExecutionError(f"failed to execute {operation} on {table}: {e}") from e

        log_statement_success(operation, table, row_count, time.time() - start_time, logger=logger)
        return value


def _last_insert_id(result: CursorResult) -> Tuple[int, int]:
    return result.lastrowid, 1


def _affected_rows(result: CursorResult) -> Tuple[int, int]:
    return result.rowcount, result.rowcount


def _decode_rows(result: CursorResult) -> Tuple[List[Row], int]:
    try:
        columns = list(result.keys())
    except SQLAlchemyError as e:
        raise ResultDecodeError(f"failed to read result columns: {e}") from e

    rows = []
    try:
        for raw in result:
            rows.append(decode_row(columns, raw))
    except SQLAlchemyError as e:
        raise ResultDecodeError(f"failed to read result rows: {e}") from e

    return rows, len(rows)
