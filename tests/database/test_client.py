"""
Tests for the generic CRUD client.

CRUD operations run end-to-end against an in-memory SQLite engine; every
statement reaching the driver is recorded so tests can assert that rejected
input never produces one.
"""

import unittest
from unittest.mock import MagicMock, patch

from sqlalchemy import create_engine, event, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from dualdb.database import (
    DatabaseClient,
    DatabaseConnectionError,
    EmptyDataError,
    EmptyFilterError,
    ResultDecodeError,
    StatementExecutionError,
    create_db_engine,
    ping_database,
)
from dualdb.database.client import _decode_rows
from dualdb.models import DatabaseConfig


def _make_engine():
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    with engine.begin() as connection:
        connection.execute(text(
            "CREATE TABLE users ("
            "id INTEGER PRIMARY KEY AUTOINCREMENT, "
            "name TEXT, "
            "age INTEGER, "
            "avatar BLOB)"
        ))
    return engine


class ClientTestCase(unittest.TestCase):
    """Base class wiring a client to a fresh in-memory database."""

    def setUp(self):
        self.engine = _make_engine()
        self.executed = []
        event.listen(self.engine, "before_cursor_execute", self._record)
        self.client = DatabaseClient.from_engine(self.engine)

    def tearDown(self):
        self.client.close()

    def _record(self, conn, cursor, statement, parameters, context, executemany):
        self.executed.append(statement)

    def _seed(self, *rows):
        with self.engine.begin() as connection:
            for row in rows:
                connection.execute(
                    text("INSERT INTO users (id, name, age) VALUES (:id, :name, :age)"),
                    row,
                )
        self.executed.clear()


class TestCreate(ClientTestCase):

    def test_create_returns_new_id(self):
        """Test create("users", {"name": "Ana", "age": 30}) returns the new row id."""
        self._seed({"id": 41, "name": "Zed", "age": 50})

        new_id = self.client.create("users", {"name": "Ana", "age": 30})

        self.assertEqual(new_id, 42)
        self.assertEqual(len(self.executed), 1)
        self.assertTrue(self.executed[0].startswith("INSERT INTO users (name, age) VALUES"))
        self.assertEqual(self.executed[0].count("?"), 2)

    def test_create_persists_values(self):
        new_id = self.client.create("users", {"name": "Ana", "age": 30})

        rows = self.client.read("users", ["name", "age"], {"id": new_id})
        self.assertEqual(rows, [{"name": "Ana", "age": 30}])

    def test_create_empty_data(self):
        """Test that empty data is rejected and nothing is executed."""
        with self.assertRaises(EmptyDataError):
            self.client.create("users", {})

        self.assertEqual(self.executed, [])

    def test_create_driver_error(self):
        with self.assertRaises(StatementExecutionError) as cm:
            self.client.create("missing_table", {"name": "Ana"})

        self.assertIsInstance(cm.exception.__cause__, OperationalError)
        self.assertIn("INSERT", str(cm.exception))


class TestRead(ClientTestCase):

    def setUp(self):
        super().setUp()
        self._seed(
            {"id": 1, "name": "Ana", "age": 31},
            {"id": 2, "name": "Bo", "age": 31},
            {"id": 3, "name": "Cy", "age": 40},
        )

    def test_read_matching_rows(self):
        """Test read("users", [], {"age": 31}) returns only matching rows."""
        rows = self.client.read("users", [], {"age": 31})

        self.assertEqual(
            rows,
            [
                {"id": 1, "name": "Ana", "age": 31, "avatar": None},
                {"id": 2, "name": "Bo", "age": 31, "avatar": None},
            ],
        )
        self.assertEqual(list(rows[0].keys()), ["id", "name", "age", "avatar"])

    def test_read_empty_filter_returns_all(self):
        rows = self.client.read("users")

        self.assertEqual(len(rows), 3)
        self.assertEqual(self.executed, ["SELECT * FROM users"])

    def test_read_selected_columns(self):
        rows = self.client.read("users", ["name"], {"id": 3})
        self.assertEqual(rows, [{"name": "Cy"}])

    def test_read_multiple_conditions(self):
        rows = self.client.read("users", ["id"], {"age": 31, "name": "Bo"})
        self.assertEqual(rows, [{"id": 2}])

    def test_read_no_match(self):
        self.assertEqual(self.client.read("users", [], {"age": 99}), [])

    def test_read_decodes_bytes(self):
        """Test that byte-valued columns are surfaced as text."""
        new_id = self.client.create("users", {"name": "Di", "avatar": b"hello"})

        rows = self.client.read("users", ["avatar"], {"id": new_id})
        self.assertEqual(rows, [{"avatar": "hello"}])
        self.assertIsInstance(rows[0]["avatar"], str)

    def test_read_driver_error(self):
        with self.assertRaises(StatementExecutionError):
            self.client.read("users", ["no_such_column"])

    def test_read_decode_error_propagates(self):
        with patch("dualdb.database.client._decode_rows", side_effect=ResultDecodeError("boom")):
            with self.assertRaises(ResultDecodeError):
                self.client.read("users")


class TestUpdate(ClientTestCase):

    def setUp(self):
        super().setUp()
        self._seed({"id": 42, "name": "Ana", "age": 30})

    def test_update_returns_affected_count(self):
        """Test update("users", {"age": 31}, {"id": 42}) returns 1."""
        affected = self.client.update("users", {"age": 31}, {"id": 42})

        self.assertEqual(affected, 1)
        self.assertEqual(len(self.executed), 1)
        self.assertEqual(self.executed[0], "UPDATE users SET age = ? WHERE id = ?")
        self.assertEqual(self.client.read("users", ["age"], {"id": 42}), [{"age": 31}])

    def test_update_empty_filter(self):
        """Test that an unscoped update is refused and nothing is executed."""
        with self.assertRaises(EmptyFilterError):
            self.client.update("users", {"age": 31}, {})

        self.assertEqual(self.executed, [])
        self.assertEqual(self.client.read("users", ["age"]), [{"age": 30}])

    def test_update_empty_data(self):
        with self.assertRaises(EmptyDataError):
            self.client.update("users", {}, {"id": 42})

        self.assertEqual(self.executed, [])

    def test_update_no_match(self):
        self.assertEqual(self.client.update("users", {"age": 31}, {"id": 7}), 0)

    def test_update_counts_every_matching_row(self):
        self._seed({"id": 43, "name": "Bo", "age": 30})

        self.assertEqual(self.client.update("users", {"age": 32}, {"age": 30}), 2)

    def test_update_driver_error(self):
        with self.assertRaises(StatementExecutionError):
            self.client.update("users", {"no_such_column": 1}, {"id": 42})


class TestDelete(ClientTestCase):

    def setUp(self):
        super().setUp()
        self._seed({"id": 42, "name": "Ana", "age": 31}, {"id": 43, "name": "Bo", "age": 31})

    def test_delete_returns_affected_count(self):
        """Test delete("users", {"id": 42}) returns 1."""
        affected = self.client.delete("users", {"id": 42})

        self.assertEqual(affected, 1)
        self.assertEqual(self.executed, ["DELETE FROM users WHERE id = ?"])
        self.assertEqual(self.client.read("users", ["id"]), [{"id": 43}])

    def test_delete_empty_filter(self):
        """Test that an unscoped delete is refused and nothing is executed."""
        with self.assertRaises(EmptyFilterError):
            self.client.delete("users", {})

        self.assertEqual(self.executed, [])
        self.assertEqual(len(self.client.read("users")), 2)

    def test_delete_no_match(self):
        self.assertEqual(self.client.delete("users", {"id": 7}), 0)

    def test_delete_driver_error(self):
        with self.assertRaises(StatementExecutionError):
            self.client.delete("missing_table", {"id": 42})


class TestDecodeRows(unittest.TestCase):
    """Test cases for result decoding failures."""

    def test_column_introspection_error(self):
        result = MagicMock()
        result.keys.side_effect = OperationalError("SELECT", {}, Exception("gone"))

        with self.assertRaises(ResultDecodeError):
            _decode_rows(result)

    def test_row_iteration_error(self):
        result = MagicMock()
        result.keys.return_value = ["id"]
        result.__iter__.side_effect = OperationalError("SELECT", {}, Exception("lost connection"))

        with self.assertRaises(ResultDecodeError):
            _decode_rows(result)


class TestClientConstruction(unittest.TestCase):
    """Test cases for connecting, pinging and closing."""

    def test_requires_dsn_or_engine(self):
        with self.assertRaises(ValueError):
            DatabaseClient()

    def test_invalid_dsn(self):
        with self.assertRaises(DatabaseConnectionError):
            DatabaseClient("not-a-dsn")

    @patch("dualdb.database.client.ping_database")
    @patch("dualdb.database.client.create_db_engine")
    def test_connects_and_pings(self, mock_create, mock_ping):
        engine = MagicMock()
        mock_create.return_value = engine

        client = DatabaseClient("root:password@tcp(localhost:3306)/oltp_db")

        mock_create.assert_called_once_with("root:password@tcp(localhost:3306)/oltp_db")
        mock_ping.assert_called_once_with(engine)
        self.assertIs(client.engine, engine)

    @patch("dualdb.database.client.ping_database")
    @patch("dualdb.database.client.create_db_engine")
    def test_ping_failure_releases_pool(self, mock_create, mock_ping):
        engine = MagicMock()
        mock_create.return_value = engine
        mock_ping.side_effect = DatabaseConnectionError("failed to ping database")

        with self.assertRaises(DatabaseConnectionError):
            DatabaseClient("root:password@tcp(localhost:3306)/oltp_db")

        engine.dispose.assert_called_once()

    @patch("dualdb.database.client.ping_database")
    @patch("dualdb.database.client.create_db_engine")
    def test_from_config_uses_dsn(self, mock_create, mock_ping):
        config = DatabaseConfig("localhost", "3307", "root", "password", "olap_db")

        DatabaseClient.from_config(config)

        mock_create.assert_called_once_with(
            "root:password@tcp(localhost:3307)/olap_db?parseTime=true&charset=utf8mb4"
        )

    @patch("dualdb.database.client.create_db_engine")
    def test_driver_rejecting_dsn_option_is_wrapped(self, mock_create):
        """Test that a connect argument the driver refuses surfaces as a connection error."""
        engine = MagicMock()
        engine.connect.side_effect = TypeError(
            "Connection.__init__() got an unexpected keyword argument 'timeout'"
        )
        mock_create.return_value = engine

        with self.assertRaises(DatabaseConnectionError) as cm:
            DatabaseClient("root:pw@tcp(127.0.0.1:1)/db?parseTime=true&charset=utf8mb4&timeout=5s")

        self.assertIsInstance(cm.exception.__cause__, TypeError)
        engine.dispose.assert_called_once()

    def test_context_manager_closes(self):
        engine = MagicMock()

        with DatabaseClient.from_engine(engine) as client:
            self.assertIs(client.engine, engine)

        engine.dispose.assert_called_once()


class TestConnection(unittest.TestCase):
    """Test cases for engine creation and the liveness check."""

    def test_pool_bounds(self):
        """Test that the pool keeps 5 idle and opens at most 25 connections."""
        engine = create_db_engine("root:password@tcp(localhost:3306)/oltp_db?parseTime=true&charset=utf8mb4")
        try:
            self.assertEqual(engine.pool.size(), 5)
            self.assertEqual(engine.pool._max_overflow, 20)
            self.assertEqual(engine.url.database, "oltp_db")
        finally:
            engine.dispose()

    def test_ping_success(self):
        engine = _make_engine()
        ping_database(engine)
        engine.dispose()

    def test_ping_driver_argument_error(self):
        engine = MagicMock()
        engine.connect.side_effect = TypeError("unexpected keyword argument 'timeout'")

        with self.assertRaises(DatabaseConnectionError):
            ping_database(engine)

    def test_ping_failure(self):
        engine = MagicMock()
        engine.connect.side_effect = OperationalError("SELECT 1", {}, Exception("connection refused"))

        with self.assertRaises(DatabaseConnectionError) as cm:
            ping_database(engine)

        self.assertIsInstance(cm.exception.__cause__, OperationalError)


if __name__ == "__main__":
    unittest.main()
