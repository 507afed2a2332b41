"""
Database configuration management module.

This module handles DSN parsing, turning the
``user:password@tcp(host:port)/dbname?options`` format into a SQLAlchemy URL.
"""

from urllib.parse import parse_qsl

from sqlalchemy.engine import URL

from ..constants import DEFAULT_CHARSET, DSN_PROTOCOL, SQLALCHEMY_DRIVER
from .errors import DatabaseConnectionError

# DSN options with no PyMySQL counterpart; temporal columns are always converted
_IGNORED_OPTIONS = {"parseTime"}


def parse_dsn(dsn: str) -> URL:
    """
    Parse a DSN string into a SQLAlchemy URL.

    The credentials are split from the address at the last ``@`` before the
    final ``/``, so passwords may contain ``@`` or ``/``. Only the ``tcp``
    protocol is supported. ``charset`` becomes a PyMySQL connect argument;
    ``parseTime`` is accepted and ignored; other options are passed through.

    Args:
        dsn: DSN string to parse

    Returns:
        SQLAlchemy URL for the mysql+pymysql dialect

    Raises:
        DatabaseConnectionError: If the DSN is malformed
    """
    if not dsn:
        raise DatabaseConnectionError("DSN is empty")

    slash = dsn.rfind("/")
    if slash == -1:
        raise DatabaseConnectionError("DSN missing '/' before database name")

    head, tail = dsn[:slash], dsn[slash + 1:]
    database, _, options = tail.partition("?")

    at = head.rfind("@")
    if at == -1:
        raise DatabaseConnectionError("DSN missing '@' between credentials and address")

    credentials, address = head[:at], head[at + 1:]
    username, _, password = credentials.partition(":")
    if not username:
        raise DatabaseConnectionError("DSN missing username")

    if not (address.startswith(f"{DSN_PROTOCOL}(") and address.endswith(")")):
        raise DatabaseConnectionError(
            f"DSN address '{address}' not supported. Use '{DSN_PROTOCOL}(host:port)'"
        )

    host, _, port = address[len(DSN_PROTOCOL) + 1:-1].rpartition(":")
    if not host:
        raise DatabaseConnectionError("DSN missing host or port")

    try:
        port_number = int(port)
    except ValueError as e:
        raise DatabaseConnectionError(f"DSN port '{port}' is not a number") from e

    if not database:
        raise DatabaseConnectionError("DSN missing database name")

    query = {"charset": DEFAULT_CHARSET}
    for key, value in parse_qsl(options):
        if key not in _IGNORED_OPTIONS:
            query[key] = value

    return URL.create(
        drivername=SQLALCHEMY_DRIVER,
        username=username,
        password=password or None,
        host=host,
        port=port_number,
        database=database,
        query=query,
    )

