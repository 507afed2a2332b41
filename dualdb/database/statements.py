"""
SQL statement assembly.

Builds INSERT, SELECT, UPDATE and DELETE statements from caller-supplied
column/value maps. Values are always bound through named placeholders
(``:p0``, ``:p1``, ...). Table and column names are inlined as given.
"""

from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..models import SqlValue, Statement
from .errors import EmptyDataError, EmptyFilterError


class _Params:
    """Allocates unique placeholder names and collects their values."""

    def __init__(self):
        self.values: Dict[str, SqlValue] = {}

    def bind(self, value: SqlValue) -> str:
        name = f"p{len(self.values)}"
        self.values[name] = value
        return f":{name}"


def _pairs(mapping: Optional[Mapping[str, SqlValue]]) -> List[Tuple[str, SqlValue]]:
    """Freeze a mapping into an ordered list of (column, value) pairs."""
    return list(mapping.items()) if mapping else []


def _conditions(pairs: List[Tuple[str, SqlValue]], params: _Params) -> str:
    return " AND ".join(f"{column} = {params.bind(value)}" for column, value in pairs)


def build_insert(table: str, data: Mapping[str, SqlValue]) -> Statement:
    """
    Build ``INSERT INTO t (cols) VALUES (placeholders)``.

    Raises:
        EmptyDataError: If data is empty
    """
    pairs = _pairs(data)
    if not pairs:
        raise EmptyDataError(f"no data to insert into {table}")

    params = _Params()
    columns = ", ".join(column for column, _ in pairs)
    placeholders = ", ".join(params.bind(value) for _, value in pairs)
    return Statement(f"INSERT INTO {table} ({columns}) VALUES ({placeholders})", params.values)


def build_select(
    table: str,
    columns: Optional[Sequence[str]] = None,
    filters: Optional[Mapping[str, SqlValue]] = None,
) -> Statement:
    """Build ``SELECT cols FROM t [WHERE ...]``; no columns selects ``*``."""
    params = _Params()
    columns_sql = ", ".join(columns) if columns else "*"
    sql = f"SELECT {columns_sql} FROM {table}"

    pairs = _pairs(filters)
    if pairs:
        sql += f" WHERE {_conditions(pairs, params)}"
    return Statement(sql, params.values)


def build_update(table: str, data: Mapping[str, SqlValue], filters: Mapping[str, SqlValue]) -> Statement:
    """
    Build ``UPDATE t SET col = ..., ... WHERE ...``.

    Raises:
        EmptyDataError: If data is empty
        EmptyFilterError: If filters is empty (unscoped UPDATE is refused)
    """
    data_pairs = _pairs(data)
    if not data_pairs:
        raise EmptyDataError(f"no data to update in {table}")

    filter_pairs = _pairs(filters)
    if not filter_pairs:
        raise EmptyFilterError(f"empty filter: UPDATE on {table} without WHERE is not allowed")

    params = _Params()
    assignments = ", ".join(f"{column} = {params.bind(value)}" for column, value in data_pairs)
    where = _conditions(filter_pairs, params)
    return Statement(f"UPDATE {table} SET {assignments} WHERE {where}", params.values)


def build_delete(table: str, filters: Mapping[str, SqlValue]) -> Statement:
    """
    Build ``DELETE FROM t WHERE ...``.

    Raises:
        EmptyFilterError: If filters is empty (unscoped DELETE is refused)
    """
    pairs = _pairs(filters)
    if not pairs:
        raise EmptyFilterError(f"empty filter: DELETE on {table} without WHERE is not allowed")

    params = _Params()
    return Statement(f"DELETE FROM {table} WHERE {_conditions(pairs, params)}", params.values)
