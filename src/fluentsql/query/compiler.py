"""Compile accumulated statement state to SQL text.

Every function here is pure: it reads the fragments a builder collected and
returns a string, never mutating its inputs.

    UPDATE t SET a = 'x', b = 5 WHERE id >= 10 AND status = 1
    SELECT a, b FROM t WHERE ... GROUP BY a ORDER BY b DESC LIMIT 10 OFFSET 20
    INSERT INTO t (a, b) VALUES ('x', 5)
    DELETE FROM t WHERE ...

WHERE fragments are concatenated without a separator: connectives carry
their own surrounding spaces (``" AND "``).
"""

from __future__ import annotations

from typing import Sequence

from .keywords import (
    ALL_COLUMNS, DEFAULT_VALUES, DELETE_FROM, DISTINCT, FROM, GROUP_BY,
    INSERT_INTO, LIMIT, LIST_SEPARATOR, OFFSET, ORDER_BY, SELECT, SET,
    UPDATE, VALUES, WHERE,
)


def compile_where(predicates: Sequence[str]) -> str:
    """Compile WHERE fragments, including the leading space.

    Returns an empty string when there are no fragments.
    """
    if not predicates:
        return ''
    return f' {WHERE} ' + ''.join(predicates)


def compile_update(
    table: str,
    assignments: Sequence[str],
    predicates: Sequence[str],
    set_keyword: bool = True,
) -> str:
    """Compile an UPDATE statement."""
    sql = f'{UPDATE} {table}'
    if assignments:
        head = f' {SET} ' if set_keyword else ' '
        sql += head + LIST_SEPARATOR.join(assignments)
    return sql + compile_where(predicates)


def compile_delete(table: str, predicates: Sequence[str]) -> str:
    """Compile a DELETE statement."""
    return f'{DELETE_FROM} {table}' + compile_where(predicates)


def compile_insert(table: str, columns: Sequence[str], values: Sequence[str]) -> str:
    """Compile an INSERT statement.

    With no columns the row is inserted with ``DEFAULT VALUES``.
    """
    if not columns:
        return f'{INSERT_INTO} {table} {DEFAULT_VALUES}'
    cols = LIST_SEPARATOR.join(columns)
    vals = LIST_SEPARATOR.join(values)
    return f'{INSERT_INTO} {table} ({cols}) {VALUES} ({vals})'


def compile_select(
    table: str,
    columns: Sequence[str],
    predicates: Sequence[str],
    group_by: Sequence[str] = (),
    order_by: Sequence[str] = (),
    limit: int | None = None,
    offset: int | None = None,
    distinct: bool = False,
) -> str:
    """Compile a SELECT statement.

    ``OFFSET`` is only emitted together with ``LIMIT``.
    """
    keyword = f'{SELECT} {DISTINCT}' if distinct else SELECT
    cols = LIST_SEPARATOR.join(columns) if columns else ALL_COLUMNS
    sql = f'{keyword} {cols} {FROM} {table}' + compile_where(predicates)
    if group_by:
        sql += f' {GROUP_BY} ' + LIST_SEPARATOR.join(group_by)
    if order_by:
        sql += f' {ORDER_BY} ' + LIST_SEPARATOR.join(order_by)
    if limit is not None:
        sql += f' {LIMIT} {limit}'
        if offset is not None:
            sql += f' {OFFSET} {offset}'
    return sql
