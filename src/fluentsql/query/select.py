"""SelectStatement: chainable SELECT statement builder."""

from __future__ import annotations

from typing import Any

from ..exc import StatementError
from .base import Predicates, Statement
from .compiler import compile_select
from .keywords import DESC, SELECT


class SelectStatement(Predicates, Statement):
    """Chainable SELECT statement builder.

    Usage::

        sql = (SelectStatement('trade')
                   .columns('sym', 'price')
                   .greater_equal('price', 100)
                   .order_by('price', desc=True)
                   .limit(10)
                   .render())
        # SELECT sym, price FROM trade WHERE price >= 100 ORDER BY price DESC LIMIT 10

    A select can also be passed to another statement's ``in_()``.
    """

    keyword = SELECT

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._init_select()

    def _init_select(self) -> None:
        self._columns: list[str] = []
        self._group_by: list[str] = []
        self._order_by: list[str] = []
        self._limit_n: int | None = None
        self._offset_n: int | None = None
        self._distinct = False

    def columns(self, *names: str) -> SelectStatement:
        """Add result columns; ``*`` is used when none are given."""
        self._columns.extend(names)
        return self

    def distinct(self) -> SelectStatement:
        self._distinct = True
        return self

    def group_by(self, *columns: str) -> SelectStatement:
        """Add GROUP BY columns."""
        self._group_by.extend(columns)
        return self

    def order_by(self, column: str, desc: bool = False) -> SelectStatement:
        """Add an ORDER BY column, descending when ``desc`` is set."""
        self._order_by.append(f'{column} {DESC}' if desc else column)
        return self

    def limit(self, n: int) -> SelectStatement:
        """Limit the number of rows returned."""
        self._limit_n = _non_negative('limit', n)
        return self

    def offset(self, n: int) -> SelectStatement:
        """Skip ``n`` rows; rendered only together with a limit."""
        self._offset_n = _non_negative('offset', n)
        return self

    def _reset(self) -> None:
        super()._reset()
        self._init_select()

    def _compile(self) -> str:
        return compile_select(
            table=self.table,
            columns=self._columns,
            predicates=self._where,
            group_by=self._group_by,
            order_by=self._order_by,
            limit=self._limit_n,
            offset=self._offset_n,
            distinct=self._distinct,
        )


def _non_negative(name: str, n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise StatementError(f"{name} must be a non-negative integer, got {n!r}")
    return n
