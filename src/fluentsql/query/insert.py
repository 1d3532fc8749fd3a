"""InsertStatement: single-row INSERT statement builder."""

from __future__ import annotations

from typing import Any

from .base import Statement
from .compiler import compile_insert
from .keywords import INSERT_INTO
from .literals import render_literal


class InsertStatement(Statement):
    """Single-row INSERT statement builder.

    Usage::

        sql = (InsertStatement('trade')
                   .value('sym', 'AAPL')
                   .value('size', 100)
                   .render())
        # INSERT INTO trade (sym, size) VALUES ('AAPL', 100)
    """

    keyword = INSERT_INTO

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._columns: list[str] = []
        self._values: list[str] = []

    @property
    def columns(self) -> tuple[str, ...]:
        return tuple(self._columns)

    def value(self, column: str, value: Any) -> InsertStatement:
        """Add a column and its value, rendered like UPDATE assignments."""
        self._columns.append(column)
        self._values.append(render_literal(value))
        return self

    def _reset(self) -> None:
        super()._reset()
        self._columns = []
        self._values = []

    def _compile(self) -> str:
        return compile_insert(self.table, self._columns, self._values)
