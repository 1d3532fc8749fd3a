"""UpdateStatement: chainable UPDATE statement builder."""

from __future__ import annotations

from typing import Any

from .base import Predicates, Statement
from .compiler import compile_update
from .keywords import EQUAL, UPDATE
from .literals import render_literal


class UpdateStatement(Predicates, Statement):
    """Chainable UPDATE statement builder.

    Usage::

        sql = (UpdateStatement('trade')
                   .set('sym', 'AAPL')
                   .set('size', 100)
                   .where('id', '>=', 10)
                   .render())
        # UPDATE trade SET sym = 'AAPL', size = 100 WHERE id >= 10

    Assignments render in insertion order; repeating a column keeps both.
    """

    keyword = UPDATE

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._assignments: list[str] = []

    @property
    def assignments(self) -> tuple[str, ...]:
        return tuple(self._assignments)

    def set(self, column: str, value: Any) -> UpdateStatement:
        """Assign ``value`` to ``column``.

        ``value`` is a tagged value or a str, int, bool, datetime or date.
        """
        self._assignments.append(f'{column} {EQUAL} {render_literal(value)}')
        return self

    def _reset(self) -> None:
        super()._reset()
        if not self.options.keep_assignments_on_clear:
            self._assignments = []

    def _compile(self) -> str:
        return compile_update(
            table=self.table,
            assignments=self._assignments,
            predicates=self._where,
            set_keyword=self.options.set_keyword,
        )
