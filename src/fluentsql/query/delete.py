"""DeleteStatement: chainable DELETE statement builder."""

from __future__ import annotations

from .base import Predicates, Statement
from .compiler import compile_delete
from .keywords import DELETE_FROM


class DeleteStatement(Predicates, Statement):
    """Chainable DELETE statement builder.

    Usage::

        sql = DeleteStatement('trade').equal('sym', 'AAPL').render()
        # DELETE FROM trade WHERE sym = 'AAPL'
    """

    keyword = DELETE_FROM

    def _compile(self) -> str:
        return compile_delete(table=self.table, predicates=self._where)
