"""Statement base class and the shared WHERE-clause accumulator."""

from __future__ import annotations

import abc
import logging
from typing import Any, TypeVar

from ..config import RenderOptions
from ..exc import StatementError
from .keywords import AND, DIFFERENT, EQUAL, GREATER_EQUAL, IN, OR, SMALLER_EQUAL
from .literals import render_comparand, render_text

log = logging.getLogger("fluentsql")
predicate_log = logging.getLogger("fluentsql.predicates")

_AND_FRAGMENT = f' {AND} '
_OR_FRAGMENT = f' {OR} '
_CONNECTIVES = (_AND_FRAGMENT, _OR_FRAGMENT)

_S = TypeVar('_S', bound='Statement')
_P = TypeVar('_P', bound='Predicates')


class Statement(abc.ABC):
    """Base class for all statement builders.

    A statement is bound to one table and accumulates fragments through
    chained calls; :meth:`render` turns them into SQL without changing them.
    Instances are not thread-safe: guard shared instances externally.
    """

    keyword: str = ''

    def __init__(self, table: str, options: RenderOptions | None = None) -> None:
        self.table = table
        self.options = options or RenderOptions()

    @abc.abstractmethod
    def _compile(self) -> str:
        """Compile the current state to SQL."""

    def _reset(self) -> None:
        """Drop accumulated fragments. Subclasses extend this."""

    def render(self) -> str:
        """Render the SQL text for the current state."""
        sql = self._compile()
        log.debug("render %s: %s", self.keyword, sql)
        return sql

    def clear(self: _S, table: str = '') -> _S:
        """Reset the builder for reuse, rebinding it to ``table``."""
        log.debug("clear %s on %r", self.keyword, self.table)
        self.table = table
        self._reset()
        return self

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._compile()})"


class Predicates:
    """Mixin accumulating WHERE fragments.

    Fragments are kept in insertion order and joined with no separator,
    so callers place connectives with :meth:`and_` / :meth:`or_`::

        stmt.where("status", "=", 1).and_().greater_equal("id", 10)
        # ... WHERE status = 1 AND id >= 10
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._where: list[str] = []

    @property
    def predicates(self) -> tuple[str, ...]:
        return tuple(self._where)

    def _reset(self) -> None:
        super()._reset()  # type: ignore[misc]
        self._where = []

    def where(self: _P, clause: str, op: str | None = None, value: Any = None) -> _P:
        """Add a WHERE fragment.

        With one argument ``clause`` is raw text and is dropped when blank.
        With ``op`` the fragment is ``"clause op value"``; ``value`` is used
        as-is (``None`` becomes ``NULL``), so quote strings beforehand.
        """
        if op is not None:
            clause = f'{clause} {op} {render_text(value)}'
        if clause.strip():
            self._where.append(clause)
        return self

    def _connect(self: _P, fragment: str) -> _P:
        if not self._where:
            return self
        if self._where[-1] in _CONNECTIVES:
            predicate_log.warning(
                "Consecutive connectives %r, %r in WHERE clause",
                self._where[-1].strip(), fragment.strip(),
            )
        self._where.append(fragment)
        return self

    def and_(self: _P) -> _P:
        """Append ``AND``; no-op while no predicate exists."""
        return self._connect(_AND_FRAGMENT)

    def or_(self: _P) -> _P:
        """Append ``OR``; no-op while no predicate exists."""
        return self._connect(_OR_FRAGMENT)

    def equal(
        self: _P,
        column: str,
        value: Any,
        alias: str | None = None,
        value_alias: str | None = None,
    ) -> _P:
        """Add ``column = value``.

        Without aliases strings are quoted and other values render as literals
        (floats and decimals as their text).
        With ``alias`` the column becomes ``alias.column`` and the value is
        used as-is; with ``value_alias`` it becomes ``value_alias.value``,
        which is how two aliased columns are compared.
        """
        if alias is None and value_alias is None:
            return self.where(column, EQUAL, render_comparand(value))
        column = qualify(alias, column)
        if value_alias is not None:
            value = qualify(value_alias, render_text(value))
        return self.where(column, EQUAL, value)

    def greater_equal(self: _P, column: str, value: Any) -> _P:
        return self.where(column, GREATER_EQUAL, value)

    def smaller_equal(self: _P, column: str, value: Any) -> _P:
        return self.where(column, SMALLER_EQUAL, value)

    def dif(self: _P, column: str, value: Any) -> _P:
        """Add ``column <> value``."""
        return self.where(column, DIFFERENT, value)

    def in_(self: _P, column: str, sub_select: str | Statement) -> _P:
        """Add ``column IN (sub_select)``.

        ``sub_select`` is raw SQL text or another statement, which is
        rendered in place.
        """
        if isinstance(sub_select, Statement):
            sub_select = sub_select.render()
        elif not isinstance(sub_select, str):
            raise StatementError(
                f"in_() expects SQL text or a statement, got {type(sub_select).__name__}"
            )
        return self.where(f'{column} {IN} ({sub_select})')


def qualify(alias: str | None, name: str) -> str:
    """Prefix ``name`` with ``alias.`` unless the alias is empty."""
    return f'{alias}.{name}' if alias else name
