"""fluentsql — fluent builders for SQL statement strings.

Usage::

    import fluentsql

    sql = (fluentsql.update('users')
                    .set('name', 'Ann')
                    .set('active', True)
                    .equal('id', 7)
                    .and_()
                    .in_('group_id', fluentsql.select('groups').columns('id'))
                    .render())
    # UPDATE users SET name = 'Ann', active = 1
    #   WHERE id = 7 AND group_id IN (SELECT id FROM groups)

Builders only produce text: values are not escaped and nothing is executed.
"""

from __future__ import annotations

from .config import RenderOptions, load_config, options_from_config
from .query.base import Statement, Predicates
from .query.literals import (
    Value, Text, Integer, Boolean, Timestamp,
    wrap_value, render_literal,
)
from .query.select import SelectStatement
from .query.insert import InsertStatement
from .query.update import UpdateStatement
from .query.delete import DeleteStatement
from .exc import FluentSQLError, StatementError, ValueRenderError, ConfigError

__version__ = "0.1.0"


def select(table: str, options: RenderOptions | None = None) -> SelectStatement:
    """Start a SELECT on ``table``."""
    return SelectStatement(table, options)


def insert(table: str, options: RenderOptions | None = None) -> InsertStatement:
    """Start an INSERT into ``table``."""
    return InsertStatement(table, options)


def update(table: str, options: RenderOptions | None = None) -> UpdateStatement:
    """Start an UPDATE of ``table``."""
    return UpdateStatement(table, options)


def delete(table: str, options: RenderOptions | None = None) -> DeleteStatement:
    """Start a DELETE from ``table``."""
    return DeleteStatement(table, options)


__all__ = [
    # Builders
    'Statement', 'Predicates',
    'SelectStatement', 'InsertStatement', 'UpdateStatement', 'DeleteStatement',
    'select', 'insert', 'update', 'delete',
    # Values
    'Value', 'Text', 'Integer', 'Boolean', 'Timestamp',
    'wrap_value', 'render_literal',
    # Config
    'RenderOptions', 'load_config', 'options_from_config',
    # Exceptions
    'FluentSQLError', 'StatementError', 'ValueRenderError', 'ConfigError',
]
