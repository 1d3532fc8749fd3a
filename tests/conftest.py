"""Shared fixtures for statement builder tests."""

from __future__ import annotations

import pytest

from fluentsql import (
    RenderOptions, SelectStatement, InsertStatement, UpdateStatement, DeleteStatement,
)


@pytest.fixture
def legacy_options() -> RenderOptions:
    return RenderOptions.legacy()


@pytest.fixture
def update_stmt() -> UpdateStatement:
    """A fresh UPDATE on ``users``."""
    return UpdateStatement('users')


@pytest.fixture
def select_stmt() -> SelectStatement:
    """A fresh SELECT on ``users``."""
    return SelectStatement('users')


@pytest.fixture
def insert_stmt() -> InsertStatement:
    return InsertStatement('users')


@pytest.fixture
def delete_stmt() -> DeleteStatement:
    return DeleteStatement('users')
