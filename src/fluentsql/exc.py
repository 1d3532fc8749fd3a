"""Exception hierarchy for fluentsql."""


class FluentSQLError(Exception):
    """Base exception for all fluentsql errors."""


class StatementError(FluentSQLError):
    """Misuse of a statement builder."""


class ValueRenderError(StatementError, TypeError):
    """Value type cannot be rendered as a SQL literal."""


class ConfigError(FluentSQLError, ValueError):
    """Malformed render configuration."""
