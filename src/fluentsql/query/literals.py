"""Tagged values for assignments and equality predicates.

A value placed into a statement is one of four tags: ``Text``, ``Integer``,
``Boolean`` or ``Timestamp``.  Plain Python values are dispatched to a tag by
:func:`wrap_value` and rendered by :func:`render_literal`::

    render_literal(wrap_value("abc"))   # "'abc'"
    render_literal(wrap_value(True))    # "1"
"""

from __future__ import annotations

import datetime
from typing import Any

from ..exc import ValueRenderError
from .keywords import NULL

UNIX_EPOCH_DT = datetime.datetime(1970, 1, 1, tzinfo=datetime.timezone.utc)
_ONE_MILLI = datetime.timedelta(milliseconds=1)


class Value:
    """Base class for all tagged values.

    Subclasses name the Python types they accept in ``accepts``; any other
    payload raises :class:`ValueRenderError` at construction.
    """
    __slots__ = ('value',)

    accepts: tuple[type, ...] = (object,)
    rejects: tuple[type, ...] = ()

    def __init__(self, value: Any) -> None:
        if not isinstance(value, self.accepts) or isinstance(value, self.rejects):
            raise ValueRenderError(
                f"{type(self).__name__} cannot hold {type(value).__name__} value {value!r}"
            )
        self.value = value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class Text(Value):
    """A string, rendered between single quotes without escaping."""
    __slots__ = ()
    accepts = (str,)


class Integer(Value):
    """An integer, rendered as decimal digits."""
    __slots__ = ()
    accepts = (int,)
    rejects = (bool,)


class Boolean(Value):
    """A boolean, rendered as ``1`` or ``0``."""
    __slots__ = ()
    accepts = (bool,)


class Timestamp(Value):
    """A point in time, rendered as integer milliseconds since the Unix epoch."""
    __slots__ = ()
    accepts = (datetime.datetime, datetime.date)


# ── Conversion helpers ─────────────────────────────────────────────

def epoch_millis(value: datetime.datetime | datetime.date) -> int:
    """Milliseconds since 1970-01-01 UTC.

    Naive datetimes are taken as UTC; plain dates count from their midnight.
    """
    if not isinstance(value, datetime.datetime):
        value = datetime.datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=datetime.timezone.utc)
    return (value - UNIX_EPOCH_DT) // _ONE_MILLI


def wrap_value(value: Any) -> Value | None:
    """Tag a plain Python value.

    ``None`` passes through untagged and renders as ``NULL``.
    """
    if value is None or isinstance(value, Value):
        return value
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, str):
        return Text(value)
    if isinstance(value, (datetime.datetime, datetime.date)):
        return Timestamp(value)
    raise ValueRenderError(
        f"Cannot render {type(value).__name__} value {value!r}; "
        "expected str, int, bool, datetime or date"
    )


def render_literal(value: Any) -> str:
    """Render a tagged (or plain) value as SQL literal text."""
    value = wrap_value(value)
    if value is None:
        return NULL
    if isinstance(value, Text):
        return f"'{value.value}'"
    if isinstance(value, Boolean):
        return '1' if value.value else '0'
    if isinstance(value, Integer):
        return str(value.value)
    if isinstance(value, Timestamp):
        return str(epoch_millis(value.value))
    raise ValueRenderError(f"Unknown value tag: {value!r}")


def render_text(value: Any) -> str:
    """Default textual form used by raw comparisons (no quoting)."""
    if value is None:
        return NULL
    if isinstance(value, Value):
        return render_literal(value)
    return str(value)


def render_comparand(value: Any) -> str:
    """Render the right-hand side of an unaliased equality.

    Values of the four tags render as literals; anything else (floats,
    decimals) falls back to :func:`render_text`.
    """
    if value is None or isinstance(value, (Value, str, int, datetime.date)):
        return render_literal(value)
    return render_text(value)
