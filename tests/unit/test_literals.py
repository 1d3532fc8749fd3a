"""Unit tests for tagged values and literal rendering."""

import datetime

import pytest

from fluentsql import UpdateStatement
from fluentsql.exc import FluentSQLError, ValueRenderError, StatementError
from fluentsql.query.literals import (
    Boolean, Integer, Text, Timestamp,
    epoch_millis, render_comparand, render_literal, render_text, wrap_value,
)


class TestWrapValue:
    def test_str(self):
        assert wrap_value('a') == Text('a')

    def test_int(self):
        assert wrap_value(5) == Integer(5)

    def test_bool_is_not_integer(self):
        assert isinstance(wrap_value(True), Boolean)

    def test_datetime(self):
        now = datetime.datetime(2024, 5, 1, 12, 0)
        assert wrap_value(now) == Timestamp(now)

    def test_date(self):
        assert isinstance(wrap_value(datetime.date(2024, 5, 1)), Timestamp)

    def test_none_passes_through(self):
        assert wrap_value(None) is None

    def test_tagged_passes_through(self):
        tagged = Text('x')
        assert wrap_value(tagged) is tagged

    @pytest.mark.parametrize('bad', [1.5, b'x', [1], {'a': 1}])
    def test_unsupported(self, bad):
        with pytest.raises(ValueRenderError):
            wrap_value(bad)

    def test_error_hierarchy(self):
        assert issubclass(ValueRenderError, StatementError)
        assert issubclass(ValueRenderError, TypeError)


class TestTaggedPayloads:
    @pytest.mark.parametrize('tag,payload', [
        (Timestamp, 5),
        (Timestamp, '2024-01-01'),
        (Integer, 'x'),
        (Integer, True),
        (Integer, 1.0),
        (Boolean, 'false'),
        (Boolean, 0),
        (Text, 7),
        (Text, None),
    ])
    def test_bad_payload_raises(self, tag, payload):
        with pytest.raises(ValueRenderError, match=tag.__name__):
            tag(payload)

    def test_date_payload_accepted(self):
        assert Timestamp(datetime.date(1970, 1, 1)).value == datetime.date(1970, 1, 1)

    def test_bad_payload_never_reaches_statement(self):
        stmt = UpdateStatement('t')
        with pytest.raises(FluentSQLError):
            stmt.set('a', Boolean('false'))
        assert stmt.render() == 'UPDATE t'


class TestRenderLiteral:
    def test_text(self):
        assert render_literal('abc') == "'abc'"

    def test_text_not_escaped(self):
        assert render_literal("it's") == "'it's'"

    def test_integer(self):
        assert render_literal(-42) == '-42'

    def test_booleans(self):
        assert render_literal(True) == '1'
        assert render_literal(False) == '0'
        assert render_literal(Boolean(False)) == '0'

    def test_timestamp(self):
        assert render_literal(Timestamp(datetime.datetime(1970, 1, 1, 0, 0, 1))) == '1000'

    def test_none(self):
        assert render_literal(None) == 'NULL'

    def test_repr(self):
        assert repr(Integer(3)) == 'Integer(3)'

    def test_equality_depends_on_tag(self):
        assert Integer(1) != Boolean(1)


class TestRenderText:
    def test_plain_values_use_str(self):
        assert render_text('abc') == 'abc'
        assert render_text(10) == '10'

    def test_none(self):
        assert render_text(None) == 'NULL'

    def test_tagged_values_render_as_literals(self):
        assert render_text(Text('abc')) == "'abc'"


class TestEpochMillis:
    def test_naive_is_utc(self):
        assert epoch_millis(datetime.datetime(1970, 1, 1, 0, 0, 0, 5000)) == 5

    def test_aware(self):
        tz = datetime.timezone(datetime.timedelta(hours=2))
        assert epoch_millis(datetime.datetime(1970, 1, 1, 2, 0, tzinfo=tz)) == 0

    def test_before_epoch(self):
        assert epoch_millis(datetime.date(1969, 12, 31)) == -86_400_000

    def test_date_is_midnight(self):
        assert epoch_millis(datetime.date(2000, 1, 1)) == 946_684_800_000


class TestRenderComparand:
    def test_str_is_quoted(self):
        assert render_comparand('abc') == "'abc'"

    def test_bool_and_int(self):
        assert render_comparand(True) == '1'
        assert render_comparand(12) == '12'

    def test_float_uses_text(self):
        assert render_comparand(1.5) == '1.5'

    def test_none(self):
        assert render_comparand(None) == 'NULL'
