"""Unit tests for the fluentsql command line."""

import json
import logging
from unittest.mock import patch

import pytest

from fluentsql.cli import main


class TestCli:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert 'usage' in capsys.readouterr().out

    def test_update(self, capsys):
        rc = main([
            'update', 'users',
            '--set', 'name=Ann', '--set-int', 'age=30', '--set-bool', 'active=yes',
            '--where', 'id = 7', '--where', 'org = 2',
        ])
        assert rc == 0
        assert capsys.readouterr().out.strip() == (
            "UPDATE users SET name = 'Ann', age = 30, active = 1 "
            "WHERE id = 7 AND org = 2"
        )

    def test_update_legacy(self, capsys):
        assert main(['--legacy', 'update', 'T', '--set-int', 'b=5']) == 0
        assert capsys.readouterr().out.strip() == 'UPDATE T b = 5'

    def test_update_with_config(self, capsys, tmp_path):
        f = tmp_path / "render.json"
        f.write_text(json.dumps({"render": {"set_keyword": False}}))
        assert main(['--config', str(f), 'update', 'T', '--set', 'a=x']) == 0
        assert capsys.readouterr().out.strip() == "UPDATE T a = 'x'"

    def test_bad_config_reports_error(self, capsys, tmp_path):
        f = tmp_path / "render.json"
        f.write_text(json.dumps({"render": {"bogus": True}}))
        assert main(['--config', str(f), 'delete', 'T']) == 1
        assert 'error: Unknown render option' in capsys.readouterr().err

    def test_missing_config_reports_error(self, capsys):
        assert main(['--config', '/nonexistent/render.json', 'delete', 'T']) == 1
        assert capsys.readouterr().err.startswith('error:')

    def test_select(self, capsys):
        rc = main([
            'select', 'trade', '--columns', 'sym, price', '--distinct',
            '--where', 'price >= 100', '--where', 'size > 0', '--any',
            '--order-by', 'price', '--desc', '--limit', '5',
        ])
        assert rc == 0
        assert capsys.readouterr().out.strip() == (
            'SELECT DISTINCT sym, price FROM trade '
            'WHERE price >= 100 OR size > 0 ORDER BY price DESC LIMIT 5'
        )

    def test_select_negative_limit(self, capsys):
        assert main(['select', 't', '--limit', '-1']) == 1
        assert 'limit' in capsys.readouterr().err

    def test_delete_skips_blank_where(self, capsys):
        assert main(['delete', 't', '--where', ' ', '--where', 'a = 1']) == 0
        assert capsys.readouterr().out.strip() == 'DELETE FROM t WHERE a = 1'

    def test_insert(self, capsys):
        assert main(['insert', 't', '--set', 'a=x=y', '--set-int', 'b=-2']) == 0
        assert capsys.readouterr().out.strip() == "INSERT INTO t (a, b) VALUES ('x=y', -2)"

    @pytest.mark.parametrize('arg', ['--set-int=a=x', '--set-bool=a=maybe', '--set=novalue'])
    def test_bad_value_exits(self, arg):
        with pytest.raises(SystemExit) as exc:
            main(['update', 't', arg])
        assert exc.value.code == 2


class TestCliOptions:
    def test_legacy_and_config_are_exclusive(self, capsys, tmp_path):
        f = tmp_path / "render.json"
        f.write_text(json.dumps({"render": {"set_keyword": True}}))
        with pytest.raises(SystemExit) as exc:
            main(['--legacy', '--config', str(f), 'update', 'T'])
        assert exc.value.code == 2
        assert 'not allowed with' in capsys.readouterr().err

    def test_verbose_configures_debug_logging(self, capsys):
        with patch('fluentsql.cli.logging.basicConfig') as basic_config:
            assert main(['-v', 'delete', 'T']) == 0
        basic_config.assert_called_once()
        assert basic_config.call_args.kwargs['level'] == logging.DEBUG
        assert capsys.readouterr().out.strip() == 'DELETE FROM T'

    def test_quiet_by_default(self, capsys):
        with patch('fluentsql.cli.logging.basicConfig') as basic_config:
            assert main(['delete', 'T']) == 0
        basic_config.assert_not_called()
