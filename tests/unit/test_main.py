"""
Unit tests for the command line entry point
"""

import io
import logging
import pytest
from filterscope import main as cli
from filterscope.config import settings as settings_module


@pytest.fixture(autouse=True)
def fresh_state(monkeypatch):
    """Reset the settings singleton and remove installed log handlers"""
    monkeypatch.setattr(settings_module, '_settings', None)
    yield
    logger = logging.getLogger('filterscope')
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def run(argv):
    """Run main and return the exit code"""
    with pytest.raises(SystemExit) as exc_info:
        cli.main(argv)
    return exc_info.value.code


class TestMain:
    """Test CLI behaviour"""

    def test_clause_printed(self, config_file, capsys):
        """Test clause on stdout"""
        code = run([
            '--table', 'sales.orders',
            '--query', "SELECT * FROM sales.orders WHERE cob_date='2024-01-15'",
            '--config', config_file,
        ])

        assert code == 0
        assert capsys.readouterr().out == "where cob_date='2024-01-15'\n"

    def test_no_match(self, config_file, capsys):
        """Test clean no-match prints nothing"""
        code = run(['--table', 'bar.baz', '--query', 'select * from foo', '--config', config_file])

        assert code == 0
        assert capsys.readouterr().out == ""

    def test_invalid_query(self, config_file, capsys):
        """Test invalid query exits non-zero"""
        code = run([
            '--table', 'bar.baz',
            '--query', 'select * from foo where x=1',
            '--config', config_file,
        ])

        captured = capsys.readouterr()
        assert code == 1
        assert captured.out == ""
        assert "invalid query" in captured.err

    def test_policy_violation(self, config_file, capsys):
        """Test policy violation exits non-zero"""
        code = run([
            '--table', 'sales.orders',
            '--query', 'select * from sales.orders',
            '--config', config_file,
        ])

        assert code == 1
        assert "row filter is mandatory" in capsys.readouterr().err

    def test_query_from_file(self, config_file, tmp_path, capsys):
        """Test --file input"""
        sql_file = tmp_path / 'query.sql'
        sql_file.write_text("select *\nfrom foo\nwhere x=1\n", encoding='utf-8')

        code = run(['--table', 'foo', '--file', str(sql_file), '--config', config_file])

        assert code == 0
        assert capsys.readouterr().out == "where x=1\n\n"

    def test_query_from_stdin(self, config_file, monkeypatch, capsys):
        """Test stdin input"""
        monkeypatch.setattr('sys.stdin', io.StringIO("select * from foo where x=1"))

        code = run(['--table', 'foo', '--config', config_file])

        assert code == 0
        assert capsys.readouterr().out == "where x=1\n"

    def test_missing_query_file(self, config_file, tmp_path, capsys):
        """Test unreadable input file"""
        code = run(['--table', 'foo', '--file', str(tmp_path / 'nope.sql'), '--config', config_file])

        assert code == 1
        assert "Input Error" in capsys.readouterr().err

    def test_missing_config(self, tmp_path, capsys):
        """Test configuration error"""
        code = run(['--table', 'foo', '--query', 'select 1', '--config', str(tmp_path / 'none.yaml')])

        assert code == 1
        assert "Configuration Error" in capsys.readouterr().err

    def test_table_required(self, capsys):
        """Test argparse rejects missing --table"""
        assert run(['--query', 'select 1']) == 2
