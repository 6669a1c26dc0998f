"""
Tests for the command-line batch tool (python -m finparse).
"""
import json

import pytest

from finparse.__main__ import main

pytestmark = pytest.mark.usefixtures("restore_logging")


def read_output(capsys):
    out = capsys.readouterr().out
    return [json.loads(line) for line in out.splitlines() if line.strip()]


# =============================================================================
# Inputs and Output
# =============================================================================

class TestCli:
    """Tests for main()."""

    def test_texts_as_arguments(self, capsys):
        code = main(['шашлык 500 руб', 'coffee $5', '--today', '2025-03-12'])
        assert code == 0

        results = read_output(capsys)
        assert len(results) == 2
        assert results[0]['amount'] == '500'
        assert results[0]['currency'] == 'RUB'
        assert results[0]['category'] == 'Food & Dining'
        assert results[1]['currency'] == 'USD'

    def test_today_used_for_relative_dates(self, capsys):
        main(['кофе 200 вчера', '--today', '2025-03-12'])
        assert read_output(capsys)[0]['date'] == '2025-03-11'

    def test_file_input_skips_blank_lines(self, tmp_path, capsys):
        source = tmp_path / 'expenses.txt'
        source.write_text('такси 300\n\nкофе 200\n', encoding='utf-8')

        code = main(['--file', str(source)])
        assert code == 0
        assert [r['amount'] for r in read_output(capsys)] == ['300', '200']

    def test_strict_fails_on_unparsed_line(self, capsys):
        assert main(['кофе 200', 'что-то', '--strict']) == 1
        assert len(read_output(capsys)) == 2

    def test_without_strict_unparsed_line_is_ok(self, capsys):
        assert main(['что-то']) == 0
        assert read_output(capsys)[0]['confidence'] == 'low'


# =============================================================================
# Argument Errors
# =============================================================================

class TestCliErrors:
    """Bad arguments exit with status 2."""

    def test_bad_today(self):
        with pytest.raises(SystemExit) as exc_info:
            main(['кофе 200', '--today', '12.03.2025'])
        assert exc_info.value.code == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(['--file', str(tmp_path / 'missing.txt')])
        assert exc_info.value.code == 2

    def test_no_input(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    def test_invalid_env_config(self, monkeypatch):
        monkeypatch.setenv('FINPARSE_MAX_TEXT_LENGTH', 'abc')
        with pytest.raises(SystemExit) as exc_info:
            main(['кофе 200'])
        assert exc_info.value.code == 2
