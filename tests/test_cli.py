"""
Tests for the command line interface
"""

import pytest

from idem_monoid.cli import (
    EXIT_INVALID_SYMBOL, EXIT_OK, EXIT_TOO_LARGE, build_parser, main,
)


class TestGenerateCommand:
    def test_prints_elements(self, capsys):
        assert main(["generate", "2"]) == EXIT_OK
        assert capsys.readouterr().out == "0\na\nb\nab\nba\naba\nbab\n"

    def test_writes_file(self, tmp_path, capsys):
        target = tmp_path / "elements.txt"
        assert main(["generate", "3", "--workers", "2", "--output", str(target)]) == EXIT_OK
        lines = target.read_text().splitlines()
        assert len(lines) == 160
        assert lines[0] == "0"
        assert capsys.readouterr().out == ""

    def test_too_large(self, capsys):
        assert main(["generate", "5"]) == EXIT_TOO_LARGE
        assert main(["generate", "3", "--max-generators", "2"]) == EXIT_TOO_LARGE
        assert "exceeds" in capsys.readouterr().err


class TestReduceCommand:
    def test_reduce(self, capsys):
        assert main(["reduce", "ababcbcbab"]) == EXIT_OK
        assert capsys.readouterr().out == "abcbab\n"

    def test_identity(self, capsys):
        assert main(["reduce", "0"]) == EXIT_OK
        assert capsys.readouterr().out == "0\n"

    def test_verbose(self, capsys):
        assert main(["reduce", "aaa", "-v"]) == EXIT_OK
        assert capsys.readouterr().out.splitlines() == [
            "(aa)a -> (a)a",
            "(aa) -> (a)",
            "a",
        ]

    def test_verbose_multi_letter(self, capsys):
        assert main(["reduce", "abab", "--verbose"]) == EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert lines[-1] == "ab"
        assert all(" -> " in line for line in lines[:-1])

    def test_invalid_symbol(self, capsys):
        assert main(["reduce", "abd", "--alphabet", "abc"]) == EXIT_INVALID_SYMBOL
        assert "'d'" in capsys.readouterr().err


class TestTableCommand:
    def test_table_too_large(self, capsys):
        assert main(["table", "4"]) == EXIT_TOO_LARGE
        assert capsys.readouterr().out == ""

    def test_table(self, capsys):
        assert main(["table", "1"]) == EXIT_OK
        assert capsys.readouterr().out.splitlines() == [
            "0 * 0 = 0", "0 * a = a", "a * 0 = a", "a * a = a",
        ]


class TestParser:
    def test_requires_command(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
