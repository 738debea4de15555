"""Tests for the ``python -m arithlex`` token printer."""

from __future__ import annotations

import io

import pytest

from arithlex.__main__ import DEFAULT_EXPRESSION, main


class TestOutput:
    def test_default_expression(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines == [
            "Number: 12", "+", "Number: 34", "-", "Number: 5", "*", "Number: 67", "/", "Number: 8",
        ]
        assert DEFAULT_EXPRESSION == "12 + 34 - 5 * 67 / 8"

    def test_arguments_are_joined(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["(2", "^", "3)", "%", "4"]) == 0
        out = capsys.readouterr().out
        assert out == "(\nNumber: 2\n^\nNumber: 3\n)\n%\nNumber: 4\n"

    def test_empty_expression_prints_nothing(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["   "]) == 0
        assert capsys.readouterr().out == ""

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("7a8\n"))
        assert main(["-"]) == 0
        assert capsys.readouterr().out == "Number: 7\nNumber: 8\n"


class TestOptions:
    def test_strict_failure(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--strict", "1 + x"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "unrecognized character 'x'" in captured.err
        assert "1:5" in captured.err

    def test_strict_failure_names_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("x"))
        assert main(["--strict", "-"]) == 1
        assert "<stdin>:1:1" in capsys.readouterr().err

    def test_overflow_checked(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--overflow", "checked", "9223372036854775808"]) == 1
        assert "overflows" in capsys.readouterr().err

    def test_overflow_unbounded(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--overflow=unbounded", "9223372036854775808"]) == 0
        assert capsys.readouterr().out == "Number: 9223372036854775808\n"

    def test_bad_overflow_choice(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--overflow", "saturate", "1"])
        assert exc_info.value.code == 2


class TestLeadingMinus:
    """Expression words that start with '-' are not options."""

    def test_negative_looking_expression(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-2*3"]) == 0
        assert capsys.readouterr().out == "-\nNumber: 2\n*\nNumber: 3\n"

    def test_minus_before_paren(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-(2)"]) == 0
        assert capsys.readouterr().out == "-\n(\nNumber: 2\n)\n"

    def test_word_order_is_kept(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["1", "-(2)", "--strict", "^", "3"]) == 0
        out = capsys.readouterr().out
        assert out == "Number: 1\n-\n(\nNumber: 2\n)\n^\nNumber: 3\n"

    def test_option_after_expression(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-x", "--strict"]) == 1
        assert "unrecognized character 'x'" in capsys.readouterr().err

    def test_double_dash_separator(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--", "-2*3"]) == 0
        assert capsys.readouterr().out == "-\nNumber: 2\n*\nNumber: 3\n"

    def test_unknown_long_option_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--bogus", "1"])
        assert exc_info.value.code == 2
