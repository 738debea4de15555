"""Tests for strict handling of unrecognized characters."""

from __future__ import annotations

import logging

import pytest

from arithlex import tokenize
from arithlex.config import LexConfig
from arithlex.errors import ArithlexError, UnrecognizedCharacterError
from arithlex.lexer import Lexer
from arithlex.tokens import Token

STRICT = LexConfig(strict=True)


class TestStrictMode:
    """strict=True turns silent drops into errors."""

    def test_clean_input_passes(self) -> None:
        assert tokenize("1 + (2)", config=STRICT) == tokenize("1 + (2)")

    def test_letter_raises(self) -> None:
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            tokenize("7a8", config=STRICT)

        err = exc_info.value
        assert err.char == "a"
        assert err.location is not None
        assert err.location.offset == 1
        assert err.location.col_offset == 2
        assert "U+0061" in str(err)
        assert isinstance(err, ArithlexError)

    def test_location_on_later_line(self) -> None:
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            tokenize("1 +\n  ?", source_name="calc.txt", config=STRICT)
        assert str(exc_info.value).startswith("calc.txt:2:3 ")

    def test_tokens_before_error_are_yielded(self) -> None:
        stream = Lexer("1 + #", config=STRICT).tokenize()
        assert next(stream) == Token.number(1)
        next(stream)
        with pytest.raises(UnrecognizedCharacterError):
            next(stream)

    def test_non_ascii_digit_raises(self) -> None:
        with pytest.raises(UnrecognizedCharacterError):
            tokenize("٣", config=STRICT)


class TestLenientMode:
    """Default mode only logs dropped characters."""

    def test_drop_is_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="arithlex"):
            assert tokenize("x") == []
        assert any("'x'" in r.getMessage() for r in caplog.records)
        assert all(r.levelno == logging.DEBUG for r in caplog.records)
        assert all(r.name.startswith("arithlex.") for r in caplog.records)
