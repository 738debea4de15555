"""Character classifiers for the arithlex lexer.

Classifiers are pure logic: they inspect a character and never move the
cursor. The Lexer decides what to consume based on their answers.
"""

from __future__ import annotations

from arithlex.tokens import SYMBOLS, Token, TokenType


def is_ascii_digit(char: str) -> bool:
    """True for "0" through "9" only.

    str.isdigit() also accepts superscripts and other scripts' digits,
    which are not numeric literals here.
    """
    return "0" <= char <= "9"


class SymbolClassifierMixin:
    """Mixin providing single-character symbol classification."""

    def _make_token(
        self,
        token_type: TokenType,
        start_pos: int,
        value: int | None = None,
    ) -> Token:
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_symbol(self, char: str, start_pos: int) -> Token | None:
        """Try to classify char as an operator or parenthesis.

        Args:
            char: The character already consumed by the lexer
            start_pos: Position of char in source

        Returns:
            Token if char is one of + - * / ^ % ( ), None otherwise.
        """
        token_type = SYMBOLS.get(char)
        if token_type is None:
            return None
        return self._make_token(token_type, start_pos)
