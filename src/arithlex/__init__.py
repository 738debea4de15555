"""
arithlex: Lexer for integer arithmetic expressions

Turns an expression like ``12 + 34 * (5 ^ 2)`` into a flat list of tokens:
integer literals and the operators ``+ - * / ^ %`` plus parentheses.
Whitespace is skipped and any other character is dropped.

Quick Start:
    >>> from arithlex import tokenize
    >>> [str(t) for t in tokenize("12 + 34")]
    ['Number: 12', '+', 'Number: 34']

    >>> # Lazy form, one token at a time
    >>> from arithlex import Lexer
    >>> for token in Lexer("(1)").tokenize():
    ...     print(token.type.name)
    LPAREN
    NUMBER
    RPAREN

Strict Options:
    >>> from arithlex import LexConfig
    >>> tokenize("1 + x", config=LexConfig(strict=True))
    Traceback (most recent call last):
    ...
    arithlex.errors.UnrecognizedCharacterError: 1:5 unrecognized character 'x' (U+0078)
"""

from arithlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from arithlex.errors import (
    ArithlexError,
    ConfigError,
    LexError,
    NumberOverflowError,
    UnrecognizedCharacterError,
)
from arithlex.lexer import Lexer
from arithlex.location import SourceLocation
from arithlex.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(
    source: str,
    *,
    source_name: str | None = None,
    config: LexConfig | None = None,
) -> list[Token]:
    """Tokenize an expression into a list of tokens.

    Args:
        source: Expression source text
        source_name: Optional name of the source for error messages
        config: Lexer options (uses the context config if None)

    Returns:
        Every token in source order. Empty for empty or all-whitespace input.

    Example:
        >>> tokenize("7a8")
        [Token(NUMBER, 7, 1:1), Token(NUMBER, 8, 1:3)]

    """
    return list(Lexer(source, source_name=source_name, config=config).tokenize())


__all__ = [
    "ArithlexError",
    "ConfigError",
    "LexConfig",
    "LexError",
    "Lexer",
    "NumberOverflowError",
    "SourceLocation",
    "Token",
    "TokenType",
    "UnrecognizedCharacterError",
    "__version__",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    "tokenize",
]
