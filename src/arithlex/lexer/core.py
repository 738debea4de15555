"""Single-pass scanner for arithmetic expressions.

Classifies one character at a time and only ever moves the cursor forward,
so every call makes progress and scanning is O(n).

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from arithlex.config import LexConfig, get_lex_config
from arithlex.errors import UnrecognizedCharacterError
from arithlex.lexer.classifiers import SymbolClassifierMixin, is_ascii_digit
from arithlex.lexer.numbers import NumberScannerMixin
from arithlex.location import SourceLocation
from arithlex.tokens import Token, TokenType
from arithlex.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    SymbolClassifierMixin,
    NumberScannerMixin,
):
    """Arithmetic expression lexer.

    Each step skips whitespace, consumes one character and classifies it as
    a symbol, the start of an integer literal, or something to drop.

    Usage:
            >>> lexer = Lexer("12 + (3 ^ 2)")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Number: 12
        +
        (
        Number: 3
        ^
        Number: 2
        )

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        The cursor never rewinds, so a second tokenize() yields nothing.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_saved_lineno",
        "_saved_col",
        "_source_name",
        "_config",
    )

    def __init__(
        self,
        source: str,
        *,
        source_name: str | None = None,
        config: LexConfig | None = None,
    ) -> None:
        """Initialize lexer with source text.

        Args:
            source: Expression source text
            source_name: Optional name of the source for error messages
            config: Lexer options; defaults to the active context config
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._saved_lineno = 1
        self._saved_col = 1
        self._source_name = source_name
        self._config = config if config is not None else get_lex_config()

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects in source order, until end of input

        Raises:
            UnrecognizedCharacterError: In strict mode only.
            NumberOverflowError: With the "checked" overflow policy only.
        """
        source_len = self._source_len
        while self._pos < source_len:
            token = self._next_token()
            if token is not None:
                yield token

    def _next_token(self) -> Token | None:
        """Produce the next token.

        Returns:
            The token, or None when this step produced nothing: either end of
            input was reached after whitespace, or the consumed character was
            dropped.
        """
        self._skip_whitespace()
        if self._pos >= self._source_len:
            return None

        start_pos = self._pos
        self._save_location()
        char = self._advance()

        token = self._try_classify_symbol(char, start_pos)
        if token is not None:
            return token
        if is_ascii_digit(char):
            return self._scan_number(char, start_pos)

        self._drop(char, start_pos)
        return None

    def _drop(self, char: str, start_pos: int) -> None:
        """Discard an unrecognized character, or raise in strict mode."""
        if self._config.strict:
            raise UnrecognizedCharacterError(char, self._error_location(start_pos, self._pos))
        logger.debug("Dropped unrecognized character %r at offset %d", char, start_pos)

    # =========================================================================
    # Character navigation helpers
    # =========================================================================

    def _skip_whitespace(self) -> None:
        while self._peek().isspace():
            self._advance()

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""
        return self._source[self._pos]

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return ""

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current line and column as the start of the next token."""
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(
        self,
        token_type: TokenType,
        start_pos: int,
        value: int | None = None,
    ) -> Token:
        """Create a Token ending at the current position (lazy SourceLocation)."""
        return Token(
            type=token_type,
            value=value,
            _offset=start_pos,
            _end_offset=self._pos,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _source_name=self._source_name,
        )

    def _error_location(self, start_pos: int, end_pos: int) -> SourceLocation:
        return SourceLocation(
            lineno=self._saved_lineno,
            col_offset=self._saved_col,
            offset=start_pos,
            end_offset=end_pos,
            source_name=self._source_name,
        )
