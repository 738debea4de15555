"""Token and TokenType definitions for the arithlex lexer.

The lexer produces a stream of Token objects for a downstream parser or
printer to consume. Each Token has a type, an integer value (numbers only),
and a source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Coordinates are excluded from equality, so Token.number(12) compares equal
to a NUMBER token lexed from "12" anywhere in a source.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arithlex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    The set is closed: the lexer never produces anything else.

    """

    # Arithmetic operators
    PLUS = auto()  # +
    MINUS = auto()  # -
    MUL = auto()  # *
    DIVIDE = auto()  # /
    POWER = auto()  # ^
    MODULO = auto()  # %

    # Grouping
    LPAREN = auto()  # (
    RPAREN = auto()  # )

    # Literals
    NUMBER = auto()  # 42


# Single-character symbols and the token type each maps to
SYMBOLS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MUL,
    "/": TokenType.DIVIDE,
    "^": TokenType.POWER,
    "%": TokenType.MODULO,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}

_SYMBOL_TEXT: dict[TokenType, str] = {kind: char for char, kind in SYMBOLS.items()}


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Integer value for NUMBER tokens, None for symbols
        _offset: Absolute start index in source
        _end_offset: Absolute end index in source (exclusive)
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _source_name: Optional name of the source

    Only ``type`` and ``value`` take part in equality and hashing.

    """

    type: TokenType
    value: int | None = None
    _offset: int = field(default=0, compare=False)
    _end_offset: int = field(default=0, compare=False)
    _lineno: int = field(default=0, compare=False)
    _col: int = field(default=0, compare=False)
    _source_name: str | None = field(default=None, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @classmethod
    def number(cls, value: int) -> Token:
        """Build a position-less NUMBER token."""
        return cls(TokenType.NUMBER, value)

    @classmethod
    def of(cls, token_type: TokenType) -> Token:
        """Build a position-less symbol token.

        Raises:
            ValueError: If token_type is NUMBER (use Token.number instead).
        """
        if token_type is TokenType.NUMBER:
            raise ValueError("NUMBER tokens need a value; use Token.number()")
        return cls(token_type)

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from arithlex.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._offset,
            end_offset=self._end_offset,
            source_name=self._source_name,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def symbol(self) -> str:
        """Source-like text of the token ("+", "(", "42", ...)."""
        if self.type is TokenType.NUMBER:
            return str(self.value)
        return _SYMBOL_TEXT[self.type]

    def __str__(self) -> str:
        if self.type is TokenType.NUMBER:
            return f"Number: {self.value}"
        return self.symbol

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type is TokenType.NUMBER:
            return f"Token(NUMBER, {self.value}, {self._lineno}:{self._col})"
        return f"Token({self.type.name}, {self._lineno}:{self._col})"
