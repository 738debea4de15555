"""Exception classes for arithlex.

The lexer raises nothing under the default configuration: unrecognized
characters are dropped and oversized literals wrap. These exceptions back the
opt-in strict behaviors selected through LexConfig.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from arithlex.location import SourceLocation


class ArithlexError(Exception):
    """Base exception for all arithlex errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(ArithlexError):
    """Invalid lexer configuration value."""

    pass


class LexError(ArithlexError):
    """Error while scanning an expression.

    Raised only when a strict option is enabled in LexConfig.
    """

    def __init__(self, message: str, location: SourceLocation | None = None) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            location: Where in the source the error occurred (optional)
        """
        self.message = message
        self.location = location

        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}{message}")


class UnrecognizedCharacterError(LexError):
    """A character that is not whitespace, a symbol, or an ASCII digit."""

    def __init__(self, char: str, location: SourceLocation | None = None) -> None:
        self.char = char
        super().__init__(f"unrecognized character {char!r} (U+{ord(char):04X})", location)


class NumberOverflowError(LexError):
    """Integer literal does not fit in a signed 64-bit integer."""

    def __init__(self, literal: str, location: SourceLocation | None = None) -> None:
        self.literal = literal
        shown = literal if len(literal) <= 24 else literal[:21] + "..."
        super().__init__(f"integer literal {shown} overflows a 64-bit signed integer", location)
