"""Integer literal scanner mixin."""

from __future__ import annotations

from typing import TYPE_CHECKING

from arithlex.errors import NumberOverflowError
from arithlex.lexer.classifiers import is_ascii_digit
from arithlex.tokens import Token, TokenType
from arithlex.utils.logger import get_logger

if TYPE_CHECKING:
    from arithlex.config import LexConfig
    from arithlex.location import SourceLocation

logger = get_logger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
_UINT64_MASK = 2**64 - 1


def wrap_int64(value: int) -> int:
    """Reduce value to signed 64-bit two's complement.

    >>> wrap_int64(2**63)
    -9223372036854775808
    """
    return ((value - INT64_MIN) & _UINT64_MASK) + INT64_MIN


class NumberScannerMixin:
    """Mixin providing multi-digit integer literal scanning.

    Expects the host class to provide _source, _pos and
    _config (see Lexer).
    """

    _source: str
    _pos: int
    _config: LexConfig

    def _peek(self) -> str:
        """Current character or "". Implemented by Lexer."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume one character. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(
        self,
        token_type: TokenType,
        start_pos: int,
        value: int | None = None,
    ) -> Token:
        """Create token with raw coordinates. Implemented by Lexer."""
        raise NotImplementedError

    def _error_location(self, start_pos: int, end_pos: int) -> SourceLocation:
        """Location for an error span. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_number(self, first_digit: str, start_pos: int) -> Token:
        """Scan the rest of an integer literal whose first digit is consumed.

        Folds each following ASCII digit in as ``acc * 10 + digit`` and
        stops at the first non-digit or end of input. Under "wrap" the
        accumulator is reduced modulo 2**64 on every step and under
        "checked" scanning stops folding at the first overflow, so both run
        in linear time. Only "unbounded" keeps the exact value.

        Args:
            first_digit: The digit already consumed by the lexer
            start_pos: Position of first_digit in source

        Returns:
            NUMBER token spanning the whole literal.

        Raises:
            NumberOverflowError: If the literal exceeds the signed 64-bit
                range and the overflow policy is "checked".
        """
        policy = self._config.overflow
        value = ord(first_digit) - 48
        wrapped = False
        while is_ascii_digit(self._peek()):
            value = value * 10 + (ord(self._advance()) - 48)
            if value > INT64_MAX and policy != "unbounded":
                if policy == "checked":
                    self._skip_digits()
                    raise NumberOverflowError(
                        self._source[start_pos : self._pos],
                        self._error_location(start_pos, self._pos),
                    )
                value &= _UINT64_MASK
                wrapped = True

        if wrapped:
            value = wrap_int64(value)
            logger.debug("Integer literal at offset %d wrapped to %d", start_pos, value)
        return self._make_token(TokenType.NUMBER, start_pos, value)

    def _skip_digits(self) -> None:
        while is_ascii_digit(self._peek()):
            self._advance()
