"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in expression source.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a token or character in the expression source.

    Line and column are 1-indexed. Offsets are 0-indexed code point indices
    into the source string, with end_offset exclusive.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start index in source
        end_offset: Absolute end index in source (exclusive)
        source_name: Name of the expression source (optional, e.g. a file path)

    Examples:
            >>> loc = SourceLocation(lineno=1, col_offset=4, offset=3, end_offset=5)
            >>> str(loc)
            '1:4'

            >>> str(SourceLocation(2, 1, source_name="<stdin>"))
            '<stdin>:2:1'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_name: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "expr.txt:1:5" or "1:5"
        """
        if self.source_name:
            return f"{self.source_name}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @property
    def length(self) -> int:
        """Number of code points covered by this location."""
        return self.end_offset - self.offset

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create a placeholder location for tokens built outside the lexer."""
        return cls(lineno=0, col_offset=0)
