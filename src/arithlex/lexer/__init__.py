"""Scanner for arithmetic expressions.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + navigation)
├── classifiers.py       # Symbol classification, ASCII digit test
└── numbers.py           # Integer literal scanning and overflow policy

Usage:
    >>> from arithlex.lexer import Lexer
    >>> [str(t) for t in Lexer("7 % 2").tokenize()]
    ['Number: 7', '%', 'Number: 2']

"""

from arithlex.lexer.core import Lexer

__all__ = ["Lexer"]
