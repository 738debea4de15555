"""Logger factory for arithlex modules.

Every logger lives under the "arithlex" namespace, so a single
``logging.getLogger("arithlex").setLevel(logging.DEBUG)`` shows what the
lexer does. The library only emits DEBUG records and never installs
handlers; the command line configures logging when run with --verbose.

Records emitted:
    arithlex.lexer.core     an unrecognized character was dropped
    arithlex.lexer.numbers  an integer literal wrapped to 64 bits
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the logger for name, placed under the "arithlex." namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("arithlex.lexer.core").name
        'arithlex.lexer.core'
        >>> get_logger("plugin").name
        'arithlex.plugin'
    """
    if not (name == "arithlex" or name.startswith("arithlex.")):
        name = f"arithlex.{name}"
    return logging.getLogger(name)
