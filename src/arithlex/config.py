"""ContextVar-based lexer configuration for arithlex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the context config at construction unless one is passed in.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from arithlex import tokenize
    from arithlex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(strict=True)):
        tokens = tokenize("1 + x")  # raises UnrecognizedCharacterError

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from arithlex.errors import ConfigError

# Accepted values for LexConfig.overflow
OVERFLOW_POLICIES = frozenset({"wrap", "checked", "unbounded"})


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Attributes:
        overflow: How integer literals beyond the signed 64-bit range are
            handled. "wrap" reproduces two's-complement wraparound,
            "checked" raises NumberOverflowError, "unbounded" keeps the
            arbitrary-precision Python int.
        strict: Raise UnrecognizedCharacterError instead of silently
            dropping characters the lexer does not recognize.

    """

    overflow: str = "wrap"
    strict: bool = False

    def __post_init__(self) -> None:
        if self.overflow not in OVERFLOW_POLICIES:
            choices = ", ".join(sorted(OVERFLOW_POLICIES))
            raise ConfigError(f"overflow must be one of {choices}; got {self.overflow!r}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> LexConfig.from_dict({"strict": True, "color": "red"}).strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexer configuration (thread-local)."""
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexer configuration for current context.

    Only affects the current thread's context.
    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with lex_config_context(LexConfig(overflow="checked")):
        ...     tokens = tokenize("9223372036854775807")
        >>> # Automatically reset to previous config

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "OVERFLOW_POLICIES",
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
]
