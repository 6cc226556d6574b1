"""ContextVar-based lexer configuration for mathlang.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer snapshots the active config when it is constructed.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from mathlang.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(strict_strings=True)):
        tokens = tokenize(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexer configuration.

    Note: source_file is excluded; it is per-call state and lives on
    the Lexer instance.

    Attributes:
        strict_strings: Raise UnterminatedStringError when a string literal
            runs off the end of the source. By default that case ends the
            token stream silently (a warning is logged).

    """

    strict_strings: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from dict.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "strict_strings": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_strings
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

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    Example:
        >>> with lex_config_context(LexConfig(strict_strings=True)):
        ...     lexer = Lexer('"abc')
        >>> # Previous config restored here

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
