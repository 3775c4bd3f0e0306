"""ContextVar-based lexer configuration for argvlex.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Lexer reads the active config once, at construction time.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from argvlex.config import LexerConfig, lexer_config_context

    with lexer_config_context(LexerConfig(includes_program_name=False)):
        lexer = Lexer(["-v", "file.txt"])

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class LexerConfig:
    """Immutable lexer configuration.

    Attributes:
        includes_program_name: Whether element zero of the vector is the
            program name (skipped by the lexer). Used when the Lexer is
            constructed without an explicit value.
        encoding: Codec used to view ``bytes`` arguments as text. Undecodable
            bytes are kept as lone surrogates so payloads round-trip exactly.

    """

    includes_program_name: bool = True
    encoding: str = "utf-8"

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexerConfig":
        """Create LexerConfig from dictionary.

        Only includes keys that are valid LexerConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexerConfig attribute names.

        Returns:
            New LexerConfig instance with values from dict.

        Example:
            >>> config = LexerConfig.from_dict({
            ...     "includes_program_name": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.includes_program_name
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexerConfig = LexerConfig()

_lexer_config: ContextVar[LexerConfig] = ContextVar(
    "lexer_config",
    default=_DEFAULT_CONFIG,
)


def get_lexer_config() -> LexerConfig:
    """Get current lexer configuration (thread-local).

    Returns:
        The active LexerConfig for this thread/context.

    """
    return _lexer_config.get()


def set_lexer_config(config: LexerConfig) -> None:
    """Set lexer configuration for current context.

    Lexers built afterwards in this context pick it up; lexers that already
    exist keep the config they were constructed with.

    Args:
        config: LexerConfig instance to use for this context.

    """
    _lexer_config.set(config)


def reset_lexer_config() -> None:
    """Reset to the default: program name included, UTF-8 for bytes."""
    _lexer_config.set(_DEFAULT_CONFIG)


@contextmanager
def lexer_config_context(config: LexerConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Handy when lexing a vector that does not start with the program name,
    such as a subcommand tail or a test fixture.

    Args:
        config: LexerConfig to use within the context.

    Yields:
        None

    Example:
        >>> with lexer_config_context(LexerConfig(includes_program_name=False)):
        ...     lexer = Lexer(["-v"])
        >>> # Automatically reset to previous config

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _lexer_config.get()
    _lexer_config.set(config)
    try:
        yield
    finally:
        _lexer_config.set(previous)


__all__ = [
    "LexerConfig",
    "get_lexer_config",
    "set_lexer_config",
    "reset_lexer_config",
    "lexer_config_context",
]
