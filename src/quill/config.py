"""ContextVar-based text configuration for Quill.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Builders read the active config whenever an operation needs it, so a config
change applies to every builder used in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from quill import make
    from quill.config import TextConfig, text_config_context

    with text_config_context(TextConfig(newline="\\r\\n")):
        text = make("Line 1").append_line("Line 2")

    # Or set it for the rest of the context
    set_text_config(TextConfig(split_digits=True))
    try:
        make("version2Beta").kebab_case()  # 'version-2-beta'
    finally:
        reset_text_config()

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class TextConfig:
    """Immutable text configuration.

    Attributes:
        newline: Separator used by line operations (append_line, nl, ...)
        split_digits: Treat letter/digit transitions as word boundaries
            in the case converters
        word_pattern: Regex used by words() when no pattern is given
            (None = maximal runs of non-whitespace, non-punctuation)

    """

    newline: str = "\n"
    split_digits: bool = False
    word_pattern: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "TextConfig":
        """Create TextConfig from dictionary.

        Only includes keys that are valid TextConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                TextConfig attribute names.

        Returns:
            New TextConfig instance with values from dict.

        Example:
            >>> config = TextConfig.from_dict({
            ...     "newline": "\\r\\n",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.newline
            '\\r\\n'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TextConfig = TextConfig()

_text_config: ContextVar[TextConfig] = ContextVar(
    "text_config",
    default=_DEFAULT_CONFIG,
)


def get_text_config() -> TextConfig:
    """Get current text configuration (thread-local)."""
    return _text_config.get()


def set_text_config(config: TextConfig) -> None:
    """Set text configuration for current context.

    Args:
        config: TextConfig instance to use for this context.

    """
    _text_config.set(config)


def reset_text_config() -> None:
    """Reset to default configuration."""
    _text_config.set(_DEFAULT_CONFIG)


@contextmanager
def text_config_context(config: TextConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: TextConfig to use within the context.

    Yields:
        None

    Example:
        >>> with text_config_context(TextConfig(split_digits=True)):
        ...     make("abc123").snake_case().to_string()
        'abc_123'

    Thread Safety:
        Only affects the current thread's context. Properly restores previous
        config even if an exception is raised.

    """
    previous = _text_config.get()
    _text_config.set(config)
    try:
        yield
    finally:
        _text_config.set(previous)


__all__ = [
    "TextConfig",
    "get_text_config",
    "set_text_config",
    "reset_text_config",
    "text_config_context",
]
