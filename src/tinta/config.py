"""ContextVar-based tokenize configuration for Tinta.

Provides thread-local configuration using Python's ContextVars (PEP 567).

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    from tinta.config import TokenizeConfig, tokenize_config_context

    with tokenize_config_context(TokenizeConfig(strip_snippet=True)):
        doc = tokenize(snippet, "toml")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tinta.registry import GrammarRegistry


@dataclass(frozen=True, slots=True)
class TokenizeConfig:
    """Immutable tokenize configuration.

    Attributes:
        strip_snippet: Trim leading/trailing whitespace from the whole snippet
            before splitting it into lines
        grammar_registry: Registry used to resolve language identifiers
            (None selects the default registry)

    """

    strip_snippet: bool = False
    grammar_registry: GrammarRegistry | None = None

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> TokenizeConfig:
        """Create TokenizeConfig from dictionary.

        Only includes keys that are valid TokenizeConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = TokenizeConfig.from_dict({"strip_snippet": True, "theme": "x"})
            >>> config.strip_snippet
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: TokenizeConfig = TokenizeConfig()

_tokenize_config: ContextVar[TokenizeConfig] = ContextVar(
    "tokenize_config",
    default=_DEFAULT_CONFIG,
)


def get_tokenize_config() -> TokenizeConfig:
    """Get current tokenize configuration (thread-local)."""
    return _tokenize_config.get()


def set_tokenize_config(config: TokenizeConfig) -> None:
    """Set tokenize configuration for current context.

    Thread Safety:
        Only affects the current thread's context. Other threads are unaffected.

    """
    _tokenize_config.set(config)


def reset_tokenize_config() -> None:
    """Reset to default configuration."""
    _tokenize_config.set(_DEFAULT_CONFIG)


@contextmanager
def tokenize_config_context(config: TokenizeConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with tokenize_config_context(TokenizeConfig(strip_snippet=True)):
        ...     doc = tokenize("  echo hi  ", "bash")
        >>> # Automatically reset to previous config

    """
    previous = _tokenize_config.get()
    _tokenize_config.set(config)
    try:
        yield
    finally:
        _tokenize_config.set(previous)


__all__ = [
    "TokenizeConfig",
    "get_tokenize_config",
    "reset_tokenize_config",
    "set_tokenize_config",
    "tokenize_config_context",
]
