"""Content-addressed tokenize cache for Tinta.

Provides (content_hash, config_hash) -> Document caching so pages that render
the same snippet repeatedly tokenize it once.

Thread Safety:
    DictTokenizeCache is not thread-safe. For concurrent use, wrap get/put in
    a lock or supply another TokenizeCache implementation.

Example:
    >>> from tinta import tokenize, DictTokenizeCache
    >>> cache = DictTokenizeCache()
    >>> doc1 = tokenize("cargo build", "bash", cache=cache)
    >>> doc2 = tokenize("cargo build", "bash", cache=cache)  # Cache hit
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from tinta.registry import normalize_language
from tinta.utils.hashing import hash_str

if TYPE_CHECKING:
    from tinta.config import TokenizeConfig
    from tinta.registry import GrammarRegistry
    from tinta.tokens import Document


class TokenizeCache(Protocol):
    """Protocol for content-addressed tokenize caches.

    Cache key is (content_hash, config_hash). Cached value is an immutable
    Document, safe to share across threads.
    """

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        ...


class DictTokenizeCache:
    """In-memory tokenize cache using a dict.

    Not thread-safe.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], Document] = {}

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        self._data[(content_hash, config_hash)] = doc

    def __len__(self) -> int:
        return len(self._data)


def hash_content(code: str) -> str:
    """Compute SHA256 hash of a snippet for cache key."""
    return hash_str(code)


def hash_config(
    config: TokenizeConfig,
    language: str,
    registry: GrammarRegistry | None = None,
) -> str:
    """Compute hash of the language identifier, registry and TokenizeConfig.

    Identifiers that differ only in case or surrounding whitespace share
    a key. An explicit ``registry`` takes precedence over the config's.
    """
    parts = (
        normalize_language(language),
        str(config.strip_snippet),
        str(id(config.grammar_registry if registry is None else registry)),
    )
    return hash_str("|".join(parts))


__all__ = [
    "DictTokenizeCache",
    "TokenizeCache",
    "hash_config",
    "hash_content",
]
