"""Grammar registry: language identifier to grammar lookup.

The registry maps canonical names and aliases to grammars. Lookup is
case-insensitive and never fails: unknown identifiers resolve to the
plain-text fallback grammar.

Thread Safety:
GrammarRegistry is immutable after creation. Safe to share.
Use GrammarRegistryBuilder for mutable construction.

Example:
    >>> builder = create_registry_with_defaults()
    >>> builder.register(Grammar("ini", ("cfg",), INI_RULES))
    >>> registry = builder.build()
    >>> registry.resolve("CFG").name
    'ini'
"""

from __future__ import annotations

from tinta.errors import GrammarRegistryError
from tinta.grammars import BUILTIN_GRAMMARS, FALLBACK
from tinta.scanner import Grammar
from tinta.utils.logger import get_logger

logger = get_logger(__name__)


def normalize_language(language: str) -> str:
    """Canonical lookup key for a language identifier."""
    return language.strip().lower()


class GrammarRegistry:
    """Immutable mapping of language identifiers to grammars.

    Thread Safety:
        Immutable after creation. Safe to share across threads.
    """

    __slots__ = ("_grammars", "_by_name", "_fallback")

    def __init__(
        self,
        grammars: tuple[Grammar, ...],
        by_name: dict[str, Grammar],
        fallback: Grammar = FALLBACK,
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use GrammarRegistryBuilder to create instances.
        """
        self._grammars = grammars
        self._by_name = by_name
        self._fallback = fallback

    def get(self, language: str) -> Grammar | None:
        """Get the grammar registered for ``language``.

        Args:
            language: Language identifier or alias, any case

        Returns:
            Grammar if registered, None otherwise
        """
        return self._by_name.get(normalize_language(language))

    def resolve(self, language: str) -> Grammar:
        """Get the grammar for ``language``, or the fallback grammar.

        Never raises; this is the dispatcher used by tokenize().
        """
        grammar = self.get(language)
        if grammar is None:
            logger.debug("No grammar for %r, using plain text", language)
            return self._fallback
        return grammar

    def has(self, language: str) -> bool:
        """Check if a language identifier is registered."""
        return normalize_language(language) in self._by_name

    @property
    def names(self) -> frozenset[str]:
        """All registered names and aliases (normalized)."""
        return frozenset(self._by_name)

    @property
    def grammars(self) -> tuple[Grammar, ...]:
        """Registered grammars in registration order."""
        return self._grammars

    @property
    def fallback(self) -> Grammar:
        """Grammar used for unknown identifiers."""
        return self._fallback

    def __contains__(self, language: str) -> bool:
        """Support 'language in registry' syntax."""
        return self.has(language)

    def __len__(self) -> int:
        """Number of registered grammars."""
        return len(self._grammars)


class GrammarRegistryBuilder:
    """Mutable builder for GrammarRegistry.

    Example:
        >>> builder = GrammarRegistryBuilder()
        >>> builder.register(RUST).register(TOML)
        >>> registry = builder.build()
    """

    __slots__ = ("_grammars", "_by_name", "_fallback")

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._grammars: list[Grammar] = []
        self._by_name: dict[str, Grammar] = {}
        self._fallback: Grammar = FALLBACK

    def register(self, grammar: Grammar) -> GrammarRegistryBuilder:
        """Register a grammar under its name and aliases.

        Args:
            grammar: Grammar to register

        Returns:
            Self for chaining

        Raises:
            GrammarRegistryError: If the grammar has an empty name, or a name
                or alias is already registered
        """
        keys = [normalize_language(name) for name in grammar.names]
        if not all(keys):
            raise GrammarRegistryError(grammar.name, "names and aliases must be non-empty")

        for key in keys:
            existing = self._by_name.get(key)
            if existing is not None:
                raise GrammarRegistryError(
                    grammar.name, f"'{key}' already registered by grammar '{existing.name}'"
                )

        for key in keys:
            self._by_name[key] = grammar
        self._grammars.append(grammar)
        return self

    def register_all(self, grammars: list[Grammar] | tuple[Grammar, ...]) -> GrammarRegistryBuilder:
        """Register multiple grammars.

        Returns:
            Self for chaining
        """
        for grammar in grammars:
            self.register(grammar)
        return self

    def set_fallback(self, grammar: Grammar) -> GrammarRegistryBuilder:
        """Replace the grammar used for unknown identifiers.

        Returns:
            Self for chaining
        """
        self._fallback = grammar
        return self

    def build(self) -> GrammarRegistry:
        """Build immutable registry from registered grammars."""
        registry = GrammarRegistry(
            grammars=tuple(self._grammars),
            by_name=dict(self._by_name),
            fallback=self._fallback,
        )
        logger.debug(
            "Built grammar registry: %s",
            ", ".join(grammar.name for grammar in registry.grammars),
        )
        return registry

    def __len__(self) -> int:
        """Number of registered grammars."""
        return len(self._grammars)


# Cached singleton; GrammarRegistry is immutable
_DEFAULT_REGISTRY: GrammarRegistry | None = None


def create_default_registry() -> GrammarRegistry:
    """Get the default grammar registry (cached singleton).

    Returns:
        Registry with the built-in grammars:
        - yaml (yml)
        - bash (sh, shell)
        - json
        - rust (rs)
        - solidity (sol)
        - toml

    Thread Safety:
        Returns a cached immutable registry. Safe for concurrent access.
    """
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY


def create_registry_with_defaults() -> GrammarRegistryBuilder:
    """Create a builder pre-populated with the built-in grammars.

    Use this to add grammars or aliases on top of the defaults.
    """
    return GrammarRegistryBuilder().register_all(BUILTIN_GRAMMARS)


__all__ = [
    "GrammarRegistry",
    "GrammarRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    "normalize_language",
]
