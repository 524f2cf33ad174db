"""
Tinta: Snippet Tokenizer for Documentation Sites

Turns short code and configuration snippets into classified token streams
that any rendering surface can color. Six hand-written grammars, no external
highlighting engine, zero runtime dependencies.

Quick Start:
    >>> from tinta import tokenize
    >>> doc = tokenize('name = "tinta"', "toml")
    >>> [(t.kind.value, t.content) for t in doc.lines[0]]
    [('property', 'name'), ('operator', ' = '), ('string', '"tinta"')]

    >>> # HTML with one CSS class per token kind
    >>> from tinta import highlight
    >>> html = highlight("cargo build --release", "bash")

Supported languages:
    yaml (yml), bash (sh, shell), json, rust (rs), solidity (sol), toml.
    Any other identifier falls back to one plain token per line.
"""

from tinta.assembler import assemble, split_lines
from tinta.cache import DictTokenizeCache, TokenizeCache, hash_config, hash_content
from tinta.config import (
    TokenizeConfig,
    get_tokenize_config,
    reset_tokenize_config,
    set_tokenize_config,
    tokenize_config_context,
)
from tinta.errors import GrammarRegistryError, SerializationError, TintaError
from tinta.highlighting import Highlighter, HtmlHighlighter, highlight
from tinta.registry import (
    GrammarRegistry,
    GrammarRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)
from tinta.scanner import Grammar, Rule, rule
from tinta.serialization import from_dict, from_json, to_dict, to_json
from tinta.tokens import Document, Line, Token, TokenKind
from tinta.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def tokenize(
    code: str,
    language: str,
    *,
    registry: GrammarRegistry | None = None,
    cache: TokenizeCache | None = None,
) -> Document:
    """Tokenize a snippet into lines of classified tokens.

    Never raises for any text or identifier: unknown identifiers produce
    one plain token per non-empty line.

    Empty lines yield a Line with no tokens under every grammar, including
    the plain-text fallback, since a token never has empty content. The
    only empty tokens are the spacing parts of a JSON property key.

    Args:
        code: Snippet text; lines are split on ``\\n``
        language: Language identifier or alias, any case (e.g., "RS", "yml")
        registry: Grammar registry (falls back to the active TokenizeConfig's
            registry, then to the default registry)
        cache: Optional content-addressed cache consulted before tokenizing

    Returns:
        Document with one Line per source line

    Example:
        >>> doc = tokenize("if (x)", "rust")
        >>> [t.content for t in doc.lines[0]]
        ['if', ' ', '(', 'x', ')']
    """
    config = get_tokenize_config()
    if registry is None:
        registry = config.grammar_registry
    if registry is None:
        registry = create_default_registry()

    config_hash = ""
    content_hash = ""
    if cache is not None:
        config_hash = hash_config(config, language, registry)
        content_hash = hash_content(code)
        cached = cache.get(content_hash, config_hash)
        if cached is not None:
            logger.debug("Tokenize cache hit for %r snippet", language)
            return cached

    if config.strip_snippet:
        code = code.strip()

    doc = assemble(code, registry.resolve(language))

    if cache is not None:
        cache.put(content_hash, config_hash, doc)
    return doc


__all__ = [
    "DictTokenizeCache",
    "Document",
    "Grammar",
    "GrammarRegistry",
    "GrammarRegistryBuilder",
    "GrammarRegistryError",
    "Highlighter",
    "HtmlHighlighter",
    "Line",
    "Rule",
    "SerializationError",
    "TintaError",
    "Token",
    "TokenKind",
    "TokenizeCache",
    "TokenizeConfig",
    "assemble",
    "create_default_registry",
    "create_registry_with_defaults",
    "from_dict",
    "from_json",
    "get_tokenize_config",
    "hash_config",
    "hash_content",
    "highlight",
    "reset_tokenize_config",
    "rule",
    "set_tokenize_config",
    "split_lines",
    "to_dict",
    "to_json",
    "tokenize",
    "tokenize_config_context",
    "__version__",
]
