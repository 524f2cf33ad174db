"""Exception classes for Tinta.

Tokenization itself never raises: unknown languages and malformed snippets
degrade to plain text. These exceptions cover the configuration and
serialization surfaces around it.
"""

from __future__ import annotations


class TintaError(Exception):
    """Base exception for all Tinta errors.

    Subclass this for specific error categories.
    """

    pass


class GrammarRegistryError(TintaError, ValueError):
    """Error while building a grammar registry.

    Raised when a grammar has no names or a name is already registered.
    """

    def __init__(self, grammar_name: str, message: str) -> None:
        """Initialize registry error.

        Args:
            grammar_name: Canonical name of the grammar being registered
            message: Description of the conflict
        """
        self.grammar_name = grammar_name
        super().__init__(f"Grammar '{grammar_name}': {message}")


class SerializationError(TintaError, ValueError):
    """Error while reconstructing a Document from serialized data."""

    pass
