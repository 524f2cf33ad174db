"""Token, Line and Document definitions for Tinta.

Every grammar produces a Line of Tokens per source line; the assembler wraps
the lines in a Document.

Thread Safety:
Token, Line and Document are frozen (immutable) and safe to share across
threads. TokenKind is an enum (inherently immutable).

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class TokenKind(Enum):
    """Closed set of token categories.

    Values double as the CSS class suffix used by the HTML adapter
    (``tok-keyword``, ``tok-string``, ...) and as the serialized form.

    """

    KEYWORD = "keyword"
    STRING = "string"
    COMMENT = "comment"
    NUMBER = "number"
    FUNCTION = "function"
    TYPE = "type"
    PROPERTY = "property"
    OPERATOR = "operator"
    VARIABLE = "variable"
    PUNCTUATION = "punctuation"
    BUILTIN = "builtin"
    ATTRIBUTE = "attribute"
    PLAIN = "plain"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified slice of one source line.

    Attributes:
        kind: The token category
        content: The exact substring of the line this token covers

    """

    kind: TokenKind
    content: str

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.content!r})"


@dataclass(frozen=True, slots=True)
class Line:
    """Tokens of a single source line in reading order.

    Concatenating token contents reproduces the source line exactly.
    """

    tokens: tuple[Token, ...] = ()

    @property
    def text(self) -> str:
        """The source line rebuilt from token contents."""
        return "".join(token.content for token in self.tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]


@dataclass(frozen=True, slots=True)
class Document:
    """Tokenized snippet: one Line per ``\\n``-separated source line.

    Attributes:
        language: Canonical grammar name that produced the lines
            ("text" when the identifier fell back to plain text)
        lines: Lines in original order

    """

    language: str
    lines: tuple[Line, ...] = ()

    @property
    def text(self) -> str:
        """The snippet rebuilt from all lines."""
        return "\n".join(line.text for line in self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> Line:
        return self.lines[index]


__all__ = [
    "Document",
    "Line",
    "Token",
    "TokenKind",
]
