"""Key/value configuration grammar (TOML-like).

Line-oriented like the YAML grammar. Inline tables are not tokenized
further: a value starting with ``{`` is a single punctuation token.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from tinta.lexicons import TOML_LITERALS
from tinta.scanner import Grammar, groups, pieces, rule
from tinta.tokens import Token, TokenKind


def _classify_value(value: str) -> TokenKind:
    """Kind for the text after ``=``, decided by its first character."""
    if value.startswith(('"', "'")):
        return TokenKind.STRING
    if value.startswith("{"):
        return TokenKind.PUNCTUATION
    if value in TOML_LITERALS:
        return TokenKind.KEYWORD
    if value[:1].isdigit() and value[:1].isascii():
        return TokenKind.NUMBER
    return TokenKind.PLAIN


def _key_value(match: re.Match[str]) -> Iterable[Token]:
    indent, key, equals, value = match.groups()
    return pieces(
        (TokenKind.PLAIN, indent),
        (TokenKind.PROPERTY, key),
        (TokenKind.OPERATOR, equals),
        (_classify_value(value), value),
    )


TOML = Grammar(
    name="toml",
    aliases=(),
    rules=(
        rule(r"\s*#.*", TokenKind.COMMENT, line_start=True),
        rule(
            r"(\s*)(\[+)([^\]]+)(\]+)(.*)",
            groups(
                TokenKind.PLAIN,
                TokenKind.PUNCTUATION,
                TokenKind.TYPE,
                TokenKind.PUNCTUATION,
                TokenKind.PLAIN,
            ),
            line_start=True,
        ),
        rule(r"(\s*)([a-zA-Z_-][a-zA-Z0-9_-]*)(\s*=\s*)(.*)", _key_value, line_start=True),
        rule(r".+", TokenKind.PLAIN, line_start=True),
    ),
)
