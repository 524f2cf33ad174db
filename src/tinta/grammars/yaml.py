"""Data/markup grammar (YAML-like).

Line-oriented: each rule fires at column 0 and consumes the whole line.
Values after a key are classified once, with no attempt to find the
closing quote of a string.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from tinta.lexicons import YAML_LITERALS
from tinta.scanner import Grammar, pieces, rule
from tinta.tokens import Token, TokenKind

_DIGITS = re.compile(r"[0-9]+")


def _classify_value(rest: str) -> TokenKind:
    """Kind for the text following ``key:``."""
    stripped = rest.strip()
    if not stripped:
        return TokenKind.PLAIN
    if '"' in rest or "'" in rest:
        return TokenKind.STRING
    if stripped.lower() in YAML_LITERALS:
        return TokenKind.KEYWORD
    if _DIGITS.fullmatch(stripped):
        return TokenKind.NUMBER
    return TokenKind.PLAIN


def _key_value(match: re.Match[str]) -> Iterable[Token]:
    indent, key, colon, rest = match.groups()
    return pieces(
        (TokenKind.PLAIN, indent),
        (TokenKind.PROPERTY, key),
        (TokenKind.PUNCTUATION, colon),
        (_classify_value(rest), rest),
    )


def _list_item(match: re.Match[str]) -> Iterable[Token]:
    indent, dash, space, content = match.groups()
    tokens = pieces(
        (TokenKind.PLAIN, indent),
        (TokenKind.PUNCTUATION, dash),
        (TokenKind.PLAIN, space),
    )
    key, colon, rest = content.partition(":")
    if colon:
        tokens += pieces(
            (TokenKind.PROPERTY, key),
            (TokenKind.PUNCTUATION, colon),
            (TokenKind.PLAIN, rest),
        )
    else:
        tokens += pieces((TokenKind.PLAIN, content))
    return tokens


YAML = Grammar(
    name="yaml",
    aliases=("yml",),
    rules=(
        rule(r"\s*#.*", TokenKind.COMMENT, line_start=True),
        rule(r"(\s*)([a-zA-Z_-]+)(:)(.*)", _key_value, line_start=True),
        rule(r"(\s*)(-)(\s*)(.*)", _list_item, line_start=True),
        rule(r".+", TokenKind.PLAIN, line_start=True),
    ),
)
