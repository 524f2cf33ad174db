"""Contract-language grammar (Solidity-like).

Shares the systems-language scan shape without macros, attributes or
lifetimes. Version literals such as ``^0.8.20`` are numbers, and a bare
lowercase identifier is consumed whole as PLAIN so that keywords hidden
inside longer names are not picked out.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from tinta.grammars.rust import IDENTIFIER, PUNCTUATION
from tinta.lexicons import SOLIDITY_KEYWORDS, SOLIDITY_TYPES
from tinta.scanner import Grammar, pieces, rule, word_in
from tinta.tokens import Token, TokenKind

OPERATORS = r"==|!=|<=|>=|&&|\|\||[+\-*/%=<>!&|^~]"


def _call(match: re.Match[str]) -> Iterable[Token]:
    name, space, paren = match.groups()
    return pieces(
        (TokenKind.FUNCTION, name),
        (TokenKind.PLAIN, space),
        (TokenKind.PUNCTUATION, paren),
    )


SOLIDITY = Grammar(
    name="solidity",
    aliases=("sol",),
    rules=(
        rule(r"\s*//.*", TokenKind.COMMENT, line_start=True),
        rule(r"//.*", TokenKind.COMMENT),
        rule(r"\"(?:[^\"\\]|\\.)*\"", TokenKind.STRING),
        rule(r"\^?[0-9]+\.[0-9]+\.[0-9]+", TokenKind.NUMBER),
        rule(IDENTIFIER, TokenKind.KEYWORD, accept=word_in(SOLIDITY_KEYWORDS)),
        rule(IDENTIFIER, TokenKind.TYPE, accept=word_in(SOLIDITY_TYPES)),
        rule(r"[A-Z][a-zA-Z0-9_]*", TokenKind.TYPE),
        rule(r"([a-z_][a-zA-Z0-9_]*)(\s*)(\()", _call),
        rule(r"[a-z_][a-zA-Z0-9_]*", TokenKind.PLAIN),
        rule(r"[0-9]+", TokenKind.NUMBER),
        rule(OPERATORS, TokenKind.OPERATOR),
        rule(PUNCTUATION, TokenKind.PUNCTUATION),
    ),
)
