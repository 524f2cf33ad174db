"""Systems-language grammar (Rust-like).

Rule order matters:
- Keywords are matched before the call heuristic, so ``if (x)`` keeps
  ``if`` as a keyword instead of a function.
- Macro invocations (``name!``) win over everything word-shaped.
- A lowercase name followed by ``(`` is a function call; names in
  RUST_BUILTINS are reported as builtins instead.

Bare lowercase identifiers have no rule of their own and fall through to
the scanner's one-character PLAIN fallback.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from tinta.lexicons import RUST_BUILTINS, RUST_KEYWORDS, RUST_TYPES
from tinta.scanner import Grammar, pieces, rule, word_in
from tinta.tokens import Token, TokenKind

IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"
OPERATORS = r"::|->|=>|&&|\|\||[+\-*/%=<>!&|^~?]"
PUNCTUATION = r"[{}\[\]();,.:]"


def _call(match: re.Match[str]) -> Iterable[Token]:
    name, space, paren = match.groups()
    kind = TokenKind.BUILTIN if name in RUST_BUILTINS else TokenKind.FUNCTION
    return pieces(
        (kind, name),
        (TokenKind.PLAIN, space),
        (TokenKind.PUNCTUATION, paren),
    )


RUST = Grammar(
    name="rust",
    aliases=("rs",),
    rules=(
        rule(r"\s*//.*", TokenKind.COMMENT, line_start=True),
        rule(r"//.*", TokenKind.COMMENT),
        rule(IDENTIFIER + r"!", TokenKind.BUILTIN),
        rule(r"#\[[^\]]+\]", TokenKind.ATTRIBUTE),
        rule(r"\"(?:[^\"\\]|\\.)*\"", TokenKind.STRING),
        rule(r"'[a-zA-Z_][a-zA-Z0-9_]*", TokenKind.ATTRIBUTE),
        rule(IDENTIFIER, TokenKind.KEYWORD, accept=word_in(RUST_KEYWORDS)),
        rule(IDENTIFIER, TokenKind.TYPE, accept=word_in(RUST_TYPES)),
        rule(r"[A-Z][a-zA-Z0-9_]*", TokenKind.TYPE),
        rule(r"([a-z_][a-zA-Z0-9_]*)(\s*)(\()", _call),
        rule(r"[0-9]+\.?[0-9]*", TokenKind.NUMBER),
        rule(OPERATORS, TokenKind.OPERATOR),
        rule(PUNCTUATION, TokenKind.PUNCTUATION),
    ),
)
