"""Structured-data grammar (JSON-like).

Tolerates two documentation conventions that strict JSON rejects:
trailing ``//`` comments and ``...`` marking elided content.

A property key is always reported as six tokens (leading space, quote, key,
quote, space before the colon, colon), even when a space part is empty.
"""

from tinta.lexicons import JSON_LITERALS
from tinta.scanner import Grammar, groups, rule, word_in
from tinta.tokens import TokenKind

JSON = Grammar(
    name="json",
    aliases=(),
    rules=(
        rule(
            r"(\s*)(\")([^\"]+)(\")(\s*)(:)",
            groups(
                TokenKind.PLAIN,
                TokenKind.PUNCTUATION,
                TokenKind.PROPERTY,
                TokenKind.PUNCTUATION,
                TokenKind.PLAIN,
                TokenKind.PUNCTUATION,
                keep_empty=True,
            ),
        ),
        # An unclosed quote runs to the end of the line
        rule(r"\"[^\"]*\"?", TokenKind.STRING),
        rule(r"-?[0-9]+\.?[0-9]*", TokenKind.NUMBER),
        rule(r"[a-z]+(?![A-Za-z0-9_])", TokenKind.KEYWORD, accept=word_in(JSON_LITERALS)),
        rule(r"//.*", TokenKind.COMMENT),
        rule(r"[{}\[\],]", TokenKind.PUNCTUATION),
        rule(r"\.\.\.", TokenKind.COMMENT),
    ),
)
