"""Plain-text grammar used for unrecognized language identifiers.

Each non-empty line is one PLAIN token equal to the whole line. An empty
line has no tokens.
"""

from tinta.scanner import Grammar, rule
from tinta.tokens import TokenKind

FALLBACK = Grammar(
    name="text",
    aliases=(),
    rules=(rule(r".+", TokenKind.PLAIN, line_start=True),),
)
