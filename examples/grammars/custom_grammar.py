"""Add your own grammar on top of the built-in ones."""

from tinta import Grammar, TokenKind, create_registry_with_defaults, rule, tokenize
from tinta.scanner import groups

INI = Grammar(
    name="ini",
    aliases=("cfg",),
    rules=(
        rule(r"\s*[;#].*", TokenKind.COMMENT, line_start=True),
        rule(r"(\[)([^\]]*)(\])", groups(TokenKind.PUNCTUATION, TokenKind.TYPE, TokenKind.PUNCTUATION)),
        rule(r"([\w.-]+)(\s*=\s*)(.*)", groups(TokenKind.PROPERTY, TokenKind.OPERATOR, TokenKind.STRING)),
    ),
)

registry = create_registry_with_defaults().register(INI).build()

source = """; settings
[server]
host = example.org
"""

for line in tokenize(source, "cfg", registry=registry):
    print([(token.kind.value, token.content) for token in line])
