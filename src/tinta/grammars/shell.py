"""Shell-command grammar.

Flags are only recognized at line start or right after whitespace, so a
hyphen inside a word (``foo-bar``) stays plain. The scanner's boundary flag
carries that state: the whitespace rule sets it, every other rule clears it.
A ``#`` only starts a comment when it opens the line.
"""

from tinta.lexicons import SHELL_COMMANDS
from tinta.scanner import Grammar, rule, word_in
from tinta.tokens import TokenKind

SHELL = Grammar(
    name="bash",
    aliases=("sh", "shell"),
    rules=(
        rule(r"\s*#.*", TokenKind.COMMENT, line_start=True),
        rule(r"[A-Za-z]+(?![A-Za-z0-9_])", TokenKind.BUILTIN, accept=word_in(SHELL_COMMANDS)),
        rule(r"--?[a-zA-Z][-a-zA-Z0-9]*", TokenKind.KEYWORD, at_boundary=True),
        rule(r"\"[^\"]*\"|'[^']*'", TokenKind.STRING),
        rule(r"\$[a-zA-Z_][a-zA-Z0-9_]*|\$\{[^}]+\}", TokenKind.VARIABLE),
        rule(r"https?://\S+", TokenKind.STRING),
        rule(r"[|>&;]", TokenKind.OPERATOR),
        rule(r"\s+", TokenKind.PLAIN, sets_boundary=True),
        rule(r"[^\s|>&;$\"'#]+", TokenKind.PLAIN),
    ),
)
