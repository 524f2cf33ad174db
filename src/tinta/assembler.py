"""Document assembly: split a snippet into lines and tokenize each one.

Lines are independent; no lexical state crosses a line break.
"""

from __future__ import annotations

from tinta.scanner import Grammar
from tinta.tokens import Document


def split_lines(code: str) -> list[str]:
    """Split on ``\\n`` only; ``\\r`` stays part of its line.

    Empty input is one empty line, and a trailing newline yields a final
    empty line.
    """
    return code.split("\n")


def assemble(code: str, grammar: Grammar) -> Document:
    """Tokenize every line of ``code`` with ``grammar``.

    Complexity: O(n) in len(code).
    """
    lines = tuple(grammar.tokenize_line(line) for line in split_lines(code))
    return Document(language=grammar.name, lines=lines)


__all__ = ["assemble", "split_lines"]
