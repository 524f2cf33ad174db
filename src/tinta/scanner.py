"""Table-driven line scanner shared by every grammar.

A grammar is an ordered tuple of Rules. At each cursor position the scanner
tries the rules in order and applies the first one whose pattern matches at
the cursor; if none matches, exactly one character is emitted as PLAIN.
Each step consumes at least one character, so a line of length N takes at
most N steps and no input can make the scan fail.

Thread Safety:
Rules and Grammars are frozen and hold only compiled patterns and pure
callables. All scan state is local to a single scan_line() call.

"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from tinta.tokens import Line, Token, TokenKind

# Emitter: turns a successful match into tokens
Emitter = Callable[[re.Match[str]], Iterable[Token]]


@dataclass(frozen=True, slots=True)
class Rule:
    """One (pattern, classifier) entry of a grammar's rule table.

    Attributes:
        pattern: Compiled pattern, matched at the cursor with ``pattern.match``
        emit: A TokenKind for the whole match, or an Emitter producing tokens
        accept: Optional predicate; when it returns False the rule is skipped
        line_start: Only try this rule at column 0
        at_boundary: Only try this rule when the previous unit was whitespace
            (or the cursor is at line start)
        sets_boundary: Value of the boundary flag after this rule fires

    """

    pattern: re.Pattern[str]
    emit: TokenKind | Emitter
    accept: Callable[[re.Match[str]], bool] | None = None
    line_start: bool = False
    at_boundary: bool = False
    sets_boundary: bool = False

    def tokens(self, match: re.Match[str]) -> Iterable[Token]:
        """Tokens this rule emits for ``match``."""
        if isinstance(self.emit, TokenKind):
            return (Token(self.emit, match.group()),)
        return self.emit(match)


def rule(
    pattern: str,
    emit: TokenKind | Emitter,
    *,
    accept: Callable[[re.Match[str]], bool] | None = None,
    line_start: bool = False,
    at_boundary: bool = False,
    sets_boundary: bool = False,
) -> Rule:
    """Compile ``pattern`` and build a Rule."""
    return Rule(
        pattern=re.compile(pattern),
        emit=emit,
        accept=accept,
        line_start=line_start,
        at_boundary=at_boundary,
        sets_boundary=sets_boundary,
    )


def word_in(vocabulary: frozenset[str]) -> Callable[[re.Match[str]], bool]:
    """Accept predicate: the whole match is a member of ``vocabulary``."""

    def accept(match: re.Match[str]) -> bool:
        return match.group() in vocabulary

    return accept


def groups(*kinds: TokenKind, keep_empty: bool = False) -> Emitter:
    """Emitter mapping capture group ``i`` to ``kinds[i - 1]``.

    Empty groups are dropped unless ``keep_empty`` is set, for decompositions
    that always report every part.
    """

    def emit(match: re.Match[str]) -> Iterable[Token]:
        for index, kind in enumerate(kinds, start=1):
            text = match.group(index) or ""
            if text or keep_empty:
                yield Token(kind, text)

    return emit


def pieces(*parts: tuple[TokenKind, str]) -> list[Token]:
    """Build tokens from (kind, text) pairs, skipping empty text."""
    return [Token(kind, text) for kind, text in parts if text]


def scan_line(line: str, rules: Sequence[Rule]) -> Line:
    """Tokenize one line with an ordered rule table.

    Args:
        line: Source line without its line terminator
        rules: Ordered rules; the first applicable match wins

    Returns:
        Line whose token contents concatenate back to ``line``

    Complexity: at most len(line) rule applications.
    """
    tokens: list[Token] = []
    pos = 0
    end = len(line)
    # True at line start and after a whitespace run
    boundary = True

    while pos < end:
        for candidate in rules:
            if candidate.line_start and pos:
                continue
            if candidate.at_boundary and not boundary:
                continue
            match = candidate.pattern.match(line, pos)
            if match is None or match.end() == pos:
                continue
            if candidate.accept is not None and not candidate.accept(match):
                continue
            tokens.extend(candidate.tokens(match))
            pos = match.end()
            boundary = candidate.sets_boundary
            break
        else:
            tokens.append(Token(TokenKind.PLAIN, line[pos]))
            pos += 1
            boundary = False

    return Line(tuple(tokens))


@dataclass(frozen=True, slots=True)
class Grammar:
    """A named rule table.

    Attributes:
        name: Canonical language name (e.g., "rust")
        aliases: Extra identifiers that select this grammar (e.g., "rs")
        rules: Ordered rule table handed to scan_line()

    """

    name: str
    aliases: tuple[str, ...]
    rules: tuple[Rule, ...]

    @property
    def names(self) -> tuple[str, ...]:
        """Canonical name followed by aliases."""
        return (self.name, *self.aliases)

    def tokenize_line(self, line: str) -> Line:
        """Tokenize a single line."""
        return scan_line(line, self.rules)


__all__ = [
    "Emitter",
    "Grammar",
    "Rule",
    "groups",
    "pieces",
    "rule",
    "scan_line",
    "word_in",
]
