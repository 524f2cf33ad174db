"""HTML highlighting adapter for Tinta token streams.

Turns a tokenized Document into HTML with one CSS class per token kind.
Colors are left to the page stylesheet; no inline styles are emitted.

Protocol Alignment:
    HtmlHighlighter satisfies the Highlighter protocol used by Markdown
    engines:
    - highlight(code, language, hl_lines, show_linenos) -> str
    - supports_language(language) -> bool

Usage:
    from tinta.highlighting import highlight

    html = highlight('name = "tinta"', "toml")

    # Plug into a Markdown engine that accepts a Highlighter
    from my_engine import set_highlighter
    from tinta.highlighting import HtmlHighlighter

    set_highlighter(HtmlHighlighter())

Output shape:
    <pre class="tinta"><code class="language-toml"><span class="line">
    <span class="tok-property">name</span>...</span></code></pre>

Plain tokens are emitted as escaped text without a wrapping span. Line
breaks between lines are literal newlines; whitespace inside lines is
preserved as-is, so the container must keep ``white-space: pre``.
"""

from __future__ import annotations

from html import escape
from typing import Protocol

from tinta.registry import GrammarRegistry, create_default_registry
from tinta.tokens import Document, Line, TokenKind


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Thread Safety:
        Implementations must be thread-safe. The highlight() method
        may be called concurrently from multiple render threads.
    """

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Highlight code with syntax colors.

        Args:
            code: Source code to highlight
            language: Language identifier (e.g., "rust", "yml")
            hl_lines: 1-indexed line numbers to emphasize (optional)
            show_linenos: Include line numbers in output

        Returns:
            HTML markup with highlighting

        Contract:
            - MUST return valid HTML (never raise for bad input)
            - MUST escape HTML entities in code
            - MUST use CSS classes (not inline styles)
            - SHOULD fall back to plain text for unknown languages
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if highlighter supports the given language.

        Contract:
            - MUST NOT raise exceptions
            - SHOULD handle common aliases (yml -> yaml)
        """
        ...


class HtmlHighlighter:
    """Tinta-backed Highlighter producing class-annotated HTML.

    Stateless apart from its immutable registry; safe to share.
    """

    __slots__ = ("_registry", "_class_prefix")

    def __init__(
        self,
        *,
        registry: GrammarRegistry | None = None,
        class_prefix: str = "tok-",
    ) -> None:
        """Initialize highlighter.

        Args:
            registry: Grammar registry (default registry if None)
            class_prefix: Prefix for per-kind CSS classes
        """
        self._registry = registry
        self._class_prefix = class_prefix

    def highlight(
        self,
        code: str,
        language: str,
        *,
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Tokenize ``code`` and render it as HTML."""
        from tinta import tokenize

        doc = tokenize(code, language, registry=self._registry)
        return self.render(doc, language=language, hl_lines=hl_lines, show_linenos=show_linenos)

    def render(
        self,
        doc: Document,
        *,
        language: str = "",
        hl_lines: list[int] | None = None,
        show_linenos: bool = False,
    ) -> str:
        """Render an already tokenized Document."""
        hl_set = set(hl_lines) if hl_lines else set()
        width = len(str(len(doc.lines)))
        rendered = [
            self._render_line(line, lineno, lineno in hl_set, width if show_linenos else 0)
            for lineno, line in enumerate(doc.lines, start=1)
        ]
        lang_class = f' class="language-{escape(language)}"' if language else ""
        body = "\n".join(rendered)
        return f'<pre class="tinta"><code{lang_class}>{body}</code></pre>'

    def supports_language(self, language: str) -> bool:
        """Check if a grammar is registered for ``language``."""
        registry = self._registry if self._registry is not None else create_default_registry()
        return registry.has(language)

    def _render_line(self, line: Line, lineno: int, emphasized: bool, lineno_width: int) -> str:
        parts: list[str] = []
        if lineno_width:
            parts.append(f'<span class="lineno">{lineno:>{lineno_width}} </span>')
        for token in line:
            text = escape(token.content)
            if token.kind is TokenKind.PLAIN:
                parts.append(text)
            else:
                parts.append(f'<span class="{self._class_prefix}{token.kind.value}">{text}</span>')
        css = "line hll" if emphasized else "line"
        return f'<span class="{css}">{"".join(parts)}</span>'


# Shared instance for the module-level helper
_default_highlighter = HtmlHighlighter()


def highlight(
    code: str,
    language: str,
    *,
    hl_lines: list[int] | None = None,
    show_linenos: bool = False,
) -> str:
    """Highlight ``code`` with the default HtmlHighlighter.

    Args:
        code: Snippet text
        language: Language identifier; unknown identifiers render as plain text
        hl_lines: 1-indexed line numbers to emphasize (optional)
        show_linenos: Include line numbers in output

    Returns:
        HTML markup
    """
    return _default_highlighter.highlight(
        code, language, hl_lines=hl_lines, show_linenos=show_linenos
    )


__all__ = [
    "Highlighter",
    "HtmlHighlighter",
    "highlight",
]
