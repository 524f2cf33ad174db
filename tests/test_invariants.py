"""Property-based tests for tokenizer invariants using Hypothesis.

These hold for every grammar and every input, including identifiers that
fall back to plain text.
"""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tinta import TokenKind, tokenize

LANGUAGES = ["yaml", "bash", "json", "rust", "solidity", "toml", "unknown"]

# Characters that drive rule selection in at least one grammar
SPECIAL_ALPHABET = "\"'#$-:{}[](),;!<>|&=/\\.^_*+%?~ \t\r\naZif0123456789"

single_lines = st.text(alphabet=st.characters(blacklist_characters="\n", blacklist_categories=("Cs",)))


class TestTotality:
    """tokenize() returns a well-formed Document for any input."""

    @pytest.mark.parametrize("language", LANGUAGES)
    @given(code=st.text(max_size=500))
    @settings(max_examples=100)
    def test_never_raises(self, language: str, code: str) -> None:
        doc = tokenize(code, language)
        assert len(doc.lines) == code.count("\n") + 1

    @pytest.mark.parametrize("language", LANGUAGES)
    @given(code=st.text(alphabet=SPECIAL_ALPHABET, max_size=300))
    @settings(max_examples=150)
    def test_special_characters(self, language: str, code: str) -> None:
        doc = tokenize(code, language)
        for line in doc:
            for token in line:
                assert isinstance(token.kind, TokenKind)

    @given(code=st.text(max_size=100), language=st.text(max_size=20))
    @settings(max_examples=100)
    def test_any_identifier(self, code: str, language: str) -> None:
        assert tokenize(code, language).text == code


class TestRoundTrip:
    """Concatenated token contents reproduce each line exactly."""

    @pytest.mark.parametrize("language", LANGUAGES)
    @given(code=st.text(alphabet=SPECIAL_ALPHABET, max_size=300))
    @settings(max_examples=150)
    def test_lines_round_trip(self, language: str, code: str) -> None:
        doc = tokenize(code, language)
        assert [line.text for line in doc] == code.split("\n")

    @pytest.mark.parametrize("language", LANGUAGES)
    @given(code=st.text(max_size=300))
    @settings(max_examples=100)
    def test_document_round_trips(self, language: str, code: str) -> None:
        assert tokenize(code, language).text == code


class TestTokenShape:
    """Token content and count bounds."""

    @pytest.mark.parametrize("language", ["yaml", "bash", "rust", "solidity", "toml", "unknown"])
    @given(code=st.text(alphabet=SPECIAL_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_no_empty_tokens(self, language: str, code: str) -> None:
        for line in tokenize(code, language):
            assert all(token.content for token in line)

    @given(code=st.text(alphabet=SPECIAL_ALPHABET, max_size=200))
    @settings(max_examples=100)
    def test_json_empty_tokens_are_key_spacing_only(self, code: str) -> None:
        for line in tokenize(code, "json"):
            for token in line:
                if not token.content:
                    assert token.kind is TokenKind.PLAIN

    @pytest.mark.parametrize("language", LANGUAGES)
    @given(line=single_lines)
    @settings(max_examples=100)
    def test_token_count_bounded_by_length(self, language: str, line: str) -> None:
        tokens = [t for t in tokenize(line, language).lines[0] if t.content]
        assert len(tokens) <= len(line)


class TestFullLineComments:
    """A leading # makes the whole line one comment."""

    @pytest.mark.parametrize("language", ["yaml", "bash", "toml"])
    @given(indent=st.text(alphabet=" \t", max_size=8), rest=single_lines)
    @settings(max_examples=100)
    def test_hash_comment(self, language: str, indent: str, rest: str) -> None:
        line = f"{indent}#{rest}"
        tokens = list(tokenize(line, language).lines[0])
        assert [(t.kind, t.content) for t in tokens] == [(TokenKind.COMMENT, line)]

    @pytest.mark.parametrize("language", ["rust", "solidity"])
    @given(indent=st.text(alphabet=" \t", max_size=8), rest=single_lines)
    @settings(max_examples=100)
    def test_slash_comment(self, language: str, indent: str, rest: str) -> None:
        line = f"{indent}//{rest}"
        tokens = list(tokenize(line, language).lines[0])
        assert [(t.kind, t.content) for t in tokens] == [(TokenKind.COMMENT, line)]


class TestDeterminism:
    """Tokenizing the same input twice gives identical results."""

    @pytest.mark.parametrize("language", LANGUAGES)
    @given(code=st.text(alphabet=SPECIAL_ALPHABET, max_size=200))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, language: str, code: str) -> None:
        assert tokenize(code, language) == tokenize(code, language)
