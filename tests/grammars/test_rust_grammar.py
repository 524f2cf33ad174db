"""Tests for the Rust grammar."""

import pytest

from tinta import tokenize


def _tokens(line: str, language: str = "rust") -> list[tuple[str, str]]:
    doc = tokenize(line, language)
    assert len(doc.lines) == 1
    return [(t.kind.value, t.content) for t in doc.lines[0]]


class TestPrecedence:
    """Keyword matching runs before the call heuristic."""

    def test_keyword_followed_by_paren(self) -> None:
        assert _tokens("if (x)") == [
            ("keyword", "if"),
            ("plain", " "),
            ("punctuation", "("),
            ("plain", "x"),
            ("punctuation", ")"),
        ]

    def test_function_definition(self) -> None:
        assert _tokens("fn main() {") == [
            ("keyword", "fn"),
            ("plain", " "),
            ("function", "main"),
            ("punctuation", "("),
            ("punctuation", ")"),
            ("plain", " "),
            ("punctuation", "{"),
        ]

    def test_space_before_call_paren(self) -> None:
        assert _tokens("foo (1)") == [
            ("function", "foo"),
            ("plain", " "),
            ("punctuation", "("),
            ("number", "1"),
            ("punctuation", ")"),
        ]

    def test_builtin_call_without_bang(self) -> None:
        assert _tokens("x.unwrap()") == [
            ("plain", "x"),
            ("punctuation", "."),
            ("builtin", "unwrap"),
            ("punctuation", "("),
            ("punctuation", ")"),
        ]


class TestTypes:
    """Type vocabulary and PascalCase names."""

    def test_generic_binding(self) -> None:
        assert _tokens("let v: Vec<u32> = Vec::new();") == [
            ("keyword", "let"),
            ("plain", " "),
            ("plain", "v"),
            ("punctuation", ":"),
            ("plain", " "),
            ("type", "Vec"),
            ("operator", "<"),
            ("type", "u32"),
            ("operator", ">"),
            ("plain", " "),
            ("operator", "="),
            ("plain", " "),
            ("type", "Vec"),
            ("operator", "::"),
            ("function", "new"),
            ("punctuation", "("),
            ("punctuation", ")"),
            ("punctuation", ";"),
        ]

    def test_pascal_case_is_type(self) -> None:
        assert _tokens("MyStruct::new()")[:2] == [("type", "MyStruct"), ("operator", "::")]

    def test_variant_call_is_type(self) -> None:
        assert _tokens("Some(3.14)") == [
            ("type", "Some"),
            ("punctuation", "("),
            ("number", "3.14"),
            ("punctuation", ")"),
        ]


class TestMacrosAttributesLifetimes:
    """Rust-specific markers."""

    def test_macro_invocation(self) -> None:
        tokens = _tokens('println!("hi {}", name);')
        assert tokens[0] == ("builtin", "println!")
        assert tokens[1] == ("punctuation", "(")
        assert tokens[2] == ("string", '"hi {}"')
        assert tokens[-2:] == [("punctuation", ")"), ("punctuation", ";")]

    def test_attribute(self) -> None:
        assert _tokens("#[derive(Debug, Clone)]") == [("attribute", "#[derive(Debug, Clone)]")]

    def test_lifetimes(self) -> None:
        assert _tokens("fn f<'a>(s: &'a str)") == [
            ("keyword", "fn"),
            ("plain", " "),
            ("plain", "f"),
            ("operator", "<"),
            ("attribute", "'a"),
            ("operator", ">"),
            ("punctuation", "("),
            ("plain", "s"),
            ("punctuation", ":"),
            ("plain", " "),
            ("operator", "&"),
            ("attribute", "'a"),
            ("plain", " "),
            ("type", "str"),
            ("punctuation", ")"),
        ]

    def test_escaped_quotes_stay_in_string(self) -> None:
        line = r'"a \"b\" c"'
        assert _tokens(line) == [("string", line)]


class TestOperators:
    """Compound operators are single tokens."""

    @pytest.mark.parametrize("op", ["::", "->", "=>", "&&", "||"])
    def test_compound_operator(self, op: str) -> None:
        assert _tokens(op) == [("operator", op)]

    def test_arrow_in_signature(self) -> None:
        assert ("operator", "->") in _tokens("fn f() -> bool")


class TestComments:
    """Full-line and trailing comments."""

    @pytest.mark.parametrize("line", ["// note", "    // indented note"])
    def test_full_line_comment(self, line: str) -> None:
        assert _tokens(line) == [("comment", line)]

    def test_trailing_comment(self) -> None:
        assert _tokens("let x = 1; // one")[-1] == ("comment", "// one")


class TestBareIdentifiers:
    """Plain names never end in a keyword or type token."""

    def test_binding_names_stay_plain(self) -> None:
        tokens = _tokens("let chain = domain;")
        assert ("keyword", "in") not in tokens
        assert [t for t in tokens if t[0] not in ("plain", "operator", "punctuation")] == [
            ("keyword", "let")
        ]

    @pytest.mark.parametrize("name", ["chain", "main", "bin", "plugin", "alias", "has", "mychar"])
    def test_name_is_all_plain(self, name: str) -> None:
        assert {kind for kind, _ in _tokens(name)} == {"plain"}


class TestAliases:
    """rs selects the Rust grammar."""

    def test_rs_alias(self) -> None:
        assert _tokens("fn main()", "rs") == _tokens("fn main()", "rust")
