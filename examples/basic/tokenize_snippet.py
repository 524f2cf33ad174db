"""Tokenize a snippet and render it as HTML in a few lines."""

from tinta import highlight, tokenize

doc = tokenize('[package]\nname = "tinta"', "toml")
for line in doc:
    print([(token.kind.value, token.content) for token in line])

print(highlight("cargo build --release", "bash"))
