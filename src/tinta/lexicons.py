"""Vocabulary tables for O(1) word classification.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from tinta.lexicons import RUST_KEYWORDS

    if word in RUST_KEYWORDS:  # O(1) lookup
        ...
"""

# Shell: command words highlighted wherever they start a word
SHELL_COMMANDS: frozenset[str] = frozenset(
    {
        "build",
        "cargo",
        "cd",
        "curl",
        "echo",
        "forge",
        "gh",
        "git",
        "install",
        "mkdir",
        "npm",
        "run",
        "test",
    }
)

# YAML: scalar words rendered as keywords (matched case-insensitively)
YAML_LITERALS: frozenset[str] = frozenset({"true", "false", "null", "yes", "no"})

# JSON: literal words (case-sensitive)
JSON_LITERALS: frozenset[str] = frozenset({"true", "false", "null"})

# TOML: boolean literals (case-sensitive)
TOML_LITERALS: frozenset[str] = frozenset({"true", "false"})

# Bare Rust identifiers are scanned one character at a time, so every word in
# the Rust sets also matches as the tail of a longer name
RUST_KEYWORDS: frozenset[str] = frozenset(
    {
        "async",
        "await",
        "const",
        "crate",
        "dyn",
        "else",
        "enum",
        "extern",
        "fn",
        "for",
        "if",
        "impl",
        "let",
        "loop",
        "match",
        "mod",
        "move",
        "mut",
        "pub",
        "ref",
        "return",
        "self",
        "Self",
        "static",
        "struct",
        "trait",
        "type",
        "unsafe",
        "use",
        "where",
        "while",
    }
)

RUST_TYPES: frozenset[str] = frozenset(
    {
        "Arc",
        "Box",
        "Err",
        "None",
        "Ok",
        "Option",
        "Path",
        "PathBuf",
        "Rc",
        "Result",
        "Some",
        "String",
        "Vec",
        "bool",
        "f32",
        "f64",
        "i32",
        "i64",
        "str",
        "u32",
        "u64",
        "usize",
    }
)

# Call-like names that read as built-ins even without the macro bang
RUST_BUILTINS: frozenset[str] = frozenset(
    {
        "assert",
        "expect",
        "format",
        "panic",
        "print",
        "println",
        "unwrap",
    }
)

SOLIDITY_KEYWORDS: frozenset[str] = frozenset(
    {
        "assert",
        "break",
        "calldata",
        "constructor",
        "continue",
        "contract",
        "delete",
        "do",
        "else",
        "emit",
        "enum",
        "event",
        "external",
        "for",
        "from",
        "function",
        "if",
        "import",
        "interface",
        "internal",
        "is",
        "library",
        "mapping",
        "memory",
        "modifier",
        "new",
        "override",
        "payable",
        "pragma",
        "private",
        "public",
        "pure",
        "require",
        "return",
        "returns",
        "revert",
        "solidity",
        "storage",
        "struct",
        "using",
        "view",
        "virtual",
        "while",
    }
)

# Elementary types: address, bool, string, bytes and sized integers
SOLIDITY_TYPES: frozenset[str] = frozenset(
    {"address", "bool", "string", "bytes"}
    | {f"bytes{size}" for size in range(1, 33)}
    | {"int", "uint"}
    | {f"int{bits}" for bits in range(8, 257, 8)}
    | {f"uint{bits}" for bits in range(8, 257, 8)}
)

__all__ = [
    "JSON_LITERALS",
    "RUST_BUILTINS",
    "RUST_KEYWORDS",
    "RUST_TYPES",
    "SHELL_COMMANDS",
    "SOLIDITY_KEYWORDS",
    "SOLIDITY_TYPES",
    "TOML_LITERALS",
    "YAML_LITERALS",
]
