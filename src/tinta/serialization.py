"""Document serialization: JSON round-trip for token streams.

Useful for caching tokenized snippets to disk at build time and shipping
them to a client-side renderer.

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from tinta import tokenize
    from tinta.serialization import to_json, from_json

    doc = tokenize("cargo test --release", "bash")
    assert from_json(to_json(doc)) == doc

Thread Safety:
    All functions are pure; safe to call from any thread.

"""

import json
from typing import Any

from tinta.errors import SerializationError
from tinta.tokens import Document, Line, Token, TokenKind


def to_dict(doc: Document) -> dict[str, Any]:
    """Convert a Document to a JSON-compatible dict.

    Shape: ``{"language": str, "lines": [[{"kind": str, "content": str}]]}``
    """
    return {
        "language": doc.language,
        "lines": [
            [{"kind": token.kind.value, "content": token.content} for token in line]
            for line in doc.lines
        ],
    }


def from_dict(data: dict[str, Any]) -> Document:
    """Reconstruct a Document from a dict produced by to_dict().

    Raises:
        SerializationError: If a field is missing or has the wrong type, or a
            token kind is unknown.
    """
    try:
        language = data["language"]
        raw_lines = data["lines"]
    except (KeyError, TypeError) as e:
        msg = f"Malformed document payload: {e}"
        raise SerializationError(msg) from e

    if not isinstance(language, str):
        msg = f"'language' must be a string, got {type(language).__name__}"
        raise SerializationError(msg)
    if not isinstance(raw_lines, list):
        msg = f"'lines' must be a list, got {type(raw_lines).__name__}"
        raise SerializationError(msg)

    return Document(
        language=language,
        lines=tuple(_line_from_list(raw_line) for raw_line in raw_lines),
    )


def _line_from_list(raw_line: list[Any]) -> Line:
    if not isinstance(raw_line, list):
        msg = f"Serialized line must be a list, got {type(raw_line).__name__}"
        raise SerializationError(msg)
    return Line(tuple(_token_from_dict(raw) for raw in raw_line))


def _token_from_dict(raw: dict[str, Any]) -> Token:
    if not isinstance(raw, dict):
        msg = f"Serialized token must be an object, got {type(raw).__name__}"
        raise SerializationError(msg)
    kind_name = raw.get("kind")
    if kind_name is None:
        msg = "Missing 'kind' field in serialized token"
        raise SerializationError(msg)
    try:
        kind = TokenKind(kind_name)
    except (ValueError, TypeError) as e:
        msg = f"Unknown token kind: {kind_name!r}"
        raise SerializationError(msg) from e
    content = raw.get("content")
    if not isinstance(content, str):
        msg = f"Token 'content' must be a string, got {type(content).__name__}"
        raise SerializationError(msg)
    # Only the spacing parts of a JSON property key are ever empty
    if not content and kind is not TokenKind.PLAIN:
        msg = f"Empty content for {kind.value} token"
        raise SerializationError(msg)
    return Token(kind, content)


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Args:
        doc: Document to serialize.
        indent: JSON indentation (None for compact).

    Returns:
        JSON string with sorted keys.
    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(json_str: str) -> Document:
    """Deserialize a JSON string to a Document.

    Raises:
        SerializationError: If the JSON is invalid or not a document payload.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        msg = f"Invalid JSON: {e}"
        raise SerializationError(msg) from e
    if not isinstance(data, dict):
        msg = "Serialized document must be a JSON object"
        raise SerializationError(msg)
    return from_dict(data)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
