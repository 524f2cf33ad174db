"""Serialize token streams to JSON for a client-side renderer."""

from tinta import from_json, to_json, tokenize

doc = tokenize('{\n  "name": "tinta",\n  "private": true\n}', "json")
payload = to_json(doc, indent=2)
print(payload)

assert from_json(payload) == doc
print("Round-trip OK")
