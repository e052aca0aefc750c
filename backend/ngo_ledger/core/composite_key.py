"""Composite Keys - maps (namespace, ordered parts) onto a single flat ledger key.

Invariants:
    - encode() is deterministic: identical (namespace, parts) always yield the identical key
    - Distinct (namespace, parts) tuples never yield the same key
    - Every composite key starts with COMPOSITE_KEY_PREFIX; no valid simple key does
    - decode(encode(ns, parts)) == (ns, parts)

Design Decisions:
    - Length-prefixed parts over a plain separator: "A:B"+"C" and "A"+"B:C" stay distinct
      without restricting which characters an id may contain (ADR: collision resistance)
    - U+0000 prefix matches the ledger host's composite key space, so simple keys
      starting with U+0000 are rejected rather than silently aliased
"""

from collections.abc import Sequence

from ngo_ledger.core.errors import InvalidKeyError

COMPOSITE_KEY_PREFIX = "\x00"
_DELIMITER = "\x00"
_LENGTH_SEPARATOR = ":"


def encode(namespace: str, parts: Sequence[str]) -> str:
    """Build the canonical composite key for namespace + ordered parts."""
    _validate_namespace(namespace)
    encoded = [COMPOSITE_KEY_PREFIX, namespace, _DELIMITER]
    for part in parts:
        if not isinstance(part, str):
            raise InvalidKeyError(
                f"Composite key part must be a string, got {type(part).__name__}",
            )
        encoded.append(f"{len(part)}{_LENGTH_SEPARATOR}{part}{_DELIMITER}")
    return "".join(encoded)


def decode(key: str) -> tuple[str, list[str]]:
    """Split a composite key back into (namespace, parts)."""
    if not is_composite(key):
        raise InvalidKeyError(f"Not a composite key: {key!r}")
    end = key.find(_DELIMITER, 1)
    if end <= 1:
        raise InvalidKeyError(f"Composite key has no namespace: {key!r}")
    namespace = key[1:end]
    parts: list[str] = []
    pos = end + 1
    while pos < len(key):
        part, pos = _read_part(key, pos)
        parts.append(part)
    return namespace, parts


def is_composite(key: str) -> bool:
    return key.startswith(COMPOSITE_KEY_PREFIX)


def validate_simple_key(key: str) -> str:
    """Simple (non-composite) keys must be non-empty and outside the composite key space."""
    if not key:
        raise InvalidKeyError("Key must not be an empty string")
    if is_composite(key):
        raise InvalidKeyError(
            f"Key {key!r} must not start with the composite key prefix U+0000",
        )
    return key


def _validate_namespace(namespace: str) -> None:
    if not namespace:
        raise InvalidKeyError("Composite key namespace must not be empty")
    if _DELIMITER in namespace:
        raise InvalidKeyError(
            f"Composite key namespace {namespace!r} must not contain U+0000",
        )


def _read_part(key: str, pos: int) -> tuple[str, int]:
    """Read one '<len>:<part>\\x00' segment starting at pos."""
    sep = key.find(_LENGTH_SEPARATOR, pos)
    length_text = key[pos:sep] if sep != -1 else ""
    if not (length_text.isascii() and length_text.isdigit()):
        raise InvalidKeyError(f"Malformed composite key part length in {key!r}")
    start = sep + 1
    stop = start + int(length_text)
    if stop >= len(key) or key[stop] != _DELIMITER:
        raise InvalidKeyError(f"Truncated composite key part in {key!r}")
    return key[start:stop], stop + 1
