"""Existence Enforcement - decides whether a ledger read counts as an existing record.

Invariants:
    - All functions are PURE: no IO, no async, no store access
    - A record exists iff the store returned a value that is neither None nor ""
    - An explicitly stored empty string is indistinguishable from an absent key

Design Decisions:
    - Empty-as-absent kept for parity with records already on the ledger
    - require_existing raises (not returns a dict): handlers stay linear and the
      dispatcher owns the single error -> result conversion
"""

from ngo_ledger.core.errors import ErrorContext, NotFoundError


def record_exists(value: str | None) -> bool:
    return value is not None and value != ""


def require_existing(
    value: str | None, resource_type: str, resource_id: str,
    key: str | None = None,
) -> str:
    """Return value if the record exists, else raise NotFoundError naming the key read."""
    if not record_exists(value):
        raise NotFoundError(
            resource_type, resource_id, ErrorContext(ledger_key=key),
        )
    return value
