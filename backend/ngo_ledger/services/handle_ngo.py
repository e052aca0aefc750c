"""NGO Handlers - registerNGO, queryNGO (2 methods).

Invariants:
    - NGO records live under the raw NGO id (simple key, no namespace)
    - registerNGO overwrites unconditionally; queryNGO requires an existing record
    - Arity is checked before the store is touched

Design Decisions:
    - NGO ids validated as simple keys: an id starting with U+0000 would alias the
      composite key space used by donation requests and donations
"""

from ngo_ledger.core.composite_key import validate_simple_key
from ngo_ledger.core.enforce_existence import require_existing
from ngo_ledger.core.operation_args import NgoKeyArgs, RegisterNgoArgs
from ngo_ledger.core.repository_protocols import LedgerStub


class NgoHandlers:
    """Organization registration and lookup."""

    def __init__(self, store: LedgerStub):
        self.store = store

    async def register_ngo(self, args: list[str]) -> str:
        parsed = RegisterNgoArgs.parse(args)
        key = validate_simple_key(parsed.ngo_id)
        await self.store.put_state(key, parsed.ngo_info)
        return f"NGO registered successfully: {parsed.ngo_id}"

    async def query_ngo(self, args: list[str]) -> str:
        """Return the stored NGO info verbatim."""
        parsed = NgoKeyArgs.parse(args)
        key = validate_simple_key(parsed.ngo_id)
        value = await self.store.get_state(key)
        return require_existing(value, "NGO", parsed.ngo_id, key)
