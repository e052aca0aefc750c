"""Donation Request Handlers - create, update, delete, query (4 methods).

Invariants:
    - Records keyed by composite("DonationRequest", ngo_id, request_id), in that order
    - create overwrites unconditionally (no existence check)
    - update/delete/query read first and fail with NotFoundError when the record
      is absent or holds an empty string
    - A failed check performs no write

Design Decisions:
    - Arguments arrive as named fields (operation_args): create/update take
      (request_id, ngo_id, ...) while delete/query take (ngo_id, request_id),
      and _key() is the only place the composite order is spelled out
"""

from ngo_ledger.core.domain_types import Namespace, NgoId, RequestId
from ngo_ledger.core.enforce_existence import require_existing
from ngo_ledger.core.operation_args import (
    DonationRequestKeyArgs, DonationRequestWriteArgs,
)
from ngo_ledger.core.repository_protocols import LedgerStub

_RESOURCE = "Donation request"


class DonationRequestHandlers:
    """Full lifecycle for donation requests scoped to an NGO."""

    def __init__(self, store: LedgerStub):
        self.store = store

    def _key(self, ngo_id: NgoId, request_id: RequestId) -> str:
        return self.store.create_composite_key(
            Namespace.DONATION_REQUEST.value, [ngo_id, request_id],
        )

    async def create_donation_request(self, args: list[str]) -> str:
        parsed = DonationRequestWriteArgs.parse_create(args)
        key = self._key(parsed.ngo_id, parsed.request_id)
        await self.store.put_state(key, parsed.info)
        return f"Donation request created successfully: {parsed.request_id}"

    async def update_donation_request(self, args: list[str]) -> str:
        parsed = DonationRequestWriteArgs.parse_update(args)
        key = self._key(parsed.ngo_id, parsed.request_id)
        value = await self.store.get_state(key)
        require_existing(value, _RESOURCE, parsed.request_id, key)
        await self.store.put_state(key, parsed.info)
        return f"Donation request updated successfully: {parsed.request_id}"

    async def delete_donation_request(self, args: list[str]) -> str:
        parsed = DonationRequestKeyArgs.parse(args)
        key = self._key(parsed.ngo_id, parsed.request_id)
        value = await self.store.get_state(key)
        require_existing(value, _RESOURCE, parsed.request_id, key)
        await self.store.delete_state(key)
        return f"Donation request deleted successfully: {parsed.request_id}"

    async def query_donation_request(self, args: list[str]) -> str:
        """Return the stored request info verbatim."""
        parsed = DonationRequestKeyArgs.parse(args)
        key = self._key(parsed.ngo_id, parsed.request_id)
        value = await self.store.get_state(key)
        return require_existing(value, _RESOURCE, parsed.request_id, key)
