"""Donation Handlers - donate (1 method).

Invariants:
    - Records keyed by composite("Donation", ngo_id, donation_id)
    - donate creates or overwrites unconditionally

Design Decisions:
    - Create-only on purpose: donations have no update/delete/query function, unlike
      donation requests. Kept as-is for compatibility with existing clients.
"""

from ngo_ledger.core.domain_types import Namespace
from ngo_ledger.core.operation_args import DonateArgs
from ngo_ledger.core.repository_protocols import LedgerStub


class DonationHandlers:

    def __init__(self, store: LedgerStub):
        self.store = store

    async def donate(self, args: list[str]) -> str:
        parsed = DonateArgs.parse(args)
        key = self.store.create_composite_key(
            Namespace.DONATION.value, [parsed.ngo_id, parsed.donation_id],
        )
        await self.store.put_state(key, parsed.amount)
        return f"Donation made successfully: {parsed.donation_id}"
