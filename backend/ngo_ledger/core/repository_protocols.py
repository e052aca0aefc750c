"""Boundary Protocols - contracts between the chaincode core and the ledger host.

Invariants:
    - Core NEVER imports from infrastructure - dependency arrows point inward only
    - The host is consumed through exactly four operations: get, put, delete, composite key
    - get_state returns None for an absent key; existence policy is applied by the caller

Design Decisions:
    - Protocol over ABC: structural subtyping, any host adapter qualifies without inheritance
    - Async state access: implementations do IO, key construction stays sync and pure
    - TransactionalLedger kept separate: only the host shell frames transactions,
      handlers never commit or roll back
"""

from collections.abc import Sequence
from typing import Protocol


class LedgerStub(Protocol):
    """The four operations the ledger host exposes to a chaincode invocation."""
    async def get_state(self, key: str) -> str | None: ...
    async def put_state(self, key: str, value: str) -> None: ...
    async def delete_state(self, key: str) -> None: ...
    def create_composite_key(
        self, namespace: str, parts: Sequence[str],
    ) -> str: ...


class TransactionalLedger(LedgerStub, Protocol):
    """LedgerStub plus the transaction boundary the host applies around invoke()."""
    async def commit(self) -> None: ...
    async def rollback(self) -> None: ...
