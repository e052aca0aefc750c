"""Ledger Stores - host-side implementations of the LedgerStub boundary.

Invariants:
    - get_state returns None for absent keys and never applies the empty-as-absent policy
    - create_composite_key always delegates to core.composite_key.encode
    - SqlLedgerStore maps every SQLAlchemy and encoding failure to HostStoreError
      carrying the driver message and the key involved
    - SqlLedgerStore flushes after each write so later reads in the same invocation see it
    - Neither store caches reads or batches writes

Design Decisions:
    - InMemoryLedgerStore as a module-level singleton for LEDGER_BACKEND=memory:
      deliberate exception to no-global-state (ADR: local development, single process,
      state lost on restart)
    - Transactions framed by the HTTP shell (commit on ok, rollback on error),
      never by handlers
"""

import logging
from collections.abc import AsyncGenerator, Iterator, Sequence
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ngo_ledger.config import get_settings
from ngo_ledger.core import composite_key
from ngo_ledger.core.errors import ErrorContext, HostStoreError
from ngo_ledger.core.repository_protocols import TransactionalLedger
from ngo_ledger.infrastructure import database
from ngo_ledger.models.ledger_state import LedgerState

logger = logging.getLogger(__name__)


class InMemoryLedgerStore:
    """Dict-backed world state. Writes apply immediately."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._state: dict[str, str] = dict(initial or {})

    async def get_state(self, key: str) -> str | None:
        return self._state.get(key)

    async def put_state(self, key: str, value: str) -> None:
        self._state[key] = value

    async def delete_state(self, key: str) -> None:
        self._state.pop(key, None)

    def create_composite_key(self, namespace: str, parts: Sequence[str]) -> str:
        return composite_key.encode(namespace, parts)

    async def commit(self) -> None:
        pass

    async def rollback(self) -> None:
        pass

    def snapshot(self) -> dict[str, str]:
        """Copy of the full state, for inspection."""
        return dict(self._state)


class SqlLedgerStore:
    """World state persisted in the ledger_state table through one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_state(self, key: str) -> str | None:
        with self._host_errors("get", key):
            row = await self.db.get(LedgerState, _key_bytes(key))
            if row is None:
                return None
            return row.value.decode("utf-8")

    async def put_state(self, key: str, value: str) -> None:
        with self._host_errors("put", key):
            row = await self.db.get(LedgerState, _key_bytes(key))
            if row is None:
                self.db.add(LedgerState(
                    key=_key_bytes(key),
                    value=value.encode("utf-8"),
                    object_type=_object_type(key),
                ))
            else:
                row.value = value.encode("utf-8")
            await self.db.flush()

    async def delete_state(self, key: str) -> None:
        with self._host_errors("delete", key):
            row = await self.db.get(LedgerState, _key_bytes(key))
            if row is not None:
                await self.db.delete(row)
                await self.db.flush()

    def create_composite_key(self, namespace: str, parts: Sequence[str]) -> str:
        return composite_key.encode(namespace, parts)

    async def commit(self) -> None:
        with self._host_errors("commit"):
            await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()

    @contextmanager
    def _host_errors(
        self, operation: str, key: str | None = None,
    ) -> Iterator[None]:
        context = ErrorContext(ledger_key=key)
        try:
            yield
        except UnicodeError as e:
            logger.error(f"Ledger {operation} encoding error: {e}")
            raise HostStoreError(f"encoding error: {e}", operation, context)
        except SQLAlchemyError as e:
            logger.error(f"Ledger {operation} failed: {e}")
            # driver message, without SQLAlchemy's statement and background link
            cause = getattr(e, "orig", None) or e
            raise HostStoreError(str(cause), operation, context)


def _key_bytes(key: str) -> bytes:
    return key.encode("utf-8")


def _object_type(key: str) -> str | None:
    if not composite_key.is_composite(key):
        return None
    namespace, _ = composite_key.decode(key)
    return namespace


# Singleton for LEDGER_BACKEND=memory (created on first use)
_memory_store: InMemoryLedgerStore | None = None


def get_memory_store() -> InMemoryLedgerStore:
    global _memory_store
    if _memory_store is None:
        _memory_store = InMemoryLedgerStore()
    return _memory_store


async def get_ledger_store() -> AsyncGenerator[TransactionalLedger, None]:
    """FastAPI dependency: the configured ledger backend for one invocation."""
    if get_settings().ledger_backend == "memory":
        yield get_memory_store()
        return
    if not database.db_manager:
        raise RuntimeError("Database not initialized")
    async with database.db_manager.session() as session:
        yield SqlLedgerStore(session)
