"""Ledger Store Dependency - tests for backend selection and the in-memory store."""

from ngo_ledger.core import composite_key
from ngo_ledger.infrastructure.ledger_store import (
    InMemoryLedgerStore, get_ledger_store, get_memory_store,
)


def test_memory_store_is_a_singleton():
    assert get_memory_store() is get_memory_store()


async def test_dependency_yields_memory_store_for_memory_backend():
    # root conftest sets LEDGER_BACKEND=memory
    gen = get_ledger_store()
    store = await anext(gen)
    assert store is get_memory_store()
    await gen.aclose()


async def test_in_memory_store_round_trip():
    store = InMemoryLedgerStore({"ngo1": "Red Cross"})
    assert await store.get_state("ngo1") == "Red Cross"
    await store.delete_state("ngo1")
    await store.delete_state("ngo1")
    assert await store.get_state("ngo1") is None


async def test_in_memory_commit_and_rollback_keep_writes():
    store = InMemoryLedgerStore()
    await store.put_state("ngo1", "Red Cross")
    await store.rollback()
    await store.commit()
    assert store.snapshot() == {"ngo1": "Red Cross"}


def test_in_memory_composite_key_uses_codec():
    assert InMemoryLedgerStore().create_composite_key("Donation", ["O1", "D1"]) == (
        composite_key.encode("Donation", ["O1", "D1"])
    )
