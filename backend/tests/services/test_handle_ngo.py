"""NGO Handlers - tests for registration and lookup against an in-memory store.

Tests cover:
    - register writes the info under the raw NGO id
    - register overwrites silently
    - query returns stored info, NotFound for absent or empty values
    - Invalid simple keys are rejected before touching the store
"""

import pytest

from ngo_ledger.core.errors import ArityError, InvalidKeyError, NotFoundError
from ngo_ledger.services.handle_ngo import NgoHandlers


async def test_register_stores_under_raw_id(store):
    handlers = NgoHandlers(store)
    message = await handlers.register_ngo(["ngo1", "Red Cross"])
    assert message == "NGO registered successfully: ngo1"
    assert store.snapshot() == {"ngo1": "Red Cross"}


async def test_register_overwrites(store):
    handlers = NgoHandlers(store)
    await handlers.register_ngo(["ngo1", "Red Cross"])
    await handlers.register_ngo(["ngo1", "Red Crescent"])
    assert await handlers.query_ngo(["ngo1"]) == "Red Crescent"


async def test_query_missing_raises_not_found(store):
    with pytest.raises(NotFoundError) as exc_info:
        await NgoHandlers(store).query_ngo(["ngo2"])
    assert exc_info.value.message == "NGO not found: ngo2"


async def test_query_empty_value_raises_not_found(store):
    await store.put_state("ngo1", "")
    with pytest.raises(NotFoundError):
        await NgoHandlers(store).query_ngo(["ngo1"])


async def test_register_rejects_empty_id(store):
    with pytest.raises(InvalidKeyError):
        await NgoHandlers(store).register_ngo(["", "info"])
    assert store.snapshot() == {}


async def test_register_rejects_composite_prefixed_id(store):
    with pytest.raises(InvalidKeyError):
        await NgoHandlers(store).register_ngo(["\x00DonationRequest\x00", "info"])
    assert store.snapshot() == {}


async def test_register_wrong_arity_does_not_write(store):
    with pytest.raises(ArityError):
        await NgoHandlers(store).register_ngo(["ngo1"])
    assert store.snapshot() == {}
