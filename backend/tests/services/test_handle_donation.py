"""Donation Handlers - tests for create-only donations."""

import pytest

from ngo_ledger.core import composite_key
from ngo_ledger.core.errors import ArityError
from ngo_ledger.services.handle_donation import DonationHandlers
from ngo_ledger.services.handle_donation_request import DonationRequestHandlers


async def test_donate_stores_amount_under_composite_key(store):
    message = await DonationHandlers(store).donate(["D1", "O1", "250"])
    assert message == "Donation made successfully: D1"
    assert store.snapshot() == {
        composite_key.encode("Donation", ["O1", "D1"]): "250",
    }


async def test_donate_overwrites(store):
    handlers = DonationHandlers(store)
    await handlers.donate(["D1", "O1", "250"])
    await handlers.donate(["D1", "O1", "300"])
    assert list(store.snapshot().values()) == ["300"]


async def test_donation_does_not_collide_with_request(store):
    await DonationHandlers(store).donate(["X1", "O1", "250"])
    await DonationRequestHandlers(store).create_donation_request(["X1", "O1", "tents"])
    assert len(store.snapshot()) == 2


async def test_donate_wrong_arity(store):
    with pytest.raises(ArityError):
        await DonationHandlers(store).donate(["D1", "O1"])
    assert store.snapshot() == {}
