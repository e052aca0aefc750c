"""Domain Types - verifies identity wrappers and wire-level enum values.

Tests:
    - NewType wrappers are transparent over str
    - Namespace values are the persisted composite key tags
    - ChaincodeFunction lists exactly the seven invokable functions
"""

from ngo_ledger.core.domain_types import (
    ChaincodeFunction, DonationId, Namespace, NgoId, RequestId, ResultStatus,
)


def test_identity_types_wrap_str():
    assert NgoId("ngo1") == "ngo1"
    assert RequestId("R1") == "R1"
    assert DonationId("D1") == "D1"


def test_namespace_tags():
    assert Namespace.DONATION_REQUEST.value == "DonationRequest"
    assert Namespace.DONATION.value == "Donation"
    assert len(Namespace) == 2


def test_chaincode_has_exactly_seven_functions():
    assert {f.value for f in ChaincodeFunction} == {
        "registerNGO",
        "createDonationRequest",
        "updateDonationRequest",
        "deleteDonationRequest",
        "donate",
        "queryNGO",
        "queryDonationRequest",
    }


def test_result_status_compares_to_wire_string():
    assert ResultStatus.OK == "ok"
    assert ResultStatus.ERROR == "error"
