"""Operation Arguments - positional chaincode args parsed into named fields.

Invariants:
    - Every parser checks arity before reading any position; mismatch raises ArityError
    - Arity messages are the exact strings clients have always received
    - Positional order is NOT uniform across functions and is fixed here, nowhere else:
        registerNGO            (ngo_id, ngo_info)
        createDonationRequest  (request_id, ngo_id, info)
        updateDonationRequest  (request_id, ngo_id, info)
        deleteDonationRequest  (ngo_id, request_id)     <- reversed vs create/update
        queryDonationRequest   (ngo_id, request_id)     <- reversed vs create/update
        donate                 (donation_id, ngo_id, amount)
        queryNGO               (ngo_id)

Design Decisions:
    - One frozen dataclass per argument shape: handlers read .ngo_id / .request_id,
      so the asymmetric ordering cannot leak into key construction
    - Pure functions, no IO: testable without a store
"""

from collections.abc import Sequence
from dataclasses import dataclass

from ngo_ledger.core.domain_types import DonationId, NgoId, RequestId
from ngo_ledger.core.errors import ArityError


def _check_arity(args: Sequence[str], expected: int, message: str) -> None:
    if len(args) != expected:
        raise ArityError(message, expected=expected, received=len(args))


@dataclass(frozen=True)
class RegisterNgoArgs:
    ngo_id: NgoId
    ngo_info: str

    @classmethod
    def parse(cls, args: Sequence[str]) -> "RegisterNgoArgs":
        _check_arity(args, 2, "Expected 2 arguments: NGO ID and NGO Information")
        return cls(ngo_id=NgoId(args[0]), ngo_info=args[1])


@dataclass(frozen=True)
class NgoKeyArgs:
    ngo_id: NgoId

    @classmethod
    def parse(cls, args: Sequence[str]) -> "NgoKeyArgs":
        _check_arity(args, 1, "Expected 1 argument: NGO ID")
        return cls(ngo_id=NgoId(args[0]))


@dataclass(frozen=True)
class DonationRequestWriteArgs:
    """Shared by create and update; only the arity message differs."""
    request_id: RequestId
    ngo_id: NgoId
    info: str

    @classmethod
    def parse_create(cls, args: Sequence[str]) -> "DonationRequestWriteArgs":
        _check_arity(
            args, 3,
            "Expected 3 arguments: Donation ID, NGO ID, "
            "and Donation Request Information",
        )
        return cls._from_positions(args)

    @classmethod
    def parse_update(cls, args: Sequence[str]) -> "DonationRequestWriteArgs":
        _check_arity(
            args, 3,
            "Expected 3 arguments: Donation ID, NGO ID, "
            "and Updated Donation Request Information",
        )
        return cls._from_positions(args)

    @classmethod
    def _from_positions(cls, args: Sequence[str]) -> "DonationRequestWriteArgs":
        return cls(
            request_id=RequestId(args[0]), ngo_id=NgoId(args[1]), info=args[2],
        )


@dataclass(frozen=True)
class DonationRequestKeyArgs:
    ngo_id: NgoId
    request_id: RequestId

    @classmethod
    def parse(cls, args: Sequence[str]) -> "DonationRequestKeyArgs":
        _check_arity(args, 2, "Expected 2 arguments: NGO ID and Donation ID")
        return cls(ngo_id=NgoId(args[0]), request_id=RequestId(args[1]))


@dataclass(frozen=True)
class DonateArgs:
    donation_id: DonationId
    ngo_id: NgoId
    amount: str

    @classmethod
    def parse(cls, args: Sequence[str]) -> "DonateArgs":
        _check_arity(
            args, 3, "Expected 3 arguments: Donation ID, NGO ID, and Donation Amount",
        )
        return cls(
            donation_id=DonationId(args[0]), ngo_id=NgoId(args[1]), amount=args[2],
        )
