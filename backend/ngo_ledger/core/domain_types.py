"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - NgoId, RequestId, DonationId wrap str - never pass anonymous strings between layers
    - Namespace values are the exact composite key tags persisted in the ledger
    - ChaincodeFunction values are the exact, case-sensitive names clients invoke

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: compare equal to the raw wire strings and serialize without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

NgoId = NewType("NgoId", str)
RequestId = NewType("RequestId", str)
DonationId = NewType("DonationId", str)


# ─── Enums ───────────────────────────────────────────────────────

class Namespace(str, Enum):
    """Composite key namespaces. NGO records use simple keys and have none."""
    DONATION_REQUEST = "DonationRequest"
    DONATION = "Donation"


class ChaincodeFunction(str, Enum):
    """Functions accepted by invoke()."""
    REGISTER_NGO = "registerNGO"
    CREATE_DONATION_REQUEST = "createDonationRequest"
    UPDATE_DONATION_REQUEST = "updateDonationRequest"
    DELETE_DONATION_REQUEST = "deleteDonationRequest"
    DONATE = "donate"
    QUERY_NGO = "queryNGO"
    QUERY_DONATION_REQUEST = "queryDonationRequest"


class ResultStatus(str, Enum):
    OK = "ok"
    ERROR = "error"
