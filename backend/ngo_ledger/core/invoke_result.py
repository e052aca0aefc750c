"""Invoke Result - tagged success/error outcome of a single chaincode invocation.

Invariants:
    - status is OK or ERROR, never anything else
    - payload is always a human-readable string (stored info, confirmation, or error message)
    - error_code is None exactly when status is OK
    - http_status is 200 on success; on error it comes from the raising LedgerError and never enters to_dict()

Design Decisions:
    - Frozen dataclass over raw dict: handlers and the HTTP shell share one shape,
      to_dict() keeps the JSON envelope identical on both paths (ADR: uniform response shape)
"""

from dataclasses import dataclass, field

from ngo_ledger.core.domain_types import ResultStatus


@dataclass(frozen=True)
class InvokeResult:
    status: ResultStatus
    payload: str
    error_code: str | None = None
    http_status: int = field(default=200, compare=False)

    @classmethod
    def ok(cls, payload: str) -> "InvokeResult":
        return cls(ResultStatus.OK, payload)

    @classmethod
    def error(
        cls, message: str, error_code: str, http_status: int = 500,
    ) -> "InvokeResult":
        return cls(ResultStatus.ERROR, message, error_code, http_status)

    @property
    def is_ok(self) -> bool:
        return self.status is ResultStatus.OK

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "payload": self.payload,
            "error_code": self.error_code,
        }
