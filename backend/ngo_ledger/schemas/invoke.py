"""Invoke Schemas - Pydantic models for the chaincode HTTP boundary.

Invariants:
    - function is passed through verbatim; routing and unknown-name handling belong to the dispatcher
    - args are strings only, order preserved
"""

from pydantic import BaseModel, Field

from ngo_ledger.core.invoke_result import InvokeResult


class InvokeRequest(BaseModel):
    function: str = Field(min_length=1, max_length=100)
    args: list[str] = Field(default_factory=list)


class InvokeResponse(BaseModel):
    status: str
    payload: str
    error_code: str | None = None

    @classmethod
    def from_result(cls, result: InvokeResult) -> "InvokeResponse":
        return cls(**result.to_dict())
