"""Error Hierarchy - tests for codes, categories and result/response envelopes.

Tests cover:
    - Every concrete error carries the expected code and HTTP status
    - to_result() produces an error InvokeResult with the exact message
    - to_response() produces the REST envelope
    - InvokeResult success/error shapes, http_status kept out of the envelope
"""

import pytest

from ngo_ledger.core.domain_types import ResultStatus
from ngo_ledger.core.errors import (
    ArityError, ErrorCategory, ErrorContext, HostStoreError, InvalidKeyError,
    LedgerError, NotFoundError, UnknownOperationError,
)
from ngo_ledger.core.invoke_result import InvokeResult


@pytest.mark.parametrize(
    "error, code, status",
    [
        (ArityError("Expected 1 argument: NGO ID", 1, 0), "ARITY_ERROR", 400),
        (InvalidKeyError("bad key"), "INVALID_KEY", 400),
        (UnknownOperationError("nope"), "UNKNOWN_FUNCTION", 400),
        (NotFoundError("NGO", "ngo2"), "NOT_FOUND", 404),
        (HostStoreError("connection reset", "get"), "HOST_STORE_ERROR", 503),
    ],
)
def test_error_codes_and_status(error, code, status):
    assert isinstance(error, LedgerError)
    assert error.code == code
    assert error.http_status == status


def test_unknown_operation_message_names_function():
    assert UnknownOperationError("transfer").message == "Invalid function name: transfer"


def test_host_store_error_prefixes_message():
    error = HostStoreError("connection reset", "put")
    assert error.message == "Invoke failed: connection reset"
    assert error.category is ErrorCategory.DATABASE
    assert error.operation == "put"


def test_to_result_is_error_outcome():
    result = NotFoundError("NGO", "ngo2").to_result()
    assert result.status is ResultStatus.ERROR
    assert result.payload == "NGO not found: ngo2"
    assert result.error_code == "NOT_FOUND"
    assert not result.is_ok
    assert result.http_status == 404


def test_to_response_envelope():
    error = InvalidKeyError("bad key", ErrorContext(function_name="queryNGO"))
    body = error.to_response()["error"]
    assert body["code"] == "INVALID_KEY"
    assert body["category"] == "validation"
    assert body["context"]["function_name"] == "queryNGO"
    assert body["context"]["ledger_key"] is None


def test_to_response_includes_ledger_key():
    error = HostStoreError("disk full", "put", ErrorContext(ledger_key="ngo1"))
    assert error.to_response()["error"]["context"]["ledger_key"] == "ngo1"


def test_http_status_is_not_part_of_the_envelope():
    result = InvokeResult.error("NGO not found: ngo2", "NOT_FOUND", 404)
    assert "http_status" not in result.to_dict()
    assert result == InvokeResult.error("NGO not found: ngo2", "NOT_FOUND")


def test_invoke_result_ok_to_dict():
    assert InvokeResult.ok("Red Cross").to_dict() == {
        "status": "ok",
        "payload": "Red Cross",
        "error_code": None,
    }
