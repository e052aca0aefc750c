"""Error Hierarchy - typed, categorized exceptions for every ledger operation failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation and not-found errors are 400-level; host store errors are 503
    - to_result() produces the chaincode outcome; to_response() produces the REST envelope
    - Messages are the exact human-readable strings returned to the invoking client

Design Decisions:
    - Single hierarchy with LedgerError base: dispatcher catches one type and turns it
      into an error result, FastAPI global handler catches the rest (ADR: uniform error shape)
    - ErrorContext as dataclass: observability fields travel with the error, not the logger
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from ngo_ledger.core.invoke_result import InvokeResult


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    function_name: str | None = None
    ledger_key: str | None = None


class LedgerError(Exception):
    """Base exception for all ledger operation errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_result(self) -> InvokeResult:
        """Convert to the error outcome handed back to the invoking client."""
        return InvokeResult.error(self.message, self.code, self.http_status)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "function_name": self.context.function_name,
                    "ledger_key": self.context.ledger_key,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class ArityError(LedgerError):
    """Argument count does not match what the function expects."""
    def __init__(
        self, message: str, expected: int, received: int,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "ARITY_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.expected = expected
        self.received = received


class InvalidKeyError(LedgerError):
    """Key or key component cannot be addressed in the ledger key space."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_KEY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class UnknownOperationError(LedgerError):
    """Dispatcher received a function name it does not route."""
    def __init__(self, function_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Invalid function name: {function_name}",
            "UNKNOWN_FUNCTION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.function_name = function_name


class NotFoundError(LedgerError):
    """Existence precondition failed: the store returned nothing or an empty value."""
    def __init__(
        self, resource_type: str, resource_id: str,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class HostStoreError(LedgerError):
    """The external store failed a get/put/delete. Never retried here."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Invoke failed: {message}",
            "HOST_STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
