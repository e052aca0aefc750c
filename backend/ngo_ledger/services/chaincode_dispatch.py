"""Chaincode Dispatch - explicit routing from function name to handler.

Invariants:
    - Every function->handler mapping is visible in one dict; names match exactly (case-sensitive)
    - Unknown functions return an UNKNOWN_FUNCTION error result (never raise)
    - Any LedgerError from a handler becomes an error result; nothing is retried
    - Any other exception raised by the store becomes a HOST_STORE_ERROR result carrying its message
    - init() mutates nothing and always succeeds
    - Every invocation is logged with its function name and outcome

Design Decisions:
    - Explicit dict over getattr: adding a function requires editing this mapping
    - Handlers split by entity (NGO, donation request, donation): each class stays small
    - Handlers instantiated per-dispatch around the injected store; no state survives an invocation
"""

import logging
from collections.abc import Awaitable, Callable

from ngo_ledger.core.domain_types import ChaincodeFunction
from ngo_ledger.core.errors import (
    HostStoreError, LedgerError, UnknownOperationError,
)
from ngo_ledger.core.invoke_result import InvokeResult
from ngo_ledger.core.repository_protocols import LedgerStub
from ngo_ledger.services.handle_donation import DonationHandlers
from ngo_ledger.services.handle_donation_request import DonationRequestHandlers
from ngo_ledger.services.handle_ngo import NgoHandlers

logger = logging.getLogger(__name__)

Handler = Callable[[list[str]], Awaitable[str]]


class ChaincodeDispatch:
    """Routes function name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, store: LedgerStub):
        ngo = NgoHandlers(store)
        requests = DonationRequestHandlers(store)
        donations = DonationHandlers(store)

        self._handlers: dict[str, Handler] = {
            # NGO (simple keys)
            ChaincodeFunction.REGISTER_NGO.value: ngo.register_ngo,
            ChaincodeFunction.QUERY_NGO.value: ngo.query_ngo,

            # Donation requests (full lifecycle)
            ChaincodeFunction.CREATE_DONATION_REQUEST.value: requests.create_donation_request,
            ChaincodeFunction.UPDATE_DONATION_REQUEST.value: requests.update_donation_request,
            ChaincodeFunction.DELETE_DONATION_REQUEST.value: requests.delete_donation_request,
            ChaincodeFunction.QUERY_DONATION_REQUEST.value: requests.query_donation_request,

            # Donations (create only)
            ChaincodeFunction.DONATE.value: donations.donate,
        }

    def init(self) -> InvokeResult:
        logger.info("Initializing NGO chaincode")
        return InvokeResult.ok("NGO Chaincode Initialized")

    async def invoke(self, function: str, args: list[str]) -> InvokeResult:
        """Route function to its handler. Returns a tagged result, never raises."""
        handler = self._handlers.get(function)
        try:
            if handler is None:
                raise UnknownOperationError(function)
            result = InvokeResult.ok(await handler(list(args)))
        except LedgerError as e:
            e.context.function_name = function
            result = e.to_result()
        except Exception as e:
            logger.error(f"Invoke {function} raised: {e}", exc_info=True)
            error = HostStoreError(str(e), "invoke")
            error.context.function_name = function
            result = error.to_result()
        self._log_invocation(function, result)
        return result

    def _log_invocation(self, function: str, result: InvokeResult) -> None:
        extra = {
            "function_name": function,
            "status": result.status.value,
            "error_code": result.error_code,
        }
        if result.is_ok:
            logger.info(f"Invoked {function}", extra=extra)
        else:
            logger.warning(f"Invoke {function} failed: {result.payload}", extra=extra)
