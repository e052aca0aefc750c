"""Chaincode Routes - init and invoke over HTTP, one ledger transaction per request.

Invariants:
    - The route never interprets function names or args (ChaincodeDispatch does)
    - Successful invocations commit; error results roll back
    - HTTP status is 200 on success, the error's http_status otherwise; body shape is identical

Design Decisions:
    - Transaction framing lives here, not in handlers: the host owns atomicity of a whole invocation
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ngo_ledger.core.repository_protocols import TransactionalLedger
from ngo_ledger.infrastructure.ledger_store import get_ledger_store
from ngo_ledger.schemas.invoke import InvokeRequest, InvokeResponse
from ngo_ledger.services.chaincode_dispatch import ChaincodeDispatch

router = APIRouter(prefix="/api/v1/chaincode", tags=["chaincode"])


@router.post("/init", response_model=InvokeResponse)
async def init_chaincode(store: TransactionalLedger = Depends(get_ledger_store)):
    """Lifecycle init. Performs no state mutation."""
    result = ChaincodeDispatch(store).init()
    return InvokeResponse.from_result(result)


@router.post("/invoke", response_model=InvokeResponse)
async def invoke_chaincode(
    body: InvokeRequest, store: TransactionalLedger = Depends(get_ledger_store),
):
    result = await ChaincodeDispatch(store).invoke(body.function, body.args)
    if not result.is_ok:
        await store.rollback()
        return JSONResponse(
            status_code=result.http_status,
            content=result.to_dict(),
        )
    await store.commit()
    return InvokeResponse.from_result(result)
