# orderbook/routers/errors.py
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from orderbook.errors import (
    ConstraintViolation,
    LookupFailure,
    OperationTimeout,
    StoreFailure,
)
from orderbook.queries.results import LedgerResult, Outcome

logger = logging.getLogger(__name__)


def unwrap(result: LedgerResult, what: str):
    """Return the row of an OK result, otherwise raise the matching HTTP error."""
    if result.outcome is Outcome.OK:
        return result.item
    if result.outcome is Outcome.NOT_FOUND:
        raise HTTPException(status_code=404, detail=f"{what} not found")
    raise HTTPException(status_code=409, detail="Order is done")


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(LookupFailure)
    async def _lookup_failure(request: Request, exc: LookupFailure):
        if exc.missing:
            return JSONResponse(status_code=404, content={"detail": f"Order {exc.order_id} not found"})
        logger.error("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": "Unable to check order status"})

    @app.exception_handler(ConstraintViolation)
    async def _constraint_violation(request: Request, exc: ConstraintViolation):
        logger.warning("%s %s rejected by the store: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=409, content={"detail": "Rejected by a store constraint"})

    @app.exception_handler(OperationTimeout)
    async def _operation_timeout(request: Request, exc: OperationTimeout):
        logger.error("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=504, content={"detail": "Store operation timed out"})

    @app.exception_handler(StoreFailure)
    async def _store_failure(request: Request, exc: StoreFailure):
        logger.error("%s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=503, content={"detail": "Store unavailable"})
