"""Payments endpoints backed by the in-memory store."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from portfolio_api.core.store import MockStore
from portfolio_api.domain.exceptions import DataValidationError
from portfolio_api.routes.dependencies import get_store

logger = logging.getLogger(__name__)

router = APIRouter()


class PaymentRequest(BaseModel):
    """Request model for logging a payment."""

    model_config = ConfigDict(populate_by_name=True)

    customer: str = "Demo Customer"
    amount_eth: float | None = Field(None, alias="amountEth", description="Amount in ETH, > 0")
    fiat: str | None = None
    network: str = "Unknown"
    method: str = "ETH"
    memo: str = ""
    tx_hash: str | None = Field(None, alias="txHash")


@router.get("")
def list_payments(store: Annotated[MockStore, Depends(get_store)]) -> dict[str, Any]:
    """All payments, newest first."""
    return {"payments": [p.to_dict() for p in store.list_payments()]}


@router.post("", status_code=201)
def log_payment(
    request: PaymentRequest,
    store: Annotated[MockStore, Depends(get_store)],
) -> dict[str, Any]:
    """Log a new payment at the top of the list.

    Raises:
        HTTPException 400: if amountEth is missing or not > 0
    """
    try:
        payment = store.log_payment(
            amount_eth=request.amount_eth or 0.0,
            customer=request.customer,
            fiat=request.fiat,
            network=request.network,
            method=request.method,
            memo=request.memo,
            tx_hash=request.tx_hash,
        )
    except DataValidationError as e:
        logger.warning(f"Rejected payment: {e}")
        raise HTTPException(status_code=400, detail=str(e)) from None
    return payment.to_dict()
