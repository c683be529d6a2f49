"""Portfolio allocation endpoints (heuristic weighting)."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from portfolio_api.core.config import clamp_risk_tolerance
from portfolio_api.domain.entities.allocation import AllocationResult, AssetDescriptor
from portfolio_api.domain.exceptions import DataValidationError
from portfolio_api.domain.services.heuristic_allocation import compute_allocation
from portfolio_api.routes.dependencies import (
    get_default_risk_tolerance,
    get_label_missing_symbols,
)

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Request / Response models
# ============================================================================


class AssetModel(BaseModel):
    """One asset in an allocation request."""

    model_config = ConfigDict(populate_by_name=True)

    symbol: str | None = Field(None, description="Ticker or label; optional")
    expected_return: float = Field(..., alias="expectedReturn", description="Expected return")
    risk: float = Field(..., description="Risk figure, must be > 0")

    def to_descriptor(self) -> AssetDescriptor:
        return AssetDescriptor(
            symbol=self.symbol,
            expected_return=self.expected_return,
            risk=self.risk,
        )


class OptimizeRequest(BaseModel):
    """Request model for the portfolio optimize endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    assets: list[AssetModel] = Field(..., description="Non-empty list of assets")
    risk_tolerance: float | None = Field(
        None,
        alias="riskTolerance",
        description="Risk tolerance, clamped to [0, 1]. Defaults to 0.5.",
    )


class WeightModel(BaseModel):
    symbol: str
    weight: float


class OptimizeResponse(BaseModel):
    """Response model for the portfolio optimize endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    weights: list[WeightModel] = Field(..., description="Weights in input order, sum to 1")
    expected_return: float = Field(..., alias="expectedReturn")
    approximate_risk: float = Field(..., alias="approximateRisk")
    risk_tolerance: float = Field(..., alias="riskTolerance", description="Tolerance actually used")

    @classmethod
    def from_result(cls, result: AllocationResult, risk_tolerance: float) -> "OptimizeResponse":
        return cls(
            weights=[WeightModel(symbol=w.symbol, weight=w.weight) for w in result.weights],
            expected_return=result.expected_return,
            approximate_risk=result.approximate_risk,
            risk_tolerance=risk_tolerance,
        )


# ============================================================================
# Endpoint
# ============================================================================


@router.post("/optimize", response_model=OptimizeResponse)
def optimize_portfolio(
    request: OptimizeRequest,
    default_risk_tolerance: float = Depends(get_default_risk_tolerance),
    label_missing_symbols: bool = Depends(get_label_missing_symbols),
) -> OptimizeResponse:
    """Compute heuristic weights for the given assets.

    score = expectedReturn / risk ** (0.5 + riskTolerance), normalized to
    sum to 1. If every score is zero the assets are equally weighted.

    Raises:
        HTTPException 400: empty assets or an asset with invalid risk/return
    """
    if request.risk_tolerance is None:
        risk_tolerance = default_risk_tolerance
    else:
        risk_tolerance = clamp_risk_tolerance(request.risk_tolerance)

    try:
        result = compute_allocation(
            [a.to_descriptor() for a in request.assets],
            risk_tolerance,
            label_missing_symbols=label_missing_symbols,
        )
    except DataValidationError as e:
        logger.warning(f"Rejected allocation request ({e.field}): {e}")
        raise HTTPException(status_code=400, detail=str(e)) from None

    if result.equal_weight_fallback:
        logger.info(f"All scores zero, equal-weighting {len(result.weights)} assets")

    return OptimizeResponse.from_result(result, risk_tolerance)
