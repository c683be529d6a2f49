"""Stock prediction endpoints (return statistics)."""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from portfolio_api.domain.entities.prediction import ReturnStatistics
from portfolio_api.domain.exceptions import DataValidationError
from portfolio_api.domain.services.return_statistics import estimate_return_statistics

logger = logging.getLogger(__name__)

router = APIRouter()


# ============================================================================
# Request / Response models
# ============================================================================


class StockPredictionRequest(BaseModel):
    """Request model for the stock prediction endpoint."""

    prices: list[float] = Field(
        ...,
        description="Ordered price observations, at least 2, all positive",
    )


class StockPredictionResponse(BaseModel):
    """Response model for the stock prediction endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    last_price: float = Field(..., alias="lastPrice", description="Final observed price")
    avg_return: float = Field(
        ..., alias="avgReturn", description="Mean simple return (6 decimals)"
    )
    volatility: float = Field(
        ..., description="Population standard deviation of simple returns (6 decimals)"
    )
    predicted_price: float = Field(
        ...,
        alias="predictedPrice",
        description="lastPrice * (1 + avgReturn), 2 decimals",
    )

    @classmethod
    def from_stats(cls, stats: ReturnStatistics) -> "StockPredictionResponse":
        return cls(**stats.to_dict())


# ============================================================================
# Endpoint
# ============================================================================


@router.post("/ai/stock-prediction", response_model=StockPredictionResponse)
@router.post("/stock/predict", response_model=StockPredictionResponse, deprecated=True)
def predict_stock(request: StockPredictionRequest) -> StockPredictionResponse:
    """Estimate return statistics and project the next price.

    /stock/predict is kept as a legacy alias of /ai/stock-prediction.

    Raises:
        HTTPException 400: fewer than 2 prices or a non-positive price
    """
    try:
        stats = estimate_return_statistics(request.prices)
    except DataValidationError as e:
        logger.warning(f"Rejected price series ({e.field}): {e}")
        raise HTTPException(status_code=400, detail=str(e)) from None

    return StockPredictionResponse.from_stats(stats)
