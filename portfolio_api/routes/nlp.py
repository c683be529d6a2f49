"""Natural language endpoints (sentiment)."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from portfolio_api.core.finbert import SentimentScorer
from portfolio_api.routes.dependencies import get_sentiment_scorer

router = APIRouter()


class SentimentRequest(BaseModel):
    """Request model for the sentiment endpoint."""

    text: str = Field(..., description="Text to analyze")


class SentimentResponse(BaseModel):
    """Response model for the sentiment endpoint."""

    label: str = Field(..., description="positive, negative or neutral")
    score: float = Field(..., description="p_pos - p_neg, range [-1, 1]")
    p_pos: float
    p_neg: float
    p_neu: float
    confidence: float = Field(..., description="Probability of the winning label")


@router.post("/sentiment", response_model=SentimentResponse)
def analyze_sentiment(
    request: SentimentRequest,
    scorer: Annotated[SentimentScorer, Depends(get_sentiment_scorer)],
) -> SentimentResponse:
    """Score the sentiment of a piece of text with FinBERT.

    Raises:
        HTTPException 400: if text is empty
    """
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="text is required and must be a string")

    result = scorer.score(request.text)
    return SentimentResponse(**result.to_dict())
