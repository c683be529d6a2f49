"""Dependency injection shared by the route modules."""

from fastapi import Request

from portfolio_api.core.config import (
    resolve_default_risk_tolerance,
    resolve_label_missing_symbols,
)
from portfolio_api.core.finbert import FinBERTScorer, SentimentScorer
from portfolio_api.core.store import MockStore


def get_store(request: Request) -> MockStore:
    """Get the application-owned mock store."""
    return request.app.state.store


def get_sentiment_scorer() -> SentimentScorer:
    """Get the FinBERT scorer (model loads on first score)."""
    return FinBERTScorer()


def get_default_risk_tolerance() -> float:
    """Risk tolerance applied when a request omits it."""
    return resolve_default_risk_tolerance()


def get_label_missing_symbols() -> bool:
    """Whether assets without a symbol are labelled instead of rejected."""
    return resolve_label_missing_symbols()
