"""Static dashboard and status stub endpoints."""

from typing import Any

from fastapi import APIRouter

from portfolio_api.core import mock_feeds

router = APIRouter()


@router.get("/finviz/summary", tags=["finviz"])
def finviz_summary() -> dict[str, Any]:
    """Mock stock and crypto quotes."""
    return mock_feeds.market_summary()


@router.get("/cicd/pipelines", tags=["cicd"])
def cicd_pipelines() -> list[dict[str, Any]]:
    return mock_feeds.cicd_pipelines()


@router.get("/cache/stats", tags=["status"])
def cache_stats() -> dict[str, Any]:
    return mock_feeds.cache_stats()


@router.get("/trading/status", tags=["status"])
def trading_status() -> dict[str, Any]:
    return mock_feeds.trading_status()


@router.get("/blockchain/status", tags=["status"])
def blockchain_status() -> dict[str, Any]:
    return mock_feeds.blockchain_status()


@router.get("/mlops/status", tags=["status"])
def mlops_status() -> dict[str, Any]:
    return mock_feeds.mlops_status()


@router.get("/ar/routes", tags=["status"])
def ar_routes() -> dict[str, Any]:
    return mock_feeds.ar_routes()
