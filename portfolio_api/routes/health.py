"""Health check endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter, Depends

from portfolio_api.core.store import MockStore
from portfolio_api.routes.dependencies import get_store

router = APIRouter()


@router.get("")
def health_check() -> dict:
    """Generic health check with the server time."""
    return {"status": "ok", "timestamp": datetime.now(UTC).isoformat()}


@router.get("/live")
def liveness() -> dict:
    """Liveness probe - is the process running?"""
    return {"status": "alive"}


@router.get("/ready")
def readiness(store: MockStore = Depends(get_store)) -> dict:
    """Readiness probe - is the in-memory store attached?"""
    return {"status": "ready", "checks": {"store_attached": store is not None}}
