"""Static payloads for the dashboard and status stub endpoints.

Timestamps are computed relative to the call so the stubs look live.
"""

from datetime import UTC, datetime, timedelta
from typing import Any


def _iso(moment: datetime) -> str:
    return moment.isoformat()


def market_summary(now: datetime | None = None) -> dict[str, Any]:
    """Mock stock and crypto quotes for the Fin-Viz dashboard."""
    now = now or datetime.now(UTC)
    return {
        "updatedAt": _iso(now),
        "stocks": [
            {"symbol": "AAPL", "price": 190.12, "changePct": 0.56},
            {"symbol": "TSLA", "price": 240.44, "changePct": -1.23},
            {"symbol": "NVDA", "price": 480.01, "changePct": 2.34},
        ],
        "crypto": [
            {"symbol": "BTC", "price": 64000, "changePct": 0.8},
            {"symbol": "ETH", "price": 3500, "changePct": 1.2},
        ],
    }


def cicd_pipelines(now: datetime | None = None) -> list[dict[str, Any]]:
    """Two pipelines: a finished one an hour ago and one running now."""
    now = now or datetime.now(UTC)
    return [
        {
            "name": "portfolio-frontend",
            "status": "success",
            "lastRun": _iso(now - timedelta(hours=1)),
            "qualityGates": {"tests": "pass", "coverage": 82, "securityScan": "pass"},
        },
        {
            "name": "portfolio-backend",
            "status": "running",
            "lastRun": _iso(now),
            "qualityGates": {"tests": "running", "coverage": None, "securityScan": "pending"},
        },
    ]


def cache_stats() -> dict[str, Any]:
    return {"nodes": 3, "hitRate": 0.92, "missRate": 0.08, "items": 15234}


def trading_status() -> dict[str, Any]:
    return {"engine": "simulated", "status": "online", "avgLatencyMicros": 250}


def blockchain_status() -> dict[str, Any]:
    return {"network": "Ethereum testnet", "status": "operational", "processedPayments24h": 27}


def mlops_status(now: datetime | None = None) -> dict[str, Any]:
    now = now or datetime.now(UTC)
    return {
        "pipelines": 3,
        "lastTrainingRun": _iso(now - timedelta(hours=2)),
        "monitoredModels": 2,
    }


def ar_routes() -> dict[str, Any]:
    return {
        "building": "Sample Mall",
        "routes": [
            {"from": "Entrance", "to": "Food Court", "estimatedTimeMinutes": 3},
            {"from": "Food Court", "to": "Electronics Store", "estimatedTimeMinutes": 4},
        ],
    }
