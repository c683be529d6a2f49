"""Domain entities - pure dataclasses with no external dependencies.

These entities represent the core business objects in the domain model.
"""

from portfolio_api.domain.entities.allocation import (
    AllocationResult,
    AssetDescriptor,
    AssetWeight,
)
from portfolio_api.domain.entities.migration import MigrationEstimate
from portfolio_api.domain.entities.prediction import ReturnStatistics
from portfolio_api.domain.entities.records import (
    ChatMessage,
    IotDevice,
    Payment,
    Workout,
)
from portfolio_api.domain.entities.sentiment import SentimentResult

__all__ = [
    # Prediction
    "ReturnStatistics",
    # Allocation
    "AssetDescriptor",
    "AssetWeight",
    "AllocationResult",
    # Sentiment
    "SentimentResult",
    # Mock store
    "ChatMessage",
    "Payment",
    "IotDevice",
    "Workout",
    # Cloud
    "MigrationEstimate",
]
