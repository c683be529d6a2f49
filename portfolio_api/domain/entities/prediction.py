"""Return-statistics domain entities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ReturnStatistics:
    """Historical return statistics and a one-step price projection."""

    last_price: float

    # Mean of simple returns (rounded to 6 decimals)
    avg_return: float

    # Population standard deviation of simple returns (rounded to 6 decimals)
    volatility: float

    # last_price * (1 + unrounded mean return), rounded to 2 decimals
    predicted_price: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "lastPrice": self.last_price,
            "avgReturn": self.avg_return,
            "volatility": self.volatility,
            "predictedPrice": self.predicted_price,
        }
