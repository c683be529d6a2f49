"""Sentiment-related domain entities."""

from dataclasses import dataclass
from typing import Any


@dataclass
class SentimentResult:
    """Sentiment classification result for a piece of text.

    Attributes:
        label: Winning label ("positive", "negative", "neutral")
        p_pos: Probability of positive sentiment
        p_neg: Probability of negative sentiment
        p_neu: Probability of neutral sentiment
        score: p_pos - p_neg, range [-1, 1]
        confidence: Max probability
    """

    label: str
    p_pos: float
    p_neg: float
    p_neu: float
    score: float
    confidence: float

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "label": self.label,
            "p_pos": self.p_pos,
            "p_neg": self.p_neg,
            "p_neu": self.p_neu,
            "score": self.score,
            "confidence": self.confidence,
        }
