"""FinBERT sentiment scoring for free text.

The model is loaded lazily on the first request and shared across the
process, so importing this module stays cheap.

Usage:
    scorer = FinBERTScorer()
    result = scorer.score("Apple reports record earnings")
    print(result.label, result.score)
"""

import logging
from typing import Protocol

from transformers import AutoModelForSequenceClassification, AutoTokenizer, pipeline

from portfolio_api.core.device import get_device
from portfolio_api.domain.entities.sentiment import SentimentResult

logger = logging.getLogger(__name__)

# FinBERT model configuration
FINBERT_MODEL = "ProsusAI/finbert"
FINBERT_MAX_LENGTH = 512


class SentimentScorer(Protocol):
    """Protocol for scoring text sentiment."""

    def score(self, text: str) -> SentimentResult:
        """Score the sentiment of a text."""
        ...


class FinBERTScorer:
    """FinBERT sentiment scorer with lazy loading and GPU support.

    Implements the singleton pattern to avoid loading the model more than once.
    """

    _instance: "FinBERTScorer | None" = None
    _pipeline = None
    _device: str = "cpu"
    _use_gpu: bool | None = None

    def __new__(cls, use_gpu: bool | None = None) -> "FinBERTScorer":
        """Create or return the singleton instance.

        Args:
            use_gpu: Force GPU usage on/off. None = auto-detect.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._use_gpu = use_gpu
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (useful for testing)."""
        cls._instance = None
        cls._pipeline = None

    def _detect_device(self) -> str:
        if self._use_gpu is False:
            return "cpu"
        return get_device()

    def _ensure_loaded(self) -> None:
        """Lazy-load the model on first use."""
        if self._pipeline is not None:
            return

        self._device = self._detect_device()
        logger.info(f"Loading {FINBERT_MODEL} on {self._device}")

        tokenizer = AutoTokenizer.from_pretrained(FINBERT_MODEL)
        model = AutoModelForSequenceClassification.from_pretrained(FINBERT_MODEL)

        if self._device != "cpu":
            model = model.to(self._device)

        if self._device == "cuda":
            device_param = 0
        elif self._device == "cpu":
            device_param = -1
        else:
            device_param = self._device  # "mps"

        type(self)._pipeline = pipeline(
            "sentiment-analysis",
            model=model,
            tokenizer=tokenizer,
            top_k=None,
            truncation=True,
            max_length=FINBERT_MAX_LENGTH,
            device=device_param,
        )

    @staticmethod
    def _parse_scores(scores: list[dict]) -> SentimentResult:
        """Parse raw pipeline label scores into a SentimentResult."""
        probs = {"positive": 0.0, "negative": 0.0, "neutral": 0.0}
        for item in scores:
            label = item["label"].lower()
            if label in probs:
                probs[label] = float(item["score"])

        p_pos, p_neg, p_neu = probs["positive"], probs["negative"], probs["neutral"]

        if p_pos >= p_neg and p_pos >= p_neu:
            label = "positive"
        elif p_neg >= p_pos and p_neg >= p_neu:
            label = "negative"
        else:
            label = "neutral"

        return SentimentResult(
            label=label,
            p_pos=round(p_pos, 4),
            p_neg=round(p_neg, 4),
            p_neu=round(p_neu, 4),
            score=round(p_pos - p_neg, 4),
            confidence=round(max(p_pos, p_neg, p_neu), 4),
        )

    def score(self, text: str) -> SentimentResult:
        """Score a single text."""
        return self.score_batch([text])[0]

    def score_batch(self, texts: list[str]) -> list[SentimentResult]:
        """Score a batch of texts.

        Args:
            texts: Texts to analyze

        Returns:
            One SentimentResult per text, in order
        """
        if not texts:
            return []

        self._ensure_loaded()
        batch_results = self._pipeline(texts)
        return [self._parse_scores(scores) for scores in batch_results]
