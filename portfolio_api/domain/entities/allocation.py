"""Allocation-related domain entities."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AssetDescriptor:
    """One asset considered by the heuristic weighter.

    symbol may be None when the caller omits it; the weighter then
    synthesizes a positional label.
    """

    symbol: str | None
    expected_return: float
    risk: float


@dataclass(frozen=True)
class AssetWeight:
    """Allocation weight for a single asset."""

    symbol: str
    weight: float


@dataclass
class AllocationResult:
    """Result of heuristic allocation computation."""

    # Same order as the input assets, sum to 1.0 within rounding
    weights: list[AssetWeight] = field(default_factory=list)

    # Weight-weighted sums of the asset figures
    expected_return: float = 0.0
    approximate_risk: float = 0.0

    # True when every score was zero and equal weights were used
    equal_weight_fallback: bool = False
