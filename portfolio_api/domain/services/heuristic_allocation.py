"""Heuristic portfolio allocation domain service.

Closed-form weighting, not a mean-variance optimizer:

    alpha  = 0.5 + risk_tolerance
    score  = expected_return / risk ** alpha
    weight = score / sum(scores)

A higher risk tolerance raises alpha, which penalizes risk more for
assets with risk > 1 and less for assets with risk < 1.
"""

import math
from collections.abc import Sequence

import numpy as np

from portfolio_api.domain.constants import (
    AGGREGATE_DECIMALS,
    ALPHA_BASE,
    WEIGHT_DECIMALS,
    ZERO_SCORE_TOLERANCE,
)
from portfolio_api.domain.entities.allocation import (
    AllocationResult,
    AssetDescriptor,
    AssetWeight,
)
from portfolio_api.domain.exceptions import DataValidationError


def _check_finite_scores(scores: np.ndarray, sigma: np.ndarray) -> None:
    """Reject scores that overflowed because risk ** alpha underflowed to 0."""
    bad = ~np.isfinite(scores)
    if bad.any():
        idx = int(np.argmax(bad))
        raise DataValidationError(
            f"assets[{idx}].risk is too small for the given riskTolerance",
            field=f"assets[{idx}].risk",
            value=float(sigma[idx]),
        )


def _asset_label(asset: AssetDescriptor, index: int, label_missing: bool) -> str:
    """Return the asset's symbol or a positional "Asset N" label."""
    if asset.symbol:
        return asset.symbol
    if not label_missing:
        raise DataValidationError(
            f"assets[{index}].symbol is required",
            field=f"assets[{index}].symbol",
            value=asset.symbol,
        )
    return f"Asset {index + 1}"


def _validate_assets(assets: Sequence[AssetDescriptor], risk_tolerance: float) -> None:
    """Reject the whole request before any score is computed.

    Raises:
        DataValidationError: empty assets, non-finite expected return,
            non-finite or non-positive risk, or non-finite risk tolerance
    """
    if not assets:
        raise DataValidationError("assets must be a non-empty array", field="assets", value=[])

    if not math.isfinite(risk_tolerance):
        raise DataValidationError(
            "riskTolerance must be a finite number",
            field="riskTolerance",
            value=risk_tolerance,
        )

    for i, asset in enumerate(assets):
        if not math.isfinite(asset.expected_return):
            raise DataValidationError(
                f"assets[{i}].expectedReturn must be a finite number",
                field=f"assets[{i}].expectedReturn",
                value=asset.expected_return,
            )
        if not math.isfinite(asset.risk) or asset.risk <= 0:
            raise DataValidationError(
                f"assets[{i}].risk must be a finite number greater than 0",
                field=f"assets[{i}].risk",
                value=asset.risk,
            )


def compute_allocation(
    assets: Sequence[AssetDescriptor],
    risk_tolerance: float,
    label_missing_symbols: bool = True,
) -> AllocationResult:
    """Compute normalized heuristic weights for the given assets.

    risk_tolerance is used as given; callers are expected to clamp it
    to [0, 1] beforehand.

    Args:
        assets: Non-empty ordered assets (output keeps this order)
        risk_tolerance: Scalar added to ALPHA_BASE to form the risk exponent
        label_missing_symbols: Label assets without a symbol as "Asset N"
            instead of rejecting them

    Returns:
        AllocationResult with weights rounded to 4 decimals

    Raises:
        DataValidationError: on any invalid asset or parameter, or when a
            score overflows (risk too close to 0 for the exponent)
    """
    _validate_assets(assets, risk_tolerance)
    labels = [_asset_label(a, i, label_missing_symbols) for i, a in enumerate(assets)]

    mu = np.array([a.expected_return for a in assets], dtype=float)
    sigma = np.array([a.risk for a in assets], dtype=float)
    alpha = ALPHA_BASE + risk_tolerance

    with np.errstate(over="ignore", divide="ignore", invalid="ignore"):
        scores = mu / np.power(sigma, alpha)
        total = float(scores.sum())
    _check_finite_scores(scores, sigma)
    if not math.isfinite(total):
        raise DataValidationError(
            "Asset scores are too large to normalize",
            field="assets",
            value=total,
        )

    n = len(assets)
    fallback = abs(total) < ZERO_SCORE_TOLERANCE
    if fallback:
        weights = np.full(n, 1.0 / n)
    else:
        with np.errstate(over="ignore", invalid="ignore"):
            weights = scores / total

    with np.errstate(over="ignore", invalid="ignore"):
        expected_return = float(np.dot(weights, mu))
        approximate_risk = float(np.dot(weights, sigma))
    if not (
        np.isfinite(weights).all()
        and math.isfinite(expected_return)
        and math.isfinite(approximate_risk)
    ):
        raise DataValidationError(
            "Allocation is not finite for the given assets",
            field="assets",
        )

    return AllocationResult(
        weights=[
            AssetWeight(symbol=label, weight=round(float(w), WEIGHT_DECIMALS))
            for label, w in zip(labels, weights)
        ],
        expected_return=round(expected_return, AGGREGATE_DECIMALS),
        approximate_risk=round(approximate_risk, AGGREGATE_DECIMALS),
        equal_weight_fallback=fallback,
    )
