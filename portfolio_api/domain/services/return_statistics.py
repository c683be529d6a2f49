"""Return statistics domain service.

Estimates the mean and population volatility of simple returns from a
price series and projects the next price one step ahead.

Pure functions with no dependencies beyond numpy.
"""

import math
from collections.abc import Sequence

import numpy as np

from portfolio_api.domain.constants import (
    MIN_PRICE_POINTS,
    PREDICTED_PRICE_DECIMALS,
    RETURN_DECIMALS,
    VOLATILITY_DECIMALS,
)
from portfolio_api.domain.entities.prediction import ReturnStatistics
from portfolio_api.domain.exceptions import DataValidationError, InsufficientDataError


def _validate_prices(prices: Sequence[float]) -> np.ndarray:
    """Check length and positivity, returning the series as a float array.

    Raises:
        InsufficientDataError: fewer than MIN_PRICE_POINTS values
        DataValidationError: any value is non-finite or <= 0
    """
    if len(prices) < MIN_PRICE_POINTS:
        raise InsufficientDataError(
            f"Need at least {MIN_PRICE_POINTS} price points",
            field="prices",
            required=MIN_PRICE_POINTS,
            available=len(prices),
        )

    series = np.asarray(prices, dtype=float)
    bad = ~np.isfinite(series) | (series <= 0)
    if bad.any():
        idx = int(np.argmax(bad))
        raise DataValidationError(
            "All prices must be positive numbers",
            field=f"prices[{idx}]",
            value=prices[idx],
        )
    return series


def compute_simple_returns(prices: Sequence[float]) -> np.ndarray:
    """Compute per-step simple returns.

    return[i] = (price[i] - price[i-1]) / price[i-1]

    Args:
        prices: Price series of length >= 2, all values positive

    Returns:
        Array of n-1 simple returns
    """
    series = _validate_prices(prices)
    return np.diff(series) / series[:-1]


def estimate_return_statistics(prices: Sequence[float]) -> ReturnStatistics:
    """Compute return statistics and a one-step-ahead price projection.

    The algorithm:
    1. Simple returns between consecutive prices
    2. avg_return = arithmetic mean of the returns
    3. volatility = population standard deviation (divides by the return count)
    4. predicted_price = last_price * (1 + avg_return)

    The projection uses the unrounded mean; only the reported figures are
    rounded (6 decimals for avg_return and volatility, 2 for predicted_price).

    Args:
        prices: Ordered price observations of one instrument

    Returns:
        ReturnStatistics

    Raises:
        InsufficientDataError: fewer than 2 price points
        DataValidationError: a non-positive or non-finite price, or a series
            whose returns overflow to non-finite statistics
    """
    with np.errstate(over="ignore", invalid="ignore"):
        returns = compute_simple_returns(prices)
        avg_return = float(np.mean(returns))
        volatility = float(np.std(returns))  # ddof=0 -> population std
    last_price = float(prices[-1])
    predicted_price = last_price * (1 + avg_return)

    if not all(math.isfinite(x) for x in (avg_return, volatility, predicted_price)):
        raise DataValidationError(
            "Price changes are too large to compute finite statistics",
            field="prices",
        )

    return ReturnStatistics(
        last_price=last_price,
        avg_return=round(avg_return, RETURN_DECIMALS),
        volatility=round(volatility, VOLATILITY_DECIMALS),
        predicted_price=round(predicted_price, PREDICTED_PRICE_DECIMALS),
    )
