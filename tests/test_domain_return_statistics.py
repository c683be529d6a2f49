"""Unit tests for the return statistics domain service (pure functions)."""

import math

import pytest

from portfolio_api.domain.exceptions import DataValidationError, InsufficientDataError
from portfolio_api.domain.services.return_statistics import (
    compute_simple_returns,
    estimate_return_statistics,
)


class TestComputeSimpleReturns:
    """Tests for compute_simple_returns."""

    def test_two_returns(self):
        """(110-100)/100 = 0.1 and (99-110)/110 = -0.1."""
        returns = compute_simple_returns([100, 110, 99])
        assert list(returns) == pytest.approx([0.1, -0.1])

    def test_length_is_n_minus_one(self):
        returns = compute_simple_returns([10, 11, 12, 13, 14])
        assert len(returns) == 4


class TestEstimateReturnStatistics:
    """Tests for estimate_return_statistics."""

    def test_single_step_series(self):
        """[100, 110] -> avg 0.1, no dispersion, projection 121."""
        stats = estimate_return_statistics([100, 110])

        assert stats.last_price == 110.0
        assert stats.avg_return == pytest.approx(0.1)
        assert stats.volatility == 0.0
        assert stats.predicted_price == 121.0

    def test_up_then_down(self):
        """[100, 110, 90] -> returns [0.1, -0.1818...]."""
        stats = estimate_return_statistics([100, 110, 90])

        assert stats.avg_return == pytest.approx(-0.040909, abs=1e-6)
        assert stats.volatility == pytest.approx(0.140909, abs=1e-6)
        assert stats.predicted_price == pytest.approx(86.32, abs=1e-9)
        assert stats.last_price == 90.0

    def test_avg_return_is_mean_of_returns(self):
        """avg_return equals the mean of the n-1 simple returns, rounded to 6 decimals."""
        prices = [50.0, 52.5, 51.0, 53.2, 55.9, 54.1]
        returns = [(b - a) / a for a, b in zip(prices, prices[1:])]
        stats = estimate_return_statistics(prices)

        assert stats.avg_return == pytest.approx(round(sum(returns) / len(returns), 6), abs=1e-12)

    def test_volatility_is_population_std(self):
        """Divisor is the number of returns, not returns - 1."""
        prices = [100, 120, 90, 99]
        returns = [(b - a) / a for a, b in zip(prices, prices[1:])]
        mean = sum(returns) / len(returns)
        expected = math.sqrt(sum((r - mean) ** 2 for r in returns) / len(returns))

        stats = estimate_return_statistics(prices)
        assert stats.volatility == pytest.approx(round(expected, 6), abs=1e-12)

    def test_flat_series(self):
        stats = estimate_return_statistics([50, 50, 50])
        assert stats.avg_return == 0.0
        assert stats.volatility == 0.0
        assert stats.predicted_price == 50.0

    def test_projection_uses_unrounded_mean(self):
        """predicted_price is computed before avg_return is rounded."""
        # return is ~3e-7, which rounds to 0 at 6 decimals
        stats = estimate_return_statistics([1_000_000.0, 1_000_000.3])
        assert stats.avg_return == 0.0
        assert stats.predicted_price == pytest.approx(1_000_000.6)

    def test_single_point_rejected(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            estimate_return_statistics([5])
        assert exc_info.value.required == 2
        assert exc_info.value.available == 1

    def test_empty_series_rejected(self):
        with pytest.raises(InsufficientDataError):
            estimate_return_statistics([])

    def test_insufficient_data_is_validation_error(self):
        """Callers catching DataValidationError also see the too-short case."""
        with pytest.raises(DataValidationError):
            estimate_return_statistics([5])

    def test_zero_price_rejected(self):
        with pytest.raises(DataValidationError) as exc_info:
            estimate_return_statistics([100, 0, 50])
        assert exc_info.value.field == "prices[1]"

    def test_negative_price_rejected(self):
        with pytest.raises(DataValidationError):
            estimate_return_statistics([100, -5])

    def test_non_finite_price_rejected(self):
        with pytest.raises(DataValidationError):
            estimate_return_statistics([100, float("nan")])
        with pytest.raises(DataValidationError):
            estimate_return_statistics([float("inf"), 100])

    def test_overflowing_returns_rejected(self):
        """Finite prices whose ratio overflows must not yield inf/nan statistics."""
        with pytest.raises(DataValidationError) as exc_info:
            estimate_return_statistics([1e-300, 1e300])
        assert exc_info.value.field == "prices"

    def test_large_but_finite_moves_still_computed(self):
        stats = estimate_return_statistics([1e-3, 1e3])
        assert math.isfinite(stats.avg_return)
        assert math.isfinite(stats.volatility)
        assert math.isfinite(stats.predicted_price)

    def test_to_dict_uses_wire_names(self):
        stats = estimate_return_statistics([100, 110])
        assert set(stats.to_dict()) == {"lastPrice", "avgReturn", "volatility", "predictedPrice"}
