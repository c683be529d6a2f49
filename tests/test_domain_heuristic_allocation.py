"""Unit tests for the heuristic allocation domain service (pure functions)."""

import pytest

from portfolio_api.domain.entities.allocation import AssetDescriptor
from portfolio_api.domain.exceptions import DataValidationError
from portfolio_api.domain.services.heuristic_allocation import compute_allocation


def _asset(symbol, expected_return, risk):
    return AssetDescriptor(symbol=symbol, expected_return=expected_return, risk=risk)


class TestComputeAllocation:
    """Tests for compute_allocation."""

    def test_equal_return_over_risk_gives_equal_weights(self):
        """With alpha = 1, 0.1/0.2 and 0.05/0.1 score the same."""
        result = compute_allocation([_asset("A", 0.1, 0.2), _asset("B", 0.05, 0.1)], 0.5)

        assert [w.weight for w in result.weights] == pytest.approx([0.5, 0.5])
        assert result.expected_return == pytest.approx(0.075)
        assert result.approximate_risk == pytest.approx(0.15)
        assert result.equal_weight_fallback is False

    def test_low_tolerance_uses_square_root_of_risk(self):
        """r = 0 -> alpha = 0.5: scores 0.1/sqrt(0.2) and 0.05/sqrt(0.1)."""
        result = compute_allocation([_asset("A", 0.1, 0.2), _asset("B", 0.05, 0.1)], 0.0)

        assert result.weights[0].weight == 0.5858
        assert result.weights[1].weight == 0.4142

    def test_tolerance_changes_weights(self):
        assets = [_asset("A", 0.12, 0.3), _asset("B", 0.04, 0.05)]
        low = compute_allocation(assets, 0.0)
        high = compute_allocation(assets, 1.0)

        assert low.weights[0].weight != high.weights[0].weight

    def test_weights_sum_to_one(self):
        assets = [
            _asset("AAPL", 0.12, 0.25),
            _asset("MSFT", 0.10, 0.18),
            _asset("TSLA", 0.30, 0.60),
            _asset("BND", 0.03, 0.05),
        ]
        for r in (0.0, 0.25, 0.5, 0.75, 1.0):
            result = compute_allocation(assets, r)
            assert sum(w.weight for w in result.weights) == pytest.approx(1.0, abs=1e-3)

    def test_output_order_matches_input_order(self):
        """The smaller score stays first even though it gets the smaller weight."""
        result = compute_allocation([_asset("LOW", 0.01, 1.0), _asset("HIGH", 0.2, 1.0)], 0.5)

        assert [w.symbol for w in result.weights] == ["LOW", "HIGH"]
        assert result.weights[0].weight == 0.0476
        assert result.weights[1].weight == 0.9524

    def test_weights_rounded_to_four_decimals(self):
        result = compute_allocation(
            [_asset("A", 0.1, 0.3), _asset("B", 0.07, 0.2), _asset("C", 0.02, 0.9)], 0.3
        )
        for w in result.weights:
            assert w.weight == round(w.weight, 4)
        assert result.expected_return == round(result.expected_return, 4)
        assert result.approximate_risk == round(result.approximate_risk, 4)

    def test_zero_returns_fall_back_to_equal_weights(self):
        result = compute_allocation([_asset("A", 0.0, 1.0), _asset("B", 0.0, 1.0)], 0.5)

        assert [w.weight for w in result.weights] == [0.5, 0.5]
        assert result.equal_weight_fallback is True
        assert result.expected_return == 0.0
        assert result.approximate_risk == 1.0

    def test_cancelling_scores_fall_back_to_equal_weights(self):
        """Scores summing to zero must not divide by zero."""
        result = compute_allocation(
            [_asset("A", 0.1, 1.0), _asset("B", -0.1, 1.0), _asset("C", 0.0, 2.0)], 0.5
        )

        assert [w.weight for w in result.weights] == [0.3333, 0.3333, 0.3333]
        assert result.equal_weight_fallback is True

    def test_single_asset_gets_full_weight(self):
        result = compute_allocation([_asset("ONLY", 0.08, 0.2)], 0.5)
        assert result.weights[0].weight == 1.0
        assert result.expected_return == 0.08
        assert result.approximate_risk == 0.2

    def test_missing_symbol_gets_positional_label(self):
        result = compute_allocation([_asset("A", 0.1, 0.2), _asset(None, 0.1, 0.2)], 0.5)
        assert [w.symbol for w in result.weights] == ["A", "Asset 2"]

    def test_missing_symbol_rejected_when_labelling_disabled(self):
        with pytest.raises(DataValidationError) as exc_info:
            compute_allocation([_asset(None, 0.1, 0.2)], 0.5, label_missing_symbols=False)
        assert exc_info.value.field == "assets[0].symbol"

    def test_risk_tolerance_not_clamped_by_core(self):
        """Out-of-range tolerance is used as given (alpha = 2.5)."""
        assets = [_asset("A", 0.1, 0.5), _asset("B", 0.1, 0.25)]
        result = compute_allocation(assets, 2.0)

        # scores 0.1/0.5**2.5 and 0.1/0.25**2.5 -> ratio 1 : 2**2.5
        ratio = 2**2.5
        assert result.weights[0].weight == round(1 / (1 + ratio), 4)


class TestComputeAllocationValidation:
    """Invalid inputs reject the whole request."""

    def test_empty_assets(self):
        with pytest.raises(DataValidationError, match="non-empty"):
            compute_allocation([], 0.5)

    def test_zero_risk(self):
        with pytest.raises(DataValidationError) as exc_info:
            compute_allocation([_asset("A", 0.1, 0.0)], 0.5)
        assert exc_info.value.field == "assets[0].risk"

    def test_negative_risk(self):
        with pytest.raises(DataValidationError, match="risk"):
            compute_allocation([_asset("A", 0.1, 0.2), _asset("B", 0.1, -0.2)], 0.5)

    def test_infinite_risk(self):
        with pytest.raises(DataValidationError):
            compute_allocation([_asset("A", 0.1, float("inf"))], 0.5)

    def test_nan_expected_return(self):
        with pytest.raises(DataValidationError) as exc_info:
            compute_allocation([_asset("A", float("nan"), 0.2)], 0.5)
        assert exc_info.value.field == "assets[0].expectedReturn"

    def test_nan_risk_tolerance(self):
        with pytest.raises(DataValidationError):
            compute_allocation([_asset("A", 0.1, 0.2)], float("nan"))

    def test_late_invalid_asset_rejects_everything(self):
        """A bad asset at the end still prevents any result."""
        assets = [_asset("A", 0.1, 0.2), _asset("B", 0.2, 0.3), _asset("C", 0.1, 0.0)]
        with pytest.raises(DataValidationError) as exc_info:
            compute_allocation(assets, 0.5)
        assert exc_info.value.field == "assets[2].risk"

    def test_tiny_risk_that_overflows_score_is_rejected(self):
        """risk ** alpha underflowing to 0 must not produce nan weights."""
        assets = [_asset("A", 0.1, 1e-300), _asset("B", 0.1, 1.0)]
        with pytest.raises(DataValidationError) as exc_info:
            compute_allocation(assets, 1.0)
        assert exc_info.value.field == "assets[0].risk"

    def test_score_sum_overflow_is_rejected(self):
        assets = [_asset("A", 1e308, 1.0), _asset("B", 1e308, 1.0)]
        with pytest.raises(DataValidationError):
            compute_allocation(assets, 0.5)

    def test_small_but_representable_risk_still_allocates(self):
        result = compute_allocation([_asset("A", 0.1, 1e-6), _asset("B", 0.1, 1.0)], 1.0)
        assert sum(w.weight for w in result.weights) == pytest.approx(1.0, abs=1e-3)
        assert result.weights[0].weight == pytest.approx(1.0)
