"""Tests for prediction, risk and recommendation heuristics."""

import random

import pytest

from stockscope.config.settings import Settings
from stockscope.core.analytics import (
    CONFIDENCE_POLICIES,
    ConfidencePolicy,
    classify_risk,
    confidence_policy_from_settings,
    derive_comparison,
    derive_prediction,
    recent_closes,
    recommend,
)
from stockscope.core.models import Recommendation, RiskLevel, Trend
from stockscope.exceptions import InvalidInputError


class TestDerivePrediction:
    """Test derive_prediction."""

    def test_flat_history_is_deterministic(self, quote_factory, history_factory):
        """Zero volatility removes the random term entirely."""
        quote = quote_factory(price=100.0)
        history = history_factory([100.0] * 30)

        for seed in range(5):
            prediction = derive_prediction(quote, history, rng=random.Random(seed))
            assert prediction.trend == Trend.STABLE
            assert prediction.predicted_price == 100.0
            assert prediction.confidence == 95.0

    def test_uptrend_momentum(self, quote_factory, history_factory):
        quote = quote_factory(price=110.0)
        history = history_factory([100.0] * 30)

        prediction = derive_prediction(quote, history, rng=random.Random(1))

        assert prediction.trend == Trend.UP
        # momentum 0.1 * 0.7 on top of the current price
        assert prediction.predicted_price == pytest.approx(117.7)

    def test_downtrend(self, quote_factory, history_factory):
        quote = quote_factory(price=90.0)
        history = history_factory([100.0] * 30)

        prediction = derive_prediction(quote, history)

        assert prediction.trend == Trend.DOWN
        assert prediction.predicted_price < quote.current_price

    def test_predicted_price_noise_is_bounded(self, quote_factory, history_factory):
        quote = quote_factory(price=100.0)
        history = history_factory([100.0] * 23 + [96.0, 104.0] * 3 + [100.0])
        closes = recent_closes(history)
        avg = sum(closes) / len(closes)
        volatility = (sum((c - avg) ** 2 for c in closes) / len(closes)) ** 0.5
        baseline = 100.0 * (1 + (100.0 - avg) / avg * 0.7)
        max_noise = 100.0 * 0.5 * (volatility / 100.0) * 0.3

        for seed in range(20):
            prediction = derive_prediction(quote, history, rng=random.Random(seed))
            assert abs(prediction.predicted_price - baseline) <= max_noise + 0.01

    def test_uses_most_recent_closes_only(self, quote_factory, history_factory):
        """Older, wildly different closes do not affect the result."""
        quote = quote_factory(price=100.0)
        history = history_factory([1000.0] * 23 + [100.0] * 7)

        prediction = derive_prediction(quote, history)

        assert prediction.trend == Trend.STABLE
        assert prediction.predicted_price == 100.0

    def test_history_order_does_not_matter(self, quote_factory, history_factory):
        quote = quote_factory(price=100.0)
        history = history_factory([1000.0] * 23 + [100.0] * 7)

        prediction = derive_prediction(quote, list(reversed(history)))

        assert prediction.trend == Trend.STABLE
        assert prediction.predicted_price == 100.0

    def test_keeps_history_and_horizon(self, quote_factory, history_factory):
        quote = quote_factory(price=100.0)
        history = history_factory([100.0] * 30)

        prediction = derive_prediction(quote, history, horizon_days=90)

        assert prediction.horizon_days == 90
        assert len(prediction.historical_data) == 30
        assert prediction.quote == quote

    def test_confidence_floor(self, quote_factory, history_factory):
        quote = quote_factory(price=100.0)
        history = history_factory([50.0, 150.0] * 15)

        prediction = derive_prediction(quote, history)

        assert prediction.confidence == 75.0

    @pytest.mark.parametrize("spread", [0.0, 0.5, 1.0, 2.0, 5.0, 20.0, 60.0])
    def test_confidence_always_clamped(self, quote_factory, history_factory, spread):
        quote = quote_factory(price=100.0)
        history = history_factory([100.0 - spread, 100.0 + spread] * 15)

        prediction = derive_prediction(quote, history, rng=random.Random(7))

        assert 75.0 <= prediction.confidence <= 100.0

    def test_live_policy_floor(self, quote_factory, history_factory):
        quote = quote_factory(price=100.0)
        history = history_factory([50.0, 150.0] * 15)

        prediction = derive_prediction(
            quote, history, policy=CONFIDENCE_POLICIES["live"]
        )

        assert prediction.confidence == 70.0

    def test_zero_price_is_invalid(self, quote_factory, history_factory):
        quote = quote_factory(price=0.0)

        with pytest.raises(InvalidInputError):
            derive_prediction(quote, history_factory([100.0] * 30))

    def test_empty_history_is_invalid(self, quote_factory):
        with pytest.raises(InvalidInputError):
            derive_prediction(quote_factory(price=100.0), [])


class TestConfidencePolicy:
    """Test confidence policy presets and overrides."""

    def test_presets(self):
        assert CONFIDENCE_POLICIES["synthetic"] == ConfidencePolicy(95.0, 800.0, 75.0)
        assert CONFIDENCE_POLICIES["live"] == ConfidencePolicy(100.0, 1000.0, 70.0)

    def test_score_caps_at_ceiling(self):
        policy = ConfidencePolicy(base=120.0, volatility_weight=800.0, floor=75.0)
        assert policy.score(0.0, 100.0) == 100.0

    def test_score_rejects_zero_price(self):
        with pytest.raises(InvalidInputError):
            CONFIDENCE_POLICIES["synthetic"].score(1.0, 0.0)

    def test_policy_follows_data_mode(self):
        settings = Settings(_env_file=None, data_mode="live", alpha_vantage_api_key="k")
        assert confidence_policy_from_settings(settings) == CONFIDENCE_POLICIES["live"]

    def test_explicit_profile_and_overrides(self):
        settings = Settings(
            _env_file=None,
            data_mode="synthetic",
            confidence_profile="live",
            confidence_floor=60.0,
        )

        policy = confidence_policy_from_settings(settings)

        assert policy.base == 100.0
        assert policy.volatility_weight == 1000.0
        assert policy.floor == 60.0


class TestDeriveComparison:
    """Test derive_comparison."""

    def test_uptrend_with_gain_is_buy(self, prediction_factory):
        entry = derive_comparison(prediction_factory(Trend.UP, change_percent=3.0))
        assert entry.recommendation == Recommendation.BUY

    def test_downtrend_with_loss_is_sell(self, prediction_factory):
        entry = derive_comparison(prediction_factory(Trend.DOWN, change_percent=-3.0))
        assert entry.recommendation == Recommendation.SELL

    def test_flat_is_hold(self, prediction_factory):
        entry = derive_comparison(prediction_factory(Trend.STABLE, change_percent=0.0))
        assert entry.recommendation == Recommendation.HOLD

    def test_predicted_return(self, prediction_factory):
        entry = derive_comparison(
            prediction_factory(price=100.0, predicted_price=110.0)
        )
        assert entry.predicted_return == pytest.approx(10.0)

    @pytest.mark.parametrize("price", [1.0, 100.0, 5000.0])
    def test_constant_history_is_low_risk(self, prediction_factory, price):
        entry = derive_comparison(prediction_factory(price=price, predicted_price=price))
        assert entry.risk == RiskLevel.LOW

    def test_volatile_history_is_high_risk(self, prediction_factory):
        entry = derive_comparison(
            prediction_factory(history_prices=[100.0] * 23 + [85.0, 115.0] * 3 + [100.0])
        )
        assert entry.risk == RiskLevel.HIGH

    def test_carries_prediction_fields(self, prediction_factory):
        prediction = prediction_factory()
        entry = derive_comparison(prediction)

        assert entry.symbol == prediction.symbol
        assert entry.confidence == prediction.confidence
        assert entry.quote == prediction.quote


class TestClassifiers:
    @pytest.mark.parametrize(
        "volatility,expected",
        [
            (0.0, RiskLevel.LOW),
            (2.0, RiskLevel.LOW),
            (2.5, RiskLevel.MEDIUM),
            (4.0, RiskLevel.MEDIUM),
            (4.5, RiskLevel.HIGH),
        ],
    )
    def test_classify_risk_thresholds(self, volatility, expected):
        assert classify_risk(volatility, 100.0) == expected

    @pytest.mark.parametrize(
        "change_percent,trend,expected",
        [
            (2.0, Trend.STABLE, Recommendation.HOLD),
            (1.6, Trend.UP, Recommendation.BUY),
            (-1.6, Trend.DOWN, Recommendation.SELL),
            (2.4, Trend.DOWN, Recommendation.HOLD),
            (-2.4, Trend.UP, Recommendation.HOLD),
        ],
    )
    def test_recommend(self, change_percent, trend, expected):
        assert recommend(change_percent, trend) == expected
