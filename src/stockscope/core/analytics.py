"""Trend, prediction, confidence, risk and recommendation heuristics.

The prediction is a naive momentum extrapolation over the most recent closes
with a small random term scaled by recent volatility. Two calls on the same
input are not expected to agree on ``predicted_price``; everything else is
deterministic.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..exceptions import InvalidInputError
from .models import (
    ComparisonEntry,
    HistoricalPoint,
    Prediction,
    Quote,
    Recommendation,
    RiskLevel,
    Trend,
)
from .statistics import mean, population_std

ANALYSIS_WINDOW = 7
MOMENTUM_WEIGHT = 0.7
NOISE_WEIGHT = 0.3

HIGH_RISK_RATIO = 0.04
MEDIUM_RISK_RATIO = 0.02

BUY_THRESHOLD = 2.0
SELL_THRESHOLD = -2.0
TREND_SCORE_WEIGHT = 0.5


@dataclass(frozen=True)
class ConfidencePolicy:
    """Confidence score knobs: ``clamp(base - ratio * weight, floor, 100)``."""

    base: float
    volatility_weight: float
    floor: float
    ceiling: float = 100.0

    def score(self, volatility: float, current_price: float) -> float:
        if current_price <= 0:
            raise InvalidInputError(
                "Confidence is undefined for a non-positive price",
                field="current_price",
            )
        raw = self.base - (volatility / current_price) * self.volatility_weight
        return min(self.ceiling, max(self.floor, raw))


CONFIDENCE_POLICIES = {
    "synthetic": ConfidencePolicy(base=95.0, volatility_weight=800.0, floor=75.0),
    "live": ConfidencePolicy(base=100.0, volatility_weight=1000.0, floor=70.0),
}


def confidence_policy_from_settings(settings) -> ConfidencePolicy:
    """Pick the named preset for the settings and apply per-field overrides."""
    profile = settings.confidence_profile or settings.data_mode
    preset = CONFIDENCE_POLICIES[profile]
    return ConfidencePolicy(
        base=_override(settings.confidence_base, preset.base),
        volatility_weight=_override(
            settings.confidence_volatility_weight, preset.volatility_weight
        ),
        floor=_override(settings.confidence_floor, preset.floor),
    )


def _override(value: Optional[float], default: float) -> float:
    return default if value is None else value


def recent_closes(
    history: Sequence[HistoricalPoint], window: int = ANALYSIS_WINDOW
) -> List[float]:
    """Closing prices of the *window* most recent points, oldest first."""
    if not history:
        raise InvalidInputError("Historical data is empty", field="history")
    ordered = sorted(history, key=lambda point: point.date)
    return [point.price for point in ordered[-window:]]


def classify_trend(current_price: float, average: float) -> Trend:
    if current_price > average:
        return Trend.UP
    if current_price < average:
        return Trend.DOWN
    return Trend.STABLE


def classify_risk(volatility: float, current_price: float) -> RiskLevel:
    """Bucket volatility against 4% / 2% of the current price."""
    if volatility > current_price * HIGH_RISK_RATIO:
        return RiskLevel.HIGH
    if volatility > current_price * MEDIUM_RISK_RATIO:
        return RiskLevel.MEDIUM
    return RiskLevel.LOW


def recommend(change_percent: float, trend: Trend) -> Recommendation:
    """Combine the day's percent change with the trend direction."""
    momentum_score = {Trend.UP: 1, Trend.DOWN: -1, Trend.STABLE: 0}[Trend(trend)]
    overall_score = change_percent + momentum_score * TREND_SCORE_WEIGHT

    if overall_score > BUY_THRESHOLD:
        return Recommendation.BUY
    if overall_score < SELL_THRESHOLD:
        return Recommendation.SELL
    return Recommendation.HOLD


def derive_prediction(
    quote: Quote,
    history: Sequence[HistoricalPoint],
    policy: ConfidencePolicy = CONFIDENCE_POLICIES["synthetic"],
    rng: Optional[random.Random] = None,
    horizon_days: int = 30,
    window: int = ANALYSIS_WINDOW,
) -> Prediction:
    """
    Derive trend, predicted price and confidence from a quote and its history.

    Args:
        quote: Current quote for the security
        history: Daily closes, any order
        policy: Confidence score constants
        rng: Random source for the noise term (module random if omitted)
        horizon_days: Horizon label carried on the result; does not change
            the analysis window
        window: Number of most recent closes to analyse

    Returns:
        Prediction for the quote's symbol

    Raises:
        InvalidInputError: If the current price is not positive or the
            history is empty
    """
    current_price = quote.current_price
    if current_price <= 0:
        raise InvalidInputError(
            f"Current price for {quote.symbol} must be positive",
            field="current_price",
        )

    closes = recent_closes(history, window)
    average = mean(closes)
    volatility = population_std(closes)
    trend = classify_trend(current_price, average)

    momentum = 0.0 if average == 0 else (current_price - average) / average
    noise = (rng or random).random() - 0.5
    prediction_factor = (
        momentum * MOMENTUM_WEIGHT
        + noise * (volatility / current_price) * NOISE_WEIGHT
    )
    predicted_price = current_price * (1 + prediction_factor)
    confidence = policy.score(volatility, current_price)

    return Prediction(
        symbol=quote.symbol,
        current_price=current_price,
        predicted_price=round(predicted_price, 2),
        confidence=round(confidence, 1),
        trend=trend,
        horizon_days=horizon_days,
        historical_data=list(history),
        quote=quote,
    )


def derive_comparison(
    prediction: Prediction, window: int = ANALYSIS_WINDOW
) -> ComparisonEntry:
    """Turn a prediction into a comparison row with risk and recommendation."""
    current_price = prediction.current_price
    if current_price <= 0:
        raise InvalidInputError(
            f"Current price for {prediction.symbol} must be positive",
            field="current_price",
        )

    volatility = population_std(recent_closes(prediction.historical_data, window))
    predicted_return = (prediction.predicted_price - current_price) / current_price * 100

    return ComparisonEntry(
        symbol=prediction.symbol,
        current_price=current_price,
        predicted_price=prediction.predicted_price,
        predicted_return=predicted_return,
        risk=classify_risk(volatility, current_price),
        confidence=prediction.confidence,
        recommendation=recommend(prediction.quote.change_percent, prediction.trend),
        quote=prediction.quote,
    )
