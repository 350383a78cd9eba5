"""Shared test configuration and fixtures."""

import random
import sys
from datetime import date, timedelta
from typing import List

import pytest

sys.path.append("src")

from stockscope.config.settings import Settings, get_settings
from stockscope.core.models import HistoricalPoint, Prediction, Quote, Trend
from stockscope.providers.synthetic import SyntheticMarketDataProvider
from stockscope.services import StockService

FIXED_TODAY = date(2024, 3, 15)


def make_quote(
    symbol: str = "AAPL",
    price: float = 100.0,
    change_percent: float = 0.0,
) -> Quote:
    """Quote with sensible defaults around *price*."""
    change = round(price * change_percent / 100, 2)
    return Quote(
        symbol=symbol,
        current_price=price,
        change=change,
        change_percent=change_percent,
        open=price,
        high=price,
        low=price,
        previous_close=round(price - change, 2),
        volume=1_000_000,
        market_cap=1_000_000_000,
        pe_ratio=20.0,
        dividend_yield=1.0,
    )


def make_history(prices: List[float], end: date = FIXED_TODAY) -> List[HistoricalPoint]:
    """Daily points ending at *end*, oldest first."""
    start = end - timedelta(days=len(prices) - 1)
    return [
        HistoricalPoint(date=(start + timedelta(days=i)).isoformat(), price=p)
        for i, p in enumerate(prices)
    ]


def make_prediction(
    trend: Trend = Trend.STABLE,
    change_percent: float = 0.0,
    price: float = 100.0,
    predicted_price: float = 100.0,
    history_prices: List[float] = None,
) -> Prediction:
    history_prices = history_prices or [price] * 30
    return Prediction(
        symbol="AAPL",
        current_price=price,
        predicted_price=predicted_price,
        confidence=90.0,
        trend=trend,
        historical_data=make_history(history_prices),
        quote=make_quote(price=price, change_percent=change_percent),
    )


class CountingProvider(SyntheticMarketDataProvider):
    """Synthetic provider that records which symbols were quoted."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.quoted: List[str] = []

    async def get_quote(self, symbol: str) -> Quote:
        self.quoted.append(symbol)
        return await super().get_quote(symbol)


@pytest.fixture(autouse=True)
def clean_settings_cache():
    """Clear settings cache between tests to avoid state pollution."""
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings():
    """Synthetic-mode settings that ignore any local .env file."""
    return Settings(_env_file=None, environment="testing", data_mode="synthetic")


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def synthetic_provider(rng):
    return SyntheticMarketDataProvider(rng=rng, today=FIXED_TODAY)


@pytest.fixture
def counting_provider(rng):
    return CountingProvider(rng=rng, today=FIXED_TODAY)


@pytest.fixture
def stock_service(synthetic_provider, test_settings, rng):
    return StockService(provider=synthetic_provider, settings=test_settings, rng=rng)


@pytest.fixture
def quote_factory():
    return make_quote


@pytest.fixture
def history_factory():
    return make_history


@pytest.fixture
def prediction_factory():
    return make_prediction
