"""Market data providers and provider selection."""

import random
from typing import Optional

from ..config.settings import Settings
from ..exceptions import ConfigurationError
from .alpha_vantage import AlphaVantageProvider
from .base import MarketDataProvider
from .synthetic import SyntheticMarketDataProvider


def get_market_data_provider(
    settings: Settings, rng: Optional[random.Random] = None
) -> MarketDataProvider:
    """Build the provider for the configured data mode."""
    if settings.is_live():
        if not settings.alpha_vantage_api_key:
            raise ConfigurationError(
                "alpha_vantage_api_key", "required when data_mode is 'live'"
            )
        return AlphaVantageProvider(
            api_key=settings.alpha_vantage_api_key,
            base_url=settings.alpha_vantage_base_url,
            fetch_fundamentals=settings.alpha_vantage_fetch_fundamentals,
        )
    return SyntheticMarketDataProvider(
        rng=rng, simulate_latency=settings.simulate_latency
    )


__all__ = [
    "AlphaVantageProvider",
    "MarketDataProvider",
    "SyntheticMarketDataProvider",
    "get_market_data_provider",
]
