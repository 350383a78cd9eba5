"""Tests for provider selection from settings."""

import pytest

from stockscope.config.settings import Settings
from stockscope.exceptions import ConfigurationError
from stockscope.providers import (
    AlphaVantageProvider,
    SyntheticMarketDataProvider,
    get_market_data_provider,
)


def test_synthetic_by_default(test_settings):
    provider = get_market_data_provider(test_settings)

    assert isinstance(provider, SyntheticMarketDataProvider)
    assert provider.simulate_latency is False


def test_synthetic_latency_from_settings():
    settings = Settings(_env_file=None, simulate_latency=True)
    provider = get_market_data_provider(settings)
    assert provider.simulate_latency is True


def test_live_mode_builds_alpha_vantage():
    settings = Settings(
        _env_file=None,
        data_mode="live",
        alpha_vantage_api_key="secret",
        alpha_vantage_fetch_fundamentals=True,
    )

    provider = get_market_data_provider(settings)

    assert isinstance(provider, AlphaVantageProvider)
    assert provider.api_key == "secret"
    assert provider.fetch_fundamentals is True


def test_live_mode_without_key_is_configuration_error():
    settings = Settings(_env_file=None, data_mode="live", alpha_vantage_api_key=None)

    with pytest.raises(ConfigurationError) as exc_info:
        get_market_data_provider(settings)

    assert exc_info.value.status_code == 500
    assert "alpha_vantage_api_key" in exc_info.value.message
