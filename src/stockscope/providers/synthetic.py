"""Synthetic market data: plausible but fabricated quotes around seed prices."""

import asyncio
import random
from datetime import date, timedelta
from typing import List, Optional, Tuple

from ..config.logging import get_logger
from ..core.models import HistoricalPoint, Quote
from ..core.symbols import SYMBOL_UNIVERSE, seed_price
from .base import MarketDataProvider

logger = get_logger(__name__)

QUOTE_SPREAD = 0.02
HISTORY_SPREAD = 0.015
SEARCH_LIMIT = 8

# Simulated round-trip time ranges in seconds
QUOTE_LATENCY = (0.3, 0.8)
HISTORY_LATENCY = (0.2, 0.5)
SEARCH_LATENCY = (0.1, 0.3)


class SyntheticMarketDataProvider(MarketDataProvider):
    """Generates quotes and history with bounded multiplicative noise."""

    name = "synthetic"

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        simulate_latency: bool = False,
        today: Optional[date] = None,
    ):
        self.rng = rng or random.Random()
        self.simulate_latency = simulate_latency
        self._today = today
        self.logger = logger.bind(provider=self.name)

    def perturb(self, base: float, spread: float) -> float:
        """Move *base* by at most ``spread / 2`` in either direction."""
        return base * (1 + (self.rng.random() - 0.5) * spread)

    async def _delay(self, bounds: Tuple[float, float]) -> None:
        if self.simulate_latency:
            await asyncio.sleep(self.rng.uniform(*bounds))

    async def get_quote(self, symbol: str) -> Quote:
        await self._delay(QUOTE_LATENCY)
        return self.generate_quote(symbol)

    async def get_history(self, symbol: str, days: int = 30) -> List[HistoricalPoint]:
        await self._delay(HISTORY_LATENCY)
        return self.generate_history(symbol, days)

    async def search(self, query: str) -> List[str]:
        await self._delay(SEARCH_LATENCY)
        needle = query.lower()
        matches = [s for s in SYMBOL_UNIVERSE if needle in s.lower()]
        return matches[:SEARCH_LIMIT]

    def generate_quote(self, symbol: str) -> Quote:
        base_price = seed_price(symbol)
        current_price = self.perturb(base_price, QUOTE_SPREAD)
        change = self.perturb(base_price * 0.01, 0.5)
        previous_close = current_price - change
        change_percent = change / previous_close * 100
        high = current_price * (1 + self.rng.random() * 0.03)
        low = current_price * (1 - self.rng.random() * 0.03)
        volume = int(self.rng.random() * 50_000_000) + 10_000_000
        open_price = self.perturb(current_price, 0.01)
        market_cap = current_price * (self.rng.random() * 1_000_000_000 + 10_000_000_000)
        pe_ratio = self.rng.random() * 30 + 10
        dividend_yield = self.rng.random() * 5

        self.logger.debug("Generated quote", symbol=symbol, price=current_price)

        return Quote(
            symbol=symbol,
            current_price=round(current_price, 2),
            change=round(change, 2),
            change_percent=round(change_percent, 2),
            open=round(open_price, 2),
            high=round(high, 2),
            low=round(low, 2),
            previous_close=round(previous_close, 2),
            volume=volume,
            market_cap=int(market_cap),
            pe_ratio=round(pe_ratio, 2),
            dividend_yield=round(dividend_yield, 2),
        )

    def generate_history(self, symbol: str, days: int = 30) -> List[HistoricalPoint]:
        base_price = seed_price(symbol)
        today = self._today or date.today()

        return [
            HistoricalPoint(
                date=(today - timedelta(days=offset)).isoformat(),
                price=round(self.perturb(base_price, HISTORY_SPREAD), 2),
            )
            for offset in range(days - 1, -1, -1)
        ]
