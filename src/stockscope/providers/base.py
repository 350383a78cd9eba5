"""Interface for market data providers."""

from abc import ABC, abstractmethod
from typing import List

from ..core.models import HistoricalPoint, Quote


class MarketDataProvider(ABC):
    """Source of quotes, daily history and symbol lookups.

    Symbols passed in are already stripped and uppercased, and search queries
    have already passed the minimum-length check.
    """

    name: str = "provider"

    @abstractmethod
    async def get_quote(self, symbol: str) -> Quote: ...

    @abstractmethod
    async def get_history(self, symbol: str, days: int = 30) -> List[HistoricalPoint]:
        """Return exactly *days* daily closes, oldest first."""

    @abstractmethod
    async def search(self, query: str) -> List[str]: ...
