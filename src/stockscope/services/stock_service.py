"""Stock service: the functions the dashboard UI calls."""

import asyncio
import random
from typing import List, Optional

from ..config.logging import get_logger
from ..config.settings import Settings, get_settings
from ..core.analytics import (
    ConfidencePolicy,
    confidence_policy_from_settings,
    derive_comparison,
    derive_prediction,
)
from ..core.comparison import ComparisonBoard
from ..core.models import ComparisonEntry, HistoricalPoint, Prediction, Quote
from ..exceptions import InvalidInputError
from ..providers import MarketDataProvider, get_market_data_provider

logger = get_logger(__name__)

MIN_SEARCH_QUERY_LENGTH = 2


def normalize_symbol(symbol: str) -> str:
    """Strip and uppercase a ticker, rejecting blanks."""
    if not symbol or not isinstance(symbol, str) or not symbol.strip():
        raise InvalidInputError("Symbol must be a non-empty string", field="symbol")
    return symbol.strip().upper()


class StockService:
    """Service for quote, prediction, comparison and search operations."""

    def __init__(
        self,
        provider: Optional[MarketDataProvider] = None,
        settings: Optional[Settings] = None,
        policy: Optional[ConfidencePolicy] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or get_settings()
        self.rng = rng or random.Random()
        self.provider = provider or get_market_data_provider(self.settings, self.rng)
        self.policy = policy or confidence_policy_from_settings(self.settings)
        self.logger = logger.bind(service="stock_service", provider=self.provider.name)

    async def get_quote(self, symbol: str) -> Quote:
        symbol = normalize_symbol(symbol)
        self.logger.info("Fetching quote", symbol=symbol)
        return await self.provider.get_quote(symbol)

    async def get_history(
        self, symbol: str, days: Optional[int] = None
    ) -> List[HistoricalPoint]:
        symbol = normalize_symbol(symbol)
        if days is None:
            days = self.settings.history_days
        if days < 1:
            raise InvalidInputError("days must be at least 1", field="days")
        self.logger.info("Fetching history", symbol=symbol, days=days)
        return await self.provider.get_history(symbol, days)

    async def get_stock_data(self, symbol: str, prediction_days: int = 30) -> Prediction:
        """
        Fetch quote and history for *symbol* and derive a prediction.

        Args:
            symbol: Stock symbol (case-insensitive)
            prediction_days: Horizon label for the UI; the analysis window
                is fixed by settings

        Returns:
            Prediction with trend, predicted price and confidence

        Raises:
            InvalidInputError: If the symbol is blank or the data is degenerate
            NotFoundError, RateLimitError, NetworkFailureError: From the provider
        """
        symbol = normalize_symbol(symbol)
        self.logger.info(
            "Predicting stock", symbol=symbol, prediction_days=prediction_days
        )

        try:
            quote, history = await asyncio.gather(
                self.provider.get_quote(symbol),
                self.provider.get_history(symbol, self.settings.history_days),
            )
        except Exception as e:
            self.logger.error(
                "Failed to fetch market data", symbol=symbol, error=str(e)
            )
            raise

        prediction = derive_prediction(
            quote,
            history,
            policy=self.policy,
            rng=self.rng,
            horizon_days=prediction_days,
            window=self.settings.analysis_window,
        )

        self.logger.info(
            "Prediction derived",
            symbol=symbol,
            current_price=prediction.current_price,
            predicted_price=prediction.predicted_price,
            confidence=prediction.confidence,
            trend=prediction.trend.value,
        )
        return prediction

    async def get_stock_comparison_data(self, symbol: str) -> ComparisonEntry:
        prediction = await self.get_stock_data(symbol)
        entry = derive_comparison(prediction, window=self.settings.analysis_window)

        self.logger.info(
            "Comparison derived",
            symbol=entry.symbol,
            risk=entry.risk.value,
            recommendation=entry.recommendation.value,
        )
        return entry

    async def add_to_comparison(
        self, board: ComparisonBoard, symbol: str
    ) -> Optional[ComparisonEntry]:
        """
        Add *symbol* to *board*.

        Returns None without touching the provider when the symbol is
        already on the board.
        """
        symbol = normalize_symbol(symbol)
        if board.contains(symbol):
            self.logger.info("Symbol already on comparison board", symbol=symbol)
            return None

        entry = await self.get_stock_comparison_data(symbol)
        # A concurrent add of the same symbol may have landed during the fetch
        if not board.add(entry):
            self.logger.info("Symbol already on comparison board", symbol=symbol)
            return None
        return entry

    async def search_stocks(self, query: str) -> List[str]:
        """
        Look up symbols matching *query*.

        Queries shorter than two characters (after stripping) yield no
        results and never reach the provider. Provider failures are logged
        and also yield no results.
        """
        query = (query or "").strip()
        if len(query) < MIN_SEARCH_QUERY_LENGTH:
            return []

        try:
            return await self.provider.search(query)
        except Exception as e:
            self.logger.warning("Symbol search failed", query=query, error=str(e))
            return []
