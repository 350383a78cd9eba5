"""Alpha Vantage client for live quotes, daily history and symbol search.

Alpha Vantage reports most failures inside a 200 response body, so every
payload is checked for the ``Error Message`` / ``Note`` / ``Information``
error keys before it is parsed.
"""

import asyncio
from typing import Any, Dict, List, Optional

import aiohttp

from ..config.logging import get_logger
from ..core.models import HistoricalPoint, Quote
from ..exceptions import (
    NetworkFailureError,
    NotFoundError,
    RateLimitError,
    StockScopeError,
)
from .base import MarketDataProvider

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://www.alphavantage.co/query"
PROVIDER_NAME = "Alpha Vantage"
SEARCH_LIMIT = 10
COMPACT_SERIES_SIZE = 100


def check_payload(payload: Any, symbol: str) -> Dict[str, Any]:
    """Raise the matching error for provider error fields."""
    if not isinstance(payload, dict):
        raise NotFoundError(symbol, f"Unexpected response for '{symbol}'")
    if "Error Message" in payload:
        raise NotFoundError(symbol, payload["Error Message"])
    for key in ("Note", "Information"):
        if key in payload:
            raise RateLimitError(PROVIDER_NAME, payload[key])
    return payload


def parse_global_quote(payload: Dict[str, Any], symbol: str) -> Quote:
    """Map a GLOBAL_QUOTE payload onto a Quote."""
    data = payload.get("Global Quote") or {}
    if "05. price" not in data:
        raise NotFoundError(symbol, f"No quote data available for '{symbol}'")

    try:
        return Quote(
            symbol=data.get("01. symbol", symbol).upper(),
            current_price=float(data["05. price"]),
            change=float(data["09. change"]),
            change_percent=float(data["10. change percent"].rstrip("%")),
            open=float(data["02. open"]),
            high=float(data["03. high"]),
            low=float(data["04. low"]),
            previous_close=float(data["08. previous close"]),
            volume=int(data["06. volume"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise NotFoundError(symbol, f"Malformed quote data for '{symbol}': {e}") from e


def parse_daily_series(
    payload: Dict[str, Any], symbol: str, days: int
) -> List[HistoricalPoint]:
    """Map a TIME_SERIES_DAILY payload onto the *days* most recent closes."""
    series = payload.get("Time Series (Daily)")
    if not series:
        raise NotFoundError(symbol, f"No historical data available for '{symbol}'")

    try:
        points = [
            HistoricalPoint(date=day, price=float(values["4. close"]))
            for day, values in sorted(series.items())
        ]
    except (KeyError, TypeError, ValueError) as e:
        raise NotFoundError(
            symbol, f"Malformed historical data for '{symbol}': {e}"
        ) from e

    return points[-days:]


def parse_overview(payload: Dict[str, Any]) -> Dict[str, float]:
    """Pull market cap, P/E and dividend yield (percent) out of OVERVIEW."""
    return {
        "market_cap": _non_negative(payload.get("MarketCapitalization")),
        "pe_ratio": _non_negative(payload.get("PERatio")),
        "dividend_yield": _non_negative(payload.get("DividendYield")) * 100,
    }


def _non_negative(raw: Any) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if value > 0 else 0.0


class AlphaVantageProvider(MarketDataProvider):
    """Live market data from the Alpha Vantage query endpoint."""

    name = "alpha_vantage"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        fetch_fundamentals: bool = False,
    ):
        if not api_key:
            raise ValueError("Alpha Vantage API key is required")
        self.api_key = api_key
        self.base_url = base_url
        self.fetch_fundamentals = fetch_fundamentals
        self.logger = logger.bind(provider=self.name)

    async def _request(self, function: str, symbol: str, /, **params: str) -> Dict[str, Any]:
        """GET the query endpoint and return the checked JSON body."""
        query = {"function": function, "apikey": self.api_key, **params}
        self.logger.debug("Calling provider", function=function, symbol=symbol)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.get(self.base_url, params=query) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        raise NetworkFailureError(
                            PROVIDER_NAME,
                            function,
                            f"HTTP {response.status}: {error_text[:200]}",
                        )
                    try:
                        payload = await response.json(content_type=None)
                    except ValueError as e:
                        raise NetworkFailureError(
                            PROVIDER_NAME, function, f"Invalid JSON body: {e}"
                        ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.warning(
                "Provider request failed", function=function, symbol=symbol, error=str(e)
            )
            raise NetworkFailureError(PROVIDER_NAME, function, str(e)) from e

        try:
            return check_payload(payload, symbol)
        except RateLimitError:
            self.logger.warning("Provider rate limit hit", function=function)
            raise

    async def get_quote(self, symbol: str) -> Quote:
        payload = await self._request("GLOBAL_QUOTE", symbol, symbol=symbol)
        quote = parse_global_quote(payload, symbol)

        if self.fetch_fundamentals:
            fundamentals = await self._get_fundamentals(symbol)
            if fundamentals:
                quote = quote.model_copy(update=fundamentals)

        self.logger.info("Fetched quote", symbol=symbol, price=quote.current_price)
        return quote

    async def _get_fundamentals(self, symbol: str) -> Optional[Dict[str, float]]:
        try:
            payload = await self._request("OVERVIEW", symbol, symbol=symbol)
        except StockScopeError as e:
            self.logger.warning(
                "Fundamentals unavailable", symbol=symbol, error=e.message
            )
            return None
        return parse_overview(payload)

    async def get_history(self, symbol: str, days: int = 30) -> List[HistoricalPoint]:
        output_size = "compact" if days <= COMPACT_SERIES_SIZE else "full"
        payload = await self._request(
            "TIME_SERIES_DAILY", symbol, symbol=symbol, outputsize=output_size
        )
        points = parse_daily_series(payload, symbol, days)
        self.logger.info("Fetched history", symbol=symbol, points=len(points))
        return points

    async def search(self, query: str) -> List[str]:
        try:
            payload = await self._request("SYMBOL_SEARCH", query, keywords=query)
        except StockScopeError as e:
            self.logger.warning("Symbol search failed", query=query, error=e.message)
            return []

        matches = payload.get("bestMatches") or []
        symbols = [m["1. symbol"] for m in matches if isinstance(m, dict) and "1. symbol" in m]
        return symbols[:SEARCH_LIMIT]
