"""Exception classes shared by the data, analytics and API layers."""

from typing import Any, Dict, Optional


class StockScopeError(Exception):
    """Base exception for StockScope application."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details or {}


class NotFoundError(StockScopeError):
    """The quote provider does not recognise the symbol."""

    def __init__(self, symbol: str, message: Optional[str] = None):
        super().__init__(
            message=message or f"Symbol '{symbol}' not found",
            status_code=404,
            details={"symbol": symbol},
        )
        self.symbol = symbol


class RateLimitError(StockScopeError):
    """The quote provider signalled throttling."""

    def __init__(self, provider: str, message: str):
        super().__init__(
            message=f"Rate limit exceeded for {provider}: {message}",
            status_code=429,
            details={"provider": provider},
        )


class InvalidInputError(StockScopeError):
    """Non-positive prices or shares, or degenerate arithmetic."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            message=message,
            status_code=422,
            details={"field": field} if field else {},
        )
        self.field = field


class NetworkFailureError(StockScopeError):
    """Transport-level failure talking to the quote provider."""

    def __init__(self, provider: str, operation: str, message: str):
        super().__init__(
            message=f"{provider} request failed during {operation}: {message}",
            status_code=503,
            details={"provider": provider, "operation": operation},
        )


class ConfigurationError(StockScopeError):
    """Exception for configuration errors."""

    def __init__(self, setting: str, message: str):
        super().__init__(
            message=f"Configuration error for '{setting}': {message}",
            status_code=500,
            details={"setting": setting},
        )
