"""Request models for the StockScope API."""

import re

from pydantic import BaseModel, Field, field_validator

SYMBOL_PATTERN = re.compile(r"^[A-Za-z0-9.\-]+$")


def _validate_symbol(v: str) -> str:
    v = v.strip()
    if not SYMBOL_PATTERN.match(v):
        raise ValueError("Symbol must contain only letters, digits, '.' or '-'")
    return v.upper()


class StockSymbolRequest(BaseModel):
    """Request model for stock symbol operations."""

    symbol: str = Field(
        ..., description="Stock symbol (e.g., AAPL, GOOGL)", min_length=1, max_length=10
    )

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v):
        """Validate stock symbol format."""
        return _validate_symbol(v)


class ScenarioCreateRequest(BaseModel):
    """Request model for adding a profit/loss scenario.

    Non-finite numbers are rejected here; range checks happen in the
    calculator so API and library callers share the same errors.
    """

    symbol: str = Field(..., description="Stock symbol", min_length=1, max_length=10)
    buy_price: float = Field(
        ..., description="Price paid per share", allow_inf_nan=False
    )
    sell_price: float = Field(
        ..., description="Price received per share", allow_inf_nan=False
    )
    shares: float = Field(..., description="Number of shares", allow_inf_nan=False)
    fees: float = Field(0.0, description="Total trading fees", allow_inf_nan=False)

    @field_validator("symbol")
    @classmethod
    def validate_symbol(cls, v):
        """Validate stock symbol format."""
        return _validate_symbol(v)
