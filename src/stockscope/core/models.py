"""Data models for quotes, predictions, comparisons and P/L scenarios."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Trend(str, Enum):
    """Coarse price direction relative to the short-window average."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class RiskLevel(str, Enum):
    """Volatility bucket relative to price level."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Recommendation(str, Enum):
    """Buy/sell/hold label."""

    BUY = "buy"
    SELL = "sell"
    HOLD = "hold"


class Quote(BaseModel):
    """Point-in-time snapshot of a security's price and trading statistics."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., description="Stock symbol")
    current_price: float = Field(..., ge=0, description="Current stock price")
    change: float = Field(..., description="Price change amount")
    change_percent: float = Field(..., description="Price change percentage")
    open: float = Field(..., ge=0, description="Opening price")
    high: float = Field(..., ge=0, description="Session high")
    low: float = Field(..., ge=0, description="Session low")
    previous_close: float = Field(..., ge=0, description="Previous closing price")
    volume: int = Field(..., ge=0, description="Trading volume")
    market_cap: float = Field(0, ge=0, description="Market capitalization")
    pe_ratio: float = Field(0, ge=0, description="Price/earnings ratio")
    dividend_yield: float = Field(0, ge=0, description="Dividend yield percentage")


class HistoricalPoint(BaseModel):
    """One daily close."""

    model_config = ConfigDict(frozen=True)

    date: str = Field(..., description="Calendar day (YYYY-MM-DD)")
    price: float = Field(..., gt=0, description="Closing price")


class Prediction(BaseModel):
    """Derived price prediction for a single security."""

    symbol: str
    current_price: float
    predicted_price: float
    confidence: float = Field(..., ge=0, le=100)
    trend: Trend
    horizon_days: int = Field(30, description="Prediction horizon shown to the user")
    historical_data: List[HistoricalPoint]
    quote: Quote


class ComparisonEntry(BaseModel):
    """One row of the multi-security comparison view."""

    symbol: str
    current_price: float
    predicted_price: float
    predicted_return: float = Field(..., description="Predicted return in percent")
    risk: RiskLevel
    confidence: float
    recommendation: Recommendation
    quote: Quote


class InvestmentScenario(BaseModel):
    """User-entered trade plus the derived profit/loss figures."""

    symbol: str
    buy_price: float
    sell_price: float
    shares: float
    fees: float
    investment: float
    profit_loss: float
    profit_loss_percent: float
    net_profit_loss: float


class ScenarioSummary(BaseModel):
    """Portfolio totals across all scenarios."""

    count: int
    total_investment: float
    total_profit_loss: float
    total_return_percent: float = 0.0
    best_performer: Optional[InvestmentScenario] = None
    worst_performer: Optional[InvestmentScenario] = None
