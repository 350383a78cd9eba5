"""Core models and analytics for StockScope."""

from .analytics import (
    CONFIDENCE_POLICIES,
    ConfidencePolicy,
    derive_comparison,
    derive_prediction,
)
from .calculator import ScenarioBook, calculate_scenario
from .comparison import ComparisonBoard
from .models import (
    ComparisonEntry,
    HistoricalPoint,
    InvestmentScenario,
    Prediction,
    Quote,
    Recommendation,
    RiskLevel,
    ScenarioSummary,
    Trend,
)

__all__ = [
    "CONFIDENCE_POLICIES",
    "ConfidencePolicy",
    "derive_comparison",
    "derive_prediction",
    "ScenarioBook",
    "calculate_scenario",
    "ComparisonBoard",
    "ComparisonEntry",
    "HistoricalPoint",
    "InvestmentScenario",
    "Prediction",
    "Quote",
    "Recommendation",
    "RiskLevel",
    "ScenarioSummary",
    "Trend",
]
