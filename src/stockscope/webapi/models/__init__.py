"""API Models package for request/response schemas."""

from .requests import ScenarioCreateRequest, StockSymbolRequest
from .responses import (
    BaseResponse,
    ComparisonBoardData,
    ComparisonBoardResponse,
    ComparisonEntryResponse,
    ErrorResponse,
    HealthResponse,
    HistoryResponse,
    MessageResponse,
    PredictionResponse,
    QuoteResponse,
    ScenarioBookData,
    ScenarioBookResponse,
    SearchResponse,
    SuccessResponse,
)

__all__ = [
    # Response models
    "BaseResponse",
    "SuccessResponse",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "QuoteResponse",
    "HistoryResponse",
    "PredictionResponse",
    "ComparisonEntryResponse",
    "SearchResponse",
    "ComparisonBoardData",
    "ComparisonBoardResponse",
    "ScenarioBookData",
    "ScenarioBookResponse",
    # Request models
    "StockSymbolRequest",
    "ScenarioCreateRequest",
]
