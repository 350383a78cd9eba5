"""Response models for the StockScope API."""

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from ...core.models import (
    ComparisonEntry,
    HistoricalPoint,
    InvestmentScenario,
    Prediction,
    Quote,
    ScenarioSummary,
)

# Generic type for data responses
T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class BaseResponse(BaseModel):
    """Base response model for all API responses."""

    success: bool = Field(..., description="Whether the request was successful")
    timestamp: datetime = Field(
        default_factory=_utcnow, description="Response timestamp"
    )
    request_id: Optional[str] = Field(
        None, description="Unique request identifier for tracking"
    )

    model_config = ConfigDict(use_enum_values=True)

    @field_serializer("timestamp")
    def serialize_timestamp(self, dt: datetime) -> str:
        """Serialize datetime to ISO format with Z suffix."""
        return dt.astimezone(timezone.utc).replace(tzinfo=None).isoformat() + "Z"


class SuccessResponse(BaseResponse, Generic[T]):
    """Generic success response with typed data."""

    success: bool = Field(True, description="Always true for success responses")
    data: T = Field(..., description="Response data")
    message: Optional[str] = Field(None, description="Optional success message")


class ErrorResponse(BaseResponse):
    """Error response model."""

    success: bool = Field(False, description="Always false for error responses")
    error: Dict[str, Any] = Field(..., description="Error details")


class HealthStatus(BaseModel):
    """Health status model."""

    status: str = Field(
        ..., description="Overall health status: healthy, degraded, unhealthy"
    )
    services: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict, description="Individual service statuses"
    )
    uptime_seconds: float = Field(..., description="Application uptime in seconds")
    version: Optional[str] = Field(None, description="Application version")


class HealthResponse(BaseResponse):
    """Health check response."""

    success: bool = Field(True, description="Always true for health responses")
    health: HealthStatus = Field(..., description="Detailed health information")


class QuoteResponse(SuccessResponse[Quote]):
    data: Quote = Field(..., description="Current quote")


class HistoryResponse(SuccessResponse[List[HistoricalPoint]]):
    data: List[HistoricalPoint] = Field(..., description="Daily closes, oldest first")


class PredictionResponse(SuccessResponse[Prediction]):
    data: Prediction = Field(..., description="Price prediction")


class ComparisonEntryResponse(SuccessResponse[ComparisonEntry]):
    data: ComparisonEntry = Field(..., description="Comparison row")


class SearchResponse(SuccessResponse[List[str]]):
    data: List[str] = Field(..., description="Matching symbols")


class ComparisonBoardData(BaseModel):
    """Current comparison board."""

    entries: List[ComparisonEntry] = Field(default_factory=list)
    best_investment: Optional[ComparisonEntry] = None


class ComparisonBoardResponse(SuccessResponse[ComparisonBoardData]):
    data: ComparisonBoardData = Field(..., description="Comparison board")


class ScenarioBookData(BaseModel):
    """Current scenario list with totals."""

    scenarios: List[InvestmentScenario] = Field(default_factory=list)
    summary: ScenarioSummary


class ScenarioBookResponse(SuccessResponse[ScenarioBookData]):
    data: ScenarioBookData = Field(..., description="Scenarios and summary")


class MessageResponse(SuccessResponse[Dict[str, str]]):
    """Simple message response."""

    data: Dict[str, str] = Field(..., description="Message data")

    @classmethod
    def create(
        cls, message: str, request_id: Optional[str] = None
    ) -> "MessageResponse":
        """Create a simple message response."""
        return cls(
            success=True,
            data={"message": message},
            message=message,
            request_id=request_id,
        )
