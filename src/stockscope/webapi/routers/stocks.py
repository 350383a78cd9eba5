"""Quote, history, prediction and search endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...config.logging import get_logger
from ...services import StockService
from ..dependencies import get_request_id, get_stock_service
from ..models.responses import (
    ComparisonEntryResponse,
    HistoryResponse,
    PredictionResponse,
    QuoteResponse,
    SearchResponse,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/stocks")


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search Symbols",
    description="Symbols matching a partial query; fewer than 2 characters returns nothing",
)
async def search_stocks(
    q: str = Query("", description="Partial ticker symbol"),
    request_id: Optional[str] = Depends(get_request_id),
    stock_service: StockService = Depends(get_stock_service),
):
    results = await stock_service.search_stocks(q)
    return SearchResponse(success=True, data=results, request_id=request_id)


@router.get(
    "/{symbol}/quote",
    response_model=QuoteResponse,
    summary="Get Quote",
    description="Current price and trading statistics for a stock symbol",
)
async def get_quote(
    symbol: str,
    request_id: Optional[str] = Depends(get_request_id),
    stock_service: StockService = Depends(get_stock_service),
):
    logger.info("Quote requested", symbol=symbol, request_id=request_id)
    quote = await stock_service.get_quote(symbol)
    return QuoteResponse(success=True, data=quote, request_id=request_id)


@router.get(
    "/{symbol}/history",
    response_model=HistoryResponse,
    summary="Get Price History",
    description="Daily closing prices, oldest first",
)
async def get_history(
    symbol: str,
    days: int = Query(30, ge=1, le=365, description="Number of daily closes"),
    request_id: Optional[str] = Depends(get_request_id),
    stock_service: StockService = Depends(get_stock_service),
):
    history = await stock_service.get_history(symbol, days)
    return HistoryResponse(success=True, data=history, request_id=request_id)


@router.get(
    "/{symbol}/prediction",
    response_model=PredictionResponse,
    summary="Predict Price",
    description="Trend, predicted price and confidence for a stock symbol",
)
async def get_prediction(
    symbol: str,
    prediction_days: int = Query(30, ge=1, le=365, description="Horizon label"),
    request_id: Optional[str] = Depends(get_request_id),
    stock_service: StockService = Depends(get_stock_service),
):
    """
    Predict a stock's price.

    - **symbol**: Stock symbol (e.g., AAPL, GOOGL, MSFT)
    - **prediction_days**: Horizon shown to the user; does not change the
      analysis window
    """
    logger.info("Prediction requested", symbol=symbol, request_id=request_id)
    prediction = await stock_service.get_stock_data(symbol, prediction_days)
    return PredictionResponse(success=True, data=prediction, request_id=request_id)


@router.get(
    "/{symbol}/comparison",
    response_model=ComparisonEntryResponse,
    summary="Comparison Metrics",
    description="Predicted return, risk and recommendation for a stock symbol",
)
async def get_comparison_data(
    symbol: str,
    request_id: Optional[str] = Depends(get_request_id),
    stock_service: StockService = Depends(get_stock_service),
):
    entry = await stock_service.get_stock_comparison_data(symbol)
    return ComparisonEntryResponse(success=True, data=entry, request_id=request_id)
