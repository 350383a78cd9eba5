"""Comparison board endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from ...config.logging import get_logger
from ...core.comparison import ComparisonBoard
from ...exceptions import NotFoundError
from ...services import StockService
from ..dependencies import get_comparison_board, get_request_id, get_stock_service
from ..models.requests import StockSymbolRequest
from ..models.responses import ComparisonBoardData, ComparisonBoardResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/comparison")


def _board_response(
    board: ComparisonBoard, request_id: Optional[str], message: Optional[str] = None
) -> ComparisonBoardResponse:
    return ComparisonBoardResponse(
        success=True,
        data=ComparisonBoardData(
            entries=board.entries, best_investment=board.best_investment()
        ),
        message=message,
        request_id=request_id,
    )


@router.get("", response_model=ComparisonBoardResponse, summary="List Comparison")
async def list_comparison(
    request_id: Optional[str] = Depends(get_request_id),
    board: ComparisonBoard = Depends(get_comparison_board),
):
    return _board_response(board, request_id)


@router.post("", response_model=ComparisonBoardResponse, summary="Add Security")
async def add_to_comparison(
    body: StockSymbolRequest,
    request_id: Optional[str] = Depends(get_request_id),
    board: ComparisonBoard = Depends(get_comparison_board),
    stock_service: StockService = Depends(get_stock_service),
):
    """Add a security to the board. Adding a symbol already present is a no-op."""
    entry = await stock_service.add_to_comparison(board, body.symbol)
    message = (
        f"{body.symbol} added" if entry else f"{body.symbol} is already on the board"
    )
    logger.info("Comparison add", symbol=body.symbol, added=bool(entry))
    return _board_response(board, request_id, message)


@router.delete(
    "/{symbol}", response_model=ComparisonBoardResponse, summary="Remove Security"
)
async def remove_from_comparison(
    symbol: str,
    request_id: Optional[str] = Depends(get_request_id),
    board: ComparisonBoard = Depends(get_comparison_board),
):
    if not board.remove(symbol):
        raise NotFoundError(symbol, f"'{symbol.upper()}' is not on the comparison board")
    return _board_response(board, request_id, f"{symbol.upper()} removed")
