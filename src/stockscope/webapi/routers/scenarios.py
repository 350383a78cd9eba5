"""Profit/loss scenario endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from ...config.logging import get_logger
from ...core.calculator import ScenarioBook, calculate_scenario
from ..dependencies import get_request_id, get_scenario_book
from ..models.requests import ScenarioCreateRequest
from ..models.responses import ScenarioBookData, ScenarioBookResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/scenarios")


def _book_response(
    book: ScenarioBook, request_id: Optional[str], message: Optional[str] = None
) -> ScenarioBookResponse:
    return ScenarioBookResponse(
        success=True,
        data=ScenarioBookData(scenarios=book.scenarios, summary=book.summary()),
        message=message,
        request_id=request_id,
    )


@router.get("", response_model=ScenarioBookResponse, summary="List Scenarios")
async def list_scenarios(
    request_id: Optional[str] = Depends(get_request_id),
    book: ScenarioBook = Depends(get_scenario_book),
):
    return _book_response(book, request_id)


@router.post("", response_model=ScenarioBookResponse, summary="Add Scenario")
async def add_scenario(
    body: ScenarioCreateRequest,
    request_id: Optional[str] = Depends(get_request_id),
    book: ScenarioBook = Depends(get_scenario_book),
):
    scenario = calculate_scenario(
        body.symbol, body.buy_price, body.sell_price, body.shares, body.fees
    )
    book.add(scenario)
    logger.info(
        "Scenario added",
        symbol=scenario.symbol,
        net_profit_loss=scenario.net_profit_loss,
        request_id=request_id,
    )
    return _book_response(book, request_id)


@router.delete("/{index}", response_model=ScenarioBookResponse, summary="Remove Scenario")
async def remove_scenario(
    index: int,
    request_id: Optional[str] = Depends(get_request_id),
    book: ScenarioBook = Depends(get_scenario_book),
):
    removed = book.remove(index)
    return _book_response(book, request_id, f"Removed {removed.symbol} scenario")
