"""FastAPI dependencies resolving per-process state from the app."""

from typing import Optional

from fastapi import Request

from ..core.calculator import ScenarioBook
from ..core.comparison import ComparisonBoard
from ..services import StockService


def get_stock_service(request: Request) -> StockService:
    """Dependency to get the shared stock service instance."""
    return request.app.state.stock_service


def get_comparison_board(request: Request) -> ComparisonBoard:
    return request.app.state.comparison_board


def get_scenario_book(request: Request) -> ScenarioBook:
    return request.app.state.scenario_book


def get_request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)
