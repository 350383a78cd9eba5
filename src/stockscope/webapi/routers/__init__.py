"""API routers for StockScope."""

from .comparison import router as comparison_router
from .scenarios import router as scenarios_router
from .stocks import router as stocks_router

__all__ = ["stocks_router", "comparison_router", "scenarios_router"]
