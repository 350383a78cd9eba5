"""FastAPI application exposing StockScope to the dashboard UI."""

import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config.logging import get_logger
from ..config.settings import get_settings
from ..core.calculator import ScenarioBook
from ..core.comparison import ComparisonBoard
from ..services import StockService
from .exceptions import setup_exception_handlers
from .health import router as health_router
from .models.responses import MessageResponse
from .routers import comparison_router, scenarios_router, stocks_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(
        "Starting StockScope API",
        provider=app.state.stock_service.provider.name,
    )

    yield

    logger.info("Shutting down StockScope API")


async def add_request_id_middleware(request: Request, call_next):
    """Add unique request ID to each request for tracking."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    logger.info(
        "Request started",
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        query_params=str(request.query_params),
        remote_addr=request.client.host if request.client else None,
    )

    response = await call_next(request)

    response.headers["X-Request-ID"] = request_id

    logger.info(
        "Request completed",
        request_id=request_id,
        status_code=response.status_code,
        method=request.method,
        path=request.url.path,
    )

    return response


def create_app(stock_service: Optional[StockService] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        stock_service: Service to serve requests with; built from settings
            when omitted

    Returns:
        Configured FastAPI app. The comparison board and scenario book live
        on ``app.state`` for the lifetime of the process.
    """
    settings = get_settings()
    app = FastAPI(
        title="StockScope API",
        description="""
        Market data and analytics for the investment dashboard.

        ## Features

        * **Price Predictor**: Trend, predicted price and confidence per symbol
        * **Comparison**: Side-by-side risk, return and recommendation
        * **P/L Calculator**: Profit/loss scenarios with fees
        * **Symbol Search**: Autocomplete for ticker symbols
        """,
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.state.stock_service = stock_service or StockService(settings=settings)
    app.state.comparison_board = ComparisonBoard()
    app.state.scenario_book = ScenarioBook()

    app.middleware("http")(add_request_id_middleware)

    # The dashboard is served from a different origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(health_router, prefix="/api/v1", tags=["Health & Status"])
    app.include_router(stocks_router, prefix="/api/v1", tags=["Stocks & Predictions"])
    app.include_router(comparison_router, prefix="/api/v1", tags=["Comparison"])
    app.include_router(scenarios_router, prefix="/api/v1", tags=["P/L Scenarios"])

    @app.get("/", response_model=MessageResponse, summary="API Root Endpoint")
    async def root(request: Request) -> MessageResponse:
        return MessageResponse.create(
            message="StockScope API is running",
            request_id=request.state.request_id,
        )

    logger.info("FastAPI application created")
    return app
