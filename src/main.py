"""
StockScope - Main application entry point.

Serves the market data and analytics API used by the investment dashboard.
Run with ``-predict SYMBOL`` to print a single prediction instead.
"""

import asyncio
import sys

import uvicorn
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from stockscope.config.logging import get_logger, setup_logging
from stockscope.config.settings import get_settings
from stockscope.core.analytics import derive_comparison
from stockscope.exceptions import StockScopeError
from stockscope.services import StockService


def initialize_application() -> None:
    """Initialize logging from settings."""
    settings = get_settings()
    setup_logging(
        level=settings.log_level,
        format_type=settings.log_format,
        file_enabled=settings.log_file_enabled,
        file_path=settings.log_file_path,
        max_file_size=settings.log_max_file_size,
        backup_count=settings.log_backup_count,
    )


async def print_prediction(symbol: str) -> None:
    service = StockService()
    prediction = await service.get_stock_data(symbol)
    entry = derive_comparison(prediction, window=service.settings.analysis_window)
    print(prediction.model_dump_json(indent=2, exclude={"historical_data"}))
    print(
        f"Risk: {entry.risk.value}  Recommendation: {entry.recommendation.value}  "
        f"Predicted return: {entry.predicted_return:.2f}%"
    )


def main() -> None:
    """Main application entry point."""
    initialize_application()

    logger = get_logger(__name__)
    settings = get_settings()
    logger.info("Starting StockScope", data_mode=settings.data_mode)

    if "-predict" in sys.argv:
        try:
            symbol = sys.argv[sys.argv.index("-predict") + 1]
            asyncio.run(print_prediction(symbol))
        except IndexError:
            print("Error: Please provide a stock symbol after the -predict flag.")
            sys.exit(1)
        except StockScopeError as e:
            logger.error("Prediction failed", error=e.message)
            print(f"Error: {e.message}")
            sys.exit(1)
        return

    logger.info(
        "Starting API server",
        host=settings.endpoint_host,
        port=settings.endpoint_port,
    )
    try:
        uvicorn.run(
            "stockscope.webapi.app:create_app",
            factory=True,
            host=settings.endpoint_host,
            port=settings.endpoint_port,
            reload=settings.api_reload,
            log_level=settings.api_log_level.lower(),
        )
    except KeyboardInterrupt:
        logger.info("Received interrupt signal")


if __name__ == "__main__":
    main()
