"""StockScope - market data, price prediction and P/L analytics."""

__version__ = "1.0.0"
