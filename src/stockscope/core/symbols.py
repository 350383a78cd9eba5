"""Static symbol data used by the synthetic market data provider."""

from typing import Dict, List

DEFAULT_SEED_PRICE = 150.0

# Seed prices shared by quote and history synthesis
SEED_PRICES: Dict[str, float] = {
    "AAPL": 175.50,
    "GOOGL": 142.80,
    "MSFT": 378.90,
    "TSLA": 248.50,
    "AMZN": 145.20,
    "META": 334.90,
    "NVDA": 485.60,
    "NFLX": 485.30,
    "JPM": 172.40,
    "JNJ": 162.80,
    "V": 250.70,
    "PG": 152.30,
    "HD": 325.60,
    "MA": 415.20,
    "UNH": 515.80,
    "DIS": 92.40,
    "PYPL": 58.90,
    "ADBE": 525.40,
    "CRM": 245.60,
    "NKE": 98.70,
}

SYMBOL_UNIVERSE: List[str] = [
    "AAPL", "GOOGL", "MSFT", "TSLA", "AMZN", "META", "NVDA", "NFLX",
    "JPM", "JNJ", "V", "PG", "HD", "MA", "UNH", "DIS", "PYPL", "ADBE",
    "CRM", "NKE", "INTC", "CSCO", "PFE", "TMO", "ABT", "KO", "PEP",
    "WMT", "COST", "TGT", "LOW", "SBUX", "MCD", "YUM", "CMCSA", "VZ",
    "T", "TMUS", "CHTR", "ORCL", "IBM", "QCOM", "AVGO", "TXN", "MU",
]  # fmt: skip


def seed_price(symbol: str) -> float:
    """Base price for *symbol*, or DEFAULT_SEED_PRICE when unknown."""
    return SEED_PRICES.get(symbol.upper(), DEFAULT_SEED_PRICE)
