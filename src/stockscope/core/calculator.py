"""Profit/loss scenario arithmetic."""

import math
from typing import List, Optional

from ..exceptions import InvalidInputError
from .models import InvestmentScenario, ScenarioSummary


def calculate_scenario(
    symbol: str,
    buy_price: float,
    sell_price: float,
    shares: float,
    fees: float = 0.0,
) -> InvestmentScenario:
    """
    Build a scenario from a planned buy and sell.

    Args:
        symbol: Stock symbol (uppercased)
        buy_price: Price paid per share
        sell_price: Price received per share
        shares: Number of shares
        fees: Total fees for the round trip

    Returns:
        InvestmentScenario with investment and profit/loss figures

    Raises:
        InvalidInputError: If the symbol is blank, a price or share count is
            not a positive finite number, or fees are negative or not finite
    """
    if not symbol or not symbol.strip():
        raise InvalidInputError("Symbol must be a non-empty string", field="symbol")
    for field, value in (
        ("buy_price", buy_price),
        ("sell_price", sell_price),
        ("shares", shares),
    ):
        if value is None or not math.isfinite(value) or value <= 0:
            raise InvalidInputError(
                f"{field} must be a positive finite number", field=field
            )
    fees = fees or 0.0
    if not math.isfinite(fees) or fees < 0:
        raise InvalidInputError(
            "fees must be a non-negative finite number", field="fees"
        )

    investment = buy_price * shares
    profit_loss = (sell_price - buy_price) * shares
    if not (math.isfinite(investment) and math.isfinite(profit_loss)):
        raise InvalidInputError("Scenario values are too large", field="shares")

    return InvestmentScenario(
        symbol=symbol.strip().upper(),
        buy_price=buy_price,
        sell_price=sell_price,
        shares=shares,
        fees=fees,
        investment=investment,
        profit_loss=profit_loss,
        profit_loss_percent=(sell_price - buy_price) / buy_price * 100,
        net_profit_loss=profit_loss - fees,
    )


class ScenarioBook:
    """Ordered, in-memory list of scenarios. Identity is position only."""

    def __init__(self):
        self._scenarios: List[InvestmentScenario] = []

    def __len__(self) -> int:
        return len(self._scenarios)

    @property
    def scenarios(self) -> List[InvestmentScenario]:
        return list(self._scenarios)

    def add(self, scenario: InvestmentScenario) -> None:
        self._scenarios = [*self._scenarios, scenario]

    def remove(self, index: int) -> InvestmentScenario:
        """Remove the scenario at *index*; the rest keep their order."""
        if index < 0 or index >= len(self._scenarios):
            raise InvalidInputError(
                f"No scenario at index {index}", field="index"
            )
        removed = self._scenarios[index]
        self._scenarios = [s for i, s in enumerate(self._scenarios) if i != index]
        return removed

    def clear(self) -> None:
        self._scenarios = []

    def total_investment(self) -> float:
        return sum(s.investment for s in self._scenarios)

    def total_profit_loss(self) -> float:
        return sum(s.net_profit_loss for s in self._scenarios)

    def total_return_percent(self) -> float:
        """Net P/L as a percent of total investment; 0 when nothing is invested."""
        total_investment = self.total_investment()
        if total_investment == 0:
            return 0.0
        return self.total_profit_loss() / total_investment * 100

    def best_performer(self) -> Optional[InvestmentScenario]:
        if not self._scenarios:
            return None
        return max(self._scenarios, key=lambda s: s.profit_loss_percent)

    def worst_performer(self) -> Optional[InvestmentScenario]:
        if not self._scenarios:
            return None
        return min(self._scenarios, key=lambda s: s.profit_loss_percent)

    def summary(self) -> ScenarioSummary:
        return ScenarioSummary(
            count=len(self._scenarios),
            total_investment=self.total_investment(),
            total_profit_loss=self.total_profit_loss(),
            total_return_percent=self.total_return_percent(),
            best_performer=self.best_performer(),
            worst_performer=self.worst_performer(),
        )
