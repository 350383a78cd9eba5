"""In-memory comparison board keyed by symbol."""

from typing import List, Optional

from .models import ComparisonEntry


class ComparisonBoard:
    """Ordered list of comparison entries with unique symbols.

    Every mutation swaps in a new list rather than editing the current one.
    """

    def __init__(self):
        self._entries: List[ComparisonEntry] = []

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[ComparisonEntry]:
        return list(self._entries)

    @property
    def symbols(self) -> List[str]:
        return [entry.symbol for entry in self._entries]

    def contains(self, symbol: str) -> bool:
        return symbol.strip().upper() in self.symbols

    def add(self, entry: ComparisonEntry) -> bool:
        """Append *entry*. Returns False (and changes nothing) on a duplicate."""
        if self.contains(entry.symbol):
            return False
        self._entries = [*self._entries, entry]
        return True

    def remove(self, symbol: str) -> bool:
        symbol = symbol.strip().upper()
        remaining = [e for e in self._entries if e.symbol != symbol]
        removed = len(remaining) != len(self._entries)
        self._entries = remaining
        return removed

    def clear(self) -> None:
        self._entries = []

    def best_investment(self) -> Optional[ComparisonEntry]:
        """Entry with the highest predicted return; first wins on ties."""
        if not self._entries:
            return None
        best = self._entries[0]
        for entry in self._entries[1:]:
            if entry.predicted_return > best.predicted_return:
                best = entry
        return best
