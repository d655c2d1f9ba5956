from __future__ import annotations
from dataclasses import asdict, dataclass, fields
from typing import Dict, List

@dataclass(frozen=True)
class RowSchema:
    """Column positions (0-indexed) of a cost basis export record."""
    account_name: int = 0
    account_number: int = 1
    symbol: int = 2
    shares: int = 3
    purchase_date: int = 4  # unused
    market_value: int = 5
    cost_basis: int = 6
    unrealized_dollar: int = 7  # unused
    unrealized_percent: int = 8  # unused

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    def positions(self) -> Dict[str, int]:
        return asdict(self)

    @property
    def min_columns(self) -> int:
        return max(self.positions().values()) + 1

DEFAULT_SCHEMA = RowSchema()
