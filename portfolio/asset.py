from __future__ import annotations
from dataclasses import dataclass

@dataclass
class AssetAggregate:
    """Running totals for one symbol within one account."""
    symbol: str
    total_shares: float = 0.0
    total_cost_basis: float = 0.0
    total_market_value: float = 0.0
    cost_basis_per_share: float = 0.0

    @property
    def unrealized_gain(self) -> float:
        return self.total_market_value - self.total_cost_basis
