from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict

from portfolio.asset import AssetAggregate

@dataclass
class AccountAggregate:
    name: str  # first name seen for the account number, never overwritten
    account_number: str
    assets: Dict[str, AssetAggregate] = field(default_factory=dict)

    def total_cost_basis(self) -> float:
        return sum(a.total_cost_basis for a in self.assets.values())

    def total_market_value(self) -> float:
        return sum(a.total_market_value for a in self.assets.values())
