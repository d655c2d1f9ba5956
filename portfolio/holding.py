from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class Holding:
    """One lot of a cost basis export, decoded from a single record."""
    symbol: str
    shares: float
    cost_basis: float  # total dollars paid for the lot
    market_value: float
