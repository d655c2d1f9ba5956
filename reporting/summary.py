from __future__ import annotations
from typing import Any, Dict, List

import pandas as pd

from engine.aggregator import Accounts

FRAME_COLUMNS = [
    "account_number",
    "account_name",
    "symbol",
    "shares",
    "cost_basis",
    "market_value",
    "cost_basis_per_share",
    "unrealized_gain",
]

def asset_lines(accounts: Accounts) -> List[str]:
    lines = []
    for account in accounts.values():
        for asset in account.assets.values():
            lines.append(
                f"Account: {account.name}, Symbol: {asset.symbol}, Shares: {asset.total_shares:f}, "
                f"CostBasis: {asset.total_cost_basis:f}, MarketValue {asset.total_market_value:f}, "
                f"Cost Basis Per Share {asset.cost_basis_per_share:f}"
            )
    return lines

def holdings_frame(accounts: Accounts) -> pd.DataFrame:
    """One row per account and symbol, sorted by account number then symbol."""
    records = [
        {
            "account_number": account.account_number,
            "account_name": account.name,
            "symbol": asset.symbol,
            "shares": asset.total_shares,
            "cost_basis": asset.total_cost_basis,
            "market_value": asset.total_market_value,
            "cost_basis_per_share": asset.cost_basis_per_share,
            "unrealized_gain": asset.unrealized_gain,
        }
        for account in accounts.values()
        for asset in account.assets.values()
    ]
    df = pd.DataFrame.from_records(records, columns=FRAME_COLUMNS)
    return df.sort_values(["account_number", "symbol"]).reset_index(drop=True)

def portfolio_summary(accounts: Accounts) -> Dict[str, Any]:
    per_account = [
        {
            "account_number": a.account_number,
            "name": a.name,
            "assets": len(a.assets),
            "cost_basis": a.total_cost_basis(),
            "market_value": a.total_market_value(),
        }
        for a in accounts.values()
    ]
    return {
        "account_count": len(accounts),
        "accounts": per_account,
        "total_cost_basis": sum(a["cost_basis"] for a in per_account),
        "total_market_value": sum(a["market_value"] for a in per_account),
    }
