"""Aggregation of decoded lots into per-account, per-symbol totals."""
from __future__ import annotations

import logging
from typing import Dict

import numpy as np

from accounts.account import AccountAggregate
from portfolio.asset import AssetAggregate
from portfolio.holding import Holding

logger = logging.getLogger(__name__)

Accounts = Dict[str, AccountAggregate]


def cost_basis_per_share(total_cost_basis: float, total_shares: float) -> float:
    """Weighted average cost per share.

    Zero shares yields inf or nan (IEEE-754) rather than an exception.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        ratio = np.float64(total_cost_basis) / np.float64(total_shares)
    return float(ratio)


def get_or_create_account(state: Accounts, account_number: str, account_name: str) -> AccountAggregate:
    account = state.get(account_number)
    if account is None:
        account = AccountAggregate(name=account_name, account_number=account_number)
        state[account_number] = account
        logger.debug("Account %s not found, adding it", account_number)
    return account


def fold(state: Accounts, account_number: str, account_name: str, holding: Holding) -> None:
    """Fold one holding into the running totals of its account and symbol.

    The account name is only used when the account is first seen; later
    rows never overwrite it.
    """
    account = get_or_create_account(state, account_number, account_name)

    asset = account.assets.get(holding.symbol)
    if asset is None:
        asset = AssetAggregate(symbol=holding.symbol)
        logger.debug("Asset %s not found in account %s, adding it", holding.symbol, account_number)

    asset.total_shares += holding.shares
    asset.total_cost_basis += holding.cost_basis
    asset.total_market_value += holding.market_value
    asset.cost_basis_per_share = cost_basis_per_share(asset.total_cost_basis, asset.total_shares)
    if asset.total_shares == 0:
        logger.warning(
            "Account %s holds zero shares of %s; cost basis per share is %s",
            account_number,
            holding.symbol,
            asset.cost_basis_per_share,
        )

    account.assets[holding.symbol] = asset
