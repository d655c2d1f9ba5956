"""Row decoder.

Turns one raw csv record into a Holding. Decoding is all-or-nothing: the
first numeric field that fails to parse aborts the row.
"""
from __future__ import annotations

import logging
from typing import Sequence

from common.errors import ParseError
from ingest.schema import DEFAULT_SCHEMA, RowSchema
from portfolio.holding import Holding

logger = logging.getLogger(__name__)

# Checked in this order; later fields are skipped once one fails.
NUMERIC_FIELDS = ("shares", "cost_basis", "market_value")


def clean_number_of_commas(number: str) -> str:
    """Strip thousands separators, e.g. ``"1,304"`` -> ``"1304"``."""
    return number.replace(",", "")


def _parse_float(row: Sequence[str], schema: RowSchema, field: str) -> float:
    raw = row[getattr(schema, field)]
    try:
        return float(clean_number_of_commas(raw))
    except ValueError as e:
        err = ParseError(field, raw)
        logger.error("%s", err)
        raise err from e


def decode_holding(row: Sequence[str], schema: RowSchema = DEFAULT_SCHEMA) -> Holding:
    """Decode a record into a Holding.

    Args:
        row: Record fields; must have at least ``schema.min_columns`` entries.
        schema: Column layout of the record.

    Returns:
        The decoded Holding.

    Raises:
        ParseError: If shares, cost basis or market value is not a number.
    """
    values = {field: _parse_float(row, schema, field) for field in NUMERIC_FIELDS}
    return Holding(symbol=row[schema.symbol], **values)
