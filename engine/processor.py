"""Entry point used by the CLI: read, aggregate and report one export."""
from __future__ import annotations

import logging

from common.errors import HoldingsError
from engine.aggregator import Accounts
from ingest.reader import PathLike, read_all
from ingest.schema import DEFAULT_SCHEMA, RowSchema
from reporting.summary import asset_lines

logger = logging.getLogger(__name__)


def process(path: PathLike, schema: RowSchema = DEFAULT_SCHEMA) -> Accounts:
    """Aggregate the cost basis csv at ``path`` and log one line per asset."""
    logger.info("Processing Cost Basis CSV File at path: %s", path)
    try:
        accounts = read_all(path, schema)
    except HoldingsError as e:
        logger.error("unable to process the provided csv: %s", e)
        raise

    for line in asset_lines(accounts):
        logger.info("%s", line)
    return accounts
