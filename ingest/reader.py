"""Source reader.

Streams records from a cost basis csv export through the decoder and the
aggregator. Any malformed record aborts the whole read.
"""
from __future__ import annotations

import csv
import logging
import os
from typing import Iterable, Iterator, List, Tuple, Union

from common.errors import FormatError, ParseError, SourceIOError
from engine.aggregator import Accounts, fold
from ingest.decoder import decode_holding
from ingest.schema import DEFAULT_SCHEMA, RowSchema

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def iter_rows(handle: Iterable[str]) -> Iterator[Tuple[int, List[str]]]:
    """Yield ``(line_number, fields)`` for every csv record in ``handle``.

    Blank lines produce no record.
    """
    reader = csv.reader(handle)
    for row in reader:
        if not row:
            continue
        yield reader.line_num, row


def aggregate_rows(rows: Iterable[Tuple[int, List[str]]], schema: RowSchema = DEFAULT_SCHEMA) -> Accounts:
    """Skip the header, then decode and fold every remaining record."""
    accounts: Accounts = {}
    min_columns = schema.min_columns

    first_row = True
    for line_number, row in rows:
        if first_row:
            first_row = False
            continue

        if len(row) < min_columns:
            raise FormatError(len(row), min_columns, line_number)

        logger.debug("The row values %s", row)

        try:
            holding = decode_holding(row, schema)
        except ParseError as e:
            raise e.at_line(line_number) from e.__cause__

        fold(accounts, row[schema.account_number], row[schema.account_name], holding)

    return accounts


def read_all(source: PathLike, schema: RowSchema = DEFAULT_SCHEMA) -> Accounts:
    """Read a cost basis export and aggregate it per account and symbol.

    Raises:
        SourceIOError: The file could not be opened or read.
        FormatError: A record has fewer columns than the schema requires.
        ParseError: A numeric field could not be parsed.
    """
    path = os.fspath(source)
    try:
        handle = open(path, "r", newline="", encoding="utf-8")
    except OSError as e:
        logger.error("failed to open the csv file %s: %s", path, e)
        raise SourceIOError("open", path, str(e)) from e

    with handle:
        try:
            return aggregate_rows(iter_rows(handle), schema)
        except (csv.Error, UnicodeDecodeError, OSError) as e:
            logger.error("error while reading csv file %s: %s", path, e)
            raise SourceIOError("read", path, str(e)) from e
