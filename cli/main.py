"""Cost basis CLI.

Aggregates a brokerage cost basis export per account and symbol and logs
one line per asset. Optionally writes the aggregated table to a csv file.
"""
from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from common.config_loader import load_schema
from common.errors import HoldingsError
from engine.processor import process
from ingest.schema import DEFAULT_SCHEMA
from reporting.summary import holdings_frame, portfolio_summary

logger = logging.getLogger("cli.main")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_process(args) -> int:
    """Handle the default command: aggregate one csv export."""
    try:
        schema = load_schema(args.schema) if args.schema else DEFAULT_SCHEMA
        accounts = process(args.csvfile, schema)
    except HoldingsError as e:
        logger.error("%s", e)
        return 1

    summary = portfolio_summary(accounts)
    logger.info(
        "Processed %d account(s): cost basis $%s, market value $%s",
        summary["account_count"],
        f"{summary['total_cost_basis']:,.2f}",
        f"{summary['total_market_value']:,.2f}",
    )

    if args.output:
        try:
            holdings_frame(accounts).to_csv(args.output, index=False)
        except OSError as e:
            logger.error("unable to write %s: %s", args.output, e)
            return 1
        logger.info("Wrote aggregated holdings to %s", args.output)

    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cli.main",
        description="Aggregate a brokerage cost basis csv per account and symbol",
    )
    p.add_argument("--csvfile", default="mycsv.csv", help="Betterment cost basis csv")
    p.add_argument("--schema", default=None, help="YAML file describing the column layout")
    p.add_argument("--output", default=None, help="Write the aggregated holdings to this csv file")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning", "error"],
        default="info",
        help="Logging verbosity",
    )
    p.set_defaults(func=cmd_process)
    return p


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    raise SystemExit(args.func(args))


if __name__ == "__main__":
    main()
