"""
Command line entry point.

    pnl-stats https://web.sensibull.com/verified-pnl/<username>
    pnl-stats <username> --json
"""

import argparse
import json
import logging
import sys
from decimal import Decimal
from typing import List, Optional

from pnl_stats.config import settings
from pnl_stats.core.logging import setup_logging
from pnl_stats.infrastructure.sensibull_client import SensibullClient, extract_username
from pnl_stats.reports.formatters import format_pnl_report
from pnl_stats.reports.pnl_report import generate_pnl_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FETCH_ERROR = 1
EXIT_USAGE_ERROR = 2


def _json_default(value):
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"{type(value).__name__} is not JSON serializable")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pnl-stats",
        description="Summarise a public verified P&L history by month, year, weekday and day of month",
    )
    parser.add_argument("profile_url", help="Public verified P&L URL or bare username")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL, help="Logging level (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None, client: Optional[SensibullClient] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        username = extract_username(args.profile_url)
    except ValueError as exc:
        logger.error("%s", exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    result = (client or SensibullClient()).fetch_history(username)
    if not result.ok:
        print(f"Error: could not fetch P&L history for {username}: {result.error}", file=sys.stderr)
        return EXIT_FETCH_ERROR

    report = generate_pnl_report(result.history)
    if args.json:
        print(json.dumps(report, indent=2, ensure_ascii=False, default=_json_default))
    else:
        print(format_pnl_report(report))
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
