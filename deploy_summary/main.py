#!/usr/bin/env python3
import argparse
import logging
import sys
from typing import List, Optional

from .core.summarizer import (
    format_json_report,
    format_report,
    parse_transactions,
    summarize_transactions,
)
from .utils.config import LOG_LEVELS, load_settings
from .utils.exceptions import DeploySummaryError, UsageError
from .utils.log_loader import load_transaction_log
from .utils.logging import setup_logging

LOG = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deploy-summary",
        description="Summarize contract deployments in a transaction log, "
                    "marking each contract as a Diamond or a Facet"
    )
    # Optional here so a missing path exits 1 instead of argparse's 2
    parser.add_argument("file_path", nargs="?", default=None,
                       help="Path to the JSON transaction log")
    parser.add_argument("--json", action="store_true", dest="as_json",
                       help="Print the summary as JSON")
    parser.add_argument("--checksum", action="store_true", default=None,
                       help="Print addresses in EIP-55 checksum form")
    parser.add_argument("--log-level", default=None,
                       type=str.upper, choices=LOG_LEVELS,
                       help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", default=None,
                       help="Path to log file")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the process exit code"""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(
            log_level=args.log_level,
            log_file=args.log_file,
            checksum=args.checksum,
        )
        setup_logging(settings.log_level, settings.log_file)

        if not args.file_path:
            raise UsageError("No file path provided.")

        records = load_transaction_log(args.file_path)
        transactions = parse_transactions(records, args.file_path)
        summaries = summarize_transactions(transactions)

        if args.as_json:
            report = format_json_report(summaries, checksum=settings.checksum)
        else:
            report = format_report(summaries, checksum=settings.checksum)
    except DeploySummaryError as e:
        LOG.debug(f"Failed with {e.to_dict()}")
        print(e.message, file=sys.stderr)
        return 1

    sys.stdout.write(report)
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
