"""Command line entry point for outlook extraction."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from mdna_outlook.config.settings import DEFAULT_CIK, DEFAULT_FORM
from mdna_outlook.core.exceptions import OutlookError
from mdna_outlook.core.outlook_service import OutlookService
from mdna_outlook.utils.logger import setup_logging, get_logger, log_summary

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract the management outlook excerpt from an SEC 10-Q/10-K filing"
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument("-f", "--file", type=Path, help="Saved filing HTML document")
    source.add_argument("-c", "--cik", default=DEFAULT_CIK, help="Company CIK to fetch the latest filing for")
    parser.add_argument("--form", default=DEFAULT_FORM, help="Form type to look up (default: %(default)s)")
    parser.add_argument("-o", "--output", type=Path, help="Write the JSON report to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    parser.add_argument("--log-dir", type=Path, help="Directory for the error log")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run an extraction and print or save the JSON report."""
    args = build_parser().parse_args(argv)

    # Set up logging
    setup_logging(verbose=args.verbose, log_dir=args.log_dir)

    service = OutlookService()

    try:
        if args.file:
            if not args.file.exists():
                logger.error(f"Filing document does not exist: {args.file}")
                return 1

            result = service.outlook_from_file(args.file)
            if result is None:
                return 1
            report = result.to_dict()
        else:
            report = service.latest_outlook(args.cik, args.form).to_dict()

    except OutlookError as e:
        logger.error(f"Outlook extraction failed: {e}")
        return 1

    log_summary(report)

    if args.output:
        service.file_handler.write_report(args.output, report)
        logger.info(f"Saved report to: {args.output}")
    else:
        print(json.dumps(report, indent=2, ensure_ascii=False))

    return 0


if __name__ == "__main__":
    sys.exit(main())
