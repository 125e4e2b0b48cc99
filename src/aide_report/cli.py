"""Command-line entry point for the attack-origin report.

Usage::

    python -m aide_report
    python -m aide_report --output-dir /srv/reports
    aide-report --identity analyst@example.org

Credentials come from ``OPENSEARCH_USR`` / ``OPENSEARCH_PWD``.
"""

from __future__ import annotations

import argparse
import logging
import time
from dataclasses import replace
from typing import List, Optional

from .config import get_settings, validate_settings
from .errors import AideReportError, DecodeError, ReportError, SearchError
from .pipeline.runner import run_report

logger = logging.getLogger(__name__)

_FAILED_OPERATION = {
    SearchError: "search",
    DecodeError: "decode",
    ReportError: "report",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build the AIDE attack-origin spreadsheet for the last 12 hours"
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        default=None,
        help="Directory for the .xlsx report (default: AIDE_REPORT_OUTPUT_DIR or .)",
    )
    parser.add_argument(
        "--identity",
        default=None,
        help="Name recorded in the report header (default: OPENSEARCH_USR)",
    )
    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.strip().upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = get_settings()
        if args.output_dir:
            settings = replace(settings, report_output_dir=args.output_dir)
        if args.identity:
            settings = replace(settings, report_identity=args.identity)
        validate_settings(settings)
    except ValueError as exc:
        _configure_logging("INFO")
        logger.error("configuration failed: %s", exc)
        return 1

    _configure_logging(settings.log_level)

    t0 = time.monotonic()
    try:
        result = run_report(settings)
    except AideReportError as exc:
        operation = _FAILED_OPERATION.get(type(exc), "report run")
        logger.error("%s failed: %s", operation, exc)
        return 1

    logger.info(
        "Report finished in %.1fs: %s", time.monotonic() - t0, result.path
    )
    print("File saved.")
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
