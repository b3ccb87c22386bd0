#!/usr/bin/env python3
"""Unified command-line interface for salesaudit.

Usage:
    salesaudit report [csv_file] [--sample] [--config PATH] [-v]
    salesaudit validate [csv_file] [--sample] [--config PATH] [-v]
    salesaudit export [csv_file] [--sample] [--out DIR] [--config PATH] [-v]
"""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from salesaudit.runtime import get_logger, get_paths, set_log_level

if TYPE_CHECKING:
    from salesaudit.application.reporting import SalesReportResult

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INVALID_RECORDS = 2


def _print_error(error: str) -> None:
    for line in error.splitlines():
        print(line)


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("csv_file", nargs="?", help="Sales CSV file (Date,SKU,Unit Price,Quantity,Total Price)")
    parser.add_argument("--sample", action="store_true", help="Use the bundled sample sales log")
    parser.add_argument("--config", default=None, help="Report settings TOML (default: ./salesaudit.toml)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")


def _load(args: argparse.Namespace) -> "SalesReportResult":
    from salesaudit.application.reporting import SalesReportRequest, run_sales_report

    return run_sales_report(
        SalesReportRequest(
            csv_file=args.csv_file,
            use_sample=args.sample,
            config_path=args.config,
        )
    )


def _cmd_report(args: argparse.Namespace) -> int:
    from salesaudit.report.formatter import format_report

    result = _load(args)
    if result.status == "error":
        assert result.error is not None
        _print_error(result.error)
        return EXIT_ERROR

    assert result.report is not None and result.settings is not None
    report = result.report
    print(
        format_report(
            invalid=report.validation.invalid,
            total=report.total_sales,
            month_totals=report.month_totals,
            popular=report.most_popular,
            top_revenue=report.top_revenue,
            growth=report.growth,
            growth_places=result.settings.growth_places,
            average_places=result.settings.average_places,
        )
    )
    return EXIT_OK


def _cmd_validate(args: argparse.Namespace) -> int:
    from salesaudit.report.formatter import format_validation_issues

    result = _load(args)
    if result.status == "error":
        assert result.error is not None
        _print_error(result.error)
        return EXIT_ERROR

    assert result.report is not None
    invalid = result.report.validation.invalid
    print("\n".join(format_validation_issues(invalid)))
    return EXIT_INVALID_RECORDS if invalid else EXIT_OK


def _cmd_export(args: argparse.Namespace) -> int:
    from salesaudit.application.export import export_report_tables

    result = _load(args)
    if result.status == "error":
        assert result.error is not None
        _print_error(result.error)
        return EXIT_ERROR

    assert result.report is not None and result.settings is not None
    out_dir = Path(args.out) if args.out else get_paths().export_dir(result.settings.export_dir)
    try:
        written = export_report_tables(result.report, out_dir)
    except OSError as exc:
        logger.error("Could not write report tables to %s: %s", out_dir, exc)
        return EXIT_ERROR

    for path in written:
        print(path)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="salesaudit",
        description="Validate point-of-sale logs and report monthly sales",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  report [csv_file]          Print validation issues and every sales report
  validate [csv_file]        Print validation issues only (exit 2 if any)
  export [csv_file]          Write report tables as CSV files

Pass --sample instead of csv_file to run against the bundled sample log.
""",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    report_parser = subparsers.add_parser("report", help="Print all sales reports")
    _add_source_arguments(report_parser)

    validate_parser = subparsers.add_parser("validate", help="Print validation issues only")
    _add_source_arguments(validate_parser)

    export_parser = subparsers.add_parser("export", help="Write report tables as CSV files")
    _add_source_arguments(export_parser)
    export_parser.add_argument("--out", default=None, help="Output directory (default: export_dir from settings)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_ERROR

    if args.verbose:
        set_log_level(logging.DEBUG)

    if args.csv_file is None and not args.sample:
        print("Provide a CSV file or pass --sample.")
        return EXIT_ERROR

    if args.command == "report":
        return _cmd_report(args)
    if args.command == "validate":
        return _cmd_validate(args)
    if args.command == "export":
        return _cmd_export(args)

    return EXIT_ERROR


if __name__ == "__main__":
    raise SystemExit(main())
