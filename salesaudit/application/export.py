"""Write sales report tables to CSV files."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from salesaudit.application.reporting import SalesReport
from salesaudit.report.tables import (
    growth_frame,
    invalid_records_frame,
    month_totals_frame,
    popular_items_frame,
    top_revenue_frame,
)
from salesaudit.runtime import get_logger

logger = get_logger(__name__)

NA_MARKER = "N/A"


def report_tables(report: SalesReport) -> dict[str, pd.DataFrame]:
    """Output file stem -> table, in a stable order."""
    return {
        "validation_issues": invalid_records_frame(report.validation.invalid),
        "month_totals": month_totals_frame(report.month_totals),
        "most_popular": popular_items_frame(report.most_popular),
        "top_revenue": top_revenue_frame(report.top_revenue),
        "growth": growth_frame(report.growth),
    }


def export_report_tables(report: SalesReport, out_dir: Path) -> list[Path]:
    """Write each report table as ``<out_dir>/<name>.csv`` and return the paths."""
    out_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for name, frame in report_tables(report).items():
        path = out_dir / f"{name}.csv"
        frame.to_csv(path, index=False, na_rep=NA_MARKER)
        logger.debug("Wrote %d rows to %s", len(frame), path)
        written.append(path)

    logger.info("Exported %d report tables to %s", len(written), out_dir)
    return written
