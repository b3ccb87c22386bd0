"""Sales report workflows."""

from salesaudit.application.export import export_report_tables, report_tables
from salesaudit.application.reporting import (
    SalesReport,
    SalesReportRequest,
    SalesReportResult,
    build_sales_report,
    run_sales_report,
)

__all__ = [
    "SalesReport",
    "SalesReportRequest",
    "SalesReportResult",
    "build_sales_report",
    "run_sales_report",
    "export_report_tables",
    "report_tables",
]
