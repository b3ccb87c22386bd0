"""Presentation of sales report values: console text and pandas tables.

Usage:
    from salesaudit.report import format_report, growth_frame
"""

from salesaudit.report.formatter import (
    format_amount,
    format_growth,
    format_month_totals,
    format_most_popular,
    format_report,
    format_top_revenue,
    format_total_sales,
    format_validation_issues,
)
from salesaudit.report.tables import (
    growth_frame,
    invalid_records_frame,
    month_totals_frame,
    popular_items_frame,
    top_revenue_frame,
)

__all__ = [
    # Text
    "format_amount",
    "format_report",
    "format_validation_issues",
    "format_total_sales",
    "format_month_totals",
    "format_most_popular",
    "format_top_revenue",
    "format_growth",
    # Tables
    "invalid_records_frame",
    "month_totals_frame",
    "popular_items_frame",
    "top_revenue_frame",
    "growth_frame",
]
