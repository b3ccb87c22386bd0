"""Render sales report values as plain-text console sections."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal

from salesaudit.domain.records import InvalidRecord
from salesaudit.domain.reports import MonthGrowth, PopularItem, TopRevenueItem


def format_amount(value: Decimal) -> str:
    """Plain decimal text without exponent notation (``1E+2`` -> ``100``)."""
    return f"{value:f}"


def _section(title: str, body: list[str]) -> list[str]:
    return [f"===== {title} =====", *body, ""]


def format_validation_issues(invalid: Sequence[InvalidRecord]) -> list[str]:
    body: list[str] = []
    if not invalid:
        body.append("No issues found.")
    for record in invalid:
        body.append(f"Row {record.row_number}: {record.raw}")
        body.extend(f"  - {reason}" for reason in record.reasons)
    return _section("DATA VALIDATION ISSUES", body)


def format_total_sales(total: Decimal) -> list[str]:
    return _section("TOTAL SALES", [f"Total Sales: {format_amount(total)}"])


def format_month_totals(totals: Mapping[str, Decimal]) -> list[str]:
    body = [f"{month}: {format_amount(totals[month])}" for month in sorted(totals)]
    return _section("MONTH-WISE TOTALS", body)


def format_most_popular(popular: Mapping[str, PopularItem], average_places: int = 2) -> list[str]:
    body: list[str] = []
    for month in sorted(popular):
        p = popular[month]
        body.append(f"{month}: {p.item} (Qty: {format_amount(p.total_quantity)})")
        body.append(
            f"  Min Orders: {format_amount(p.min_orders)}"
            f" | Max Orders: {format_amount(p.max_orders)}"
            f" | Avg Orders: {p.avg_orders:.{average_places}f}"
        )
    return _section("MOST POPULAR ITEM PER MONTH", body)


def format_top_revenue(top: Mapping[str, TopRevenueItem]) -> list[str]:
    body = [f"{month}: {top[month].item} (Revenue: {format_amount(top[month].revenue)})" for month in sorted(top)]
    return _section("TOP REVENUE ITEM PER MONTH", body)


def format_growth_value(entry: MonthGrowth, growth_places: int = 2) -> str:
    if not isinstance(entry.growth, Decimal):
        return str(entry.growth)
    return f"{entry.growth:.{growth_places}f}%"


def format_growth(growth: Mapping[str, Sequence[MonthGrowth]], growth_places: int = 2) -> list[str]:
    body: list[str] = []
    for item in sorted(growth):
        body.append(f"Item: {item}")
        body.extend(
            f"  {g.from_month} -> {g.to_month}: {format_growth_value(g, growth_places)}" for g in growth[item]
        )
    return _section("MONTH-TO-MONTH GROWTH PER ITEM", body)


def format_report(
    *,
    invalid: Sequence[InvalidRecord],
    total: Decimal,
    month_totals: Mapping[str, Decimal],
    popular: Mapping[str, PopularItem],
    top_revenue: Mapping[str, TopRevenueItem],
    growth: Mapping[str, Sequence[MonthGrowth]],
    growth_places: int = 2,
    average_places: int = 2,
) -> str:
    """Render every report section, in console order, as one string."""
    lines = [
        *format_validation_issues(invalid),
        *format_total_sales(total),
        *format_month_totals(month_totals),
        *format_most_popular(popular, average_places=average_places),
        *format_top_revenue(top_revenue),
        *format_growth(growth, growth_places=growth_places),
    ]
    return "\n".join(lines)
