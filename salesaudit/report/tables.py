"""Build pandas tables from sales report values.

Money and quantity columns are converted to float so the frames behave like
any other numeric table; growth that is not applicable becomes NaN.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal

import pandas as pd

from salesaudit.domain.records import InvalidRecord
from salesaudit.domain.reports import MonthGrowth, PopularItem, TopRevenueItem

INVALID_COLUMNS = ["row_number", "raw", "reasons"]
MONTH_TOTAL_COLUMNS = ["month", "total_sales"]
POPULAR_COLUMNS = ["month", "item", "total_quantity", "min_orders", "max_orders", "avg_orders"]
TOP_REVENUE_COLUMNS = ["month", "item", "revenue"]
GROWTH_COLUMNS = ["item", "from_month", "to_month", "growth_percent"]


def invalid_records_frame(invalid: Sequence[InvalidRecord]) -> pd.DataFrame:
    """One row per rejected record; reasons joined with '; '."""
    rows = [
        {"row_number": record.row_number, "raw": record.raw, "reasons": "; ".join(record.reasons)}
        for record in invalid
    ]
    return pd.DataFrame(rows, columns=INVALID_COLUMNS)


def month_totals_frame(totals: Mapping[str, Decimal]) -> pd.DataFrame:
    rows = [{"month": month, "total_sales": float(totals[month])} for month in sorted(totals)]
    return pd.DataFrame(rows, columns=MONTH_TOTAL_COLUMNS)


def popular_items_frame(popular: Mapping[str, PopularItem]) -> pd.DataFrame:
    rows = []
    for month in sorted(popular):
        p = popular[month]
        rows.append(
            {
                "month": month,
                "item": p.item,
                "total_quantity": float(p.total_quantity),
                "min_orders": float(p.min_orders),
                "max_orders": float(p.max_orders),
                "avg_orders": float(p.avg_orders),
            }
        )
    return pd.DataFrame(rows, columns=POPULAR_COLUMNS)


def top_revenue_frame(top: Mapping[str, TopRevenueItem]) -> pd.DataFrame:
    rows = [{"month": month, "item": top[month].item, "revenue": float(top[month].revenue)} for month in sorted(top)]
    return pd.DataFrame(rows, columns=TOP_REVENUE_COLUMNS)


def growth_frame(growth: Mapping[str, Sequence[MonthGrowth]]) -> pd.DataFrame:
    """Long-format growth table: one row per (item, adjacent month pair)."""
    rows = []
    for item in sorted(growth):
        for g in growth[item]:
            rows.append(
                {
                    "item": item,
                    "from_month": g.from_month,
                    "to_month": g.to_month,
                    "growth_percent": float(g.growth) if isinstance(g.growth, Decimal) else float("nan"),
                }
            )
    frame = pd.DataFrame(rows, columns=GROWTH_COLUMNS)
    frame["growth_percent"] = frame["growth_percent"].astype("float64")
    return frame
