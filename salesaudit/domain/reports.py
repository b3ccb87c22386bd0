"""Pure report calculations over valid records and the aggregation index."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from salesaudit.domain.aggregation import AggregationIndex, MonthItemEntry
from salesaudit.domain.records import ValidRecord


@dataclass(frozen=True)
class NotApplicable:
    """Growth marker for a period whose previous revenue was zero."""

    def __str__(self) -> str:
        return "N/A"


NOT_APPLICABLE = NotApplicable()

# Percentage growth, or NOT_APPLICABLE when the base period had no revenue.
Growth = Decimal | NotApplicable


@dataclass(frozen=True)
class PopularItem:
    """Best-selling item of a month by quantity, with order size stats."""

    item: str
    total_quantity: Decimal
    min_orders: Decimal
    max_orders: Decimal
    avg_orders: Decimal


@dataclass(frozen=True)
class TopRevenueItem:
    """Highest-revenue item of a month."""

    item: str
    revenue: Decimal


@dataclass(frozen=True)
class MonthGrowth:
    """Revenue growth of one item between two adjacent months."""

    from_month: str
    to_month: str
    growth: Growth

    @property
    def is_applicable(self) -> bool:
        return not isinstance(self.growth, NotApplicable)


def total_sales(records: Iterable[ValidRecord]) -> Decimal:
    """Sum of line totals across all valid records."""
    return sum((record.total_price for record in records), Decimal("0"))


def month_wise_totals(records: Iterable[ValidRecord]) -> dict[str, Decimal]:
    """Line totals per month, keyed in ascending month order."""
    totals: dict[str, Decimal] = {}
    for record in records:
        totals[record.month] = totals.get(record.month, Decimal("0")) + record.total_price
    return {month: totals[month] for month in sorted(totals)}


def _leader(
    items: Mapping[str, MonthItemEntry],
    metric: Callable[[MonthItemEntry], Decimal],
) -> tuple[str, MonthItemEntry]:
    # Strictly greater replaces the leader, so ties keep the earliest item.
    best: tuple[str, MonthItemEntry] | None = None
    for item, entry in items.items():
        if best is None or metric(entry) > metric(best[1]):
            best = (item, entry)
    assert best is not None, "months in the index always have at least one item"
    return best


def most_popular_per_month(index: AggregationIndex) -> dict[str, PopularItem]:
    """Per month, the item with the highest total quantity plus its order stats."""
    result: dict[str, PopularItem] = {}
    for month in index.sorted_months():
        item, entry = _leader(index[month], lambda e: e.total_quantity)
        orders = entry.orders
        result[month] = PopularItem(
            item=item,
            total_quantity=entry.total_quantity,
            min_orders=min(orders),
            max_orders=max(orders),
            avg_orders=sum(orders, Decimal("0")) / len(orders),
        )
    return result


def top_revenue_per_month(index: AggregationIndex) -> dict[str, TopRevenueItem]:
    """Per month, the item with the highest total revenue."""
    result: dict[str, TopRevenueItem] = {}
    for month in index.sorted_months():
        item, entry = _leader(index[month], lambda e: e.total_revenue)
        result[month] = TopRevenueItem(item=item, revenue=entry.total_revenue)
    return result


def growth_percent(previous: Decimal, current: Decimal) -> Growth:
    """Percentage change from previous to current; N/A when previous is zero."""
    if previous == 0:
        return NOT_APPLICABLE
    return (current - previous) / previous * 100


def _revenue(index: AggregationIndex, month: str, item: str) -> Decimal:
    entry = index.entry(month, item)
    return entry.total_revenue if entry is not None else Decimal("0")


def month_to_month_growth(index: AggregationIndex) -> dict[str, list[MonthGrowth]]:
    """
    Revenue growth per item for every pair of adjacent months in the data.

    Items missing from a month count as zero revenue there. Only months that
    appear in the index are paired; gaps in the calendar are not filled in.
    """
    months = index.sorted_months()
    pairs = list(zip(months, months[1:]))
    result: dict[str, list[MonthGrowth]] = {}

    for item in index.sorted_items():
        result[item] = [
            MonthGrowth(
                from_month=prev_month,
                to_month=curr_month,
                growth=growth_percent(_revenue(index, prev_month, item), _revenue(index, curr_month, item)),
            )
            for prev_month, curr_month in pairs
        ]

    return result
