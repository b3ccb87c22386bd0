"""Month x item aggregation index built from valid sales records."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType

from salesaudit.domain.records import ValidRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthItemEntry:
    """Totals for one item within one month."""

    total_quantity: Decimal
    total_revenue: Decimal
    # Individual order quantities in input order.
    orders: tuple[Decimal, ...]


@dataclass
class _EntryBuilder:
    total_quantity: Decimal = Decimal("0")
    total_revenue: Decimal = Decimal("0")
    orders: list[Decimal] = field(default_factory=list)

    def add(self, record: ValidRecord) -> None:
        self.total_quantity += record.quantity
        self.total_revenue += record.total_price
        self.orders.append(record.quantity)

    def freeze(self) -> MonthItemEntry:
        return MonthItemEntry(
            total_quantity=self.total_quantity,
            total_revenue=self.total_revenue,
            orders=tuple(self.orders),
        )


class AggregationIndex(Mapping[str, Mapping[str, MonthItemEntry]]):
    """Read-only two-level mapping: month key -> item -> MonthItemEntry.

    Iteration follows first appearance in the input for both levels; use
    ``sorted_months()`` and ``sorted_items()`` wherever order matters.
    """

    def __init__(self, months: Mapping[str, Mapping[str, MonthItemEntry]]) -> None:
        self._months: Mapping[str, Mapping[str, MonthItemEntry]] = MappingProxyType(
            {month: MappingProxyType(dict(items)) for month, items in months.items()}
        )

    def __getitem__(self, month: str) -> Mapping[str, MonthItemEntry]:
        return self._months[month]

    def __iter__(self) -> Iterator[str]:
        return iter(self._months)

    def __len__(self) -> int:
        return len(self._months)

    def __repr__(self) -> str:
        return f"AggregationIndex({dict((m, dict(items)) for m, items in self._months.items())!r})"

    def entry(self, month: str, item: str) -> MonthItemEntry | None:
        """Return the entry for (month, item), or None when the item did not sell that month."""
        items = self._months.get(month)
        if items is None:
            return None
        return items.get(item)

    def sorted_months(self) -> list[str]:
        """Month keys in ascending (chronological) order."""
        return sorted(self._months)

    def sorted_items(self) -> list[str]:
        """Every item seen in any month, ascending."""
        items: set[str] = set()
        for month_items in self._months.values():
            items.update(month_items)
        return sorted(items)


def aggregate(records: Iterable[ValidRecord]) -> AggregationIndex:
    """Fold valid records into an AggregationIndex in a single pass."""
    builders: dict[str, dict[str, _EntryBuilder]] = {}
    count = 0

    for record in records:
        month_items = builders.setdefault(record.month, {})
        builder = month_items.get(record.item)
        if builder is None:
            builder = month_items[record.item] = _EntryBuilder()
        builder.add(record)
        count += 1

    index = AggregationIndex(
        {month: {item: builder.freeze() for item, builder in items.items()} for month, items in builders.items()}
    )
    logger.debug("Aggregated %d records into %d months", count, len(index))
    return index
