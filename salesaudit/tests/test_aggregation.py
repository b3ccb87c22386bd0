"""Tests for the month x item aggregation index."""

from __future__ import annotations

from decimal import Decimal

import pytest

from salesaudit.domain.aggregation import AggregationIndex, aggregate
from salesaudit.domain.parsing import parse
from salesaudit.domain.validation import validate

HEADER = "Date,SKU,Unit Price,Quantity,Total Price"


def _index(*rows: str) -> AggregationIndex:
    return aggregate(validate(parse([HEADER, *rows])).valid)


def test_entries_accumulate_quantity_revenue_and_orders_in_input_order() -> None:
    index = _index(
        "2019-01-01,A,180,5,900",
        "2019-01-15,B,10,2,20",
        "2019-01-20,A,180,1,180",
        "2019-01-31,A,180,3,540",
    )

    entry = index.entry("2019-01", "A")
    assert entry is not None
    assert entry.total_quantity == Decimal("9")
    assert entry.total_revenue == Decimal("1620")
    assert entry.orders == (Decimal("5"), Decimal("1"), Decimal("3"))
    assert sum(entry.orders) == entry.total_quantity


def test_each_record_updates_exactly_one_month_item_pair() -> None:
    index = _index(
        "2019-01-01,A,1,1,1",
        "2019-02-01,A,1,2,2",
        "2019-02-01,B,1,3,3",
    )

    assert set(index) == {"2019-01", "2019-02"}
    assert set(index["2019-01"]) == {"A"}
    assert set(index["2019-02"]) == {"A", "B"}
    assert index["2019-02"]["A"].orders == (Decimal("2"),)


def test_untouched_pairs_are_absent() -> None:
    index = _index("2019-01-01,A,1,1,1", "2019-02-01,B,1,1,1")

    assert index.entry("2019-01", "B") is None
    assert index.entry("2019-03", "A") is None
    assert "B" not in index["2019-01"]


def test_sorted_helpers_order_months_and_union_of_items() -> None:
    index = _index(
        "2019-03-01,Zeta,1,1,1",
        "2019-01-01,Beta,1,1,1",
        "2019-02-01,Alpha,1,1,1",
        "2019-01-05,Zeta,1,1,1",
    )

    assert list(index) == ["2019-03", "2019-01", "2019-02"]
    assert index.sorted_months() == ["2019-01", "2019-02", "2019-03"]
    assert index.sorted_items() == ["Alpha", "Beta", "Zeta"]


def test_item_order_follows_first_appearance() -> None:
    index = _index("2019-01-01,B,1,1,1", "2019-01-02,A,1,1,1", "2019-01-03,B,1,1,1")

    assert list(index["2019-01"]) == ["B", "A"]


def test_index_is_read_only() -> None:
    index = _index("2019-01-01,A,1,1,1")

    with pytest.raises(TypeError):
        index["2019-01"]["B"] = index["2019-01"]["A"]  # type: ignore[index]
    with pytest.raises(AttributeError):
        index["2019-01"]["A"].total_revenue = Decimal("0")  # type: ignore[misc]


def test_empty_input_builds_empty_index() -> None:
    index = aggregate([])

    assert len(index) == 0
    assert index.sorted_months() == []
    assert index.sorted_items() == []
