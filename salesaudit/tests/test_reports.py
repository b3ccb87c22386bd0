"""Tests for report calculations over the aggregation index."""

from __future__ import annotations

from decimal import Decimal

from salesaudit.domain.aggregation import aggregate
from salesaudit.domain.parsing import parse
from salesaudit.domain.records import ValidRecord
from salesaudit.domain.reports import (
    NOT_APPLICABLE,
    MonthGrowth,
    PopularItem,
    TopRevenueItem,
    growth_percent,
    month_to_month_growth,
    month_wise_totals,
    most_popular_per_month,
    top_revenue_per_month,
    total_sales,
)
from salesaudit.domain.validation import validate

HEADER = "Date,SKU,Unit Price,Quantity,Total Price"


def _valid(*rows: str) -> tuple[ValidRecord, ...]:
    return validate(parse([HEADER, *rows])).valid


def test_two_month_growth() -> None:
    valid = _valid(
        "2019-01-01,A,180,5,900",
        "2019-01-01,A,180,1,180",
        "2019-02-01,B,10,1,10",
    )
    index = aggregate(valid)

    popular = most_popular_per_month(index)
    assert popular["2019-01"] == PopularItem(
        item="A",
        total_quantity=Decimal("6"),
        min_orders=Decimal("1"),
        max_orders=Decimal("5"),
        avg_orders=Decimal("3"),
    )
    assert popular["2019-01"].avg_orders == 3.0

    growth = month_to_month_growth(index)
    assert growth["A"] == [MonthGrowth(from_month="2019-01", to_month="2019-02", growth=Decimal("-100"))]
    assert growth["B"] == [MonthGrowth(from_month="2019-01", to_month="2019-02", growth=NOT_APPLICABLE)]


def test_total_sales_equals_sum_of_month_totals() -> None:
    valid = _valid(
        "2019-03-01,A,1.25,4,5.00",
        "2019-01-01,A,180,5,900",
        "2019-01-09,B,0.1,3,0.3",
        "2019-02-01,B,10,1,10",
    )

    totals = month_wise_totals(valid)

    assert list(totals) == ["2019-01", "2019-02", "2019-03"]
    assert totals["2019-01"] == Decimal("900.3")
    assert total_sales(valid) == sum(totals.values()) == Decimal("915.30")


def test_totals_of_empty_input_are_zero() -> None:
    assert total_sales([]) == Decimal("0")
    assert month_wise_totals([]) == {}


def test_most_popular_tie_keeps_first_item_seen() -> None:
    index = aggregate(
        _valid(
            "2019-01-01,Late Tie,1,1,1",
            "2019-01-01,Early,1,4,4",
            "2019-01-02,Late Tie,1,3,3",
        )
    )

    assert most_popular_per_month(index)["2019-01"].item == "Late Tie"


def test_most_popular_order_stats() -> None:
    index = aggregate(
        _valid(
            "2019-01-01,A,2,3,6",
            "2019-01-02,A,2,1,2",
            "2019-01-03,A,2,4,8",
            "2019-01-04,B,2,7,14",
        )
    )

    p = most_popular_per_month(index)["2019-01"]

    assert p.item == "A"
    assert p.total_quantity == Decimal("8")
    assert (p.min_orders, p.max_orders) == (Decimal("1"), Decimal("4"))
    assert p.avg_orders == Decimal("8") / Decimal("3")


def test_top_revenue_per_month_with_tie_and_zero_revenue() -> None:
    index = aggregate(
        _valid(
            "2019-01-01,Freebie,0,3,0",
            "2019-02-01,Cone,5,2,10",
            "2019-02-02,Cup,10,1,10",
        )
    )

    top = top_revenue_per_month(index)

    assert top == {
        "2019-01": TopRevenueItem(item="Freebie", revenue=Decimal("0")),
        "2019-02": TopRevenueItem(item="Cone", revenue=Decimal("10")),
    }


def test_growth_covers_union_of_items_and_adjacent_pairs_only() -> None:
    index = aggregate(
        _valid(
            "2019-01-01,A,1,100,100",
            "2019-02-01,A,1,150,150",
            "2019-04-01,A,1,75,75",
            "2019-04-01,B,1,10,10",
        )
    )

    growth = month_to_month_growth(index)

    assert list(growth) == ["A", "B"]
    assert [(g.from_month, g.to_month) for g in growth["A"]] == [
        ("2019-01", "2019-02"),
        ("2019-02", "2019-04"),
    ]
    assert [g.growth for g in growth["A"]] == [Decimal("50"), Decimal("-50")]
    assert [g.growth for g in growth["B"]] == [NOT_APPLICABLE, NOT_APPLICABLE]


def test_growth_from_zero_revenue_is_not_applicable_even_to_zero() -> None:
    index = aggregate(
        _valid(
            "2019-01-01,Freebie,0,1,0",
            "2019-02-01,Freebie,0,2,0",
            "2019-03-01,Freebie,2,1,2",
        )
    )

    growth = month_to_month_growth(index)["Freebie"]

    assert [g.growth for g in growth] == [NOT_APPLICABLE, NOT_APPLICABLE]
    assert not any(g.is_applicable for g in growth)
    assert all(g.growth != 0 for g in growth)


def test_growth_with_single_month_has_no_pairs() -> None:
    index = aggregate(_valid("2019-01-01,A,1,1,1"))

    assert month_to_month_growth(index) == {"A": []}


def test_growth_percent() -> None:
    assert growth_percent(Decimal("800"), Decimal("320")) == Decimal("-60")
    assert growth_percent(Decimal("320"), Decimal("960")) == Decimal("200")
    assert growth_percent(Decimal("0"), Decimal("5")) is NOT_APPLICABLE
    assert str(NOT_APPLICABLE) == "N/A"


def test_reports_are_idempotent() -> None:
    valid = _valid(
        "2019-01-01,A,180,5,900",
        "2019-01-01,B,150,1,150",
        "2019-02-01,B,150,2,300",
    )

    first = aggregate(valid)
    second = aggregate(valid)

    assert most_popular_per_month(first) == most_popular_per_month(second)
    assert top_revenue_per_month(first) == top_revenue_per_month(second)
    assert month_to_month_growth(first) == month_to_month_growth(second)
    assert month_to_month_growth(first) == month_to_month_growth(first)
    assert total_sales(valid) == total_sales(valid)
