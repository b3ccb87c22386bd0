"""Core sales log pipeline: parse, validate, aggregate, report.

Everything here is pure: no file access, no printing, no runtime imports.

Usage:
    from salesaudit.domain import parse, validate, aggregate, month_to_month_growth

    result = validate(parse(lines))
    index = aggregate(result.valid)
    growth = month_to_month_growth(index)
"""

from salesaudit.domain.aggregation import AggregationIndex, MonthItemEntry, aggregate
from salesaudit.domain.parsing import parse, parse_number, split_raw_rows, to_candidate
from salesaudit.domain.records import (
    CandidateRecord,
    InvalidRecord,
    NumericField,
    RawRow,
    Unparsed,
    ValidationResult,
    ValidRecord,
    month_key,
)
from salesaudit.domain.reports import (
    NOT_APPLICABLE,
    Growth,
    MonthGrowth,
    NotApplicable,
    PopularItem,
    TopRevenueItem,
    month_to_month_growth,
    month_wise_totals,
    most_popular_per_month,
    top_revenue_per_month,
    total_sales,
)
from salesaudit.domain.validation import ALL_REASONS, InvalidReason, check_record, is_valid_date, validate

__all__ = [
    # Models
    "RawRow",
    "CandidateRecord",
    "ValidRecord",
    "InvalidRecord",
    "ValidationResult",
    "Unparsed",
    "NumericField",
    "MonthItemEntry",
    "AggregationIndex",
    "PopularItem",
    "TopRevenueItem",
    "MonthGrowth",
    "NotApplicable",
    "NOT_APPLICABLE",
    "Growth",
    "InvalidReason",
    "ALL_REASONS",
    # Pipeline
    "split_raw_rows",
    "to_candidate",
    "parse",
    "parse_number",
    "check_record",
    "is_valid_date",
    "validate",
    "aggregate",
    "month_key",
    # Reports
    "total_sales",
    "month_wise_totals",
    "most_popular_per_month",
    "top_revenue_per_month",
    "month_to_month_growth",
]
