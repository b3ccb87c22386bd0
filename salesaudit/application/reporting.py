"""Sales report workflow: load a sales log, run the pipeline, collect reports."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

from salesaudit.domain import (
    AggregationIndex,
    MonthGrowth,
    PopularItem,
    TopRevenueItem,
    ValidationResult,
    aggregate,
    month_to_month_growth,
    month_wise_totals,
    most_popular_per_month,
    parse,
    top_revenue_per_month,
    total_sales,
    validate,
)
from salesaudit.runtime import (
    ReportSettings,
    get_logger,
    load_report_settings,
    read_sales_lines,
    read_sample_lines,
)

logger = get_logger(__name__)

SalesReportStatus = Literal["ok", "error"]


@dataclass(frozen=True)
class SalesReport:
    """Every value the pipeline produces for one sales log."""

    candidate_count: int
    validation: ValidationResult
    index: AggregationIndex
    total_sales: Decimal
    month_totals: dict[str, Decimal]
    most_popular: dict[str, PopularItem]
    top_revenue: dict[str, TopRevenueItem]
    growth: dict[str, list[MonthGrowth]]


@dataclass(frozen=True)
class SalesReportRequest:
    """Inputs for the sales report workflow."""

    csv_file: str | None = None
    use_sample: bool = False
    config_path: str | None = None


@dataclass(frozen=True)
class SalesReportResult:
    """Outcome for the sales report workflow."""

    status: SalesReportStatus
    report: SalesReport | None = None
    settings: ReportSettings | None = None
    source: str | None = None
    error: str | None = None


def build_sales_report(lines: Iterable[str], delimiter: str = ",") -> SalesReport:
    """Run parse -> validate -> aggregate -> reports over raw lines."""
    candidates = parse(lines, delimiter=delimiter)
    validation = validate(candidates)
    index = aggregate(validation.valid)

    return SalesReport(
        candidate_count=len(candidates),
        validation=validation,
        index=index,
        total_sales=total_sales(validation.valid),
        month_totals=month_wise_totals(validation.valid),
        most_popular=most_popular_per_month(index),
        top_revenue=top_revenue_per_month(index),
        growth=month_to_month_growth(index),
    )


def run_sales_report(request: SalesReportRequest) -> SalesReportResult:
    """Load settings and input, then build the report; expected failures become error results."""
    if request.use_sample == (request.csv_file is not None):
        return SalesReportResult(status="error", error="Provide either a CSV file or --sample, not both or neither.")

    try:
        settings = load_report_settings(request.config_path)
    except (FileNotFoundError, ValueError) as exc:
        return SalesReportResult(status="error", error=str(exc))
    except OSError as exc:
        return SalesReportResult(status="error", error=f"Could not read report settings: {exc}")

    if request.use_sample:
        source = "sample dataset"
        lines = read_sample_lines()
    else:
        assert request.csv_file is not None
        source = request.csv_file
        try:
            lines = read_sales_lines(request.csv_file, encoding=settings.encoding)
        except FileNotFoundError as exc:
            return SalesReportResult(status="error", error=str(exc))
        except (LookupError, UnicodeDecodeError) as exc:
            return SalesReportResult(status="error", error=f"Could not decode {request.csv_file}: {exc}")
        except OSError as exc:
            return SalesReportResult(status="error", error=f"Could not read {request.csv_file}: {exc}")

    logger.info("Building sales report from %s", source)
    report = build_sales_report(lines, delimiter=settings.delimiter)
    logger.info(
        "Processed %d records: %d valid, %d invalid",
        report.candidate_count,
        len(report.validation.valid),
        len(report.validation.invalid),
    )
    return SalesReportResult(status="ok", report=report, settings=settings, source=source)
