"""Smoke tests for basic module wiring.

Keep these minimal and free of any real-world data.
"""

from __future__ import annotations


def test_imports() -> None:
    import salesaudit
    import salesaudit.application
    import salesaudit.cli.main
    import salesaudit.domain
    import salesaudit.report
    import salesaudit.runtime

    assert salesaudit is not None
    assert salesaudit.application is not None
    assert salesaudit.cli.main is not None
    assert salesaudit.domain is not None
    assert salesaudit.report is not None
    assert salesaudit.runtime is not None


def test_domain_exports_pipeline_entry_points() -> None:
    from salesaudit import domain

    for name in (
        "parse",
        "validate",
        "aggregate",
        "total_sales",
        "month_wise_totals",
        "most_popular_per_month",
        "top_revenue_per_month",
        "month_to_month_growth",
    ):
        assert callable(getattr(domain, name))
