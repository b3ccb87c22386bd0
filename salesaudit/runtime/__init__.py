"""Runtime infrastructure for salesaudit.

This package provides process/runtime services including:
- Logging setup via get_logger()
- Path resolution via get_paths(), ProjectPaths
- Report settings via load_report_settings(), ReportSettings
- Sales log reading via read_sales_lines(), read_sample_lines()

Usage:
    from salesaudit.runtime import get_logger, get_paths, load_report_settings

    logger = get_logger(__name__)
    settings = load_report_settings()
"""

from salesaudit.runtime.logging import (
    DEFAULT_LOG_LEVEL,
    LOG_FORMAT,
    LOG_FORMAT_DEBUG,
    configure_logging,
    get_logger,
    set_log_level,
)
from salesaudit.runtime.paths import (
    ProjectPaths,
    get_paths,
    reset_paths,
)
from salesaudit.runtime.sales_source import read_sales_lines, read_sample_lines
from salesaudit.runtime.settings import ReportSettings, load_report_settings

__all__ = [
    # Logging
    "get_logger",
    "configure_logging",
    "set_log_level",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_FORMAT_DEBUG",
    # Settings
    "ReportSettings",
    "load_report_settings",
    # Sources
    "read_sales_lines",
    "read_sample_lines",
    # Paths
    "get_paths",
    "reset_paths",
    "ProjectPaths",
]
