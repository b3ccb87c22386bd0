from __future__ import annotations

import logging

from salesaudit.runtime.logging import LOG_FORMAT, LOG_FORMAT_DEBUG, get_logger, set_log_level


def test_loggers_live_under_package_namespace() -> None:
    assert get_logger("salesaudit.domain.parsing").name == "salesaudit.domain.parsing"
    assert get_logger("adhoc").name == "salesaudit.adhoc"


def test_set_log_level_switches_format() -> None:
    root = logging.getLogger("salesaudit")
    previous = root.level
    try:
        set_log_level(logging.DEBUG)
        assert root.level == logging.DEBUG
        assert all(h.formatter is not None and h.formatter._fmt == LOG_FORMAT_DEBUG for h in root.handlers)

        set_log_level(logging.WARNING)
        assert all(h.formatter is not None and h.formatter._fmt == LOG_FORMAT for h in root.handlers)
    finally:
        set_log_level(previous)
