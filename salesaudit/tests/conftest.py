"""Shared pytest fixtures for salesaudit tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from salesaudit.runtime.paths import CONFIG_ENV_VAR, reset_paths
from salesaudit.runtime.settings import load_report_settings


@pytest.fixture(autouse=True)
def isolated_runtime(tmp_path, monkeypatch) -> Iterator[None]:
    """Point path resolution at a temp dir and drop cached settings between tests."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_paths(tmp_path)
    load_report_settings.cache_clear()
    yield
    load_report_settings.cache_clear()
    reset_paths()
