"""Runtime loader for report settings.

Settings live in a small TOML file:

    [input]
    delimiter = ","
    encoding = "utf-8"

    [output]
    growth_places = 2
    average_places = 2
    export_dir = "reports"
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

from salesaudit.runtime.logging import get_logger
from salesaudit.runtime.paths import get_paths

logger = get_logger(__name__)


@dataclass(frozen=True)
class ReportSettings:
    """Parsing and rendering options for one report run."""

    delimiter: str = ","
    encoding: str = "utf-8"
    growth_places: int = 2
    average_places: int = 2
    export_dir: str = "reports"


def _section(config: dict[str, Any], name: str, path: Path) -> dict[str, Any]:
    section = config.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(f"[{name}] in {path} must be a table")
    return section


def _places(section: dict[str, Any], key: str, default: int, path: Path) -> int:
    value = section.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{key} in {path} must be a non-negative integer, got {value!r}")
    return value


def _text(section: dict[str, Any], key: str, default: str, path: Path) -> str:
    value = section.get(key, default)
    if not isinstance(value, str) or not value:
        raise ValueError(f"{key} in {path} must be a non-empty string, got {value!r}")
    return value


def parse_report_settings(config: dict[str, Any], path: Path) -> ReportSettings:
    """Build ReportSettings from an already-parsed TOML document."""
    input_section = _section(config, "input", path)
    output_section = _section(config, "output", path)

    delimiter = _text(input_section, "delimiter", ReportSettings.delimiter, path)
    if len(delimiter) != 1:
        raise ValueError(f"delimiter in {path} must be a single character, got {delimiter!r}")

    return ReportSettings(
        delimiter=delimiter,
        encoding=_text(input_section, "encoding", ReportSettings.encoding, path),
        growth_places=_places(output_section, "growth_places", ReportSettings.growth_places, path),
        average_places=_places(output_section, "average_places", ReportSettings.average_places, path),
        export_dir=_text(output_section, "export_dir", ReportSettings.export_dir, path),
    )


@lru_cache(maxsize=4)
def load_report_settings(config_path: str | None = None) -> ReportSettings:
    """
    Load report settings from TOML.

    Args:
        config_path: Optional TOML path. When given, the file must exist.
            When None, the project default is used and a missing file
            falls back to built-in defaults.

    Returns:
        Frozen ReportSettings.
    """
    paths = get_paths()
    if config_path is not None:
        path = Path(config_path)
        required = True
    else:
        path = paths.config_file
        required = not paths.config_is_default

    if not path.exists():
        if required:
            raise FileNotFoundError(f"Report settings file not found: {path}")
        logger.debug("No settings file at %s, using defaults", path)
        return ReportSettings()

    with open(path, "rb") as f:
        try:
            config = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"Invalid TOML in {path}: {exc}") from exc

    settings = parse_report_settings(config, path)
    logger.debug("Loaded report settings from %s: %s", path, settings)
    return settings
