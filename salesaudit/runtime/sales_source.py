"""Read raw sales log lines from disk or from the bundled sample."""

from __future__ import annotations

from importlib import resources
from pathlib import Path

from salesaudit.runtime.logging import get_logger

logger = get_logger(__name__)

SAMPLE_RESOURCE = "sample_sales.csv"


def read_sales_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """
    Return the lines of a sales CSV file, split on newlines only.

    Blank lines are kept so that row numbers reported later still point at
    the right line of the file.
    """
    csv_path = Path(path).expanduser()
    if not csv_path.is_file():
        raise FileNotFoundError(f"Sales file not found: {csv_path}")

    # utf-8-sig drops a BOM that would otherwise stick to the header
    if encoding.lower().replace("_", "-") == "utf-8":
        encoding = "utf-8-sig"

    with open(csv_path, encoding=encoding, newline="") as f:
        text = f.read()

    lines = text.split("\n")
    logger.debug("Read %d lines from %s", len(lines), csv_path)
    return lines


def read_sample_lines() -> list[str]:
    """Return the lines of the sample sales log shipped with the package."""
    text = resources.files("salesaudit").joinpath("data").joinpath(SAMPLE_RESOURCE).read_text(encoding="utf-8")
    return text.split("\n")
