"""Pure helpers turning raw sales log lines into candidate records."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from decimal import Decimal

from salesaudit.domain.records import CandidateRecord, NumericField, RawRow, Unparsed

logger = logging.getLogger(__name__)

FIELD_COUNT = 5

# Plain ASCII decimal or exponent notation; no underscores, no NaN or Infinity.
_NUMBER_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(text: str | None) -> NumericField:
    """Parse a numeric column; anything that is not a finite number is Unparsed."""
    if text is None:
        return Unparsed("")
    if not _NUMBER_PATTERN.fullmatch(text):
        return Unparsed(text)
    return Decimal(text)


def split_raw_rows(lines: Iterable[str], delimiter: str = ",") -> list[RawRow]:
    """
    Split input lines into RawRow values.

    Blank lines are skipped but still counted, so ``line_number`` is the
    1-based position in the input. The first non-blank line is the
    header and is dropped whatever it contains.
    """
    rows: list[RawRow] = []
    header_skipped = False

    for index, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped:
            continue

        if not header_skipped:
            header_skipped = True
            logger.debug("Skipping header on line %d: %s", index, stripped)
            continue

        fields = [part.strip() for part in stripped.split(delimiter)]
        if len(fields) > FIELD_COUNT:
            logger.debug("Line %d has %d fields; extra fields ignored", index, len(fields))
        # Missing trailing columns: "" for text, None for numbers (parsed as Unparsed).
        padded: list[str | None] = [*fields[:FIELD_COUNT]]
        padded.extend([None] * (FIELD_COUNT - len(padded)))

        rows.append(
            RawRow(
                line_number=index,
                raw=stripped,
                date=padded[0] or "",
                item=padded[1] or "",
                unit_price=padded[2],
                quantity=padded[3],
                total_price=padded[4],
            )
        )

    return rows


def to_candidate(row: RawRow) -> CandidateRecord:
    """Type a RawRow's numeric columns without judging them."""
    return CandidateRecord(
        row_number=row.line_number,
        raw=row.raw,
        date=row.date,
        item=row.item,
        unit_price=parse_number(row.unit_price),
        quantity=parse_number(row.quantity),
        total_price=parse_number(row.total_price),
    )


def parse(lines: Iterable[str], delimiter: str = ",") -> list[CandidateRecord]:
    """Parse raw sales log lines into candidate records; never drops a data row."""
    candidates = [to_candidate(row) for row in split_raw_rows(lines, delimiter=delimiter)]
    logger.debug("Parsed %d candidate records", len(candidates))
    return candidates
