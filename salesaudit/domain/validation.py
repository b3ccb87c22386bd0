"""Pure validation of candidate sales records.

Every check runs on every record; a record collects all of its reasons in a
fixed order instead of stopping at the first failure.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from collections.abc import Iterable
from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext
from typing import Literal

from salesaudit.domain.records import (
    CandidateRecord,
    InvalidRecord,
    NumericField,
    ValidationResult,
    ValidRecord,
)

logger = logging.getLogger(__name__)

InvalidReason = Literal[
    "Date is malformed",
    "Quantity < 1",
    "Unit Price < 0",
    "Total Price < 0",
    "Unit Price * Quantity !== Total Price",
]

DATE_MALFORMED: InvalidReason = "Date is malformed"
QUANTITY_BELOW_ONE: InvalidReason = "Quantity < 1"
UNIT_PRICE_NEGATIVE: InvalidReason = "Unit Price < 0"
TOTAL_PRICE_NEGATIVE: InvalidReason = "Total Price < 0"
TOTAL_MISMATCH: InvalidReason = "Unit Price * Quantity !== Total Price"

ALL_REASONS: tuple[InvalidReason, ...] = (
    DATE_MALFORMED,
    QUANTITY_BELOW_ONE,
    UNIT_PRICE_NEGATIVE,
    TOTAL_PRICE_NEGATIVE,
    TOTAL_MISMATCH,
)

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def is_valid_date(text: str) -> bool:
    """True for a literal YYYY-MM-DD string naming a real calendar day from year 100 on."""
    if not _DATE_PATTERN.fullmatch(text):
        return False
    year, month, day = (int(part) for part in text.split("-"))
    # Years below 100 are not accepted as calendar years.
    if year < 100:
        return False
    try:
        dt.date(year, month, day)
    except ValueError:
        return False
    return True


def _below(value: NumericField, minimum: int) -> bool:
    # Unparsed fields always fail a lower-bound check.
    if not isinstance(value, Decimal):
        return True
    return value < minimum


def _exact_product(a: Decimal, b: Decimal) -> Decimal:
    # Enough precision for every digit of the product, so nothing is rounded.
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(a.as_tuple().digits) + len(b.as_tuple().digits))
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        return a * b


def check_record(record: CandidateRecord) -> tuple[InvalidReason, ...]:
    """Return every reason the record is invalid, in check order."""
    reasons: list[InvalidReason] = []

    if not is_valid_date(record.date):
        reasons.append(DATE_MALFORMED)

    if _below(record.quantity, 1):
        reasons.append(QUANTITY_BELOW_ONE)

    if _below(record.unit_price, 0):
        reasons.append(UNIT_PRICE_NEGATIVE)

    if _below(record.total_price, 0):
        reasons.append(TOTAL_PRICE_NEGATIVE)

    # Only comparable when all three parsed; otherwise the checks above name the defect.
    if (
        isinstance(record.unit_price, Decimal)
        and isinstance(record.quantity, Decimal)
        and isinstance(record.total_price, Decimal)
        and _exact_product(record.unit_price, record.quantity) != record.total_price
    ):
        reasons.append(TOTAL_MISMATCH)

    return tuple(reasons)


def _as_valid(record: CandidateRecord) -> ValidRecord:
    assert isinstance(record.unit_price, Decimal)
    assert isinstance(record.quantity, Decimal)
    assert isinstance(record.total_price, Decimal)
    return ValidRecord(
        row_number=record.row_number,
        raw=record.raw,
        date=record.date,
        item=record.item,
        unit_price=record.unit_price,
        quantity=record.quantity,
        total_price=record.total_price,
    )


def validate(records: Iterable[CandidateRecord]) -> ValidationResult:
    """Partition candidate records into valid rows and rejected rows with reasons."""
    valid: list[ValidRecord] = []
    invalid: list[InvalidRecord] = []

    for record in records:
        reasons = check_record(record)
        if reasons:
            logger.debug("Row %d rejected: %s", record.row_number, "; ".join(reasons))
            invalid.append(InvalidRecord(row_number=record.row_number, raw=record.raw, reasons=reasons))
        else:
            valid.append(_as_valid(record))

    logger.debug("Validated %d records: %d valid, %d invalid", len(valid) + len(invalid), len(valid), len(invalid))
    return ValidationResult(valid=tuple(valid), invalid=tuple(invalid))
