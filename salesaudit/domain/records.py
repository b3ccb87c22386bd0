"""Data models for sales log records at each pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Unparsed:
    """A numeric field whose text is not a finite number.

    Kept distinct from ``Decimal("0")`` so validation can tell a malformed
    field apart from a legitimate zero.
    """

    text: str

    def __str__(self) -> str:
        return self.text


# A numeric column value: a finite Decimal or the literal text that failed to parse.
NumericField = Decimal | Unparsed


@dataclass(frozen=True)
class RawRow:
    """One non-blank, non-header input line split into literal fields."""

    line_number: int
    raw: str
    date: str = ""
    item: str = ""
    unit_price: str | None = None
    quantity: str | None = None
    total_price: str | None = None


@dataclass(frozen=True)
class CandidateRecord:
    """A parsed but not yet validated sales row."""

    row_number: int
    raw: str
    date: str
    item: str
    unit_price: NumericField
    quantity: NumericField
    total_price: NumericField


@dataclass(frozen=True)
class ValidRecord:
    """A sales row that passed every validation check."""

    row_number: int
    raw: str
    date: str
    item: str
    unit_price: Decimal
    quantity: Decimal
    total_price: Decimal

    @property
    def month(self) -> str:
        """Month key (YYYY-MM) of the sale date."""
        return month_key(self.date)


@dataclass(frozen=True)
class InvalidRecord:
    """A rejected sales row with every reason it failed."""

    row_number: int
    raw: str
    reasons: tuple[str, ...]


@dataclass(frozen=True)
class ValidationResult:
    """Candidates partitioned into valid and invalid rows, input order kept."""

    valid: tuple[ValidRecord, ...]
    invalid: tuple[InvalidRecord, ...]

    @property
    def total(self) -> int:
        return len(self.valid) + len(self.invalid)


def month_key(date: str) -> str:
    """Return the YYYY-MM bucket for an ISO date string."""
    return date[:7]
