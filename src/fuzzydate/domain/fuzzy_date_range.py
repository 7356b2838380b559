"""Ranges between two fuzzy dates of independent precision."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TypeAlias

from fuzzydate.domain.constants import RANGE_SEPARATOR
from fuzzydate.domain.errors import (
    InvalidRangeError,
    InvalidRangeFormatError,
    ParseError,
    RangeError,
    RangeParseError,
)
from fuzzydate.domain.fuzzy_date import DateTriple, FuzzyDate

log = logging.getLogger(__name__)

RangeColumns: TypeAlias = tuple[int, int | None, int | None, int, int | None, int | None]


@dataclass(frozen=True, slots=True, repr=False)
class FuzzyDateRange:
    """An inclusive range ``start``..``end`` where ``start <= end``.

    The endpoints keep their own precision, so ``1991-08/2025`` is a valid
    range running from the first of August 1991 through the end of 2025.
    """

    start: FuzzyDate
    end: FuzzyDate

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidRangeError(self.start, self.end)

    @classmethod
    def parse(cls, text: str) -> FuzzyDateRange:
        """Parse ``{start}/{end}`` where each half is an ISO fuzzy date.

        US month-first dates cannot be range halves because their ``/`` would
        collide with the range separator.
        """

        try:
            return _parse(text)
        except RangeError as exc:
            log.debug("Rejected fuzzy date range %r: %s", text, exc)
            raise

    @classmethod
    def from_columns(
        cls,
        start_year: int,
        start_month: int | None,
        start_day: int | None,
        end_year: int,
        end_month: int | None,
        end_day: int | None,
    ) -> FuzzyDateRange:
        try:
            start = FuzzyDate.from_columns(start_year, start_month, start_day)
            end = FuzzyDate.from_columns(end_year, end_month, end_day)
        except ParseError as exc:
            raise RangeParseError(exc) from exc
        return cls(start, end)

    def dates(self) -> tuple[FuzzyDate, FuzzyDate]:
        return (self.start, self.end)

    def to_columns(self) -> RangeColumns:
        return (*self.start.to_columns(), *self.end.to_columns())

    def __composite_values__(self) -> RangeColumns:
        """Return values in a shape suitable for SQLAlchemy composite columns."""

        return self.to_columns()

    def format(self) -> str:
        return f"{self.start.format()}{RANGE_SEPARATOR}{self.end.format()}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"FuzzyDateRange({self.format()!r})"

    # Bounds of the whole range: earliest day of the start through latest day of the end.

    def lower_bound(self) -> DateTriple:
        return self.start.lower_bound()

    def upper_bound_inclusive(self) -> DateTriple:
        return self.end.upper_bound_inclusive()

    def upper_bound_exclusive(self) -> DateTriple | None:
        return self.end.upper_bound_exclusive()

    def contains(self, date: FuzzyDate) -> bool:
        """True when every day ``date`` may stand for falls inside the range."""

        return self._covers(date.lower_bound(), date.upper_bound_inclusive())

    def overlaps(self, other: FuzzyDateRange) -> bool:
        """True when the two ranges share at least one concrete day."""

        return (
            self.lower_bound() <= other.upper_bound_inclusive()
            and other.lower_bound() <= self.upper_bound_inclusive()
        )

    def is_within(self, outer: FuzzyDateRange) -> bool:
        """True when this range's whole span sits inside ``outer``."""

        return outer._covers(self.lower_bound(), self.upper_bound_inclusive())

    def _covers(self, lower: DateTriple, upper_inclusive: DateTriple) -> bool:
        if lower < self.lower_bound():
            return False
        limit = self.upper_bound_exclusive()
        return limit is None or upper_inclusive < limit

    def _sort_key(self) -> tuple[FuzzyDate, FuzzyDate]:
        return (self.start, self.end)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDateRange):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDateRange):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDateRange):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDateRange):
            return NotImplemented
        return self._sort_key() >= other._sort_key()


def _parse(text: str) -> FuzzyDateRange:
    trimmed = text.strip()
    separators = trimmed.count(RANGE_SEPARATOR)
    if separators == 0:
        raise InvalidRangeFormatError(
            text, f"No range separator found (expected {RANGE_SEPARATOR!r})"
        )
    if separators > 1:
        raise InvalidRangeFormatError(
            text, f"Too many {RANGE_SEPARATOR!r} separators: expected 1, found {separators}"
        )

    start_text, end_text = trimmed.split(RANGE_SEPARATOR)
    try:
        start = FuzzyDate.parse(start_text)
        end = FuzzyDate.parse(end_text)
    except ParseError as exc:
        raise RangeParseError(exc) from exc
    return FuzzyDateRange(start, end)


__all__ = ["FuzzyDateRange", "RangeColumns"]
