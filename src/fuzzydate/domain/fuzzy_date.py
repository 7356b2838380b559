"""Dates that carry exactly the precision present in their source.

A :class:`FuzzyDate` is a year, a year and month, or a full year/month/day.
Missing components are never filled in; instead, callers ask for the
earliest and latest concrete days a value may stand for.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from enum import StrEnum
from typing import TypeAlias, assert_never

from fuzzydate.domain.components import Day, Month, Year, days_in_month
from fuzzydate.domain.constants import (
    DATE_SEPARATOR,
    DECEMBER,
    JANUARY,
    MAX_DAY_TOKEN,
    MAX_MONTH_TOKEN,
    MAX_YEAR,
    MAX_YEAR_TOKEN,
    MIN_DAY,
    MONTH_FIRST_SEPARATOR,
)
from fuzzydate.domain.errors import (
    DayWithoutMonthError,
    EmptyInputError,
    InvalidFormatError,
    ParseError,
)

log = logging.getLogger(__name__)

# Concrete calendar day as (year, month, day).
DateTriple: TypeAlias = tuple[int, int, int]


class Precision(StrEnum):
    """Which calendar fields a fuzzy date carries."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"

    @property
    def rank(self) -> int:
        """Less precise values sort first when lower bounds tie."""

        match self:
            case Precision.YEAR:
                return 0
            case Precision.MONTH:
                return 1
            case Precision.DAY:
                return 2
            case _:
                assert_never(self)


@dataclass(frozen=True, slots=True, repr=False)
class FuzzyDate:
    """A calendar date known to year, month or day precision.

    ``month`` is ``None`` for year precision; ``day`` is ``None`` for year and
    month precision. Raw ints are accepted and converted to the validated
    component types, so ``FuzzyDate(2024, 2, 29)`` works. Construction is the
    only validation point: every instance is a real calendar value.
    """

    year: Year
    month: Month | None = None
    day: Day | None = None

    def __post_init__(self) -> None:
        year = self.year if isinstance(self.year, Year) else Year(self.year)
        object.__setattr__(self, "year", year)

        raw_day = self.day.value if isinstance(self.day, Day) else self.day
        if self.month is None:
            if raw_day is not None:
                raise DayWithoutMonthError(year.value, raw_day)
            return

        month = self.month if isinstance(self.month, Month) else Month(self.month)
        object.__setattr__(self, "month", month)

        if raw_day is not None:
            object.__setattr__(self, "day", Day.within(raw_day, year, month))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def year_precision(cls, year: int | Year) -> FuzzyDate:
        return cls(_as_year(year))

    @classmethod
    def month_precision(cls, year: int | Year, month: int | Month) -> FuzzyDate:
        return cls(_as_year(year), _as_month(month))

    @classmethod
    def day_precision(cls, year: int | Year, month: int | Month, day: int | Day) -> FuzzyDate:
        typed_year = _as_year(year)
        typed_month = _as_month(month)
        raw_day = day.value if isinstance(day, Day) else day
        return cls(typed_year, typed_month, Day.within(raw_day, typed_year, typed_month))

    @classmethod
    def parse(cls, text: str) -> FuzzyDate:
        """Parse ISO (``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD``) or US month-first
        (``MM/YYYY``, ``MM/DD/YYYY``) text.

        Raises:
            EmptyInputError: the text is blank.
            InvalidFormatError: the text is not one of the accepted shapes.
            InvalidYearError, InvalidMonthError, InvalidDayError: a component
                is out of range, checked in that order.
        """

        try:
            return _parse(text)
        except ParseError as exc:
            log.debug("Rejected fuzzy date %r: %s", text, exc)
            raise

    @classmethod
    def from_columns(cls, year: int, month: int | None, day: int | None) -> FuzzyDate:
        """Rebuild a value from its storage columns (see :meth:`to_columns`)."""

        if month is None:
            if day is not None:
                raise DayWithoutMonthError(year, day)
            return cls.year_precision(year)
        if day is None:
            return cls.month_precision(year, month)
        return cls.day_precision(year, month, day)

    @classmethod
    def from_date(cls, value: date) -> FuzzyDate:
        return cls.day_precision(value.year, value.month, value.day)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @property
    def precision(self) -> Precision:
        if self.month is None:
            return Precision.YEAR
        if self.day is None:
            return Precision.MONTH
        return Precision.DAY

    @property
    def as_date(self) -> date | None:
        """The concrete day for day-precision values, otherwise ``None``."""

        if self.precision is Precision.DAY:
            return date(*self.lower_bound())
        return None

    def format(self) -> str:
        """Render the canonical ISO form regardless of the parsed input form."""

        match self.precision:
            case Precision.YEAR:
                return f"{self.year.value:04d}"
            case Precision.MONTH:
                return f"{self.year.value:04d}-{_month(self).value:02d}"
            case Precision.DAY:
                return f"{self.year.value:04d}-{_month(self).value:02d}-{_day(self).value:02d}"
            case _:
                assert_never(self.precision)

    def to_columns(self) -> tuple[int, int | None, int | None]:
        return (
            self.year.value,
            None if self.month is None else self.month.value,
            None if self.day is None else self.day.value,
        )

    def __composite_values__(self) -> tuple[int, int | None, int | None]:
        """Return values in a shape suitable for SQLAlchemy composite columns."""

        return self.to_columns()

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"FuzzyDate({self.format()!r})"

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    def lower_bound(self) -> DateTriple:
        """Earliest concrete day this value may stand for."""

        year = self.year.value
        match self.precision:
            case Precision.YEAR:
                return (year, JANUARY, MIN_DAY)
            case Precision.MONTH:
                return (year, _month(self).value, MIN_DAY)
            case Precision.DAY:
                return (year, _month(self).value, _day(self).value)
            case _:
                assert_never(self.precision)

    def upper_bound_inclusive(self) -> DateTriple:
        """Latest concrete day this value may stand for."""

        year = self.year.value
        match self.precision:
            case Precision.YEAR:
                return (year, DECEMBER, days_in_month(year, DECEMBER))
            case Precision.MONTH:
                month = _month(self).value
                return (year, month, days_in_month(year, month))
            case Precision.DAY:
                return (year, _month(self).value, _day(self).value)
            case _:
                assert_never(self.precision)

    def upper_bound_exclusive(self) -> DateTriple | None:
        """The day after :meth:`upper_bound_inclusive`.

        ``None`` when the inclusive bound is the last day of year 9999.
        """

        return _next_day(*self.upper_bound_inclusive())

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def _sort_key(self) -> tuple[DateTriple, int]:
        return (self.lower_bound(), self.precision.rank)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, FuzzyDate):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def contains(self, other: FuzzyDate) -> bool:
        """True when every day ``other`` may stand for is also covered by this value."""

        if other.lower_bound() < self.lower_bound():
            return False
        upper = self.upper_bound_exclusive()
        return upper is None or other.upper_bound_inclusive() < upper


def _as_year(value: int | Year) -> Year:
    return value if isinstance(value, Year) else Year(value)


def _as_month(value: int | Month) -> Month:
    return value if isinstance(value, Month) else Month(value)


def _month(value: FuzzyDate) -> Month:
    if value.month is None:  # pragma: no cover - guarded by precision dispatch
        raise AssertionError("month-less value dispatched as month precision")
    return value.month


def _day(value: FuzzyDate) -> Day:
    if value.day is None:  # pragma: no cover - guarded by precision dispatch
        raise AssertionError("day-less value dispatched as day precision")
    return value.day


def _next_month(year: int, month: int) -> tuple[int, int] | None:
    if month == DECEMBER:
        if year >= MAX_YEAR:
            return None
        return (year + 1, JANUARY)
    return (year, month + 1)


def _next_day(year: int, month: int, day: int) -> DateTriple | None:
    if day < days_in_month(year, month):
        return (year, month, day + 1)
    following = _next_month(year, month)
    if following is None:
        return None
    return (*following, MIN_DAY)


def _number(text: str, token: str, ceiling: int) -> int:
    if not (token.isascii() and token.isdigit()):
        raise InvalidFormatError(text, f"Non-numeric component {token!r}")
    value = int(token)
    if value > ceiling:
        raise InvalidFormatError(text, f"Component {token!r} is out of range")
    return value


def _build(text: str, year: str, month: str | None = None, day: str | None = None) -> FuzzyDate:
    # All tokens must be numeric before any range check runs.
    raw_year = _number(text, year, MAX_YEAR_TOKEN)
    raw_month = None if month is None else _number(text, month, MAX_MONTH_TOKEN)
    raw_day = None if day is None else _number(text, day, MAX_DAY_TOKEN)
    return FuzzyDate.from_columns(raw_year, raw_month, raw_day)


def _parse(text: str) -> FuzzyDate:
    trimmed = text.strip()
    if not trimmed:
        raise EmptyInputError

    has_hyphen = DATE_SEPARATOR in trimmed
    has_slash = MONTH_FIRST_SEPARATOR in trimmed
    if has_hyphen and has_slash:
        raise InvalidFormatError(
            text, f"Mixed delimiters ({DATE_SEPARATOR} and {MONTH_FIRST_SEPARATOR})"
        )

    if has_hyphen:
        parts = [part.strip() for part in trimmed.split(DATE_SEPARATOR)]
        match parts:
            case [year, month]:
                return _build(text, year, month)
            case [year, month, day]:
                return _build(text, year, month, day)
            case _:
                raise InvalidFormatError(
                    text,
                    f"Too many {DATE_SEPARATOR} separators: expected 0-2, found {len(parts) - 1}",
                )

    if has_slash:
        parts = [part.strip() for part in trimmed.split(MONTH_FIRST_SEPARATOR)]
        match parts:
            case [month, year]:
                return _build(text, year, month)
            case [month, day, year]:
                return _build(text, year, month, day)
            case _:
                raise InvalidFormatError(
                    text,
                    f"Too many {MONTH_FIRST_SEPARATOR} separators: "
                    f"expected 1-2, found {len(parts) - 1}",
                )

    return _build(text, trimmed)


__all__ = ["DateTriple", "FuzzyDate", "Precision"]
