"""Validated calendar components.

Each component is a small value object whose constructor is the only
validation point: once a ``Year`` or ``Month`` exists, its value is known to
be in range. A ``Day`` only knows it lies in 1-31; whether it exists in a
given month is checked with :meth:`Day.within` or when a full date is built.
"""

from __future__ import annotations

from dataclasses import dataclass

from fuzzydate.domain.constants import (
    CENTURY_CYCLE,
    DAYS_IN_MONTH,
    FEBRUARY,
    FEBRUARY_DAYS_LEAP,
    GREGORIAN_CYCLE,
    LEAP_YEAR_CYCLE,
    MAX_DAY,
    MAX_MONTH,
    MAX_YEAR,
    MIN_DAY,
    MIN_MONTH,
    MIN_YEAR,
)
from fuzzydate.domain.errors import InvalidDayError, InvalidMonthError, InvalidYearError


def _require_int(value: object, component: str) -> int:
    # bool is an int subclass but never a calendar value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{component} must be an int, got {type(value).__name__}")
    return value


def is_leap_year(year: int) -> bool:
    """Proleptic Gregorian leap-year rule."""

    return (year % LEAP_YEAR_CYCLE == 0 and year % CENTURY_CYCLE != 0) or (
        year % GREGORIAN_CYCLE == 0
    )


def days_in_month(year: int, month: int) -> int:
    if not MIN_MONTH <= month <= MAX_MONTH:
        raise InvalidMonthError(month)
    if month == FEBRUARY and is_leap_year(year):
        return FEBRUARY_DAYS_LEAP
    return DAYS_IN_MONTH[month]


@dataclass(frozen=True, order=True, slots=True)
class Year:
    value: int

    def __post_init__(self) -> None:
        value = _require_int(self.value, "Year")
        if not MIN_YEAR <= value <= MAX_YEAR:
            raise InvalidYearError(value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True, slots=True)
class Month:
    value: int

    def __post_init__(self) -> None:
        value = _require_int(self.value, "Month")
        if not MIN_MONTH <= value <= MAX_MONTH:
            raise InvalidMonthError(value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True, slots=True)
class Day:
    value: int

    def __post_init__(self) -> None:
        value = _require_int(self.value, "Day")
        if not MIN_DAY <= value <= MAX_DAY:
            raise InvalidDayError(value)

    @classmethod
    def within(cls, value: int, year: int | Year, month: int | Month) -> Day:
        """Build a day that is known to exist in ``year``-``month``."""

        raw_year = int(year)
        raw_month = int(month)
        _require_int(value, "Day")
        if value < MIN_DAY or value > days_in_month(raw_year, raw_month):
            raise InvalidDayError(value, year=raw_year, month=raw_month)
        return cls(value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


__all__ = ["Day", "Month", "Year", "days_in_month", "is_leap_year"]
