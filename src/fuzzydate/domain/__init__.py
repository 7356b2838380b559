"""Pure fuzzy date domain model (no third-party dependencies)."""

from __future__ import annotations

from fuzzydate.domain.components import Day, Month, Year, days_in_month, is_leap_year
from fuzzydate.domain.errors import (
    DayWithoutMonthError,
    EmptyInputError,
    FuzzyDateError,
    InvalidDayError,
    InvalidFormatError,
    InvalidMonthError,
    InvalidRangeError,
    InvalidRangeFormatError,
    InvalidYearError,
    ParseError,
    RangeError,
    RangeParseError,
)
from fuzzydate.domain.fuzzy_date import DateTriple, FuzzyDate, Precision
from fuzzydate.domain.fuzzy_date_range import FuzzyDateRange, RangeColumns

__all__ = [
    "DateTriple",
    "Day",
    "DayWithoutMonthError",
    "EmptyInputError",
    "FuzzyDate",
    "FuzzyDateError",
    "FuzzyDateRange",
    "InvalidDayError",
    "InvalidFormatError",
    "InvalidMonthError",
    "InvalidRangeError",
    "InvalidRangeFormatError",
    "InvalidYearError",
    "Month",
    "ParseError",
    "Precision",
    "RangeColumns",
    "RangeError",
    "RangeParseError",
    "Year",
    "days_in_month",
    "is_leap_year",
]
