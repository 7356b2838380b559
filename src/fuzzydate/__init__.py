"""Dates of explicit, varying precision and ranges between them."""

from __future__ import annotations

from fuzzydate.domain import (
    DateTriple,
    Day,
    DayWithoutMonthError,
    EmptyInputError,
    FuzzyDate,
    FuzzyDateError,
    FuzzyDateRange,
    InvalidDayError,
    InvalidFormatError,
    InvalidMonthError,
    InvalidRangeError,
    InvalidRangeFormatError,
    InvalidYearError,
    Month,
    ParseError,
    Precision,
    RangeColumns,
    RangeError,
    RangeParseError,
    Year,
    days_in_month,
    is_leap_year,
)
from fuzzydate.domain.constants import MAX_YEAR, RANGE_SEPARATOR

__all__ = [
    "MAX_YEAR",
    "RANGE_SEPARATOR",
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
