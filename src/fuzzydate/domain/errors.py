"""Error types raised while building fuzzy dates and ranges."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fuzzydate.domain.constants import MAX_MONTH, MAX_YEAR, MIN_MONTH, MIN_YEAR

if TYPE_CHECKING:
    from fuzzydate.domain.fuzzy_date import FuzzyDate


class FuzzyDateError(ValueError):
    """Base class for every error raised by the fuzzy date model."""


class ParseError(FuzzyDateError):
    """Raised when text or raw components do not describe a valid fuzzy date."""


class EmptyInputError(ParseError):
    """Raised when the input is empty or only whitespace."""

    def __init__(self) -> None:
        super().__init__("Empty date string")


class InvalidFormatError(ParseError):
    """Raised when the input does not match any accepted date shape."""

    def __init__(self, text: str, detail: str | None = None) -> None:
        self.text = text
        self.detail = detail
        if detail is None:
            message = f"Invalid date format: {text}"
        else:
            message = f"Invalid date format: {detail}: {text!r}"
        super().__init__(message)


class DayWithoutMonthError(InvalidFormatError):
    """Raised when column values carry a day but no month."""

    def __init__(self, year: int, day: int) -> None:
        self.year = year
        self.day = day
        super().__init__(f"({year}, None, {day})", f"Cannot have day {day} without month")


class InvalidYearError(ParseError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Invalid year: {value} (must be {MIN_YEAR}-{MAX_YEAR})")


class InvalidMonthError(ParseError):
    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Invalid month: {value} (must be {MIN_MONTH}-{MAX_MONTH})")


class InvalidDayError(ParseError):
    """Raised when a day does not exist in its month.

    ``year`` and ``month`` are ``None`` only when a bare ``Day`` was built
    without calendar context.
    """

    def __init__(self, day: int, *, year: int | None = None, month: int | None = None) -> None:
        self.day = day
        self.year = year
        self.month = month
        if year is None or month is None:
            message = f"Invalid day: {day}"
        else:
            message = f"Invalid day {day} for month {year:04d}-{month:02d}"
        super().__init__(message)


class RangeError(FuzzyDateError):
    """Raised when a fuzzy date range cannot be built."""


class InvalidRangeError(RangeError):
    def __init__(self, start: FuzzyDate, end: FuzzyDate) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Invalid date range: start ({start}) is after end ({end})")


class InvalidRangeFormatError(RangeError):
    def __init__(self, text: str, detail: str) -> None:
        self.text = text
        self.detail = detail
        super().__init__(f"Invalid range format: {detail}: {text!r}")


class RangeParseError(RangeError):
    """Wraps the error raised while building one endpoint of a range."""

    def __init__(self, error: ParseError) -> None:
        self.error = error
        super().__init__(str(error))


__all__ = [
    "DayWithoutMonthError",
    "EmptyInputError",
    "FuzzyDateError",
    "InvalidDayError",
    "InvalidFormatError",
    "InvalidMonthError",
    "InvalidRangeError",
    "InvalidRangeFormatError",
    "InvalidYearError",
    "ParseError",
    "RangeError",
    "RangeParseError",
]
