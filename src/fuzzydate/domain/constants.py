"""Calendar and text-format constants shared by the fuzzy date model."""

from __future__ import annotations

from typing import Final

MIN_YEAR: Final[int] = 1
MAX_YEAR: Final[int] = 9999

MIN_MONTH: Final[int] = 1
MAX_MONTH: Final[int] = 12

JANUARY: Final[int] = 1
FEBRUARY: Final[int] = 2
DECEMBER: Final[int] = 12

MIN_DAY: Final[int] = 1
MAX_DAY: Final[int] = 31
FEBRUARY_DAYS_LEAP: Final[int] = 29

# Index 0 is unused so months can index directly; February holds the common-year length.
DAYS_IN_MONTH: Final[tuple[int, ...]] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

LEAP_YEAR_CYCLE: Final[int] = 4
CENTURY_CYCLE: Final[int] = 100
GREGORIAN_CYCLE: Final[int] = 400

DATE_SEPARATOR: Final[str] = "-"
MONTH_FIRST_SEPARATOR: Final[str] = "/"
RANGE_SEPARATOR: Final[str] = "/"

# Largest numeric value a component token may name; larger numbers are not a date shape.
MAX_YEAR_TOKEN: Final[int] = 0xFFFF
MAX_MONTH_TOKEN: Final[int] = 0xFF
MAX_DAY_TOKEN: Final[int] = 0xFF


__all__ = [
    "CENTURY_CYCLE",
    "DATE_SEPARATOR",
    "DAYS_IN_MONTH",
    "DECEMBER",
    "FEBRUARY",
    "FEBRUARY_DAYS_LEAP",
    "GREGORIAN_CYCLE",
    "JANUARY",
    "LEAP_YEAR_CYCLE",
    "MAX_DAY",
    "MAX_DAY_TOKEN",
    "MAX_MONTH",
    "MAX_MONTH_TOKEN",
    "MAX_YEAR",
    "MAX_YEAR_TOKEN",
    "MIN_DAY",
    "MIN_MONTH",
    "MIN_YEAR",
    "MONTH_FIRST_SEPARATOR",
    "RANGE_SEPARATOR",
]
