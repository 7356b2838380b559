"""SQLAlchemy bindings for fuzzy dates.

Two storage shapes are supported:

* a single text column holding the ISO form (``FuzzyDateType`` and
  ``FuzzyDateRangeType``), and
* nullable integer columns per component, mapped back onto the value with a
  ``composite()`` property (``fuzzy_date_columns`` + ``fuzzy_date_composite``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Final

from sqlalchemy import Column, Integer, String, TypeDecorator
from sqlalchemy.orm import composite

from fuzzydate.domain import (
    FuzzyDate,
    FuzzyDateRange,
    InvalidFormatError,
    ParseError,
    RangeError,
)

if TYPE_CHECKING:
    from sqlalchemy import Dialect
    from sqlalchemy.orm import Composite

log = logging.getLogger(__name__)

FUZZY_DATE_TEXT_LENGTH: Final[int] = 10
FUZZY_DATE_RANGE_TEXT_LENGTH: Final[int] = 2 * FUZZY_DATE_TEXT_LENGTH + 1


class FuzzyDateType(TypeDecorator[FuzzyDate]):
    impl = String(FUZZY_DATE_TEXT_LENGTH)
    cache_ok = True

    def process_bind_param(self, value: FuzzyDate | str | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        if isinstance(value, str):
            value = FuzzyDate.parse(value)
        return value.format()

    def process_result_value(self, value: str | None, dialect: Dialect) -> FuzzyDate | None:
        _ = dialect
        if value is None:
            return None
        try:
            return FuzzyDate.parse(value)
        except ParseError:
            log.warning("Stored fuzzy date %r can no longer be parsed", value)
            raise


class FuzzyDateRangeType(TypeDecorator[FuzzyDateRange]):
    impl = String(FUZZY_DATE_RANGE_TEXT_LENGTH)
    cache_ok = True

    def process_bind_param(
        self, value: FuzzyDateRange | str | None, dialect: Dialect
    ) -> str | None:
        _ = dialect
        if value is None:
            return None
        if isinstance(value, str):
            value = FuzzyDateRange.parse(value)
        return value.format()

    def process_result_value(self, value: str | None, dialect: Dialect) -> FuzzyDateRange | None:
        _ = dialect
        if value is None:
            return None
        try:
            return FuzzyDateRange.parse(value)
        except RangeError:
            log.warning("Stored fuzzy date range %r can no longer be parsed", value)
            raise


def fuzzy_date_columns(
    prefix: str, *, nullable: bool = False
) -> tuple[Column[int], Column[int], Column[int]]:
    """Return ``<prefix>_year``, ``<prefix>_month`` and ``<prefix>_day`` columns.

    ``nullable`` applies to the year column only; month and day are always
    nullable because coarser precisions leave them empty.
    """

    return (
        Column(f"{prefix}_year", Integer, nullable=nullable),
        Column(f"{prefix}_month", Integer, nullable=True),
        Column(f"{prefix}_day", Integer, nullable=True),
    )


def fuzzy_date_range_columns(
    prefix: str, *, nullable: bool = False
) -> tuple[Column[int], Column[int], Column[int], Column[int], Column[int], Column[int]]:
    return (
        *fuzzy_date_columns(f"{prefix}_start", nullable=nullable),
        *fuzzy_date_columns(f"{prefix}_end", nullable=nullable),
    )


def _fuzzy_date_from_columns(
    year: int | None, month: int | None, day: int | None
) -> FuzzyDate | None:
    if year is None:
        if month is None and day is None:
            return None
        raise InvalidFormatError(f"({year}, {month}, {day})", "Missing year column")
    return FuzzyDate.from_columns(year, month, day)


def _fuzzy_date_range_from_columns(
    start_year: int | None,
    start_month: int | None,
    start_day: int | None,
    end_year: int | None,
    end_month: int | None,
    end_day: int | None,
) -> FuzzyDateRange | None:
    values = (start_year, start_month, start_day, end_year, end_month, end_day)
    if all(value is None for value in values):
        return None
    if start_year is None or end_year is None:
        raise InvalidFormatError(repr(values), "Missing year column")
    return FuzzyDateRange.from_columns(
        start_year, start_month, start_day, end_year, end_month, end_day
    )


def fuzzy_date_composite(
    year: Column[int], month: Column[int], day: Column[int]
) -> Composite[FuzzyDate]:
    """Map three component columns onto a single ``FuzzyDate`` attribute.

    All-NULL columns load as ``None``; assigning ``None`` clears all three.
    """

    return composite(_fuzzy_date_from_columns, year, month, day)


def fuzzy_date_range_composite(
    start_year: Column[int],
    start_month: Column[int],
    start_day: Column[int],
    end_year: Column[int],
    end_month: Column[int],
    end_day: Column[int],
) -> Composite[FuzzyDateRange]:
    """Map the six columns from ``fuzzy_date_range_columns`` onto a ``FuzzyDateRange``."""

    return composite(
        _fuzzy_date_range_from_columns,
        start_year,
        start_month,
        start_day,
        end_year,
        end_month,
        end_day,
    )


__all__ = [
    "FuzzyDateRangeType",
    "FuzzyDateType",
    "fuzzy_date_columns",
    "fuzzy_date_composite",
    "fuzzy_date_range_columns",
    "fuzzy_date_range_composite",
]
