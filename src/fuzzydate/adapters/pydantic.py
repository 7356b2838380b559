"""Pydantic field types that serialise fuzzy values as their ISO text form.

Use them as model field annotations::

    class Record(BaseModel):
        born: FuzzyDateField
        active: FuzzyDateRangeField | None = None
"""

from __future__ import annotations

from typing import Annotated

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from fuzzydate.domain import FuzzyDate, FuzzyDateRange

# Shapes accepted by the parsers, whitespace and zero padding included. Value
# limits (month 1-12 and so on) are left to validation.
_NUMBER = r"\s*\d+\s*"
_ISO_SHAPE = rf"{_NUMBER}(?:-{_NUMBER}(?:-{_NUMBER})?)?"
_MONTH_FIRST_SHAPE = rf"{_NUMBER}/(?:{_NUMBER}/)?{_NUMBER}"

FUZZY_DATE_PATTERN = rf"^(?:{_ISO_SHAPE}|{_MONTH_FIRST_SHAPE})$"
FUZZY_DATE_RANGE_PATTERN = rf"^{_ISO_SHAPE}/{_ISO_SHAPE}$"


def _validate_fuzzy_date(value: object) -> FuzzyDate:
    if isinstance(value, FuzzyDate):
        return value
    if isinstance(value, str):
        return FuzzyDate.parse(value)
    raise ValueError(f"Expected a fuzzy date string, got {type(value).__name__}")


def _validate_fuzzy_date_range(value: object) -> FuzzyDateRange:
    if isinstance(value, FuzzyDateRange):
        return value
    if isinstance(value, str):
        return FuzzyDateRange.parse(value)
    raise ValueError(f"Expected a fuzzy date range string, got {type(value).__name__}")


FuzzyDateField = Annotated[
    FuzzyDate,
    PlainValidator(_validate_fuzzy_date),
    PlainSerializer(str, return_type=str),
    WithJsonSchema(
        {"type": "string", "format": "fuzzy-date", "pattern": FUZZY_DATE_PATTERN}
    ),
]

FuzzyDateRangeField = Annotated[
    FuzzyDateRange,
    PlainValidator(_validate_fuzzy_date_range),
    PlainSerializer(str, return_type=str),
    WithJsonSchema(
        {
            "type": "string",
            "format": "fuzzy-date-range",
            "pattern": FUZZY_DATE_RANGE_PATTERN,
        }
    ),
]


__all__ = [
    "FUZZY_DATE_PATTERN",
    "FUZZY_DATE_RANGE_PATTERN",
    "FuzzyDateField",
    "FuzzyDateRangeField",
]
