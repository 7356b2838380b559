from __future__ import annotations

import json
import re

import pytest
from pydantic import BaseModel, TypeAdapter, ValidationError

from fuzzydate import FuzzyDate, FuzzyDateRange
from fuzzydate.adapters.pydantic import FuzzyDateField, FuzzyDateRangeField


class Record(BaseModel):
    born: FuzzyDateField
    active: FuzzyDateRangeField | None = None


def test_model_parses_strings_into_fuzzy_values() -> None:
    record = Record.model_validate({"born": "08/15/1991", "active": "2010-03/2025"})

    assert record.born == FuzzyDate.day_precision(1991, 8, 15)
    assert record.active == FuzzyDateRange.parse("2010-03/2025")


def test_model_accepts_existing_instances() -> None:
    born = FuzzyDate.parse("1991")

    record = Record(born=born)

    assert record.born is born
    assert record.active is None


def test_model_serialises_iso_strings() -> None:
    record = Record.model_validate({"born": "08/1991", "active": "1990/2000-12-31"})

    assert record.model_dump() == {"born": "1991-08", "active": "1990/2000-12-31"}
    assert json.loads(record.model_dump_json()) == {
        "born": "1991-08",
        "active": "1990/2000-12-31",
    }


@pytest.mark.parametrize(
    "payload",
    [
        {"born": "1991"},
        {"born": "1991-08", "active": "1991-08/2025"},
        {"born": "2024-02-29", "active": "2024/2024-02-29"},
    ],
)
def test_json_round_trip_reproduces_equal_values(payload: dict[str, str]) -> None:
    record = Record.model_validate(payload)

    restored = Record.model_validate_json(record.model_dump_json())

    assert restored == record


@pytest.mark.parametrize(
    "payload",
    [
        {"born": "2024-13"},
        {"born": "2024-01-32"},
        {"born": "2023-02-29"},
        {"born": "10000"},
        {"born": ""},
        {"born": 1991},
        {"born": "1991", "active": "2000/1990"},
        {"born": "1991", "active": "1990"},
    ],
)
def test_invalid_values_raise_validation_error(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        Record.model_validate(payload)


def test_json_schema_describes_strings() -> None:
    schema = Record.model_json_schema()
    born = schema["properties"]["born"]

    assert born["type"] == "string"
    assert born["format"] == "fuzzy-date"
    assert born["pattern"].startswith("^")
    assert born["pattern"].endswith("$")


@pytest.mark.parametrize(
    "text",
    [
        "1",
        "0042",
        "1991",
        "1991-8",
        "1991-08",
        "1991-08-15",
        "1991-8-5",
        "08/1991",
        "8/1991",
        "08/15/1991",
        "8/5/1991",
        " 08 / 1991 ",
        "\t2020 - 02 - 29\n",
        "1991-08-0015",
        "0008/1991",
        "000001991",
    ],
)
def test_date_schema_pattern_matches_accepted_inputs(text: str) -> None:
    adapter = TypeAdapter(FuzzyDateField)
    pattern = adapter.json_schema()["pattern"]

    adapter.validate_python(text)

    assert re.search(pattern, text) is not None


@pytest.mark.parametrize(
    "text",
    ["1990/2000", "1991-8/2025", " 1991-08 / 2025 ", "2020/2020-06-15", "1/9999"],
)
def test_range_schema_pattern_matches_accepted_inputs(text: str) -> None:
    adapter = TypeAdapter(FuzzyDateRangeField)
    pattern = adapter.json_schema()["pattern"]

    adapter.validate_python(text)

    assert re.search(pattern, text) is not None


@pytest.mark.parametrize("text", ["", "Summer 2022", "1991-08/15", "20/26/02/13", "1990..2000"])
def test_date_schema_pattern_rejects_other_shapes(text: str) -> None:
    pattern = TypeAdapter(FuzzyDateField).json_schema()["pattern"]

    assert re.search(pattern, text) is None
