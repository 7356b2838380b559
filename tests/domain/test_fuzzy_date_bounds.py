from __future__ import annotations

from datetime import date, timedelta

import pytest

from fuzzydate import FuzzyDate, Precision


def _next_calendar_day(triple: tuple[int, int, int]) -> tuple[int, int, int]:
    following = date(*triple) + timedelta(days=1)
    return (following.year, following.month, following.day)


def test_year_bounds() -> None:
    value = FuzzyDate.parse("1991")

    assert value.lower_bound() == (1991, 1, 1)
    assert value.upper_bound_inclusive() == (1991, 12, 31)
    assert value.upper_bound_exclusive() == (1992, 1, 1)


def test_month_bounds() -> None:
    value = FuzzyDate.parse("1991-08")

    assert value.lower_bound() == (1991, 8, 1)
    assert value.upper_bound_inclusive() == (1991, 8, 31)
    assert value.upper_bound_exclusive() == (1991, 9, 1)


def test_february_upper_bound_is_leap_aware() -> None:
    assert FuzzyDate.parse("2020-02").upper_bound_inclusive() == (2020, 2, 29)
    assert FuzzyDate.parse("2021-02").upper_bound_inclusive() == (2021, 2, 28)
    assert FuzzyDate.parse("2021-02").upper_bound_exclusive() == (2021, 3, 1)


def test_day_bounds_roll_over_month_and_year() -> None:
    leap_day = FuzzyDate.parse("2020-02-29")
    new_years_eve = FuzzyDate.parse("2021-12-31")

    assert leap_day.lower_bound() == leap_day.upper_bound_inclusive() == (2020, 2, 29)
    assert leap_day.upper_bound_exclusive() == (2020, 3, 1)
    assert new_years_eve.upper_bound_exclusive() == (2022, 1, 1)


@pytest.mark.parametrize("text", ["9999", "9999-12", "9999-12-31"])
def test_exclusive_bound_is_absent_at_end_of_domain(text: str) -> None:
    value = FuzzyDate.parse(text)

    assert value.upper_bound_inclusive() == (9999, 12, 31)
    assert value.upper_bound_exclusive() is None


def test_exclusive_bound_present_just_before_end_of_domain() -> None:
    assert FuzzyDate.parse("9999-12-30").upper_bound_exclusive() == (9999, 12, 31)
    assert FuzzyDate.parse("9999-11").upper_bound_exclusive() == (9999, 12, 1)


@pytest.mark.parametrize(
    "text",
    ["1", "1991", "2000-02", "2100-02", "1991-08-31", "2024-12", "2024-12-31", "9998"],
)
def test_bounds_are_consistent(text: str) -> None:
    value = FuzzyDate.parse(text)

    assert value.lower_bound() <= value.upper_bound_inclusive()
    exclusive = value.upper_bound_exclusive()
    assert exclusive is not None
    assert exclusive == _next_calendar_day(value.upper_bound_inclusive())


def test_ordering_by_lower_bound() -> None:
    assert FuzzyDate.parse("1990") < FuzzyDate.parse("1991")
    assert FuzzyDate.parse("1991") < FuzzyDate.parse("1991-08")
    assert FuzzyDate.parse("1991-08") < FuzzyDate.parse("1991-08-15")
    assert FuzzyDate.parse("1990-12-31") < FuzzyDate.parse("1991")
    assert FuzzyDate.parse("1991-12") > FuzzyDate.parse("1991-11-30")


def test_same_lower_bound_sorts_less_precise_first() -> None:
    year = FuzzyDate.year_precision(2026)
    month = FuzzyDate.month_precision(2026, 1)
    day = FuzzyDate.day_precision(2026, 1, 1)

    assert year < month < day
    assert day > month > year
    assert year <= month
    assert day >= year
    assert year != month
    assert month != day


def test_sorting_mixed_precisions() -> None:
    values = [FuzzyDate.parse("2026-01-01"), FuzzyDate.parse("2026"), FuzzyDate.parse("2026-01")]

    assert [value.precision for value in sorted(values)] == [
        Precision.YEAR,
        Precision.MONTH,
        Precision.DAY,
    ]


def test_equality_is_structural() -> None:
    assert FuzzyDate.parse("08/15/1991") == FuzzyDate.parse("1991-08-15")
    assert hash(FuzzyDate.parse("1991-08")) == hash(FuzzyDate.month_precision(1991, 8))
    assert FuzzyDate.parse("1991") <= FuzzyDate.parse("1991")
    assert FuzzyDate.parse("1991") >= FuzzyDate.parse("1991")
    assert FuzzyDate.parse("1991") != "1991"


def test_comparison_with_other_types_is_unsupported() -> None:
    with pytest.raises(TypeError):
        _ = FuzzyDate.parse("1991") < "1992"  # type: ignore[operator]


def test_contains_is_reflexive_for_days() -> None:
    value = FuzzyDate.parse("2024-02-29")

    assert value.contains(value)


def test_contains_nests_coarser_around_finer() -> None:
    year = FuzzyDate.parse("1991")
    month = FuzzyDate.parse("1991-08")
    day = FuzzyDate.parse("1991-08-15")

    assert year.contains(month)
    assert year.contains(day)
    assert month.contains(day)
    assert year.contains(year)
    assert not month.contains(year)
    assert not day.contains(month)


def test_contains_rejects_neighbours() -> None:
    month = FuzzyDate.parse("1991-08")

    assert not month.contains(FuzzyDate.parse("1991-09-01"))
    assert not month.contains(FuzzyDate.parse("1991-07-31"))
    assert not month.contains(FuzzyDate.parse("1991-09"))


def test_contains_at_end_of_domain() -> None:
    last_year = FuzzyDate.parse("9999")

    assert last_year.contains(FuzzyDate.parse("9999-12-31"))
    assert last_year.contains(FuzzyDate.parse("9999-12"))
    assert not last_year.contains(FuzzyDate.parse("9998-12-31"))
