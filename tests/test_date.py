#!/usr/bin/env python3
"""Tests for Date class."""
import copy
import datetime

import pytest
from rental import Date
from rental.date import day_number, is_leap


class TestDateConstruction:
    """Tests for Date validation and fallback."""

    def test_valid_date(self):
        date = Date(15, 6, 2023)
        assert (date.day, date.month, date.year) == (15, 6, 2023)

    @pytest.mark.parametrize(
        "day, month, year",
        [(32, 1, 2023), (0, 1, 2023), (1, 13, 2023), (1, 0, 2023),
         (1, 1, 999), (1, 1, 10000), (31, 4, 2023), (32, 13, 999)],
    )
    def test_invalid_falls_back_to_default(self, day, month, year):
        """Any invalid triple becomes 01/01/2000."""
        assert Date(day, month, year) == Date(1, 1, 2000)

    def test_leap_day(self):
        """29 February exists only in leap years."""
        leap = Date(29, 2, 2024)
        assert (leap.day, leap.month, leap.year) == (29, 2, 2024)
        assert Date(29, 2, 2023) == Date(1, 1, 2000)

    def test_century_leap_rule(self):
        assert Date.is_valid(29, 2, 2000)
        assert not Date.is_valid(29, 2, 1900)
        assert is_leap(2400)
        assert not is_leap(2100)

    def test_is_valid_tells_explicit_default_apart(self):
        """An explicit 01/01/2000 is valid, a coerced one was not."""
        assert Date.is_valid(1, 1, 2000)
        assert not Date.is_valid(30, 2, 2024)

    def test_range_limits(self):
        assert Date.is_valid(1, 1, 1000)
        assert Date.is_valid(31, 12, 9999)


class TestDateSetters:
    """Setters only apply when the date stays valid."""

    def test_valid_values(self):
        date = Date(15, 6, 2023)
        date.day = 20
        date.month = 8
        date.year = 2024
        assert (date.day, date.month, date.year) == (20, 8, 2024)

    def test_invalid_values_are_ignored(self):
        date = Date(15, 6, 2023)
        date.day = 32
        date.month = 13
        date.year = 999
        assert (date.day, date.month, date.year) == (15, 6, 2023)

    def test_day_checked_against_month(self):
        """31 is rejected for a 30-day month."""
        date = Date(15, 6, 2023)
        date.day = 31
        assert date.day == 15

    def test_year_keeps_leap_day_valid(self):
        """Moving 29/02 to a non-leap year is ignored."""
        date = Date(29, 2, 2024)
        date.year = 2023
        assert date.year == 2024
        date.year = 2028
        assert date.year == 2028


class TestDateOrdering:
    """Tests for before/after/difference."""

    def test_before_after(self):
        earlier = Date(15, 6, 2023)
        later = Date(20, 6, 2023)
        assert earlier.before(later)
        assert not later.before(earlier)
        assert later.after(earlier)
        assert not earlier.after(later)

    def test_same_date_neither_before_nor_after(self):
        date = Date(15, 6, 2023)
        assert not date.before(Date(15, 6, 2023))
        assert not date.after(Date(15, 6, 2023))

    def test_comparison_operators(self):
        assert Date(31, 12, 2022) < Date(1, 1, 2023)
        assert Date(1, 3, 2024) > Date(29, 2, 2024)
        assert min(Date(5, 5, 2023), Date(4, 5, 2023)) == Date(4, 5, 2023)

    def test_difference_is_symmetric(self):
        a = Date(15, 6, 2023)
        b = Date(20, 6, 2023)
        assert a.difference(b) == 5
        assert b.difference(a) == 5
        assert a.difference(a) == 0

    @pytest.mark.parametrize(
        "first, second",
        [((28, 2, 2023), (1, 3, 2023)), ((28, 2, 2024), (1, 3, 2024)),
         ((1, 1, 1900), (1, 3, 1900)), ((1, 1, 2000), (31, 12, 2000)),
         ((17, 8, 1066), (9, 11, 2023)), ((1, 1, 1000), (31, 12, 9999))],
    )
    def test_difference_matches_calendar(self, first, second):
        """Day counts agree with the standard library calendar."""
        a = Date(*first)
        b = Date(*second)
        expected = (b.to_date() - a.to_date()).days
        assert a.difference(b) == expected

    def test_day_number_shifts_january_and_february(self):
        """January and February belong to the previous year in the formula."""
        assert day_number(1, 3, 2023) - day_number(28, 2, 2023) == 1
        assert day_number(1, 1, 2023) - day_number(31, 12, 2022) == 1


class TestDateTomorrow:
    """Tests for Date.tomorrow."""

    def test_same_month(self):
        assert Date(15, 6, 2023).tomorrow() == Date(16, 6, 2023)

    def test_end_of_month(self):
        assert Date(30, 6, 2023).tomorrow() == Date(1, 7, 2023)

    def test_end_of_year(self):
        assert Date(31, 12, 2023).tomorrow() == Date(1, 1, 2024)

    def test_february(self):
        assert Date(28, 2, 2023).tomorrow() == Date(1, 3, 2023)
        assert Date(28, 2, 2024).tomorrow() == Date(29, 2, 2024)
        assert Date(29, 2, 2024).tomorrow() == Date(1, 3, 2024)

    def test_last_supported_day_falls_back(self):
        """Year 10000 is out of range, so the default date comes back."""
        assert Date(31, 12, 9999).tomorrow() == Date(1, 1, 2000)

    def test_is_one_day_later(self):
        date = Date(31, 1, 2023)
        assert date.tomorrow().difference(date) == 1
        assert date.tomorrow().after(date)

    def test_does_not_modify_original(self):
        date = Date(31, 12, 2023)
        date.tomorrow()
        assert date == Date(31, 12, 2023)


class TestDateMisc:
    """Tests for string form, copies and conversions."""

    def test_str_zero_pads(self):
        assert str(Date(5, 3, 2023)) == "05/03/2023"
        assert str(Date(15, 12, 2023)) == "15/12/2023"

    def test_copy_is_independent(self):
        original = Date(15, 6, 2023)
        duplicate = copy.copy(original)
        assert duplicate == original
        duplicate.day = 20
        assert original.day == 15

    def test_equality_with_other_types(self):
        assert Date(1, 1, 2000) != "01/01/2000"

    def test_from_and_to_date(self):
        date = Date.from_date(datetime.date(2023, 6, 15))
        assert date == Date(15, 6, 2023)
        assert date.to_date() == datetime.date(2023, 6, 15)
