"""Tests for whole-year age and trailing-window helpers."""

from __future__ import annotations

from datetime import date

from roadregistry.validation.age import age_years, years_before


class TestAgeYears:
    def test_day_before_birthday(self):
        assert age_years(date(1995, 4, 15), date(2026, 4, 14)) == 30

    def test_on_birthday(self):
        assert age_years(date(1995, 4, 15), date(2026, 4, 15)) == 31

    def test_earlier_month(self):
        assert age_years(date(2008, 10, 20), date(2026, 10, 19)) == 17
        assert age_years(date(2008, 10, 19), date(2026, 10, 19)) == 18

    def test_leap_day_birthday(self):
        assert age_years(date(2004, 2, 29), date(2026, 2, 28)) == 21
        assert age_years(date(2004, 2, 29), date(2026, 3, 1)) == 22


class TestYearsBefore:
    def test_same_month_and_day(self):
        assert years_before(date(2026, 10, 19), 2) == date(2024, 10, 19)

    def test_leap_day_clamps_to_28th(self):
        assert years_before(date(2028, 2, 29), 2) == date(2026, 2, 28)

    def test_leap_day_kept_when_target_is_leap(self):
        assert years_before(date(2028, 2, 29), 4) == date(2024, 2, 29)
