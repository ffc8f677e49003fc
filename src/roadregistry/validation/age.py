"""Calendar helpers for ages and trailing windows."""

from __future__ import annotations

from datetime import date


def age_years(birth: date, reference: date) -> int:
    """Whole years between *birth* and *reference*."""
    years = reference.year - birth.year
    if (reference.month, reference.day) < (birth.month, birth.day):
        years -= 1
    return years


def years_before(value: date, years: int) -> date:
    """Same month/day *years* earlier; Feb 29 clamps to Feb 28."""
    try:
        return value.replace(year=value.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return value.replace(year=value.year - years, day=28)
